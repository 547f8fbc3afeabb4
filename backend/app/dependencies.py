from functools import lru_cache
import logging
import time

from decaygraph.graph.decay_graph import DecayGraph

from backend.app.config import AppConfig
from backend.app.services.decay_service import DecayService


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_graph() -> DecayGraph:
    logger = logging.getLogger("decaygraph.startup")
    t0 = time.perf_counter()
    config = get_config()
    graph = DecayGraph(config.decay)

    if config.seed_edges.strip():
        graph.build(config.seed_edges)
        logger.info(
            "[startup] seeded graph with %d vertices, %d edges",
            graph.count_vertices(),
            graph.edge_count(),
        )
    logger.info("[startup] get_graph total %.3fs", time.perf_counter() - t0)
    return graph


@lru_cache
def get_decay_service() -> DecayService:
    config = get_config()

    return DecayService(
        graph=get_graph(),
        config=config.decay,
    )
