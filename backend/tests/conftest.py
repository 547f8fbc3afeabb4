from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_decay_service
from backend.app.services.decay_service import DecayService

from decaygraph.config.settings import DecayGraphConfig
from decaygraph.graph.decay_graph import DecayGraph

SAMPLE_EDGES = "A BC B CADE C AB D B E B"

EDGE_LISTS = [
    SAMPLE_EDGES,
    "A B",
    "A BCDEFG",
    "Z Y Y X X W Q R",
    "A BC D EF G H",
    "M NOP N OQ O QR P R R S",
]


@pytest.fixture()
def graph() -> DecayGraph:
    return DecayGraph()


@pytest.fixture()
def sample_graph() -> DecayGraph:
    g = DecayGraph()
    g.build(SAMPLE_EDGES)
    return g


@pytest.fixture()
def service() -> DecayService:
    config = DecayGraphConfig()
    return DecayService(graph=DecayGraph(config), config=config)


@pytest.fixture()
def client(service: DecayService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_decay_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
