"""
Service layer between the HTTP/stdin callers and the decaygraph core.

The core graph is not safe for concurrent use, and FastAPI runs sync
endpoints on a thread pool, so every operation here holds one lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Tuple

from decaygraph.config.settings import DecayGraphConfig
from decaygraph.core.exceptions import MalformedInput
from decaygraph.graph.decay_graph import DecayGraph


def parse_queries(line: str) -> List[Tuple[str, int]]:
    """
    "F 2 F 3 H 2" -> [("F", 2), ("F", 3), ("H", 2)]

    Vertex labels are validated later by the graph itself.
    """
    tokens = line.split()
    if len(tokens) % 2:
        raise MalformedInput(
            f"Query line needs (vertex, expiration) pairs, got {len(tokens)} tokens",
            details={"line": line},
        )

    queries: List[Tuple[str, int]] = []
    for i in range(0, len(tokens), 2):
        start, raw = tokens[i], tokens[i + 1]
        try:
            expiration = int(raw)
        except ValueError:
            raise MalformedInput(
                f"Expiration {raw!r} at position {i + 1} is not an integer",
                details={"line": line, "position": i + 1},
            ) from None
        queries.append((start, expiration))
    return queries


class DecayService:
    """
    Owns one DecayGraph and serializes access to it.
    """

    def __init__(self, *, graph: DecayGraph, config: DecayGraphConfig) -> None:
        self.graph = graph
        self.config = config
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------

    def build(self, edges: str) -> Dict[str, Any]:
        with self._lock:
            self.graph.build(edges)
            return self._snapshot()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self._snapshot()

    def neighbors(self, vertex: str) -> str:
        with self._lock:
            return self.graph.get_neighbors(vertex)

    def _snapshot(self) -> Dict[str, Any]:
        return {
            "graph": self.graph.to_string(),
            "vertices": self.graph.count_vertices(),
            "edges": self.graph.edge_count(),
            "adjacency": self.graph.adjacency(),
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def traverse(self, start: str) -> Dict[str, Any]:
        with self._lock:
            order = self.graph.traverse(start)
            return {
                "start": start,
                "order": order,
                "distances": self.graph.get_distances(),
                "table": self.graph.distance_table(),
            }

    def unreachable(self, queries: List[Tuple[str, int]]) -> List[Dict[str, Any]]:
        results: List[Dict[str, Any]] = []
        with self._lock:
            for start, expiration in queries:
                count = self.graph.unreachable_nodes(start, expiration)
                results.append(
                    {
                        "start": start,
                        "expiration": expiration,
                        "count": count,
                        "message": self.config.query.format_report(
                            count=count,
                            start=start,
                            expiration=expiration,
                        ),
                    }
                )

        logging.getLogger("decaygraph.query").debug("queries=%d", len(results))
        return results

    def run_query_line(self, line: str) -> List[Dict[str, Any]]:
        return self.unreachable(parse_queries(line))
