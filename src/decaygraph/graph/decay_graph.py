from __future__ import annotations

from typing import Dict, List, Optional

from decaygraph.config.settings import DecayGraphConfig
from decaygraph.core.exceptions import VertexNotFound
from decaygraph.graph.graph_builder import EdgeTokens, GraphBuilder
from decaygraph.graph.graph_query import TraversalEngine
from decaygraph.graph.graph_schema import TraversalResult
from decaygraph.graph.graph_store import GraphStore
from decaygraph.graph.labels import validate_label


class DecayGraph:
    """
    Undirected graph over the letters A-Z with breadth-first distances
    and packet-decay expiration queries.

    Typical use::

        graph = DecayGraph()
        graph.build("A BC B CADE C AB D B E B")
        graph.traverse("A")          # "ABCDE"
        graph.get_distances()        # "1:BC 2:DE "
        graph.unreachable_nodes("A", 1)  # 2

    Not safe for concurrent use; callers serialize access.
    """

    def __init__(self, config: DecayGraphConfig | None = None) -> None:
        self.config = config or DecayGraphConfig()
        self.store = GraphStore()
        self._builder = GraphBuilder(self.store, self.config.graph)
        self._engine = TraversalEngine(self.store, self.config.query)

    # -------------------- Construction --------------------

    def build(self, edge_tokens: EdgeTokens) -> None:
        self._builder.build(edge_tokens)

    # -------------------- Accessors --------------------

    def count_vertices(self) -> int:
        return self.store.vertex_count()

    def edge_count(self) -> int:
        return self.store.edge_count()

    def has_vertex(self, label: str) -> bool:
        return self.store.is_present(label)

    def has_edge(self, source: str, target: str) -> bool:
        return self.store.has_edge(source, target)

    def vertices(self) -> List[str]:
        return self.store.vertices()

    def adjacency(self) -> Dict[str, str]:
        return self.store.adjacency()

    def get_neighbors(self, node: str) -> str:
        self._require_present(node)
        return "".join(self.store.neighbors(node))

    # -------------------- Traversal --------------------

    def traverse(self, start: str) -> str:
        self._require_present(start)
        return self._engine.traverse(start).order

    @property
    def last_traversal(self) -> Optional[TraversalResult]:
        return self._engine.last_traversal

    def distance_table(self) -> Dict[int, str]:
        return self._engine.distance_table()

    def get_distances(self) -> str:
        return self._engine.get_distances()

    def unreachable_nodes(self, start: str, expiration: int) -> int:
        self._require_present(start)
        return self._engine.unreachable_nodes(start, expiration)

    # -------------------- Rendering --------------------

    def to_string(self) -> str:
        return self.store.render()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DecayGraph(vertices={self.count_vertices()}, edges={self.edge_count()})"

    # -------------------- Helpers --------------------

    def _require_present(self, label: str) -> None:
        if not self.store.is_present(validate_label(label)):
            raise VertexNotFound(
                f"Vertex {label} is not in the graph",
                details={"label": label},
            )
