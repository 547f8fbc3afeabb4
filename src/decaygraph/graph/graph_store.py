from __future__ import annotations

import networkx as nx
from typing import Dict, Iterator, List

from decaygraph.graph.graph_schema import Vertex
from decaygraph.graph.labels import LABELS, validate_label


class GraphStore:
    """
    Authoritative 26-slot undirected adjacency store.

    Every letter A-Z is seeded as a node at construction and carries its
    Vertex record. A slot counts as present only while it has at least
    one edge.
    """

    def __init__(self) -> None:
        self._graph = nx.Graph()
        for label in LABELS:
            self._graph.add_node(label, data=Vertex(label))

    # -------------------- Slots --------------------

    def get_vertex(self, label: str) -> Vertex:
        return self._graph.nodes[validate_label(label)]["data"]

    def slots(self) -> Iterator[Vertex]:
        for label in LABELS:
            yield self._graph.nodes[label]["data"]

    def is_present(self, label: str) -> bool:
        return self._graph.degree(validate_label(label)) > 0

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label in self._graph and self._graph.degree(label) > 0

    def vertices(self) -> List[str]:
        return [label for label in LABELS if self._graph.degree(label) > 0]

    # -------------------- Edges --------------------

    def add_edge(self, source: str, target: str) -> bool:
        """
        Inserts the undirected edge source-target.

        Returns False when the edge already existed.
        """
        validate_label(source)
        validate_label(target)
        if self._graph.has_edge(source, target):
            return False
        self._graph.add_edge(source, target)
        return True

    def has_edge(self, source: str, target: str) -> bool:
        return self._graph.has_edge(validate_label(source), validate_label(target))

    def neighbors(self, label: str) -> List[str]:
        return sorted(self._graph.neighbors(validate_label(label)))

    # -------------------- Traversal state --------------------

    def reset_traversal_state(self) -> None:
        for vertex in self.slots():
            vertex.reset()

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return len(self.vertices())

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def adjacency(self) -> Dict[str, str]:
        return {label: "".join(self.neighbors(label)) for label in self.vertices()}

    def as_networkx(self) -> nx.Graph:
        """
        Copy of the present part of the graph, without traversal records.
        """
        view = nx.Graph()
        view.add_edges_from(self._graph.edges())
        return view

    # -------------------- Rendering --------------------

    def render(self) -> str:
        entries = [
            f"{label}=[{', '.join(self.neighbors(label))}]"
            for label in self.vertices()
        ]
        return "{" + ", ".join(entries) + "}"
