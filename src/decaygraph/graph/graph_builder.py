from __future__ import annotations

import logging
from typing import Iterable, List, Tuple, Union

from decaygraph.config.settings import GraphConfig
from decaygraph.core.exceptions import InvalidVertexLabel, MalformedInput
from decaygraph.graph.graph_store import GraphStore
from decaygraph.graph.labels import is_label

EdgeTokens = Union[str, Iterable[str]]


def tokenize(edge_tokens: EdgeTokens) -> List[str]:
    if isinstance(edge_tokens, str):
        return edge_tokens.split()
    return [str(token) for token in edge_tokens]


def _check_letters(token: str, position: int) -> None:
    for ch in token:
        if not ch.isalpha():
            raise MalformedInput(
                f"Token {token!r} at position {position} contains non-letter {ch!r}",
                details={"token": token, "position": position},
            )
        if not is_label(ch):
            raise InvalidVertexLabel(
                f"Token {token!r} at position {position} contains {ch!r}, "
                "labels must be uppercase A-Z",
                details={"token": token, "position": position, "label": ch},
            )


def parse_edge_list(edge_tokens: EdgeTokens) -> List[Tuple[str, str]]:
    """
    Splits an edge-list description into (vertex, neighbors) pairs.

    "A BC B CADE" -> [("A", "BC"), ("B", "CADE")]. The whole stream is
    validated before anything is returned.
    """
    tokens = tokenize(edge_tokens)
    if not tokens:
        raise MalformedInput("Edge list is empty")
    if len(tokens) % 2:
        raise MalformedInput(
            f"Edge list needs an even number of tokens, got {len(tokens)}",
            details={"tokens": len(tokens)},
        )

    pairs: List[Tuple[str, str]] = []
    for i in range(0, len(tokens), 2):
        vertex, neighbors = tokens[i], tokens[i + 1]
        if len(vertex) != 1:
            raise MalformedInput(
                f"Vertex token {vertex!r} at position {i} must be a single letter",
                details={"token": vertex, "position": i},
            )
        if not neighbors:
            raise MalformedInput(
                f"Neighbor token at position {i + 1} is empty",
                details={"position": i + 1},
            )
        _check_letters(vertex, i)
        _check_letters(neighbors, i + 1)
        pairs.append((vertex, neighbors))

    return pairs


class GraphBuilder:
    """
    Populates a GraphStore from textual edge-list descriptions.

    Each letter of a neighbors token is joined to the vertex token by a
    symmetric edge, so "A BC" also creates B and C. Repeated edges are
    ignored.
    """

    def __init__(self, store: GraphStore, config: GraphConfig | None = None) -> None:
        self.store = store
        self.config = config or GraphConfig()

    def add_pairs(self, pairs: Iterable[Tuple[str, str]]) -> int:
        added = 0
        for vertex, neighbors in pairs:
            for neighbor in neighbors:
                if self.store.add_edge(vertex, neighbor):
                    added += 1
        return added

    def build(self, edge_tokens: EdgeTokens) -> int:
        """
        Parses and inserts an edge list. Returns the number of new edges.
        """
        pairs = parse_edge_list(edge_tokens)
        added = self.add_pairs(pairs)

        logger = logging.getLogger("decaygraph.build")
        logger.debug(
            "pairs=%d new_edges=%d vertices=%d",
            len(pairs),
            added,
            self.store.vertex_count(),
        )
        if self.config.log_build:
            logger.info("%s", self.store.render())

        return added
