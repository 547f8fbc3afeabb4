from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from decaygraph.config.settings import QueryConfig
from decaygraph.core.exceptions import InvalidExpiration, TraversalStateError
from decaygraph.graph.graph_schema import TraversalResult
from decaygraph.graph.graph_store import GraphStore
from decaygraph.graph.labels import validate_label


class TraversalEngine:
    """
    Breadth-first traversal and the reports derived from it.

    Traversal state lives on the store's Vertex records and is
    overwritten by every call to ``traverse``. Only one traversal result
    is live at a time; derive every report from it before starting the
    next one.
    """

    def __init__(self, store: GraphStore, config: QueryConfig | None = None) -> None:
        self.store = store
        self.config = config or QueryConfig()
        self._last: Optional[TraversalResult] = None

    @property
    def last_traversal(self) -> Optional[TraversalResult]:
        return self._last

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(self, start: str) -> TraversalResult:
        """
        Breadth-first traversal from ``start``.

        Neighbors are expanded in ascending order, which fixes both the
        visitation order and the order vertices are enqueued.
        """
        validate_label(start)
        self.store.reset_traversal_state()

        self.store.get_vertex(start).visit(0)
        queue: Deque[str] = deque([start])
        order: List[str] = []
        distances: Dict[str, int] = {start: 0}

        while queue:
            current = queue.popleft()
            order.append(current)
            current_dist = self.store.get_vertex(current).dist

            for neighbor in self.store.neighbors(current):
                vertex = self.store.get_vertex(neighbor)
                if not vertex.known:
                    vertex.visit(current_dist + 1)
                    distances[neighbor] = vertex.dist
                    queue.append(neighbor)

        self._last = TraversalResult(
            start=start,
            order="".join(order),
            distances=distances,
        )
        logging.getLogger("decaygraph.traverse").debug(
            "start=%s order=%s max_dist=%d",
            start,
            self._last.order,
            self._last.max_distance(),
        )
        return self._last

    # ------------------------------------------------------------------
    # Reports on the last traversal
    # ------------------------------------------------------------------

    def distance_table(self) -> Dict[int, str]:
        """
        Present vertices grouped by distance from the last start.

        Distance 0 and unreached vertices are left out; letters within a
        bucket are ascending.
        """
        if self._last is None:
            raise TraversalStateError("No traversal has been run on this graph")

        table: Dict[int, str] = {}
        for vertex in self.store.slots():
            if vertex.dist < 1 or vertex.label not in self.store:
                continue
            table[vertex.dist] = table.get(vertex.dist, "") + vertex.label

        return dict(sorted(table.items()))

    def get_distances(self) -> str:
        return "".join(
            f"{dist}:{letters} " for dist, letters in self.distance_table().items()
        )

    # ------------------------------------------------------------------
    # Packet decay
    # ------------------------------------------------------------------

    def validate_expiration(self, expiration: int) -> int:
        if (
            isinstance(expiration, bool)
            or not isinstance(expiration, int)
            or expiration < self.config.min_expiration
        ):
            raise InvalidExpiration(
                f"Expiration must be an integer >= {self.config.min_expiration}, "
                f"got {expiration!r}",
                details={"expiration": expiration},
            )
        return expiration

    def unreachable_nodes(self, start: str, expiration: int) -> int:
        """
        Counts vertices reached from ``start`` only after more than
        ``expiration`` hops.

        Always runs a fresh traversal. Vertices the traversal never
        reaches are not counted.
        """
        self.validate_expiration(expiration)
        self.traverse(start)

        count = sum(1 for vertex in self.store.slots() if vertex.dist > expiration)

        logging.getLogger("decaygraph.query").info(
            "start=%s expiration=%d unreachable=%d",
            start,
            expiration,
            count,
        )
        return count
