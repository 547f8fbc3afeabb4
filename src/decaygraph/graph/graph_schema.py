from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

UNREACHED = -1


@dataclass
class Vertex:
    """
    Per-letter traversal record.

    Connections are not stored here; they are the adjacency of the
    slot in the owning GraphStore. ``known`` and ``dist`` describe the
    most recent traversal only.
    """

    label: str
    known: bool = False
    dist: int = UNREACHED

    def reset(self) -> None:
        self.known = False
        self.dist = UNREACHED

    def visit(self, dist: int) -> None:
        self.known = True
        self.dist = dist

    @property
    def reached(self) -> bool:
        return self.dist != UNREACHED


@dataclass(frozen=True)
class TraversalResult:
    """
    Snapshot of one breadth-first traversal.

    ``order`` is the dequeue order; ``distances`` holds every reached
    vertex, the start included at distance 0.
    """

    start: str
    order: str
    distances: Dict[str, int] = field(default_factory=dict)

    def distance_to(self, label: str) -> int:
        return self.distances.get(label, UNREACHED)

    def max_distance(self) -> int:
        return max(self.distances.values(), default=0)
