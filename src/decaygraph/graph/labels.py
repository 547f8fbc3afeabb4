from __future__ import annotations

from decaygraph.core.exceptions import InvalidVertexLabel

GRAPH_SIZE = 26

LABELS = tuple(chr(ord("A") + i) for i in range(GRAPH_SIZE))


def is_label(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and "A" <= value <= "Z"


def validate_label(value: object) -> str:
    """
    Returns the label unchanged, or raises InvalidVertexLabel.
    """
    if not is_label(value):
        raise InvalidVertexLabel(
            f"Vertex label must be a single letter A-Z, got {value!r}",
            details={"label": value},
        )
    return value


def label_to_index(label: str) -> int:
    return ord(validate_label(label)) - ord("A")


def index_to_label(index: int) -> str:
    if not 0 <= index < GRAPH_SIZE:
        raise InvalidVertexLabel(
            f"Slot index must be in [0, {GRAPH_SIZE}), got {index}",
            details={"index": index},
        )
    return LABELS[index]
