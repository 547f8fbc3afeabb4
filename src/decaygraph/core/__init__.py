"""
Core contracts shared by every decaygraph subsystem.
"""

from decaygraph.core.exceptions import (
    DecayGraphError,
    InvalidVertexLabel,
    VertexNotFound,
    MalformedInput,
    InvalidExpiration,
    TraversalStateError,
)

__all__ = [
    "DecayGraphError",
    "InvalidVertexLabel",
    "VertexNotFound",
    "MalformedInput",
    "InvalidExpiration",
    "TraversalStateError",
]
