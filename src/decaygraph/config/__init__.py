"""
Configuration layer for decaygraph.

Configuration is explicit (passed, not global) and immutable once built.
"""

from decaygraph.config.settings import (
    GraphConfig,
    QueryConfig,
    DecayGraphConfig,
)

__all__ = [
    "GraphConfig",
    "QueryConfig",
    "DecayGraphConfig",
]
