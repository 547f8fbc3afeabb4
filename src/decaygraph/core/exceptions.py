"""
Exceptions raised by the decaygraph core.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DecayGraphError(Exception):
    """Base exception class for decaygraph errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidVertexLabel(DecayGraphError):
    """Raised when a label is not a single uppercase letter A-Z."""
    pass


class VertexNotFound(DecayGraphError):
    """Raised when an operation names a vertex with no edges."""
    pass


class MalformedInput(DecayGraphError):
    """Raised when an edge-list or query token stream cannot be parsed."""
    pass


class InvalidExpiration(DecayGraphError):
    """Raised when an expiration is not a positive integer."""
    pass


class TraversalStateError(DecayGraphError):
    """Raised when a report needs a traversal that has not been run."""
    pass
