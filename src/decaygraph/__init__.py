"""
decaygraph
==========

An undirected graph over at most 26 lettered vertices (A-Z) with
breadth-first distance reports and "packet-decay" expiration queries:
how many vertices a packet cannot reach before its hop budget runs out.

Public API:
- DecayGraph
- GraphStore
- GraphBuilder
- TraversalEngine
"""

from decaygraph.graph.decay_graph import DecayGraph
from decaygraph.graph.graph_store import GraphStore
from decaygraph.graph.graph_builder import GraphBuilder
from decaygraph.graph.graph_query import TraversalEngine

__all__ = [
    "DecayGraph",
    "GraphStore",
    "GraphBuilder",
    "TraversalEngine",
]

__version__ = "0.1.0"
