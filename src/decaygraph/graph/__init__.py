"""
Graph subsystem for decaygraph.

Defines the lettered vertex store, the edge-list builder, and the
breadth-first traversal engine behind packet-decay queries.
"""

from decaygraph.graph.graph_schema import Vertex, TraversalResult
from decaygraph.graph.graph_store import GraphStore
from decaygraph.graph.graph_builder import GraphBuilder, parse_edge_list
from decaygraph.graph.graph_query import TraversalEngine
from decaygraph.graph.decay_graph import DecayGraph

__all__ = [
    "Vertex",
    "TraversalResult",
    "GraphStore",
    "GraphBuilder",
    "parse_edge_list",
    "TraversalEngine",
    "DecayGraph",
]
