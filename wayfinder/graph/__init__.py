"""Graph-related utilities for representing the walkable network.

This subpackage contains modules to build an in-memory graph from the
vertex, edge and label tables and to run path-finding on top of it.
"""

from .dijkstra import find_path, resolve_endpoint
from .heap import PathStepMinHeap
from .load_graph import ingest_edges, ingest_labels, ingest_vertices, load_graph
from .model import Graph

__all__ = [
    "Graph",
    "PathStepMinHeap",
    "find_path",
    "resolve_endpoint",
    "ingest_vertices",
    "ingest_edges",
    "ingest_labels",
    "load_graph",
]
