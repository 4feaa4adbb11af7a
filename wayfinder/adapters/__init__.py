"""Adapters layer - Concrete implementations of ports.

Adapters connect the application core to the outside world: the
filesystem, HTTP servers, and the graph algorithms themselves.
"""

from .fetch import HttpTextFetcher, LocalFileFetcher
from .graph import CSVGraphRepository, DijkstraRouteSolver

__all__ = [
    "LocalFileFetcher",
    "HttpTextFetcher",
    "CSVGraphRepository",
    "DijkstraRouteSolver",
]
