"""Domain layer - Core models and errors.

This module contains the graph entities, search results and typed
errors used throughout the application. No external dependencies.
"""

from .errors import (
    CellParseError,
    ConfigurationError,
    EmptyHeapError,
    FetchError,
    IngestionError,
    InvalidEndpointError,
    MissingColumnError,
    NoPathFoundError,
    PathReconstructionError,
    SelfLoopError,
    UnknownVertexReferenceError,
    WayfinderError,
)
from .models import (
    Edge,
    GraphLoadReport,
    IngestionReport,
    Path,
    PathStep,
    Vertex,
)

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "PathStep",
    "Path",
    "IngestionReport",
    "GraphLoadReport",
    # Errors
    "WayfinderError",
    "IngestionError",
    "CellParseError",
    "UnknownVertexReferenceError",
    "MissingColumnError",
    "SelfLoopError",
    "EmptyHeapError",
    "NoPathFoundError",
    "PathReconstructionError",
    "InvalidEndpointError",
    "FetchError",
    "ConfigurationError",
]
