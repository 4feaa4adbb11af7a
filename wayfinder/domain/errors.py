"""Typed domain errors for the wayfinder.

Row-level ingestion errors are collected into reports rather than raised,
while query-level errors abort a single query. Both share the same base
class so callers can handle them uniformly when needed.

All errors inherit from WayfinderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WayfinderError(Exception):
    """Base error for the wayfinding domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class IngestionError(WayfinderError):
    """A single table row could not be applied to the graph.

    These are recorded in an IngestionReport, never raised by the
    ingestion entry points.

    Attributes:
        row_number: 1-based index of the offending body row (0 when the
            error concerns the table as a whole)
    """

    row_number: int = 0


@dataclass
class CellParseError(IngestionError):
    """A cell that should hold an integer does not.

    Attributes:
        column: Name of the column the cell belongs to
        value: The raw cell value
    """

    column: str = ""
    value: str = ""


@dataclass
class UnknownVertexReferenceError(IngestionError):
    """An edge or label row references a vertex id the graph lacks.

    Attributes:
        vertex_id: The id that could not be resolved
    """

    vertex_id: int = 0


@dataclass
class MissingColumnError(IngestionError):
    """A table lacks a header column that ingestion requires.

    Attributes:
        column: The missing header name
    """

    column: str = ""


@dataclass
class SelfLoopError(IngestionError):
    """An edge row connects a vertex to itself.

    Attributes:
        vertex_id: The id appearing in both columns
    """

    vertex_id: int = 0


@dataclass
class EmptyHeapError(WayfinderError):
    """extract_min was called on an empty heap."""


@dataclass
class NoPathFoundError(WayfinderError):
    """The end vertex is unreachable from the start vertex.

    Attributes:
        start: Id of the start vertex
        end: Id of the end vertex
    """

    start: int = 0
    end: int = 0


@dataclass
class PathReconstructionError(WayfinderError):
    """A route was found but could not be traced back from the travel log.

    Usually means ``epsilon`` is too small for the dataset's float error.

    Attributes:
        start: Id of the start vertex
        end: Id of the end vertex
        epsilon: Tolerance used while matching accumulated distances
    """

    start: int = 0
    end: int = 0
    epsilon: float = 0.0


@dataclass
class InvalidEndpointError(WayfinderError):
    """A start or end token resolves to no vertex.

    Attributes:
        token: The token as given by the caller
        role: Either "start" or "end"
    """

    token: str = ""
    role: str = ""


@dataclass
class FetchError(WayfinderError):
    """Raw table text could not be retrieved.

    Attributes:
        location: Path or URL that was requested
    """

    location: str = ""


@dataclass
class ConfigurationError(WayfinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
