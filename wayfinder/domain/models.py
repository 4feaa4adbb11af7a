"""Domain models for the wayfinder.

Edges, path steps, paths and reports are frozen dataclasses with slots.
Vertices are slotted but mutable in a single respect: the graph keeps
their ``labels`` set in sync with its label index during ingestion.
Edges refer to vertices by id, never by object.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from .errors import IngestionError


@dataclass(slots=True)
class Vertex:
    """A waypoint in vertex-space.

    Attributes:
        id: Unique vertex identifier (negative ids are allowed)
        x: Horizontal vertex-space coordinate
        y: Vertical vertex-space coordinate
        labels: Uppercase labels currently bound to this vertex
    """

    id: int
    x: float
    y: float
    labels: set[str] = field(default_factory=set, compare=False)

    def distance_to(self, other: Vertex) -> float:
        """Euclidean distance between this vertex and ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"#{self.id}({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, navigable connection between two vertices.

    Attributes:
        from_id: Id of the source vertex
        to_id: Id of the destination vertex
        length: Euclidean distance between the two vertices
    """

    from_id: int
    to_id: int
    length: float

    @classmethod
    def between(cls, source: Vertex, target: Vertex) -> Edge:
        """Build the edge ``source -> target`` with its derived length."""
        return cls(from_id=source.id, to_id=target.id, length=source.distance_to(target))

    def __str__(self) -> str:
        return f"Edge {self.from_id} => {self.to_id}"


@dataclass(frozen=True, slots=True)
class PathStep:
    """An edge taken during a search plus the distance travelled so far.

    Attributes:
        edge: The edge leading to the step's destination
        accumulated_distance: Distance from the search origin to
            ``edge.to_id`` when arriving through ``edge``
    """

    edge: Edge
    accumulated_distance: float

    def __str__(self) -> str:
        return (
            f"Path Step on edge ({self.edge}). "
            f"Total distance: {self.accumulated_distance}"
        )


@dataclass(frozen=True, slots=True)
class Path:
    """A route through the graph.

    Attributes:
        vertices: Ordered vertices from start to end (never empty)
        edges: Edges joining each consecutive pair of vertices
    """

    vertices: tuple[Vertex, ...]
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate that the path is non-empty and its edges chain up."""
        if not self.vertices:
            raise ValueError("A path must contain at least one vertex")
        if len(self.edges) != len(self.vertices) - 1:
            raise ValueError(
                f"A path of {len(self.vertices)} vertices needs "
                f"{len(self.vertices) - 1} edges, got {len(self.edges)}"
            )

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vertex]) -> Path:
        """Build a path, deriving an edge between each consecutive pair."""
        edges = tuple(Edge.between(a, b) for a, b in zip(vertices, vertices[1:]))
        return cls(vertices=tuple(vertices), edges=edges)

    @property
    def start(self) -> Vertex:
        return self.vertices[0]

    @property
    def end(self) -> Vertex:
        return self.vertices[-1]

    @property
    def length(self) -> float:
        """Total length of the route."""
        return sum(edge.length for edge in self.edges)

    @property
    def vertex_ids(self) -> tuple[int, ...]:
        return tuple(vertex.id for vertex in self.vertices)

    @property
    def is_trivial(self) -> bool:
        """Check if the path starts and ends on the same vertex."""
        return len(self.vertices) == 1

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __str__(self) -> str:
        return "PATH: " + " => ".join(str(vertex) for vertex in self.vertices)


@dataclass(frozen=True, slots=True)
class IngestionReport:
    """Outcome of ingesting one table into a graph.

    Attributes:
        table_name: What was ingested ("vertices", "edges", "labels")
        applied: Number of rows that were applied to the graph
        errors: Errors for the rows that were skipped, in row order
    """

    table_name: str
    applied: int = 0
    errors: tuple[IngestionError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """Check if every row was applied."""
        return len(self.errors) == 0

    @property
    def error_messages(self) -> tuple[str, ...]:
        return tuple(str(error) for error in self.errors)


@dataclass(frozen=True, slots=True)
class GraphLoadReport:
    """Combined outcome of loading vertex, edge and label tables.

    Attributes:
        vertices: Report for the vertex table
        edges: Report for the edge table
        labels: Report for the label table, if one was provided
    """

    vertices: IngestionReport
    edges: IngestionReport
    labels: Optional[IngestionReport] = None

    @property
    def reports(self) -> tuple[IngestionReport, ...]:
        reports = (self.vertices, self.edges)
        if self.labels is not None:
            reports += (self.labels,)
        return reports

    @property
    def ok(self) -> bool:
        return all(report.ok for report in self.reports)

    @property
    def applied(self) -> int:
        return sum(report.applied for report in self.reports)

    @property
    def errors(self) -> tuple[IngestionError, ...]:
        return tuple(error for report in self.reports for error in report.errors)

    @property
    def error_messages(self) -> tuple[str, ...]:
        return tuple(str(error) for error in self.errors)
