"""In-memory graph of waypoints, routes and labels.

The graph represents a real-world, traversable location. It is meant to
be antireflexive (no vertex is connected to itself) and symmetric (every
edge has a reverse twin); the ingestion pipeline upholds both properties,
the graph itself only stores what it is given.

Adjacency and label lookups are keyed by integer vertex id.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..domain.models import Edge, Vertex


class Graph:
    """Vertices, directed adjacency lists, a label index and bounds.

    Labels keep a many-to-one relationship with vertices: every label
    points to exactly one vertex, and a vertex may carry any number of
    labels.

    Bounds only ever grow. Overwriting the rightmost or bottommost vertex
    with one closer to the origin leaves them unchanged, which is fine as
    long as vertices are not replaced after ingestion.
    """

    def __init__(self) -> None:
        self._vertices: Dict[int, Vertex] = {}
        self._adjacency: Dict[int, List[Edge]] = {}
        self._labels: Dict[str, int] = {}
        self._bounds: Tuple[float, float] = (0, 0)
        self.image: Optional[str] = None

    def add_vertex(self, vertex: Vertex) -> None:
        """Insert ``vertex``, replacing any vertex with the same id.

        Labels bound to the replaced vertex carry over to ``vertex``.
        """
        previous = self._vertices.get(vertex.id)
        if previous is not None:
            vertex.labels.update(previous.labels)
        self._vertices[vertex.id] = vertex
        max_x, max_y = self._bounds
        self._bounds = (max(max_x, vertex.x), max(max_y, vertex.y))

    def add_edge(self, edge: Edge) -> None:
        """Append ``edge`` to its source's adjacency list.

        Parallel edges are kept; the search tolerates them.
        """
        self._adjacency.setdefault(edge.from_id, []).append(edge)

    def add_label(self, label: str, vertex: Vertex) -> None:
        """Bind ``label`` (case-insensitive) to ``vertex``.

        A label already bound elsewhere is moved to ``vertex``.
        """
        key = label.upper()
        previous_id = self._labels.get(key)
        if previous_id is not None and previous_id in self._vertices:
            self._vertices[previous_id].labels.discard(key)
        self._labels[key] = vertex.id
        vertex.labels.add(key)

    def set_image(self, image: Optional[str]) -> None:
        """Attach the background image reference used by renderers."""
        self.image = image

    def get_vertex_by_id(self, vertex_id: int) -> Optional[Vertex]:
        return self._vertices.get(vertex_id)

    def get_vertex_by_label(self, label: str) -> Optional[Vertex]:
        vertex_id = self._labels.get(label.upper())
        if vertex_id is None:
            return None
        return self._vertices.get(vertex_id)

    def get_all_labels(self) -> List[str]:
        """Return every label, in the order they were first added."""
        return list(self._labels)

    def get_bounds(self) -> Tuple[float, float]:
        """Return ``(max_x, max_y)`` over every vertex ever added."""
        return self._bounds

    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    def edges_from(self, vertex_id: int) -> Sequence[Edge]:
        """Outgoing edges of ``vertex_id`` in insertion order."""
        return tuple(self._adjacency.get(vertex_id, ()))

    def edges(self) -> Iterator[Edge]:
        for edges in self._adjacency.values():
            yield from edges

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def describe(self) -> str:
        """Multi-line dump of the image, vertices, edges and labels."""
        lines = ["GRAPH:", "  IMAGE:"]
        lines.append(f"    {self.image}" if self.image is not None else "    no image set")
        lines.append("  VERTICES:")
        lines.extend(f"    {vertex}" for vertex in self._vertices.values())
        lines.append("  EDGES:")
        lines.extend(f"    {edge}" for edge in self.edges())
        lines.append("  LABELS:")
        for label, vertex_id in self._labels.items():
            vertex = self._vertices.get(vertex_id)
            lines.append(f"    {label} => {vertex if vertex is not None else vertex_id}")
        lines.append("END OF GRAPH")
        return "\n".join(lines)
