"""Shortest-path computation using Dijkstra's algorithm.

Steps are pushed onto a PathStepMinHeap without decrease-key, so the heap
may hold several steps leading to the same vertex; the ones reaching an
already visited vertex are dropped when popped. Every accepted step is
appended to a travel log, which is walked backwards afterwards to recover
the route.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Union

from ..config import SearchConfig
from ..domain.errors import InvalidEndpointError, NoPathFoundError, PathReconstructionError
from ..domain.models import Path, PathStep, Vertex
from ..io.table import parse_integer
from .heap import PathStepMinHeap
from .model import Graph

logger = logging.getLogger(__name__)

Token = Union[int, str]


def resolve_endpoint(graph: Graph, token: Token, role: str = "start") -> Vertex:
    """Find the vertex a start or end token refers to.

    Integer tokens (or strings holding an integer) are looked up by id,
    anything else by label, case-insensitively.

    Raises:
        InvalidEndpointError: If no vertex matches ``token``.
    """
    if isinstance(token, int):
        vertex = graph.get_vertex_by_id(token)
    else:
        text = str(token).strip()
        vertex_id = parse_integer(text)
        if vertex_id is None:
            vertex = graph.get_vertex_by_label(text)
        else:
            vertex = graph.get_vertex_by_id(vertex_id)

    if vertex is None:
        raise InvalidEndpointError(
            f"Invalid {role}: {token!r}",
            token=str(token),
            role=role,
        )
    return vertex


def _next_unvisited(heap: PathStepMinHeap, visited: Set[int]) -> Optional[PathStep]:
    while heap:
        step = heap.extract_min()
        if step.edge.to_id not in visited:
            return step
    return None


def _backtrack(
    graph: Graph,
    travel_log: List[PathStep],
    start: Vertex,
    end: Vertex,
    distance: float,
    epsilon: float,
) -> Path:
    """Walk the travel log from its end back to ``start``.

    A step belongs to the route when it arrives at the vertex being traced
    and its accumulated distance matches what is left of the route.
    """
    taken: List[PathStep] = []
    target = end.id
    remaining = distance
    for step in reversed(travel_log):
        if target == start.id:
            break
        if step.edge.to_id == target and abs(step.accumulated_distance - remaining) < epsilon:
            taken.append(step)
            target = step.edge.from_id
            remaining -= step.edge.length

    if target != start.id:
        raise PathReconstructionError(
            f"Could not trace the route from {end.id} back to {start.id}; "
            f"epsilon {epsilon} may be too small for this graph",
            start=start.id,
            end=end.id,
            epsilon=epsilon,
        )

    taken.reverse()
    vertices = [start]
    vertices.extend(graph.get_vertex_by_id(step.edge.to_id) for step in taken)
    return Path(vertices=tuple(vertices), edges=tuple(step.edge for step in taken))


def find_path(
    graph: Graph,
    start_token: Token,
    end_token: Token,
    config: Optional[SearchConfig] = None,
) -> Path:
    """Compute the shortest path between two vertices.

    Parameters
    ----------
    graph:
        Graph as produced by ``load_graph``.
    start_token, end_token:
        Vertex ids or labels of the two endpoints.
    config:
        Search settings (reconstruction epsilon, heap tracing).

    Returns
    -------
    Path
        The route from start to end (inclusive). Its ``length`` is the
        total distance.

    Raises
    ------
    InvalidEndpointError
        If either token matches no vertex.
    NoPathFoundError
        If the end vertex cannot be reached from the start vertex.
    """
    config = config or SearchConfig()
    start = resolve_endpoint(graph, start_token, "start")
    end = resolve_endpoint(graph, end_token, "end")

    if start.id == end.id:
        return Path(vertices=(start,))

    heap = PathStepMinHeap()
    visited: Set[int] = {start.id}
    travel_log: List[PathStep] = []
    current = start.id
    accumulated = 0.0

    while current != end.id:
        for edge in graph.edges_from(current):
            if edge.to_id not in visited:
                heap.insert(PathStep(edge=edge, accumulated_distance=accumulated + edge.length))

        if config.trace_heap:
            logger.debug("After expanding %s:\n%s", current, heap.pretty())

        step = _next_unvisited(heap, visited)
        if step is None:
            raise NoPathFoundError(
                f"No path from {start.id} to {end.id}",
                start=start.id,
                end=end.id,
            )

        visited.add(step.edge.to_id)
        travel_log.append(step)
        current = step.edge.to_id
        accumulated = step.accumulated_distance

        if config.trace_heap:
            logger.debug("Travel log: %s", ", ".join(str(s) for s in travel_log))

    return _backtrack(graph, travel_log, start, end, accumulated, config.epsilon)
