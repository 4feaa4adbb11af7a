"""Wayfinding service - Main orchestrator.

This service ties the graph repository and the route solver together
to answer "how do I get from A to B" queries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..domain.errors import InvalidEndpointError, NoPathFoundError, WayfinderError
from ..domain.models import Path, Vertex
from ..ports.graph import GraphRepositoryPort, RouteSolverPort

Token = Union[int, str]


def format_vertex(vertex: Vertex) -> str:
    if not vertex.labels:
        return str(vertex.id)
    return f"{vertex.id} [{'/'.join(sorted(vertex.labels))}]"


@dataclass
class WayfindingService:
    """Main service for answering route queries.

    The graph is loaded lazily through the repository on the first query
    and reused afterwards.

    Attributes:
        graph_repository: Loads the walkable network
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route(self, start: Token, end: Token) -> Path:
        """Find the shortest route between two vertices.

        Args:
            start: Start vertex id or label.
            end: End vertex id or label.

        Returns:
            The shortest Path.

        Raises:
            FetchError: If the graph tables cannot be retrieved.
            InvalidEndpointError: If start or end matches no vertex.
            NoPathFoundError: If no path exists.
        """
        self._logger.info(
            "Starting route query",
            extra={"start": str(start), "end": str(end)},
        )
        graph = self.graph_repository.load()
        self._logger.debug("Graph loaded", extra={"nodes": len(graph)})
        return self.route_solver.solve(graph, start, end)

    def route_safe(self, start: Token, end: Token) -> tuple[Optional[Path], Optional[str]]:
        """Find a route, returning an error message instead of raising.

        Returns:
            Tuple of (Path or None, error message or None).
        """
        try:
            return self.route(start, end), None
        except InvalidEndpointError as e:
            return None, f"Error: {e.message}"
        except NoPathFoundError as e:
            return None, f"No path found between {e.start} and {e.end}."
        except WayfinderError as e:
            self._logger.error("Route query failed", extra={"error": str(e)})
            return None, f"Error: {e}"

    def format_result(self, path: Path) -> str:
        """Format a route as a human-readable string."""
        path_str = " -> ".join(format_vertex(vertex) for vertex in path)
        return f"Shortest path: {path_str}\nTotal distance: {path.length:.3f}"

    def describe_route(self, start: Token, end: Token) -> str:
        """Run a query and format its outcome, whatever it is."""
        path, error = self.route_safe(start, end)
        if path is None:
            return error or "Error: no route"
        return self.format_result(path)
