"""Dijkstra route solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Configuration injection (SearchConfig)
- Logging of each query and its outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from ...config import SearchConfig
from ...domain.errors import NoPathFoundError
from ...domain.models import Path
from ...graph.dijkstra import find_path
from ...graph.model import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        config: Search configuration
    """

    config: SearchConfig = field(default_factory=SearchConfig)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        start: Union[int, str],
        end: Union[int, str],
    ) -> Path:
        """Find the shortest path between two vertices.

        Args:
            graph: The walkable network.
            start: Start vertex id or label.
            end: End vertex id or label.

        Returns:
            The shortest Path.

        Raises:
            InvalidEndpointError: If start or end matches no vertex.
            NoPathFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": str(start), "end": str(end)},
        )

        try:
            path = find_path(graph, start, end, self.config)
        except NoPathFoundError:
            self._logger.warning(
                "No route found",
                extra={"start": str(start), "end": str(end)},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "start": str(start),
                "end": str(end),
                "stops": len(path),
                "distance": path.length,
            },
        )
        return path
