"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the walkable network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import GraphLoadReport, Path
    from ..graph.model import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the graph
    from wherever its tables are stored.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The graph built from every valid row of the data tables.
        """
        ...

    @property
    def last_report(self) -> Optional[GraphLoadReport]:
        """Errors collected during the most recent load, if any."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (find_path)

    The solver computes shortest routes through the graph.
    """

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
        """
        ...
