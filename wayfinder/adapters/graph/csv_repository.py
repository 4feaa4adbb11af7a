"""CSV graph repository adapter.

This adapter wraps the table ingestion in graph/load_graph.py and adds:
- Configuration injection (table locations from DataConfig)
- A pluggable text fetcher (local files or HTTP)
- Caching of the loaded graph
- Access to the errors collected by the last load
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import DataConfig
from ...domain.models import GraphLoadReport
from ...graph.load_graph import load_graph
from ...graph.model import Graph
from ...ports.fetch import TextFetcherPort


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV tables.

    This adapter implements GraphRepositoryPort.

    Attributes:
        fetcher: Retrieves the raw table text
        config: Data configuration (table locations)
    """

    fetcher: TextFetcherPort
    config: DataConfig = field(default_factory=DataConfig)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _report: Optional[GraphLoadReport] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from the configured tables.

        Malformed rows do not fail the load; they are available through
        ``last_report`` afterwards.

        Returns:
            The graph built from every valid row.

        Raises:
            FetchError: If one of the tables cannot be retrieved.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_location": self.config.vertices_location,
                "edges_location": self.config.edges_location,
                "labels_location": self.config.labels_location,
            },
        )

        vertex_text = self.fetcher.fetch_text(self.config.vertices_location)
        edge_text = self.fetcher.fetch_text(self.config.edges_location)
        label_text = None
        if self.config.labels_location is not None:
            label_text = self.fetcher.fetch_text(self.config.labels_location)

        graph, report = load_graph(
            vertex_text,
            edge_text,
            label_text,
            image=self.config.image_location,
        )
        self._graph = graph
        self._report = report

        if not report.ok:
            self._logger.warning(
                "Graph loaded with skipped rows",
                extra={"nodes": len(graph), "errors": len(report.errors)},
            )
        return graph

    @property
    def last_report(self) -> Optional[GraphLoadReport]:
        return self._report

    def clear_cache(self) -> None:
        """Clear the cached graph and its load report."""
        self._graph = None
        self._report = None
        self._logger.debug("Graph cache cleared")
