"""Tests for the CSV graph repository and the Dijkstra route solver."""

from unittest.mock import MagicMock

import pytest

from wayfinder.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from wayfinder.config import DataConfig, SearchConfig
from wayfinder.domain.errors import FetchError, InvalidEndpointError, NoPathFoundError
from wayfinder.domain.models import Vertex
from wayfinder.graph import dijkstra


class FakeFetcher:
    """In-memory TextFetcherPort keyed by location."""

    def __init__(self, files):
        self.files = files
        self.calls = []

    def fetch_text(self, location):
        self.calls.append(location)
        if location not in self.files:
            raise FetchError(f"Missing {location}", location=location)
        return self.files[location]


@pytest.fixture
def data_config(tmp_path):
    return DataConfig(base_location=str(tmp_path), image_file="floor.png")


@pytest.fixture
def fetcher(data_config, data_texts):
    return FakeFetcher(
        {
            data_config.vertices_location: data_texts["vertices"],
            data_config.edges_location: data_texts["edges"] + "0,0\n",
            data_config.labels_location: data_texts["labels"],
        }
    )


class TestCSVGraphRepository:
    """Test suite for CSVGraphRepository."""

    def test_load_builds_graph_and_keeps_report(self, fetcher, data_config):
        repository = CSVGraphRepository(fetcher=fetcher, config=data_config)

        graph = repository.load()

        assert len(graph) == 4
        assert graph.image == data_config.image_location
        assert graph.get_vertex_by_label("Entrance").id == 5
        assert repository.last_report is not None
        assert repository.last_report.edges.applied == 2
        assert len(repository.last_report.errors) == 1

    def test_load_is_cached_until_cleared(self, fetcher, data_config):
        repository = CSVGraphRepository(fetcher=fetcher, config=data_config)

        first = repository.load()
        assert repository.load() is first
        assert len(fetcher.calls) == 3

        repository.clear_cache()
        assert repository.last_report is None
        assert repository.load() is not first
        assert len(fetcher.calls) == 6

    def test_labels_are_optional(self, fetcher, data_config):
        config = data_config.model_copy(update={"labels_file": None})
        repository = CSVGraphRepository(fetcher=fetcher, config=config)

        graph = repository.load()

        assert graph.get_all_labels() == []
        assert repository.last_report.labels is None

    def test_fetch_failure_propagates(self, data_config):
        repository = CSVGraphRepository(fetcher=FakeFetcher({}), config=data_config)

        with pytest.raises(FetchError):
            repository.load()
        assert repository.last_report is None


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    def test_solve_returns_path(self, square_graph):
        path = DijkstraRouteSolver().solve(square_graph, "entrance", "library")

        assert path.start.id == 0
        assert path.end.id == 2
        assert path.length == pytest.approx(200.0)

    def test_solve_uses_configured_epsilon(self, square_graph, monkeypatch):
        captured = MagicMock(wraps=dijkstra.find_path)
        monkeypatch.setattr("wayfinder.adapters.graph.dijkstra_solver.find_path", captured)
        config = SearchConfig(epsilon=0.5)

        DijkstraRouteSolver(config).solve(square_graph, 0, 1)

        assert captured.call_args.args[3] is config

    def test_no_route_is_logged_and_raised(self, square_graph, caplog):
        square_graph.add_vertex(Vertex(99, 1, 1))

        with pytest.raises(NoPathFoundError):
            DijkstraRouteSolver().solve(square_graph, 0, 99)
        assert "No route found" in caplog.text

    def test_invalid_endpoint_is_raised(self, square_graph):
        with pytest.raises(InvalidEndpointError):
            DijkstraRouteSolver().solve(square_graph, "basement", 0)
