"""Tests for settings loading."""

import logging

import pytest
from pydantic import ValidationError

from wayfinder.config import (
    AppConfig,
    DataConfig,
    ObservabilityConfig,
    SearchConfig,
    configure_logging,
    load_config,
)
from wayfinder.domain.errors import ConfigurationError


def test_defaults():
    config = AppConfig()

    assert config.search.epsilon == 0.001
    assert config.search.trace_heap is False
    assert config.data.source == "local"
    assert config.data.vertices_location.endswith("vertices.csv")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WAYFINDER_SEARCH_EPSILON", "0.25")
    monkeypatch.setenv("WAYFINDER_DATA_SOURCE", "http")
    monkeypatch.setenv("WAYFINDER_DATA_BASE_LOCATION", "https://example.org/maps/")

    config = AppConfig()

    assert config.search.epsilon == 0.25
    assert config.data.edges_location == "https://example.org/maps/edges.csv"


def test_epsilon_must_be_positive():
    with pytest.raises(ValidationError):
        SearchConfig(epsilon=0)


def test_optional_tables_have_no_location():
    config = DataConfig(labels_file=None)

    assert config.labels_location is None
    assert config.image_location is None


def test_local_locations_join_paths(tmp_path):
    config = DataConfig(base_location=str(tmp_path), image_file="floor.png")

    assert config.image_location == str(tmp_path / "floor.png")


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        configure_logging(ObservabilityConfig(level="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("WAYFINDER_SEARCH_TRACE_HEAP", "true")

    assert load_config().search.trace_heap is True


def test_load_config_wraps_validation_errors(monkeypatch):
    monkeypatch.setenv("WAYFINDER_SEARCH_EPSILON", "-1")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config()

    assert excinfo.value.setting_name == "epsilon"
    assert excinfo.value.expected_type == "value_error"
    assert isinstance(excinfo.value.cause, ValidationError)
    assert "SearchConfig" in excinfo.value.message
