"""Centralized configuration using Pydantic Settings.

An ``AppConfig`` is built once by the entry point and passed explicitly
to the components that need it; nothing here caches a process-wide
instance.

Configuration can be overridden via environment variables:
- WAYFINDER_DATA_BASE_LOCATION=https://example.org/maps/library
- WAYFINDER_DATA_SOURCE=http
- WAYFINDER_SEARCH_EPSILON=0.0001
- WAYFINDER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class DataConfig(BaseSettings):
    """Where the vertex, edge and label tables live.

    ``base_location`` is a directory for the local source and a URL
    prefix for the http source.

    Environment variables prefixed with WAYFINDER_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="WAYFINDER_DATA_")

    source: Literal["local", "http"] = "local"
    base_location: str = Field(
        default_factory=lambda: str(Path(__file__).resolve().parent.parent / "data")
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"
    labels_file: Optional[str] = "labels.csv"
    image_file: Optional[str] = None

    def _join(self, name: str) -> str:
        if self.source == "http":
            return f"{self.base_location.rstrip('/')}/{name}"
        return str(Path(self.base_location) / name)

    @property
    def vertices_location(self) -> str:
        """Full path or URL of the vertex table."""
        return self._join(self.vertices_file)

    @property
    def edges_location(self) -> str:
        """Full path or URL of the edge table."""
        return self._join(self.edges_file)

    @property
    def labels_location(self) -> Optional[str]:
        return self._join(self.labels_file) if self.labels_file else None

    @property
    def image_location(self) -> Optional[str]:
        return self._join(self.image_file) if self.image_file else None


class SearchConfig(BaseSettings):
    """Shortest-path search configuration.

    ``epsilon`` is the tolerance used when matching accumulated distances
    during path reconstruction. Coordinates are in arbitrary vertex-space
    units, so it should be scaled with the dataset.

    Environment variables prefixed with WAYFINDER_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="WAYFINDER_SEARCH_")

    epsilon: float = 0.001
    trace_heap: bool = False  # Log heap contents after every expansion

    @field_validator("epsilon")
    @classmethod
    def _epsilon_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"epsilon must be positive, got {value}")
        return value


class FetchConfig(BaseSettings):
    """Settings for retrieving the raw table text.

    Environment variables prefixed with WAYFINDER_FETCH_.
    """

    model_config = SettingsConfigDict(env_prefix="WAYFINDER_FETCH_")

    timeout_seconds: float = 10.0
    user_agent: str = "wayfinder"
    encoding: str = "utf-8"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WAYFINDER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WAYFINDER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = AppConfig()
        print(config.search.epsilon)
        print(config.data.vertices_location)

    Environment variables prefixed with WAYFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="WAYFINDER_")

    data: DataConfig = Field(default_factory=DataConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format to the root logger.

    Only entry points should call this; library code just logs.
    """
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)


def load_config() -> AppConfig:
    """Build an AppConfig from the environment.

    Raises:
        ConfigurationError: If a setting is missing or has an invalid value.
    """
    try:
        return AppConfig(
            data=DataConfig(),
            search=SearchConfig(),
            fetch=FetchConfig(),
            observability=ObservabilityConfig(),
        )
    except ValidationError as e:
        error = e.errors()[0]
        setting = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(
            f"Invalid {e.title} setting {setting!r}: {error['msg']}",
            setting_name=setting,
            expected_type=error["type"],
            cause=e,
        ) from e
