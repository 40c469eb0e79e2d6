"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- METROFLOW_GRAPH_DATA_DIR=/path/to/data
- METROFLOW_GRAPH_EDGES_FILE=other.csv
- METROFLOW_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with METROFLOW_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="METROFLOW_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    edges_file: str = "metro_edges.csv"

    @property
    def edges_path(self) -> Path:
        """Full path to the edges CSV file."""
        return self.data_dir / self.edges_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with METROFLOW_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METROFLOW_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges_path)

    Environment variables prefixed with METROFLOW_.
    """

    model_config = SettingsConfigDict(env_prefix="METROFLOW_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from the configuration.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}",
            setting_name="METROFLOW_LOG_LEVEL",
            expected_type="one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
