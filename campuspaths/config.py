"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- campus data file locations
- logging level and format

Configuration can be overridden via environment variables:
- CAMPUS_DATA_DATA_DIR=/path/to/data
- CAMPUS_DATA_PATHS_FILE=campus_paths.csv
- CAMPUS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CampusDataConfig(BaseSettings):
    """Campus data configuration.

    Environment variables prefixed with CAMPUS_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    buildings_file: str = "campus_buildings.csv"
    paths_file: str = "campus_paths.csv"

    @property
    def buildings_path(self) -> Path:
        """Full path to the buildings CSV file."""
        return self.data_dir / self.buildings_file

    @property
    def paths_path(self) -> Path:
        """Full path to the paths CSV file."""
        return self.data_dir / self.paths_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CAMPUS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.data.paths_path)
        print(config.observability.level)

    Environment variables prefixed with CAMPUS_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_")

    data: CampusDataConfig = Field(default_factory=CampusDataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging configuration to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
