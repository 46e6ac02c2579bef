"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration
used by the prettifier: lookup CSV column names, output coloring and
logging.

Configuration can be overridden via environment variables:
- PRETTIFIER_LOOKUP_NAME_COLUMN=airport_name
- PRETTIFIER_LOOKUP_ENCODING=latin-1
- PRETTIFIER_RENDER_COLOR=false
- PRETTIFIER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LookupConfig(BaseSettings):
    """Airport lookup CSV configuration.

    Column names are matched case-insensitively against the header row.

    Environment variables prefixed with PRETTIFIER_LOOKUP_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_LOOKUP_")

    name_column: str = "name"
    iata_column: str = "iata_code"
    icao_column: str = "icao_code"
    municipality_column: str = "municipality"
    delimiter: str = ","
    encoding: str = "utf-8"

    @property
    def required_columns(self) -> Tuple[str, str, str, str]:
        """Lower-cased required column names, in record field order."""
        return (
            self.name_column.strip().lower(),
            self.iata_column.strip().lower(),
            self.icao_column.strip().lower(),
            self.municipality_column.strip().lower(),
        )


class RenderConfig(BaseSettings):
    """Output rendering configuration.

    Environment variables prefixed with PRETTIFIER_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_RENDER_")

    color: bool = True
    encoding: str = "utf-8"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with PRETTIFIER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.lookup.name_column)
        print(config.render.color)

    Environment variables prefixed with PRETTIFIER_.
    """

    model_config = SettingsConfigDict(env_prefix="PRETTIFIER_")

    lookup: LookupConfig = Field(default_factory=LookupConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
