"""Logging configuration from ObservabilityConfig."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Send log records to stderr with the configured level and format.

    stdout is reserved for the prettified itinerary and user messages.
    """
    config = config or get_config().observability
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        stream=sys.stderr,
    )
