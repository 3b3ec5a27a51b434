"""Library bootstrap for host applications.

Loads settings and configures logging.  Host applications call
``configure`` once at start-up; nothing else in the package touches
global logging state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .core.config import Settings, load_settings
from .observability.logger import setup_logging

logger = logging.getLogger(__name__)


def configure(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings, set up structured logging and return the settings."""
    settings = load_settings(config_path=config_path, overrides=overrides)

    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )

    logger.info(
        "domain_shared configured: log_level=%s default_page_size=%d",
        settings.observability.log_level,
        settings.pagination.default_page_size,
    )
    return settings
