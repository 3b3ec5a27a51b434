"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.

Precedence, lowest to highest: defaults, TOML file, environment,
explicit overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, EnvSettingsSource

from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


class PaginationConfig(BaseModel):
    default_page_size: int = Field(default=20, gt=0)


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level library settings.

    Loaded from a TOML config file, overridden by environment variables
    (``DOMAIN_SHARED_OBSERVABILITY__LOG_LEVEL=DEBUG``).
    """

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)

    model_config = {"env_prefix": "DOMAIN_SHARED_", "env_nested_delimiter": "__"}


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    """Merge *updates* into a copy of *base*, recursing into nested dicts."""
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Environment variables win over the file, and *overrides* win over
    both.  Nested sections merge key by key, so an override naming
    ``observability.log_level`` keeps a ``log_format`` set elsewhere.

    Args:
        config_path: Path to TOML config file (optional).  A path that
            does not exist raises ``ConfigError``.
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        import tomli

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    # Init kwargs outrank env vars in pydantic-settings, so the env layer
    # is merged over the file data before it is passed in.
    data = _deep_merge(data, EnvSettingsSource(Settings)())

    if overrides:
        data = _deep_merge(data, overrides)

    return Settings(**data)
