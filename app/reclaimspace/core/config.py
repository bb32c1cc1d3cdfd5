"""Scan and deletion settings.

This module provides the settings model and loader for tunables that
are not worth a command-line flag: aggregation concurrency, delete
retry policy, and extra ignore/include patterns.

Settings are stored in ~/.config/reclaimspace/config.toml
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reclaimspace.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class ScanSettings(BaseModel):
    """User settings for scanning and deletion.

    Attributes:
        concurrency_limit: Maximum simultaneous size computations.
        max_retries: Removal attempts per target on transient errors.
        retry_delay: Seconds to wait between removal attempts.
        ignore: Extra ignore patterns, added before the defaults.
        include: Include patterns used when none are given on the CLI.
    """

    model_config = ConfigDict(extra="forbid")

    concurrency_limit: Annotated[
        int,
        Field(ge=1, le=64, description="Simultaneous size computations (1-64)"),
    ] = 5
    max_retries: Annotated[
        int,
        Field(ge=1, le=10, description="Removal attempts per target (1-10)"),
    ] = 3
    retry_delay: Annotated[
        float,
        Field(ge=0.0, le=10.0, description="Seconds between removal attempts"),
    ] = 0.5
    ignore: Annotated[
        list[str],
        Field(default_factory=list, description="Extra ignore patterns"),
    ]
    include: Annotated[
        list[str],
        Field(default_factory=list, description="Default include patterns"),
    ]


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> ScanSettings:
    """Load settings from a TOML file.

    A missing file yields the default settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated ScanSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or fails validation.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return ScanSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return ScanSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e
