"""Fixtures shared by CLI command tests."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest
from reclaimspace.core.config import ScanSettings


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[ScanSettings]:
    """Keep CLI tests independent of the user's settings file."""
    settings = ScanSettings()
    with patch("reclaimspace.cli.scanning.load_settings", return_value=settings):
        yield settings
