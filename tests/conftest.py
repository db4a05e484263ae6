"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import tempfile
from typing import TYPE_CHECKING

import pytest

from keepsake.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Saves go to a fresh temporary directory so tests never touch a real
    saves/ folder.

    Yields:
        None
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        settings.configure(
            SAVE_DIRECTORY=temp_dir,
            SAVE_FILE_NAME="data.game",
            SAVE_ENCRYPTION_ENABLED=False,
            SAVE_ENCRYPTION_KEY="word",
            DISABLE_DATA_PERSISTENCE=False,
            INITIALIZE_DATA_IF_MISSING=False,
            OVERRIDE_PROFILE_ID=False,
            TEST_PROFILE_ID="test",
            LOG_LEVEL="DEBUG",
        )
        yield
    settings.reset()
