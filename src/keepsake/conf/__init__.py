"""Django-like settings system for Keepsake.

Usage:
    # In your game project's settings.py
    from keepsake.conf import global_settings

    # Override defaults
    SAVE_DIRECTORY = "/home/player/.local/share/mygame"
    SAVE_FILE_NAME = "progress.game"
    SAVE_ENCRYPTION_ENABLED = True

    # In your game code
    from keepsake.conf import settings

    print(settings.SAVE_FILE_NAME)  # "progress.game"
"""

import importlib
import logging
import os
from typing import Any

from keepsake.conf import global_settings

logger = logging.getLogger(__name__)


def _is_missing_module(error: ImportError, module_name: str) -> bool:
    """Check whether an ImportError means the module itself, or a parent package of it, does not exist."""
    if error.name is None:
        return False
    return module_name == error.name or module_name.startswith(f"{error.name}.")


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Similar to Django's LazySettings, this defers loading until the first
    attribute access. Settings are loaded from:
    1. global_settings (framework defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - KEEPSAKE_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get("KEEPSAKE_SETTINGS_MODULE", "settings")

        wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError as e:
            # A settings module that exists but fails its own imports is a real error
            if not _is_missing_module(e, settings_module):
                raise
            logger.debug("No settings module '%s' found, using defaults", settings_module)
            self._wrapped = wrapped
            return

        overrides = [setting for setting in dir(mod) if setting.isupper()]
        for setting in overrides:
            setattr(wrapped, setting, getattr(mod, setting))
        self._wrapped = wrapped
        logger.info("Loaded settings from '%s' (%d overrides)", settings_module, len(overrides))

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                SAVE_DIRECTORY="/tmp/saves",
                SAVE_ENCRYPTION_ENABLED=True,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None

    def reset(self) -> None:
        """Drop loaded settings so the next access reloads them from scratch."""
        self._wrapped = None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
