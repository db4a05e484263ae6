"""Helper functions for setting up persistence in a game.

This module provides the startup entry point: init_persistence() builds a
ProfileStore and PersistenceCoordinator from the settings (see
keepsake.conf), picks the profile to start with and returns the coordinator
handle the rest of the game passes around.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from keepsake.conf import settings
from keepsake.coordinator import PersistenceCoordinator
from keepsake.exceptions import ImproperlyConfigured
from keepsake.storage.profile_store import ProfileStore

logger = logging.getLogger(__name__)


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_store() -> ProfileStore:
    """Create a ProfileStore from the file storage settings.

    Returns:
        Store bound to SAVE_DIRECTORY and SAVE_FILE_NAME.

    Raises:
        ImproperlyConfigured: If the file name is empty, or encryption is
            enabled with an empty key.
    """
    file_name = settings.SAVE_FILE_NAME
    if not file_name:
        msg = "SAVE_FILE_NAME must not be empty"
        raise ImproperlyConfigured(msg)

    encryption_key = settings.SAVE_ENCRYPTION_KEY
    if isinstance(encryption_key, str):
        encryption_key = encryption_key.encode("utf-8")
    if settings.SAVE_ENCRYPTION_ENABLED and not encryption_key:
        msg = "SAVE_ENCRYPTION_KEY must not be empty when SAVE_ENCRYPTION_ENABLED is set"
        raise ImproperlyConfigured(msg)

    return ProfileStore(
        Path(settings.SAVE_DIRECTORY),
        file_name,
        encryption_enabled=settings.SAVE_ENCRYPTION_ENABLED,
        encryption_key=encryption_key,
    )


def init_persistence() -> PersistenceCoordinator:
    """Create the persistence coordinator for this process.

    The starting profile is the most recently saved one on disk, unless
    OVERRIDE_PROFILE_ID is set, in which case TEST_PROFILE_ID is used.

    Returns:
        Coordinator handle to pass to scenes, menus and shutdown hooks.

    Raises:
        ImproperlyConfigured: If the storage settings are unusable.

    Example:
        >>> from keepsake import init_persistence
        >>> coordinator = init_persistence()
        >>> coordinator.on_scene_loaded([death_counter])
    """
    store = create_store()

    profile_id = store.most_recent_profile_id()
    if settings.OVERRIDE_PROFILE_ID:
        profile_id = settings.TEST_PROFILE_ID
        logger.warning("Overrode selected profile id with test id: %s", profile_id)

    return PersistenceCoordinator(
        store,
        active_profile_id=profile_id,
        disable_persistence=settings.DISABLE_DATA_PERSISTENCE,
        initialize_data_if_missing=settings.INITIALIZE_DATA_IF_MISSING,
    )
