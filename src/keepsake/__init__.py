"""Keepsake - save-data persistence for 2D games built on Arcade.

This package provides durable per-profile game state storage with features like:
- Multiple save profiles, one directory each
- Verified saves with an automatic backup copy
- Rollback to the backup when a save file is corrupt
- Optional XOR obfuscation of save files
- Pluggable save consumers that contribute their own fields

Quick start:
    # Create a settings.py file in your project root:
    # SAVE_DIRECTORY = "saves"
    # SAVE_ENCRYPTION_ENABLED = True

    from keepsake import init_persistence, setup_logging

    setup_logging()
    coordinator = init_persistence()
    coordinator.on_scene_loaded([death_counter, *coins])
    ...
    coordinator.on_scene_unloaded()

Alternative usage:
    # Customize settings programmatically
    from keepsake.conf import settings

    settings.configure(
        SAVE_DIRECTORY="/tmp/saves",
        INITIALIZE_DATA_IF_MISSING=True,
    )
"""

__version__ = "0.1.0"

from keepsake.conf import settings
from keepsake.coordinator import PersistenceCoordinator
from keepsake.data import AttributesData, GameState, Vector3
from keepsake.exceptions import DecodeError, ImproperlyConfigured, KeepsakeError
from keepsake.helpers import create_store, init_persistence, setup_logging
from keepsake.saves import BaseSaveConsumer, ConsumerRegistry
from keepsake.storage import ProfileStore

__all__ = [
    "AttributesData",
    "BaseSaveConsumer",
    "ConsumerRegistry",
    "DecodeError",
    "GameState",
    "ImproperlyConfigured",
    "KeepsakeError",
    "PersistenceCoordinator",
    "ProfileStore",
    "Vector3",
    "__version__",
    "create_store",
    "init_persistence",
    "settings",
    "setup_logging",
]
