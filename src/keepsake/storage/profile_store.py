"""File storage for per-profile game state.

Each profile is a directory under the store's base directory holding the
primary data file and, once a save has been verified, a backup copy of it:

    {base_directory}/{profile_id}/{file_name}
    {base_directory}/{profile_id}/{file_name}.bak

Key behaviors:
- Saves are verified by reading the file back before the backup is refreshed,
  so the backup always holds the last state known to load correctly
- A primary file that fails to load is replaced by the backup and loaded once more
- Profiles are enumerated from the directory structure, skipping folders that
  hold no data file
- Optional XOR obfuscation, configured per store

Errors never escape the store: I/O and decode failures are logged and turned
into None/False/empty results.

Limitations:
- No locking. Only one process may use a base directory at a time.
- Writes are not atomic. A crash mid-write leaves a truncated primary file,
  which the next load recovers from the backup.
- Obfuscation is not recorded in the files. A store configured differently
  from the files on disk treats every profile as corrupt.

Example usage:
    store = ProfileStore(Path("saves"), "data.game", encryption_enabled=True)

    store.save(GameState(), "slot-1")
    state = store.load("slot-1")
    latest = store.most_recent_profile_id()
"""

from __future__ import annotations

import logging
import shutil
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from keepsake.exceptions import DecodeError
from keepsake.storage import codec

if TYPE_CHECKING:
    from pathlib import Path

    from keepsake.data.game_state import GameState
    from keepsake.types import ProfileInfoDict

logger = logging.getLogger(__name__)

BACKUP_EXTENSION = ".bak"


class ProfileStore:
    """Reads and writes profile save files with backup and rollback.

    Attributes:
        base_directory: Directory containing one subdirectory per profile.
        file_name: Name of the primary data file within each profile directory.
        encryption_enabled: Whether files are XOR-obfuscated on disk.
    """

    def __init__(
        self,
        base_directory: Path,
        file_name: str,
        *,
        encryption_enabled: bool = False,
        encryption_key: bytes = b"word",
    ) -> None:
        """Initialize the profile store.

        Args:
            base_directory: Directory containing one subdirectory per profile.
                Created lazily by the first save.
            file_name: Name of the primary data file within each profile directory.
            encryption_enabled: Whether to XOR-obfuscate files on disk.
            encryption_key: Key for the obfuscation transform.
        """
        self.base_directory = base_directory
        self.file_name = file_name
        self.encryption_enabled = encryption_enabled
        self._encryption_key = encryption_key

    def save(self, state: GameState, profile_id: str | None) -> bool:
        """Write a game state to a profile and refresh its backup.

        The save process:
        1. Creates the profile directory if needed
        2. Encodes (and optionally obfuscates) the state over the primary file
        3. Reads the primary file back to verify it loads
        4. Copies the verified primary file over the backup

        If verification fails the backup is left untouched so it still holds
        the last state known to be good.

        Args:
            state: Game state to persist.
            profile_id: Profile to write to. Empty or None does nothing.

        Returns:
            True if the file was written and verified, False otherwise.
        """
        if not profile_id:
            logger.warning("Refusing to save without a profile id")
            return False

        data_path = self._get_data_path(profile_id)
        backup_path = self._get_backup_path(profile_id)

        try:
            data_path.parent.mkdir(parents=True, exist_ok=True)
            data_path.write_bytes(self._dump(state))

            verified = self.load(profile_id, allow_restore_from_backup=False)
            if verified is None:
                logger.error(
                    "Save file could not be verified and backup was not refreshed: %s",
                    data_path,
                )
                return False

            shutil.copyfile(data_path, backup_path)

        except OSError:
            logger.exception("Error occurred when trying to save data to file: %s", data_path)
            return False
        else:
            logger.info("Saved profile '%s' to %s", profile_id, data_path)
            return True

    def load(self, profile_id: str | None, *, allow_restore_from_backup: bool = True) -> GameState | None:
        """Load a profile's game state.

        If the primary file cannot be read or decoded and rollback is allowed,
        the backup is copied over the primary file and the load is retried once
        with rollback disabled.

        Args:
            profile_id: Profile to read. Empty or None returns None.
            allow_restore_from_backup: Whether a failed load may roll back to the backup.

        Returns:
            The loaded game state, or None if the profile does not exist or
            neither the primary file nor the backup could be loaded.
        """
        if not profile_id:
            return None

        data_path = self._get_data_path(profile_id)
        if not data_path.is_file():
            logger.debug("No save data for profile '%s'", profile_id)
            return None

        try:
            state = self._read(data_path)
        except (OSError, DecodeError):
            if not allow_restore_from_backup:
                logger.exception("Failed to load file at path %s and backup did not work", data_path)
                return None

            logger.warning("Failed to load data file, attempting to roll back: %s", data_path, exc_info=True)
            if self._attempt_rollback(profile_id):
                return self.load(profile_id, allow_restore_from_backup=False)
            logger.error("Failed to load data file and no backup could be restored: %s", data_path)
            return None

        return state

    def load_backup(self, profile_id: str | None) -> GameState | None:
        """Load a profile's backup file directly, without touching the primary file.

        Args:
            profile_id: Profile whose backup to read.

        Returns:
            The backup's game state, or None if it is missing or unreadable.
        """
        if not profile_id:
            return None

        backup_path = self._get_backup_path(profile_id)
        if not backup_path.is_file():
            return None

        try:
            state = self._read(backup_path)
        except (OSError, DecodeError):
            logger.exception("Failed to load backup file %s", backup_path)
            return None
        else:
            return state

    def delete(self, profile_id: str | None) -> bool:
        """Delete a profile's directory, including its primary and backup files.

        Args:
            profile_id: Profile to delete.

        Returns:
            True if the profile existed and was deleted, False otherwise.
        """
        if not profile_id:
            return False

        data_path = self._get_data_path(profile_id)
        if not data_path.exists():
            logger.warning("Tried to delete profile data, but data was not found at path: %s", data_path)
            return False

        try:
            shutil.rmtree(data_path.parent)
        except OSError:
            logger.exception("Failed to delete profile data for profile id '%s'", profile_id)
            return False
        else:
            logger.info("Deleted profile '%s'", profile_id)
            return True

    def profile_exists(self, profile_id: str | None) -> bool:
        """Check whether a profile has a primary data file."""
        return bool(profile_id) and self._get_data_path(profile_id).is_file()

    def list_profiles(self) -> dict[str, GameState]:
        """Load every profile in the base directory.

        Directories without a data file are skipped with a warning. Profiles
        that fail to load are logged and left out.

        Returns:
            Dictionary mapping profile ids to their game state, in directory name order.
        """
        profiles: dict[str, GameState] = {}
        if not self.base_directory.is_dir():
            return profiles

        try:
            directories = sorted(path for path in self.base_directory.iterdir() if path.is_dir())
        except OSError:
            logger.exception("Failed to list profiles in %s", self.base_directory)
            return profiles

        for directory in directories:
            profile_id = directory.name
            if not self._get_data_path(profile_id).is_file():
                logger.warning(
                    "Skipping directory when loading all profiles because it does not contain data: %s",
                    profile_id,
                )
                continue

            state = self.load(profile_id)
            if state is None:
                logger.error("Tried to load profile but something went wrong. Profile id: %s", profile_id)
                continue
            profiles[profile_id] = state

        return profiles

    def most_recent_profile_id(self) -> str | None:
        """Get the profile that was saved most recently.

        Ties on last_updated go to the profile whose directory name sorts first.

        Returns:
            The profile id with the greatest last_updated, or None if there are no profiles.
        """
        # max keeps the first of equal items, and profiles come in name order
        most_recent = max(
            self.list_profiles().items(),
            key=lambda item: item[1].last_updated,
            default=None,
        )
        return most_recent[0] if most_recent is not None else None

    def get_profile_info(self, profile_id: str) -> ProfileInfoDict | None:
        """Get the summary shown for a profile in a save slot.

        Args:
            profile_id: Profile to describe.

        Returns:
            Dictionary with completion, death count and save time, or None if
            the profile does not exist or cannot be loaded.
        """
        state = self.load(profile_id)
        if state is None:
            return None

        try:
            date_string = datetime.fromtimestamp(state.last_updated / 1000, UTC).strftime("%Y-%m-%d %H:%M")
        except (OverflowError, OSError, ValueError):
            date_string = "Unknown"

        return {
            "profile_id": profile_id,
            "percentage_complete": state.get_percentage_complete(),
            "death_count": state.death_count,
            "last_updated": state.last_updated,
            "date_string": date_string,
        }

    def _attempt_rollback(self, profile_id: str) -> bool:
        """Copy a profile's backup over its primary file.

        Args:
            profile_id: Profile to roll back.

        Returns:
            True if the backup existed and was copied, False otherwise.
        """
        data_path = self._get_data_path(profile_id)
        backup_path = self._get_backup_path(profile_id)
        if not backup_path.is_file():
            logger.error("Tried to roll back, but no backup file exists for profile '%s'", profile_id)
            return False

        try:
            shutil.copyfile(backup_path, data_path)
        except OSError:
            logger.exception("Error occurred when trying to roll back to backup file: %s", backup_path)
            return False
        else:
            logger.warning("Had to roll back to backup file at: %s", backup_path)
            return True

    def _dump(self, state: GameState) -> bytes:
        payload = codec.encode(state)
        if self.encryption_enabled:
            payload = codec.obfuscate(payload, self._encryption_key)
        return payload

    def _read(self, path: Path) -> GameState:
        payload = path.read_bytes()
        if self.encryption_enabled:
            payload = codec.deobfuscate(payload, self._encryption_key)
        return codec.decode(payload)

    def _get_data_path(self, profile_id: str) -> Path:
        return self.base_directory / profile_id / self.file_name

    def _get_backup_path(self, profile_id: str) -> Path:
        return self.base_directory / profile_id / f"{self.file_name}{BACKUP_EXTENSION}"
