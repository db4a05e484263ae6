"""Coordination of game state between save consumers and the profile store.

The PersistenceCoordinator owns the single in-memory GameState of a running
game. It loads that state from the active profile and hands it to every
registered save consumer, and on save it collects values back from the
consumers, timestamps the record and writes it through the ProfileStore.

Scene lifecycle:
- on_scene_loaded(consumers): register the scene's consumers, then load
- on_scene_unloaded(): save, then forget the scene's consumers
- shutdown(): save on process exit

Example usage:
    coordinator = init_persistence()

    # Main menu: "New Game" on slot 2
    coordinator.change_active_profile("2")
    coordinator.new_game()
    coordinator.save_game()

    # Scene start
    coordinator.on_scene_loaded([death_counter, *coins])

    # Scene end
    coordinator.on_scene_unloaded()
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from keepsake.data.game_state import GameState
from keepsake.saves.registry import ConsumerRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from keepsake.saves.base import BaseSaveConsumer
    from keepsake.storage.profile_store import ProfileStore

logger = logging.getLogger(__name__)


def current_timestamp() -> int:
    """Get the current time as milliseconds since the Unix epoch (UTC)."""
    return int(datetime.now(UTC).timestamp() * 1000)


class PersistenceCoordinator:
    """Moves game state between save consumers and the profile store.

    Create one per process with init_persistence() and pass it to the code
    that needs it.

    Attributes:
        store: Profile store used for all disk access.
        consumers: Save consumers of the active scene.
        disable_persistence: If True, load_game() and save_game() do nothing.
        initialize_data_if_missing: If True, a failed load starts a new game instead.
    """

    def __init__(
        self,
        store: ProfileStore,
        *,
        active_profile_id: str | None = None,
        disable_persistence: bool = False,
        initialize_data_if_missing: bool = False,
        clock: Callable[[], int] = current_timestamp,
    ) -> None:
        """Initialize the coordinator.

        Args:
            store: Profile store used for all disk access.
            active_profile_id: Profile to load from and save to.
            disable_persistence: Disable all loading and saving.
            initialize_data_if_missing: Start a new game when no data can be loaded.
            clock: Returns the timestamp written to last_updated on save.
        """
        self.store = store
        self.consumers = ConsumerRegistry()
        self.disable_persistence = disable_persistence
        self.initialize_data_if_missing = initialize_data_if_missing
        self._clock = clock
        self._active_profile_id = active_profile_id
        self._game_data: GameState | None = None

        if disable_persistence:
            logger.warning("Data persistence is currently disabled!")

    @property
    def active_profile_id(self) -> str | None:
        """Profile currently used for loading and saving."""
        return self._active_profile_id

    @property
    def game_data(self) -> GameState | None:
        """The in-memory game state, or None if nothing has been loaded or started."""
        return self._game_data

    def has_game_data(self) -> bool:
        """Check whether there is an in-memory game state."""
        return self._game_data is not None

    def register(self, consumer: BaseSaveConsumer) -> None:
        """Register a save consumer for the active scene."""
        self.consumers.register(consumer)

    def unregister(self, consumer: BaseSaveConsumer) -> None:
        """Unregister a save consumer."""
        self.consumers.unregister(consumer)

    def new_game(self) -> None:
        """Replace the in-memory state with a new game. Nothing is written to disk."""
        self._game_data = GameState()
        logger.info("Started a new game for profile '%s'", self._active_profile_id)

    def change_active_profile(self, profile_id: str | None) -> bool:
        """Switch to another profile and load it.

        Args:
            profile_id: Profile to use from now on.

        Returns:
            The result of load_game() for the new profile.
        """
        self._active_profile_id = profile_id
        logger.info("Active profile changed to '%s'", profile_id)
        return self.load_game()

    def load_game(self) -> bool:
        """Load the active profile and push its state into every consumer.

        Returns:
            True if a game state is now in memory and was handed to the consumers.
        """
        if self.disable_persistence:
            return False

        self._game_data = self.store.load(self._active_profile_id)

        if self._game_data is None and self.initialize_data_if_missing:
            self.new_game()

        if self._game_data is None:
            logger.info("No data was found. A new game needs to be started before data can be loaded.")
            return False

        self.consumers.load_all(self._game_data)
        return True

    def save_game(self) -> bool:
        """Collect state from every consumer and write it to the active profile.

        Returns:
            True if the state was written and verified, False otherwise.
        """
        if self.disable_persistence:
            return False

        if self._game_data is None:
            logger.warning("No data was found. A new game needs to be started before data can be saved.")
            return False

        self.consumers.save_all(self._game_data)
        self._game_data.last_updated = self._clock()
        return self.store.save(self._game_data, self._active_profile_id)

    def get_all_profiles(self) -> dict[str, GameState]:
        """Get the game state of every profile on disk."""
        return self.store.list_profiles()

    def delete_profile(self, profile_id: str) -> bool:
        """Delete a profile and fall back to the most recently saved one.

        Args:
            profile_id: Profile to delete.

        Returns:
            True if the profile existed and was deleted.
        """
        deleted = self.store.delete(profile_id)
        self._active_profile_id = self.store.most_recent_profile_id()
        self.load_game()
        return deleted

    def on_scene_loaded(self, consumers: Iterable[BaseSaveConsumer]) -> bool:
        """Register the new scene's consumers and load the active profile into them.

        Args:
            consumers: Save consumers that live in the new scene.

        Returns:
            The result of load_game().
        """
        self.consumers.replace(consumers)
        return self.load_game()

    def on_scene_unloaded(self) -> bool:
        """Save the game and drop the consumers of the scene being left.

        Returns:
            The result of save_game().
        """
        saved = self.save_game()
        self.consumers.clear()
        return saved

    def shutdown(self) -> bool:
        """Save the game before the process exits."""
        return self.save_game()
