"""Base class for save consumers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from keepsake.data.game_state import GameState


class BaseSaveConsumer(ABC):
    """Abstract base class for save consumers.

    A save consumer is any object that owns part of the game state while a
    scene is running (a death counter, a coin, the player) and needs it to
    survive between sessions. The coordinator pushes the loaded GameState into
    every registered consumer after a load, and asks every consumer to write
    its current values back into the same GameState right before a save.

    Both entry points receive the coordinator's single in-memory record.
    on_load must treat it as read-only; on_save mutates it in place.

    Class Attributes:
        name: Identifier used in log messages.

    Example:
        class DeathCounter(BaseSaveConsumer):
            name: ClassVar[str] = "death_counter"

            def on_load(self, state: GameState) -> None:
                self.deaths = state.death_count

            def on_save(self, state: GameState) -> None:
                state.death_count = self.deaths
    """

    name: ClassVar[str] = "consumer"

    @abstractmethod
    def on_load(self, state: GameState) -> None:
        """Initialize local state from a freshly loaded game state.

        Args:
            state: The loaded game state. Must not be modified.
        """

    @abstractmethod
    def on_save(self, state: GameState) -> None:
        """Write local state back into the game state before it is persisted.

        Consumers with nothing to persist implement this as a no-op.

        Args:
            state: The game state about to be saved, modified in place.
        """
