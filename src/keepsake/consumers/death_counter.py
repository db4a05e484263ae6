"""Death counter save consumer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from keepsake.events import EventBus, PlayerDeathEvent
from keepsake.saves.base import BaseSaveConsumer

if TYPE_CHECKING:
    from keepsake.data.game_state import GameState

logger = logging.getLogger(__name__)


class DeathCounter(BaseSaveConsumer):
    """Counts player deaths and persists the total in death_count."""

    name: ClassVar[str] = "death_counter"

    def __init__(self, event_bus: EventBus) -> None:
        """Initialize the counter and subscribe to player deaths.

        Args:
            event_bus: Bus on which PlayerDeathEvent is published.
        """
        self.event_bus = event_bus
        self.death_count = 0
        event_bus.subscribe(PlayerDeathEvent, self._on_player_death)

    def _on_player_death(self, event: PlayerDeathEvent) -> None:
        self.death_count += 1
        logger.debug("Player died, death count is now %d", self.death_count)

    @property
    def text(self) -> str:
        """Display text for the HUD."""
        return str(self.death_count)

    def on_load(self, state: GameState) -> None:
        """Take the death count from the loaded state."""
        self.death_count = state.death_count

    def on_save(self, state: GameState) -> None:
        """Write the current death count into the state."""
        state.death_count = self.death_count

    def cleanup(self) -> None:
        """Unsubscribe from the event bus."""
        self.event_bus.unregister_all(self)
