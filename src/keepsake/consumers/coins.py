"""Collectible coin save consumers.

Each Coin in a scene persists its own collected flag under its id in
GameState.coins_collected, so the set of keys is the set of coins the player
has seen and GameState.get_percentage_complete() can report progress.
CoinCounter only displays progress and writes nothing back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from keepsake.events import CoinCollectedEvent, EventBus
from keepsake.saves.base import BaseSaveConsumer

if TYPE_CHECKING:
    from keepsake.data.game_state import GameState

logger = logging.getLogger(__name__)


class Coin(BaseSaveConsumer):
    """A collectible coin placed in a scene.

    Attributes:
        coin_id: Unique identifier of this coin across the whole game.
        collected: Whether the player has picked the coin up.
    """

    name: ClassVar[str] = "coin"

    def __init__(self, coin_id: str, event_bus: EventBus) -> None:
        """Initialize an uncollected coin.

        Args:
            coin_id: Unique identifier, stable across sessions.
            event_bus: Bus on which CoinCollectedEvent is published.

        Raises:
            ValueError: If coin_id is empty.
        """
        if not coin_id:
            msg = "Coin id must not be empty"
            raise ValueError(msg)
        self.coin_id = coin_id
        self.event_bus = event_bus
        self.collected = False

    @property
    def visible(self) -> bool:
        """Whether the coin should still be drawn."""
        return not self.collected

    def collect(self) -> bool:
        """Collect the coin when the player touches it.

        Returns:
            True if the coin was collected now, False if it already had been.
        """
        if self.collected:
            return False
        self.collected = True
        self.event_bus.publish(CoinCollectedEvent(self.coin_id))
        logger.debug("Collected coin %s", self.coin_id)
        return True

    def on_load(self, state: GameState) -> None:
        """Restore the collected flag for this coin."""
        self.collected = state.coins_collected.get(self.coin_id, False)

    def on_save(self, state: GameState) -> None:
        """Record this coin and its collected flag."""
        state.coins_collected[self.coin_id] = self.collected


class CoinCounter(BaseSaveConsumer):
    """Counts collected coins for display as "collected / total"."""

    name: ClassVar[str] = "coin_counter"

    def __init__(self, event_bus: EventBus, total_coins: int = 0) -> None:
        """Initialize the counter and subscribe to coin pickups.

        Args:
            event_bus: Bus on which CoinCollectedEvent is published.
            total_coins: Number of coins in the game, shown as the denominator.
        """
        self.event_bus = event_bus
        self.total_coins = total_coins
        self.coins_collected = 0
        event_bus.subscribe(CoinCollectedEvent, self._on_coin_collected)

    def _on_coin_collected(self, event: CoinCollectedEvent) -> None:
        self.coins_collected += 1

    @property
    def text(self) -> str:
        """Display text for the HUD."""
        return f"{self.coins_collected} / {self.total_coins}"

    def on_load(self, state: GameState) -> None:
        """Count the coins already collected in the loaded state."""
        self.coins_collected = sum(1 for collected in state.coins_collected.values() if collected)

    def on_save(self, state: GameState) -> None:
        """Nothing to persist; the coins record themselves."""

    def cleanup(self) -> None:
        """Unsubscribe from the event bus."""
        self.event_bus.unregister_all(self)
