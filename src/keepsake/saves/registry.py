"""Registry of save consumers active in the current scene."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from keepsake.data.game_state import GameState
    from keepsake.saves.base import BaseSaveConsumer

logger = logging.getLogger(__name__)


class ConsumerRegistry:
    """Ordered, duplicate-free collection of save consumers.

    Consumers are scoped to a scene: they register when the scene becomes
    active and the whole set is replaced or cleared when the scene changes.
    Broadcasts visit consumers in registration order, but consumers must not
    rely on running before or after any sibling.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._consumers: list[BaseSaveConsumer] = []

    def register(self, consumer: BaseSaveConsumer) -> None:
        """Register a consumer.

        Registering the same consumer twice keeps its original position.

        Args:
            consumer: The consumer to add.
        """
        if consumer in self:
            logger.warning("Save consumer already registered: %s", consumer.name)
            return
        self._consumers.append(consumer)
        logger.debug("Registered save consumer: %s", consumer.name)

    def unregister(self, consumer: BaseSaveConsumer) -> None:
        """Unregister a consumer. Unknown consumers are ignored."""
        if consumer in self:
            self._consumers = [c for c in self._consumers if c is not consumer]
            logger.debug("Unregistered save consumer: %s", consumer.name)

    def replace(self, consumers: Iterable[BaseSaveConsumer]) -> None:
        """Replace all registered consumers with a new set.

        Args:
            consumers: Consumers of the newly active scene, in registration order.
        """
        self._consumers.clear()
        for consumer in consumers:
            self.register(consumer)

    def clear(self) -> None:
        """Remove all consumers."""
        self._consumers.clear()

    def load_all(self, state: GameState) -> None:
        """Push a loaded game state into every consumer.

        Args:
            state: The loaded game state.
        """
        for consumer in list(self._consumers):
            consumer.on_load(state)
            logger.debug("Restored state to save consumer: %s", consumer.name)

    def save_all(self, state: GameState) -> None:
        """Let every consumer write its values into the game state.

        Args:
            state: The game state about to be saved.
        """
        for consumer in list(self._consumers):
            consumer.on_save(state)
            logger.debug("Gathered state from save consumer: %s", consumer.name)

    def __iter__(self) -> Iterator[BaseSaveConsumer]:
        return iter(list(self._consumers))

    def __len__(self) -> int:
        return len(self._consumers)

    def __contains__(self, consumer: object) -> bool:
        return any(c is consumer for c in self._consumers)
