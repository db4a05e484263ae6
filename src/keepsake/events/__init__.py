"""Module for events."""

from keepsake.events.base import CoinCollectedEvent, Event, EventBus, PlayerDeathEvent

__all__ = [
    "CoinCollectedEvent",
    "Event",
    "EventBus",
    "PlayerDeathEvent",
]
