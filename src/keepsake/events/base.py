"""Event system for decoupled game event handling.

Gameplay code publishes events when something worth persisting happens (the
player dies, a coin is picked up) and save consumers subscribe to keep their
counters current between saves, without the gameplay code knowing anything
about persistence.

Example usage:
    bus = EventBus()

    def on_death(event: PlayerDeathEvent) -> None:
        print("Player died")

    bus.subscribe(PlayerDeathEvent, on_death)
    bus.publish(PlayerDeathEvent())
    bus.unsubscribe(PlayerDeathEvent, on_death)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


@dataclass
class PlayerDeathEvent(Event):
    """Fired when the player dies."""


@dataclass
class CoinCollectedEvent(Event):
    """Fired when the player collects a coin.

    Attributes:
        coin_id: Unique identifier of the collected coin.
    """

    coin_id: str


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Handlers are called synchronously, in subscription order, on the thread
    that publishes. This implementation is NOT thread-safe.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Any], None]) -> None:
        """Subscribe a handler to an event type.

        The same handler can be subscribed more than once and is then called
        once per subscription.

        Args:
            event_type: The type of event to listen for.
            handler: Callback taking the event as its only argument.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Any], None]) -> None:
        """Remove every subscription of a handler to an event type.

        Unsubscribing a handler that is not subscribed does nothing.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type.

        Exceptions raised by a handler propagate and stop later handlers.

        Args:
            event: The event instance to publish.
        """
        for handler in list(self.listeners.get(type(event), [])):
            handler(event)

    def clear(self) -> None:
        """Clear all event listeners."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Unregister all bound-method handlers belonging to a subscriber.

        Args:
            subscriber: The instance whose handlers should be removed.
        """
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if getattr(h, "__self__", None) is not subscriber
            ]
