"""Player save consumer."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, ClassVar

from keepsake.data.game_state import AttributesData, Vector3
from keepsake.events import EventBus, PlayerDeathEvent
from keepsake.saves.base import BaseSaveConsumer

if TYPE_CHECKING:
    from keepsake.data.game_state import GameState


class PlayerState(BaseSaveConsumer):
    """Persists the player's position and attributes.

    Attributes:
        position: Current player position.
        attributes: Current attribute points.
        respawn_point: Where the player reappears after dying.
    """

    name: ClassVar[str] = "player"

    def __init__(self, event_bus: EventBus | None = None, respawn_point: Vector3 | None = None) -> None:
        """Initialize the player at the origin with default attributes.

        Args:
            event_bus: If given, deaths publish PlayerDeathEvent on this bus.
            respawn_point: Position restored by die(). Defaults to the origin.
        """
        self.event_bus = event_bus
        self.respawn_point = respawn_point or Vector3()
        self.position = Vector3()
        self.attributes = AttributesData()

    def move_to(self, x: float, y: float, z: float = 0.0) -> None:
        """Set the player position."""
        self.position = Vector3(x, y, z)

    def die(self) -> None:
        """Handle a player death: announce it and move back to the respawn point."""
        if self.event_bus:
            self.event_bus.publish(PlayerDeathEvent())
        self.position = self.respawn_point

    def on_load(self, state: GameState) -> None:
        """Take position and attributes from the loaded state."""
        self.position = state.player_position
        self.attributes = replace(state.attributes)

    def on_save(self, state: GameState) -> None:
        """Write position and attributes into the state."""
        state.player_position = self.position
        state.attributes = replace(self.attributes)
