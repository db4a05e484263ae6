"""Game state record persisted for each profile.

The values assigned by the default constructors are the values a new game
starts with when there is no data to load.

Decoding is permissive about shape and strict about types: any key may be
missing (it falls back to its default), but a key that is present must hold a
value of the right type, otherwise DecodeError is raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from keepsake.exceptions import DecodeError

if TYPE_CHECKING:
    from keepsake.types import AttributesDict, GameStateDict, Vector3Dict


def _read_int(data: dict[str, Any], key: str, default: int, *, minimum: int | None = None) -> int:
    value = data.get(key, default)
    # bool is an int subclass; JSON true/false is never a counter
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Field '{key}' must be an integer, got {type(value).__name__}"
        raise DecodeError(msg)
    if minimum is not None and value < minimum:
        msg = f"Field '{key}' must be >= {minimum}, got {value}"
        raise DecodeError(msg)
    return value


def _read_float(data: dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"Field '{key}' must be a number, got {type(value).__name__}"
        raise DecodeError(msg)
    try:
        return float(value)
    except OverflowError as e:
        msg = f"Field '{key}' is out of range for a number"
        raise DecodeError(msg) from e


def _read_object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        msg = f"Field '{key}' must be an object, got {type(value).__name__}"
        raise DecodeError(msg)
    return value


class Vector3(NamedTuple):
    """Immutable 3-component position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> Vector3Dict:
        """Convert to dictionary for JSON serialization."""
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Vector3:
        """Create from dictionary loaded from JSON."""
        return cls(
            x=_read_float(data, "x", 0.0),
            y=_read_float(data, "y", 0.0),
            z=_read_float(data, "z", 0.0),
        )


@dataclass
class AttributesData:
    """Player attributes.

    Attributes:
        vitality: Vitality points, at least 0.
        strength: Strength points, at least 0.
        intellect: Intellect points, at least 0.
        endurance: Endurance points, at least 0.
    """

    vitality: int = 1
    strength: int = 1
    intellect: int = 1
    endurance: int = 1

    def to_dict(self) -> AttributesDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "vitality": self.vitality,
            "strength": self.strength,
            "intellect": self.intellect,
            "endurance": self.endurance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttributesData:
        """Create from dictionary loaded from JSON.

        Raises:
            DecodeError: If a present field is not a non-negative integer.
        """
        return cls(
            vitality=_read_int(data, "vitality", 1, minimum=0),
            strength=_read_int(data, "strength", 1, minimum=0),
            intellect=_read_int(data, "intellect", 1, minimum=0),
            endurance=_read_int(data, "endurance", 1, minimum=0),
        )


@dataclass
class GameState:
    """Complete persisted game state for one profile.

    A freshly constructed GameState is the "new game" state: no deaths, no
    coins registered, player at the origin and every attribute at 1.

    Attributes:
        last_updated: Milliseconds since the Unix epoch (UTC) of the last save, 0 if never saved.
        death_count: Number of times the player has died.
        player_position: Last known player position.
        coins_collected: Mapping of coin id to whether that coin has been collected.
        attributes: Player attribute points.
    """

    last_updated: int = 0
    death_count: int = 0
    player_position: Vector3 = field(default_factory=Vector3)
    coins_collected: dict[str, bool] = field(default_factory=dict)
    attributes: AttributesData = field(default_factory=AttributesData)

    def get_percentage_complete(self) -> int:
        """Get how much of the game is complete, based on coins collected.

        Returns:
            Whole percentage of registered coins that have been collected, rounded
            down, or -1 if no coins have been registered yet.
        """
        if not self.coins_collected:
            return -1
        total_collected = sum(1 for collected in self.coins_collected.values() if collected)
        return total_collected * 100 // len(self.coins_collected)

    def to_dict(self) -> GameStateDict:
        """Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation with all fields as JSON-compatible values.
        """
        return {
            "last_updated": self.last_updated,
            "death_count": self.death_count,
            "player_position": self.player_position.to_dict(),
            "coins_collected": dict(self.coins_collected),
            "attributes": self.attributes.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """Create from dictionary loaded from JSON.

        Missing keys take their default value, so documents written by older
        versions (or hand-trimmed ones) still load.

        Args:
            data: Dictionary loaded from a save file.

        Returns:
            New GameState instance with values from the dictionary.

        Raises:
            DecodeError: If the document or any present field has the wrong type.
        """
        if not isinstance(data, dict):
            msg = f"Save document must be an object, got {type(data).__name__}"
            raise DecodeError(msg)

        coins: dict[str, bool] = {}
        for coin_id, collected in _read_object(data, "coins_collected").items():
            if not isinstance(collected, bool):
                msg = f"Coin '{coin_id}' must map to a boolean, got {type(collected).__name__}"
                raise DecodeError(msg)
            coins[coin_id] = collected

        return cls(
            last_updated=_read_int(data, "last_updated", 0),
            death_count=_read_int(data, "death_count", 0, minimum=0),
            player_position=Vector3.from_dict(_read_object(data, "player_position")),
            coins_collected=coins,
            attributes=AttributesData.from_dict(_read_object(data, "attributes")),
        )
