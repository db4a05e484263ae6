"""Custom types for serialized save data."""

from typing import TypedDict


class Vector3Dict(TypedDict):
    """TypedDict for a serialized 3-component vector."""

    x: float
    y: float
    z: float


class AttributesDict(TypedDict):
    """TypedDict for serialized player attributes."""

    vitality: int
    strength: int
    intellect: int
    endurance: int


class GameStateDict(TypedDict):
    """TypedDict for the serialized game state document."""

    last_updated: int
    death_count: int
    player_position: Vector3Dict
    coins_collected: dict[str, bool]
    attributes: AttributesDict


class ProfileInfoDict(TypedDict):
    """TypedDict for the summary shown in a save slot."""

    profile_id: str
    percentage_complete: int
    death_count: int
    last_updated: int
    date_string: str
