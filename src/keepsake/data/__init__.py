"""Data model persisted by Keepsake."""

from keepsake.data.game_state import AttributesData, GameState, Vector3

__all__ = ["AttributesData", "GameState", "Vector3"]
