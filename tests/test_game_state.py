"""Unit tests for the GameState record."""

import unittest

import pytest

from keepsake.data.game_state import AttributesData, GameState, Vector3
from keepsake.exceptions import DecodeError


class TestGameStateDefaults(unittest.TestCase):
    """Test the new-game state."""

    def test_new_game_values(self) -> None:
        """Test that a fresh GameState has the new-game defaults."""
        state = GameState()

        assert state.last_updated == 0
        assert state.death_count == 0
        assert state.player_position == Vector3(0.0, 0.0, 0.0)
        assert state.coins_collected == {}
        assert state.attributes == AttributesData(vitality=1, strength=1, intellect=1, endurance=1)

    def test_instances_do_not_share_coins(self) -> None:
        """Test that mutable defaults are not shared between instances."""
        first = GameState()
        second = GameState()

        first.coins_collected["a"] = True

        assert second.coins_collected == {}


class TestPercentageComplete(unittest.TestCase):
    """Test GameState.get_percentage_complete()."""

    def test_no_coins_returns_sentinel(self) -> None:
        """Test that no registered coins gives -1, not 0."""
        assert GameState().get_percentage_complete() == -1

    def test_half_collected(self) -> None:
        """Test one of two coins collected."""
        state = GameState(coins_collected={"a": True, "b": False})

        assert state.get_percentage_complete() == 50

    def test_all_collected(self) -> None:
        """Test every coin collected."""
        state = GameState(coins_collected={"a": True, "b": True})

        assert state.get_percentage_complete() == 100

    def test_none_collected(self) -> None:
        """Test registered coins with none collected gives 0."""
        state = GameState(coins_collected={"a": False})

        assert state.get_percentage_complete() == 0

    def test_rounds_down(self) -> None:
        """Test that the percentage is floored."""
        state = GameState(coins_collected={"a": True, "b": True, "c": False})

        assert state.get_percentage_complete() == 66


class TestGameStateFromDict(unittest.TestCase):
    """Test GameState.from_dict()."""

    def test_empty_dict_gives_defaults(self) -> None:
        """Test that every field falls back to its default."""
        assert GameState.from_dict({}) == GameState()

    def test_partial_dict(self) -> None:
        """Test that present fields are read and missing ones defaulted."""
        state = GameState.from_dict({"death_count": 4, "attributes": {"strength": 7}})

        assert state.death_count == 4
        assert state.attributes.strength == 7
        assert state.attributes.vitality == 1
        assert state.coins_collected == {}

    def test_integer_position_is_converted(self) -> None:
        """Test that integer coordinates load as floats."""
        state = GameState.from_dict({"player_position": {"x": 1, "y": -2}})

        assert state.player_position == Vector3(1.0, -2.0, 0.0)
        assert isinstance(state.player_position.x, float)

    def test_to_dict_from_dict(self) -> None:
        """Test that a populated state survives to_dict/from_dict."""
        state = GameState(
            last_updated=1700000000000,
            death_count=3,
            player_position=Vector3(1.5, -2.25, 0.0),
            coins_collected={"coin-1": True, "coin-2": False},
            attributes=AttributesData(vitality=2, strength=3, intellect=4, endurance=5),
        )

        assert GameState.from_dict(state.to_dict()) == state

    def test_unknown_keys_are_ignored(self) -> None:
        """Test that extra keys do not prevent loading."""
        assert GameState.from_dict({"save_version": "9"}) == GameState()


class TestGameStateFromDictErrors:
    """Test that wrongly typed fields raise DecodeError."""

    @pytest.mark.parametrize(
        "data",
        [
            {"death_count": "3"},
            {"death_count": -1},
            {"death_count": True},
            {"last_updated": 1.5},
            {"player_position": [0, 0, 0]},
            {"player_position": {"x": "left"}},
            {"coins_collected": ["a"]},
            {"coins_collected": {"a": 1}},
            {"attributes": {"vitality": -2}},
        ],
    )
    def test_invalid_field(self, data: dict) -> None:
        """Test each invalid field."""
        with pytest.raises(DecodeError):
            GameState.from_dict(data)

    def test_non_object_document(self) -> None:
        """Test that a JSON array is rejected."""
        with pytest.raises(DecodeError):
            GameState.from_dict([])  # type: ignore[arg-type]
