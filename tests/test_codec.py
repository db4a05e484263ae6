"""Unit tests for the save file codec."""

import json
import unittest

import pytest

from keepsake.data.game_state import AttributesData, GameState, Vector3
from keepsake.exceptions import DecodeError
from keepsake.storage.codec import decode, deobfuscate, encode, obfuscate


def make_state() -> GameState:
    """Build a state with every field set to a non-default value."""
    return GameState(
        last_updated=1729350000123,
        death_count=12,
        player_position=Vector3(-3.5, 10.125, 0.0),
        coins_collected={"coin-2": False, "coin-1": True, "münze": True},
        attributes=AttributesData(vitality=3, strength=1, intellect=0, endurance=8),
    )


class TestEncodeDecode(unittest.TestCase):
    """Test encode() and decode()."""

    def test_round_trip(self) -> None:
        """Test that decoding an encoded state gives an equal state."""
        state = make_state()

        assert decode(encode(state)) == state

    def test_round_trip_with_obfuscation(self) -> None:
        """Test round trip through the obfuscation layer."""
        state = make_state()
        key = b"word"

        payload = obfuscate(encode(state), key)

        assert decode(deobfuscate(payload, key)) == state

    def test_encoding_is_readable_json(self) -> None:
        """Test that the encoded form is indented JSON with the expected keys."""
        payload = encode(GameState())
        text = payload.decode("utf-8")

        assert "\n  " in text
        assert set(json.loads(text)) == {
            "last_updated",
            "death_count",
            "player_position",
            "coins_collected",
            "attributes",
        }

    def test_encoding_is_stable(self) -> None:
        """Test that coin insertion order does not change the bytes."""
        first = GameState(coins_collected={"a": True, "b": False})
        second = GameState(coins_collected={"b": False, "a": True})

        assert encode(first) == encode(second)

    def test_decode_tolerates_missing_fields(self) -> None:
        """Test that a partial document decodes with defaults."""
        state = decode(b'{"death_count": 2}')

        assert state.death_count == 2
        assert state.attributes == AttributesData()

    def test_decode_truncated_payload(self) -> None:
        """Test that a truncated file raises DecodeError."""
        payload = encode(make_state())

        with pytest.raises(DecodeError):
            decode(payload[: len(payload) // 2])

    def test_decode_garbage(self) -> None:
        """Test that random bytes raise DecodeError."""
        with pytest.raises(DecodeError):
            decode(b"\xff\xfe\x00garbage")

    def test_decode_empty(self) -> None:
        """Test that an empty file raises DecodeError."""
        with pytest.raises(DecodeError):
            decode(b"")

    def test_decode_deeply_nested_document(self) -> None:
        """Test that nesting beyond the parser's recursion limit raises DecodeError."""
        with pytest.raises(DecodeError):
            decode(b"[" * 100000)

    def test_decode_integer_with_too_many_digits(self) -> None:
        """Test that an integer past the interpreter digit limit raises DecodeError."""
        with pytest.raises(DecodeError):
            decode(b'{"death_count": ' + b"9" * 5000 + b"}")

    def test_decode_position_too_large_for_float(self) -> None:
        """Test that a coordinate that overflows a float raises DecodeError."""
        with pytest.raises(DecodeError, match="out of range"):
            decode(b'{"player_position": {"x": 1' + b"0" * 400 + b"}}")

    def test_decode_with_wrong_key_fails(self) -> None:
        """Test that deobfuscating with another key does not decode silently."""
        payload = obfuscate(encode(make_state()), b"word")

        with pytest.raises(DecodeError):
            decode(deobfuscate(payload, b"other"))


class TestObfuscate(unittest.TestCase):
    """Test the XOR obfuscation transform."""

    def test_is_self_inverse(self) -> None:
        """Test that applying the transform twice restores the input."""
        data = b"The quick brown fox"

        assert obfuscate(obfuscate(data, b"key"), b"key") == data

    def test_changes_bytes(self) -> None:
        """Test that the transform actually alters the data."""
        data = b'{"death_count": 0}'

        assert obfuscate(data, b"word") != data

    def test_key_repeats(self) -> None:
        """Test XOR with the key cycling over the payload."""
        assert obfuscate(b"\x00\x00\x00", b"\x01\x02") == b"\x01\x02\x01"

    def test_preserves_length(self) -> None:
        """Test that output length equals input length."""
        assert len(obfuscate(b"abcdef", b"xy")) == 6

    def test_empty_key_rejected(self) -> None:
        """Test that an empty key is a programming error."""
        with pytest.raises(ValueError, match="must not be empty"):
            obfuscate(b"data", b"")
