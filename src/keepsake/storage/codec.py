"""Encoding of game state to and from the on-disk text format.

Save files are UTF-8 JSON with 2-space indentation and sorted keys, so a save
file can be read and diffed by hand and the same state always encodes to the
same bytes.

An optional XOR obfuscation layer can be wrapped around the encoded text to
discourage casual editing. It is NOT encryption: anyone who knows the key, or
has two save files to compare, can undo it.

Example usage:
    payload = obfuscate(encode(state), b"word")
    restored = decode(deobfuscate(payload, b"word"))
"""

import json

from keepsake.data.game_state import GameState
from keepsake.exceptions import DecodeError


def encode(state: GameState) -> bytes:
    """Serialize a game state to UTF-8 JSON bytes.

    Args:
        state: The game state to serialize.

    Returns:
        Encoded bytes, stable for equal states.
    """
    return json.dumps(state.to_dict(), indent=2, sort_keys=True).encode("utf-8")


def decode(payload: bytes) -> GameState:
    """Deserialize UTF-8 JSON bytes into a game state.

    Args:
        payload: Bytes previously produced by encode() (after removing any obfuscation).

    Returns:
        The decoded game state. Missing fields take their default values.

    Raises:
        DecodeError: If the payload is not valid UTF-8 JSON describing a game state.
    """
    try:
        data = json.loads(payload.decode("utf-8"))
    # ValueError is also raised for integers past the interpreter digit limit
    except (ValueError, RecursionError) as e:
        msg = f"Save data is not valid JSON: {e}"
        raise DecodeError(msg) from e
    return GameState.from_dict(data)


def obfuscate(payload: bytes, key: bytes) -> bytes:
    """XOR every byte of the payload with the repeating key.

    Applying the transform twice with the same key returns the original bytes.

    Args:
        payload: Bytes to transform.
        key: Non-empty key.

    Returns:
        Transformed bytes of the same length.

    Raises:
        ValueError: If the key is empty.
    """
    if not key:
        msg = "Obfuscation key must not be empty"
        raise ValueError(msg)
    key_length = len(key)
    return bytes(byte ^ key[i % key_length] for i, byte in enumerate(payload))


deobfuscate = obfuscate
