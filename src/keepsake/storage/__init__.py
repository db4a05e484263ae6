"""Storage layer: the save file codec and the per-profile file store."""

from keepsake.storage.codec import decode, deobfuscate, encode, obfuscate
from keepsake.storage.profile_store import ProfileStore

__all__ = ["ProfileStore", "decode", "deobfuscate", "encode", "obfuscate"]
