"""Exception types raised by Keepsake."""


class KeepsakeError(Exception):
    """Base class for all Keepsake errors."""


class DecodeError(KeepsakeError):
    """Raised when save data cannot be decoded into a GameState.

    Covers invalid UTF-8, malformed JSON, documents that are not objects and
    fields holding values of the wrong type.
    """


class ImproperlyConfigured(KeepsakeError):
    """Raised at startup when the persistence settings are unusable."""
