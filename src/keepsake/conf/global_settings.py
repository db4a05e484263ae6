"""Default settings for Keepsake.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from keepsake.conf import global_settings

    # Override framework defaults
    SAVE_DIRECTORY = "user_saves"
    SAVE_FILE_NAME = "slot.game"
    SAVE_ENCRYPTION_ENABLED = True
"""

# File storage settings
SAVE_DIRECTORY = "saves"
"""Base directory holding one subdirectory per profile (relative paths resolve against cwd)."""

SAVE_FILE_NAME = "data.game"
"""Name of the primary data file inside each profile directory."""

SAVE_ENCRYPTION_ENABLED = False
"""Whether save files are XOR-obfuscated on disk."""

SAVE_ENCRYPTION_KEY = "word"
"""Key used for the XOR obfuscation transform."""

# Debugging settings
DISABLE_DATA_PERSISTENCE = False
"""Hard-disable all loading and saving."""

INITIALIZE_DATA_IF_MISSING = False
"""Start a new game when no data can be loaded for the active profile."""

OVERRIDE_PROFILE_ID = False
"""Use TEST_PROFILE_ID instead of the most recently updated profile at startup."""

TEST_PROFILE_ID = "test"
"""Profile id used when OVERRIDE_PROFILE_ID is enabled."""

# Logging settings
LOG_LEVEL = "INFO"
"""Level used by setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
