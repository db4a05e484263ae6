"""Quick save and quick load keyboard shortcuts.

Forward the window's key presses to SaveHotkeys.on_key_press from an
arcade View:

    class GameView(arcade.View):
        def on_key_press(self, symbol: int, modifiers: int) -> None:
            if self.hotkeys.on_key_press(symbol, modifiers):
                return
            ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

if TYPE_CHECKING:
    from keepsake.coordinator import PersistenceCoordinator

logger = logging.getLogger(__name__)


class SaveHotkeys:
    """Maps F5 to a quick save and F9 to a quick load of the active profile."""

    def __init__(
        self,
        coordinator: PersistenceCoordinator,
        save_key: int = arcade.key.F5,
        load_key: int = arcade.key.F9,
    ) -> None:
        """Initialize the hotkeys.

        Args:
            coordinator: Coordinator to save and load through.
            save_key: Key symbol that triggers a quick save.
            load_key: Key symbol that triggers a quick load.
        """
        self.coordinator = coordinator
        self.save_key = save_key
        self.load_key = load_key

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Handle quick save/load hotkeys.

        Args:
            symbol: Keyboard symbol.
            modifiers: Key modifiers.

        Returns:
            True if the key was a hotkey and has been handled.
        """
        if symbol == self.save_key:
            if self.coordinator.save_game():
                logger.info("Quick save completed")
            else:
                logger.warning("Quick save failed")
            return True
        if symbol == self.load_key:
            if self.coordinator.load_game():
                logger.info("Quick load completed")
            else:
                logger.warning("Quick load failed")
            return True
        return False
