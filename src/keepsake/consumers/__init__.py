"""Ready-made save consumers for common game state."""

from keepsake.consumers.coins import Coin, CoinCounter
from keepsake.consumers.death_counter import DeathCounter
from keepsake.consumers.player import PlayerState

__all__ = ["Coin", "CoinCounter", "DeathCounter", "PlayerState"]
