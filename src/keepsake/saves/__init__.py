"""Save consumers: objects that contribute fields to and from the persisted GameState."""

from keepsake.saves.base import BaseSaveConsumer
from keepsake.saves.registry import ConsumerRegistry

__all__ = ["BaseSaveConsumer", "ConsumerRegistry"]
