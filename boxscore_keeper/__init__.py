"""
Box Score Keeper Package
Gesture-driven basketball box score tracking.
"""

from .config.settings import KeeperConfig
from .core.keeper import BoxScoreKeeper
from .errors import BoxScoreError, StoreError, UnknownPlayerError
from .ledger import PlayerStat, StatEvent, StatLedger
from .storage import PlayerStore

__version__ = "1.0.0"
__all__ = [
    "KeeperConfig",
    "BoxScoreKeeper",
    "BoxScoreError",
    "StoreError",
    "UnknownPlayerError",
    "PlayerStat",
    "StatEvent",
    "StatLedger",
    "PlayerStore",
]
