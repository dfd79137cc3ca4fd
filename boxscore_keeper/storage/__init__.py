"""
Persistence for player records.
"""

from .player_store import PlayerStore

__all__ = ['PlayerStore']
