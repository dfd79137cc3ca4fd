"""
Exceptions raised by the box score keeper.
"""


class BoxScoreError(Exception):
    """Base class for all box score keeper errors."""


class UnknownPlayerError(BoxScoreError, KeyError):
    """Raised when a player id is not present in the ledger or store."""

    def __init__(self, player_id: str):
        super().__init__(player_id)
        self.player_id = player_id

    def __str__(self):
        return f"Unknown player id: {self.player_id!r}"


class StoreError(BoxScoreError):
    """Raised when the player store cannot be read or written."""
