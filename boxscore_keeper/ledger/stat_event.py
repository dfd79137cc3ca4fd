"""
Stat events recorded against a player.
"""

from enum import Enum


class StatEvent(Enum):
    """Closed set of stat events a gesture can produce.

    The value is the display label used in confirmation messages.
    """

    REBOUND = 'Rebound'
    SHOT_ATTEMPT = 'Shot Attempt'
    SHOT_MADE = 'Shot Made'
    STEAL = 'Steal'
    TURNOVER = 'Turnover'
    ASSIST = 'Assist'

    @property
    def label(self) -> str:
        return self.value

    @property
    def ends_session(self) -> bool:
        """Whether recording this event finishes the gesture sheet."""
        return self in (StatEvent.SHOT_MADE, StatEvent.ASSIST)

    def confirmation_message(self) -> str:
        """Short banner text shown after the event is recorded."""
        return f"+1 {self.value}"
