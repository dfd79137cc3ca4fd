"""
Logging utilities for gestures and recorded stats.
"""

import datetime
import logging
from typing import Any, Dict, Optional

from ..ledger.player_stat import PlayerStat
from ..ledger.stat_event import StatEvent

logger = logging.getLogger(__name__)

EVENT_ICONS = {
    StatEvent.REBOUND: '🏀',
    StatEvent.SHOT_ATTEMPT: '🎯',
    StatEvent.SHOT_MADE: '✅',
    StatEvent.STEAL: '🖐️',
    StatEvent.TURNOVER: '❌',
    StatEvent.ASSIST: '🤝',
}


def _timestamp() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]


class StatLogger:
    """Prints gestures and stat events to the console and a debug file."""

    def __init__(self, debug_file: Optional[str] = None, echo: bool = True):
        self.echo = echo
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'a', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file '{debug_file}': {e}")
                self.debug_file = None

    def _print(self, line: str):
        if self.echo:
            print(line)

    def _debug(self, record: Any):
        if self.debug_file:
            try:
                self.debug_file.write(f"[{_timestamp()}] {record}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Debug log write failed: {e}")

    def log_selection(self, player: Optional[PlayerStat]):
        """Log a player being selected, or the selection closing."""
        if player is None:
            self._print(f"[{_timestamp()}] ⏹️  Selection closed")
            self._debug({'selection': None})
        else:
            self._print(f"[{_timestamp()}] 👉 Selected {player.name}")
            self._debug({'selection': player.id})

    def log_gesture(self, gesture: Dict[str, Any]):
        """Log a detected gesture."""
        gesture_type = gesture.get('type', 'unknown')

        if gesture_type == 'tap':
            tap_count = gesture.get('tap_count', 1)
            if tap_count == 2:
                self._print(f"[{_timestamp()}] 👆👆 DOUBLE TAP")
            else:
                self._print(f"[{_timestamp()}] 👆 TAP")
        elif gesture_type == 'drag':
            direction = gesture.get('direction', 'unknown')
            distance = gesture.get('distance', 0)
            self._print(f"[{_timestamp()}] 👋 DRAG {direction} [{int(distance)}px]")

        self._debug(gesture)

    def log_stat_event(self, player: PlayerStat, event: Optional[StatEvent]):
        """Log the stat recorded for a player, if any."""
        if event is None:
            self._print(f"[{_timestamp()}] · no stat for {player.name}")
            self._debug({'player': player.id, 'event': None})
            return

        icon = EVENT_ICONS.get(event, '')
        self._print(f"[{_timestamp()}] {icon} {event.confirmation_message()}: {player.name}")
        self._print(f"   PTS {player.points}  REB {player.rebounds}  AST {player.assists}  "
                    f"STL {player.steals}  TO {player.turnovers}  "
                    f"FG {player.shots_made}/{player.shots_attempted} "
                    f"({player.field_goal_percentage:.1f}%)")
        self._debug({'player': player.id, 'event': event.name, 'stats': player.counters()})

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
