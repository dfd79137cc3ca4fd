"""
Gesture input session for one selected player.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config.settings import KeeperConfig
from ..gestures.stat_classifier import classify_gesture
from ..ledger.stat_event import StatEvent


@dataclass
class GestureSession:
    """
    Lives from a player's selection until deselection.

    ``last_classified_event`` is the one-step memory that lets a single tap
    turn a shot attempt into a made shot. A new session always starts empty.
    """

    player_id: str
    last_classified_event: Optional[StatEvent] = None

    def classify(self, gesture: Dict[str, Any],
                 threshold: float = KeeperConfig.DRAG_THRESHOLD) -> Optional[StatEvent]:
        event = classify_gesture(gesture, self.last_classified_event, threshold)
        if event is not None:
            self.last_classified_event = event
        return event
