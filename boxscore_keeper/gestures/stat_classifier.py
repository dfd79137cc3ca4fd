"""
Maps completed gestures to stat events.

Drags are classified by direction and magnitude; taps by count, with a
single tap only meaningful right after a shot attempt. These functions are
pure: they never touch the ledger.
"""

from typing import Any, Dict, Optional

from ..config.settings import KeeperConfig
from ..ledger.stat_event import StatEvent


def classify_drag(dx: float, dy: float,
                  threshold: float = KeeperConfig.DRAG_THRESHOLD) -> Optional[StatEvent]:
    """
    Classify a drag translation (screen coordinates, +y is down).

    Right is a shot attempt, left a rebound, up a steal and down a turnover.
    The horizontal axis wins whenever ``|dx| >= |dy|`` so a diagonal swipe
    resolves to exactly one event.
    """
    horizontal = abs(dx) >= abs(dy)

    if dx > threshold and horizontal:
        return StatEvent.SHOT_ATTEMPT
    elif dx < -threshold and horizontal:
        return StatEvent.REBOUND
    elif dy < -threshold:
        return StatEvent.STEAL
    elif dy > threshold:
        return StatEvent.TURNOVER

    return None


def classify_tap(tap_count: int, preceding_event: Optional[StatEvent]) -> Optional[StatEvent]:
    """Double tap is an assist; a single tap right after a shot attempt is a made shot."""
    if tap_count == 2:
        return StatEvent.ASSIST
    if tap_count == 1 and preceding_event is StatEvent.SHOT_ATTEMPT:
        return StatEvent.SHOT_MADE
    return None


def classify_gesture(gesture: Dict[str, Any], preceding_event: Optional[StatEvent],
                     threshold: float = KeeperConfig.DRAG_THRESHOLD) -> Optional[StatEvent]:
    """Classify a gesture dict produced by ``GestureDetector``."""
    gesture_type = gesture.get('type')

    if gesture_type == 'drag':
        return classify_drag(gesture.get('dx', 0), gesture.get('dy', 0), threshold)
    if gesture_type == 'tap':
        return classify_tap(gesture.get('tap_count', 1), preceding_event)

    return None
