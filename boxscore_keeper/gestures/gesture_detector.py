"""
Gesture detection for completed pointer gestures.
"""

import math
import time
from typing import Any, Dict, List, Optional, Tuple

from ..config.settings import KeeperConfig

# slot -> (start_x, start_y, end_x, end_y, start_time)
Fingers = Dict[int, Tuple[float, float, float, float, float]]


def drag_direction(dx: float, dy: float) -> str:
    """Dominant direction of a drag, horizontal on ties."""
    if abs(dx) >= abs(dy):
        return "right" if dx > 0 else "left"
    return "down" if dy > 0 else "up"


def drag_gesture(dx: float, dy: float, **extra) -> Dict[str, Any]:
    """Build a drag gesture dict from a translation."""
    gesture = {
        'type': 'drag',
        'dx': dx,
        'dy': dy,
        'distance': math.sqrt(dx*dx + dy*dy),
        'direction': drag_direction(dx, dy)
    }
    gesture.update(extra)
    return gesture


class GestureDetector:
    """Turns finger start/end samples into tap and drag gestures."""

    def __init__(self, screen_width: int, screen_height: int,
                 drag_threshold: Optional[float] = None,
                 config: Optional[KeeperConfig] = None):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.config = config or KeeperConfig()
        self._drag_threshold_override = drag_threshold

        # Calculate pixel values based on screen resolution
        self._calculate_pixel_values()

        # Tap state tracking
        self.last_tap_time = 0.0
        self.last_tap_positions: List[Tuple[float, float]] = []

    def _calculate_pixel_values(self):
        """Calculate pixel values based on screen resolution."""
        screen_diagonal = math.sqrt(self.screen_width**2 + self.screen_height**2)

        if self._drag_threshold_override is not None:
            self.DRAG_THRESHOLD = float(self._drag_threshold_override)
        else:
            self.DRAG_THRESHOLD = float(int(screen_diagonal * self.config.DRAG_THRESHOLD_PERCENT / 100))

        # A tap never moves farther than a drag needs to register
        tap_distance = int(screen_diagonal * self.config.TAP_DISTANCE_PERCENT / 100)
        self.TAP_DISTANCE = min(tap_distance, self.DRAG_THRESHOLD)
        self.DOUBLE_TAP_MAX_DISTANCE = int(screen_diagonal * self.config.DOUBLE_TAP_MAX_DISTANCE_PERCENT / 100)

    def classify_gesture(self, fingers: Fingers, now: Optional[float] = None) -> Dict[str, Any]:
        """
        Classify a finished gesture.

        ``now`` is the lift time in milliseconds; it defaults to the wall clock.
        Only the first finger decides the gesture.
        """
        if not fingers:
            return {'type': 'none'}

        if now is None:
            now = time.time() * 1000

        sx, sy, ex, ey, _ = list(fingers.values())[0]
        finger_count = len(fingers)
        positions = [(x, y) for _, _, x, y, _ in fingers.values()]

        max_move = 0.0
        for fsx, fsy, fex, fey, _ in fingers.values():
            max_move = max(max_move, math.sqrt((fex - fsx)**2 + (fey - fsy)**2))

        if max_move < self.TAP_DISTANCE:
            return {
                'type': 'tap',
                'tap_count': self._count_tap(positions, now),
                'finger_count': finger_count,
                'positions': positions,
                'start': (sx, sy)
            }

        return self._classify_drag(sx, sy, ex, ey, finger_count, positions)

    def _count_tap(self, positions: List[Tuple[float, float]], now: float) -> int:
        """Return 2 when this tap completes a double tap, otherwise 1."""
        time_since_last = now - self.last_tap_time
        if (self.last_tap_positions and
                time_since_last < self.config.DOUBLE_TAP_TIMEOUT and
                self._positions_close(positions, self.last_tap_positions)):
            self.reset()
            return 2

        self.last_tap_time = now
        self.last_tap_positions = list(positions)
        return 1

    def _classify_drag(self, sx: float, sy: float, ex: float, ey: float,
                       finger_count: int, positions: List[Tuple[float, float]]) -> Dict[str, Any]:
        """Describe a drag by its translation; deciding the stat is left to the classifier."""
        # Any drag breaks a pending double tap
        self.reset()

        return drag_gesture(ex - sx, ey - sy,
                            finger_count=finger_count,
                            positions=positions,
                            start=(sx, sy))

    def _positions_close(self, pos1: List[Tuple[float, float]], pos2: List[Tuple[float, float]]) -> bool:
        """Check if two sets of positions are close enough for a double tap."""
        if len(pos1) != len(pos2):
            return False

        for (x1, y1), (x2, y2) in zip(pos1, pos2):
            if math.sqrt((x1-x2)**2 + (y1-y2)**2) > self.DOUBLE_TAP_MAX_DISTANCE:
                return False

        return True

    def reset(self):
        """Forget the previous tap."""
        self.last_tap_time = 0.0
        self.last_tap_positions = []
