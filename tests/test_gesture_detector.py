"""Tests for turning finger samples into tap and drag gestures."""

import pytest

from boxscore_keeper.config.settings import KeeperConfig
from boxscore_keeper.gestures.gesture_detector import GestureDetector


def one_finger(sx, sy, ex, ey):
    return {0: (sx, sy, ex, ey, 0.0)}


@pytest.fixture
def detector():
    return GestureDetector(1280, 800, drag_threshold=30)


def test_pixel_values(detector):
    assert detector.DRAG_THRESHOLD == 30
    assert detector.TAP_DISTANCE == 15
    assert detector.DOUBLE_TAP_MAX_DISTANCE == 120


def test_drag_threshold_from_screen_size():
    detector = GestureDetector(1280, 800)
    assert detector.DRAG_THRESHOLD == 22
    assert detector.TAP_DISTANCE <= detector.DRAG_THRESHOLD


def test_tap_distance_never_exceeds_drag_threshold():
    detector = GestureDetector(1280, 800, drag_threshold=5)
    assert detector.TAP_DISTANCE == 5


def test_no_fingers(detector):
    assert detector.classify_gesture({}) == {'type': 'none'}


def test_single_tap(detector):
    gesture = detector.classify_gesture(one_finger(100, 100, 103, 101), now=1000)
    assert gesture['type'] == 'tap'
    assert gesture['tap_count'] == 1
    assert gesture['start'] == (100, 100)


def test_double_tap(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    gesture = detector.classify_gesture(one_finger(110, 105, 110, 105), now=1250)
    assert gesture['tap_count'] == 2


def test_third_tap_starts_new_sequence(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1200)
    gesture = detector.classify_gesture(one_finger(100, 100, 100, 100), now=1300)
    assert gesture['tap_count'] == 1


def test_slow_second_tap_is_single(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    gesture = detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000 + 401)
    assert gesture['tap_count'] == 1


def test_distant_second_tap_is_single(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    gesture = detector.classify_gesture(one_finger(600, 500, 600, 500), now=1100)
    assert gesture['tap_count'] == 1


def test_double_tap_timeout_is_configurable():
    detector = GestureDetector(1280, 800, config=KeeperConfig(DOUBLE_TAP_TIMEOUT=1000))
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    gesture = detector.classify_gesture(one_finger(100, 100, 100, 100), now=1900)
    assert gesture['tap_count'] == 2


def test_reset_forgets_previous_tap(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    detector.reset()
    gesture = detector.classify_gesture(one_finger(100, 100, 100, 100), now=1100)
    assert gesture['tap_count'] == 1


@pytest.mark.parametrize("end, direction", [
    ((140, 100), 'right'),
    ((60, 100), 'left'),
    ((100, 60), 'up'),
    ((100, 140), 'down'),
])
def test_drag(detector, end, direction):
    gesture = detector.classify_gesture(one_finger(100, 100, *end), now=1000)
    assert gesture['type'] == 'drag'
    assert gesture['direction'] == direction
    assert gesture['dx'] == end[0] - 100
    assert gesture['dy'] == end[1] - 100
    assert gesture['distance'] == pytest.approx(40)


def test_drag_breaks_double_tap(detector):
    detector.classify_gesture(one_finger(100, 100, 100, 100), now=1000)
    detector.classify_gesture(one_finger(100, 100, 160, 100), now=1100)
    gesture = detector.classify_gesture(one_finger(100, 100, 100, 100), now=1200)
    assert gesture['tap_count'] == 1


def test_short_drag_is_still_a_drag(detector):
    """Movement past the tap distance but under the drag threshold is a drag."""
    gesture = detector.classify_gesture(one_finger(100, 100, 120, 100), now=1000)
    assert gesture['type'] == 'drag'
    assert gesture['dx'] == 20
