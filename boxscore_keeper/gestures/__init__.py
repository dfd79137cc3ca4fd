"""
Gesture detection and stat classification.

This module turns raw pointer gestures into taps and drags, and maps those
to the stat events recorded in the ledger.
"""

from .gesture_detector import GestureDetector
from .stat_classifier import classify_drag, classify_tap, classify_gesture

__all__ = [
    'GestureDetector',
    'classify_drag',
    'classify_tap',
    'classify_gesture'
]
