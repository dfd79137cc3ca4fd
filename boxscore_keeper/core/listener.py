"""
Touchscreen listener that turns evdev multitouch events into gestures.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

from evdev import ecodes

from ..config.settings import KeeperConfig
from ..device.device_manager import DeviceManager
from ..gestures.gesture_detector import GestureDetector

logger = logging.getLogger(__name__)

GestureCallback = Callable[[Dict[str, Any]], None]


class TouchListener:
    """Reads a touchscreen on a background thread and reports finished gestures."""

    def __init__(self, on_gesture: GestureCallback,
                 device_manager: Optional[DeviceManager] = None,
                 config: Optional[KeeperConfig] = None):
        self.on_gesture = on_gesture
        self.device_manager = device_manager or DeviceManager()
        self.config = config or KeeperConfig()
        self.gesture_detector: Optional[GestureDetector] = None

        # State management
        self.running = False
        self.current_slot = 0
        self.active_slots = set()
        self.slot_data: Dict[int, Dict[str, Optional[float]]] = {}
        # slot -> (start_x, start_y, end_x, end_y, start_time)
        self.fingers: Dict[int, tuple] = {}

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    @property
    def screen_size(self):
        return self.device_manager.screen_width, self.device_manager.screen_height

    def start(self) -> bool:
        """Start listening; False when no touchscreen is available."""
        device = self.device_manager.find_device()
        if not device:
            return False

        device_info = self.device_manager.get_device_info()
        self.gesture_detector = GestureDetector(
            device_info['screen_width'],
            device_info['screen_height'],
            config=self.config
        )

        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        self.device_manager.close()
        if self.thread:
            self.thread.join(timeout=1)

    def reset_taps(self):
        """Forget tap history so the next tap starts a new sequence."""
        with self.state_lock:
            if self.gesture_detector:
                self.gesture_detector.reset()

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        gesture = self._process_event_batch(event_batch)
                    event_batch = []
                    if gesture is not None:
                        self.on_gesture(gesture)

        except OSError as e:
            if self.running:
                logger.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch) -> Optional[Dict[str, Any]]:
        """Apply a batch of events; return a gesture when the last finger lifted."""
        gesture = None
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                gesture = self._handle_abs_event(ev) or gesture
        return gesture

    def _handle_abs_event(self, ev) -> Optional[Dict[str, Any]]:
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            if ev.value == -1:
                return self._handle_finger_lift(self.current_slot)
            self._handle_finger_place(self.current_slot)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position(self.current_slot, x=ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position(self.current_slot, y=ev.value)
        return None

    def _handle_finger_place(self, slot: int):
        """Handle finger placement event."""
        self.slot_data[slot] = {'x': None, 'y': None}
        self.active_slots.add(slot)

    def _handle_position(self, slot: int, x: Optional[int] = None, y: Optional[int] = None):
        """Record a coordinate update; the first full position is the start point."""
        if slot not in self.slot_data:
            return

        data = self.slot_data[slot]
        if x is not None:
            data['x'] = float(x)
        if y is not None:
            data['y'] = float(y)
        if data['x'] is None or data['y'] is None:
            return

        if slot in self.fingers:
            sx, sy, _, _, st = self.fingers[slot]
            self.fingers[slot] = (sx, sy, data['x'], data['y'], st)
        else:
            self.fingers[slot] = (data['x'], data['y'], data['x'], data['y'], time.time())

    def _handle_finger_lift(self, slot: int) -> Optional[Dict[str, Any]]:
        """Handle finger lift event."""
        self.active_slots.discard(slot)
        self.slot_data.pop(slot, None)

        if self.active_slots:
            return None

        gesture = None
        if self.fingers and self.gesture_detector:
            gesture = self.gesture_detector.classify_gesture(self.fingers)
        self.fingers.clear()
        return gesture
