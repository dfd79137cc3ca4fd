"""
Touchscreen discovery for evdev input devices.
"""

import logging
from typing import Any, Dict, Optional

import evdev
from evdev import InputDevice, ecodes

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds a multitouch device and reports its coordinate range."""

    def __init__(self, device_path: Optional[str] = None):
        self.device_path = device_path
        self.device: Optional[InputDevice] = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    def find_device(self) -> Optional[InputDevice]:
        """Open the configured device, or the first one with multitouch slots."""
        if self.device_path:
            candidates = [self.device_path]
        else:
            candidates = evdev.list_devices()

        for path in candidates:
            try:
                device = InputDevice(path)
            except OSError as e:
                logger.warning(f"Cannot open input device {path}: {e}")
                continue

            if self._configure(device):
                self.device = device
                logger.info(f"Found touchscreen: {device.name}")
                logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                return device

            device.close()

        logger.error("No touchscreen device found")
        return None

    def _configure(self, device: InputDevice) -> bool:
        """Read the touch resolution; False when the device is not multitouch."""
        abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
        abs_info = {code: info for code, info in abs_caps}

        if ecodes.ABS_MT_SLOT not in abs_info:
            return False

        if ecodes.ABS_MT_POSITION_X in abs_info:
            self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
        if ecodes.ABS_MT_POSITION_Y in abs_info:
            self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1
        return True

    def get_device_info(self) -> Dict[str, Any]:
        """Get device and screen information."""
        return {
            'device': self.device,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height
        }

    def close(self):
        if self.device is not None:
            self.device.close()
            self.device = None
