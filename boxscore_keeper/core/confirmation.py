"""
Delayed confirmation callbacks bound to a player identity.
"""

import threading
from typing import Callable

ConfirmationCallback = Callable[[str, str], None]


class ConfirmationTimer:
    """
    Fires ``callback(player_id, message)`` once after ``delay`` seconds.

    The player id and message are fixed when the timer is created, so a
    later change of selection cannot redirect it.
    """

    def __init__(self, delay: float, player_id: str, message: str,
                 callback: ConfirmationCallback):
        self.delay = delay
        self.player_id = player_id
        self.message = message
        self._callback = callback
        self._lock = threading.Lock()
        self._done = False
        self._timer = threading.Timer(delay, self.fire)
        self._timer.daemon = True

    def start(self):
        self._timer.start()

    def cancel(self):
        """Stop the timer without running the callback."""
        with self._lock:
            self._done = True
        self._timer.cancel()

    def fire(self):
        """Run the callback now unless it already ran or was cancelled."""
        with self._lock:
            if self._done:
                return
            self._done = True
        self._timer.cancel()
        self._callback(self.player_id, self.message)

    def join(self, timeout=None):
        if self._timer.is_alive():
            self._timer.join(timeout)

    @property
    def done(self) -> bool:
        return self._done
