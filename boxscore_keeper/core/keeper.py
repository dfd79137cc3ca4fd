"""
Box score keeper: coordinates player selection, gesture classification and
the stat ledger.
"""

import itertools
import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from ..config.settings import KeeperConfig
from ..errors import StoreError
from ..gestures.gesture_detector import GestureDetector, drag_gesture
from ..ledger.player_stat import PlayerStat
from ..ledger.stat_event import StatEvent
from ..ledger.stat_ledger import StatLedger
from ..utils.logger import StatLogger
from .confirmation import ConfirmationTimer
from .session import GestureSession

logger = logging.getLogger(__name__)


class BoxScoreKeeper:
    """
    Routes gestures for the selected player into the ledger.

    One session exists per selection. Each recorded stat shows a short
    confirmation message that a timer clears after
    ``config.CONFIRMATION_DELAY_MS``; the timer then reports the player it
    was scheduled for through ``on_update``, whatever is selected by then.
    """

    def __init__(self, ledger: StatLedger, config: Optional[KeeperConfig] = None,
                 on_update: Optional[Callable[[str], None]] = None,
                 event_logger: Optional[StatLogger] = None,
                 detector: Optional[GestureDetector] = None):
        self.ledger = ledger
        self.config = config or KeeperConfig()
        self.on_update = on_update
        self.event_logger = event_logger
        self.detector = detector
        self.drag_threshold = float(self.config.DRAG_THRESHOLD)

        self.session: Optional[GestureSession] = None

        # Confirmation message state, shared with timer threads
        self.state_lock = threading.Lock()
        self._message: Optional[str] = None
        self._message_serial = 0
        self._serials = itertools.count(1)
        self._pending: List[ConfirmationTimer] = []

    @property
    def selected_player_id(self) -> Optional[str]:
        return self.session.player_id if self.session else None

    @property
    def selected_player(self) -> Optional[PlayerStat]:
        if self.session is None:
            return None
        return self.ledger.get(self.session.player_id)

    @property
    def message(self) -> Optional[str]:
        with self.state_lock:
            return self._message

    @property
    def pending_confirmations(self) -> List[ConfirmationTimer]:
        with self.state_lock:
            return list(self._pending)

    def select_player(self, player_id: str) -> PlayerStat:
        """Open a fresh gesture session for ``player_id``."""
        player = self.ledger.get(player_id)
        self.session = GestureSession(player_id)
        if self.detector is not None:
            self.detector.reset()
        if self.event_logger:
            self.event_logger.log_selection(player)
        return player

    def close_session(self):
        """Drop the current session and its gesture memory."""
        if self.session is None:
            return
        self.session = None
        if self.detector is not None:
            self.detector.reset()
        if self.event_logger:
            self.event_logger.log_selection(None)

    def handle_gesture(self, gesture: Dict[str, Any]) -> Optional[StatEvent]:
        """Classify ``gesture`` for the selected player and record the result."""
        session = self.session
        if session is None:
            logger.debug(f"Ignoring {gesture.get('type')} gesture with no player selected")
            return None

        if self.event_logger:
            self.event_logger.log_gesture(gesture)

        previous = session.last_classified_event
        event = session.classify(gesture, self.drag_threshold)
        if event is None:
            if self.event_logger:
                self.event_logger.log_stat_event(self.ledger.get(session.player_id), None)
            return None

        try:
            player = self.ledger.apply(session.player_id, event)
        except StoreError as e:
            # Nothing was recorded, so the session forgets this event too
            session.last_classified_event = previous
            logger.error(f"Could not record {event.label} for {session.player_id}: {e}")
            return None

        if self.event_logger:
            self.event_logger.log_stat_event(player, event)

        self._show_confirmation(session.player_id, event.confirmation_message())
        return event

    def handle_drag(self, dx: float, dy: float) -> Optional[StatEvent]:
        return self.handle_gesture(drag_gesture(dx, dy))

    def handle_tap(self, tap_count: int = 1) -> Optional[StatEvent]:
        return self.handle_gesture({'type': 'tap', 'tap_count': tap_count})

    def _show_confirmation(self, player_id: str, message: str):
        serial = next(self._serials)
        timer = ConfirmationTimer(
            self.config.confirmation_delay,
            player_id,
            message,
            lambda pid, msg: self._on_confirmed(serial, pid),
        )
        with self.state_lock:
            self._message = message
            self._message_serial = serial
            self._pending.append(timer)
        timer.start()

    def _on_confirmed(self, serial: int, player_id: str):
        with self.state_lock:
            # A newer message keeps showing until its own timer fires
            if self._message_serial == serial:
                self._message = None
            self._pending = [t for t in self._pending if not t.done]

        if self.on_update:
            self.on_update(player_id)

    def flush_confirmations(self):
        """Fire every pending confirmation immediately."""
        for timer in self.pending_confirmations:
            timer.fire()

    def shutdown(self):
        """Cancel pending confirmations and close the session."""
        with self.state_lock:
            pending, self._pending = self._pending, []
            self._message = None
        for timer in pending:
            timer.cancel()
        self.close_session()
