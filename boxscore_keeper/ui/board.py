#!/usr/bin/env python3
"""Box score board with gesture stat entry.

Shows both teams' running totals. Tap a player to open the gesture sheet,
then swipe to record a stat:

  →  Shot Attempt     ←  Rebound
  ↑  Steal            ↓  Turnover
  tap right after an attempt  Shot Made
  double tap                  Assist

Input comes from the mouse, or from a touchscreen through evdev with --touch.
"""

import argparse
import logging
import queue
import sys
from typing import Any, Dict, List, Optional

import pygame

from ..config.settings import KeeperConfig
from ..core.keeper import BoxScoreKeeper
from ..gestures.gesture_detector import GestureDetector
from ..ledger.player_stat import PlayerStat
from ..ledger.stat_ledger import StatLedger, team_totals
from ..storage.player_store import PlayerStore
from ..utils.logger import StatLogger
from .layout import BoardLayout, Box

logger = logging.getLogger(__name__)

STAT_COLUMNS = ["PTS", "REB", "AST", "STL", "TO", "FG%"]


def stat_cells(stats: Dict[str, Any]) -> List[str]:
    """Format one row of the stat table."""
    return [
        str(stats['points']),
        str(stats['rebounds']),
        str(stats['assists']),
        str(stats['steals']),
        str(stats['turnovers']),
        f"{stats['field_goal_percentage']:.1f}",
    ]


class BoxScoreBoard:
    """Interactive two-team box score."""

    def __init__(self, keeper: BoxScoreKeeper, config: KeeperConfig,
                 touch_listener=None) -> None:
        pygame.init()
        if touch_listener is not None:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption("Basketball Boxscore")

        width, height = self.screen.get_size()
        self.layout = BoardLayout(width, height)
        self.keeper = keeper
        self.config = config
        self.keeper.on_update = self.on_player_updated

        self.touch_listener = touch_listener
        self.gesture_queue: "queue.Queue[Dict[str, Any]]" = queue.Queue()
        if touch_listener is None:
            self.detector = GestureDetector(width, height,
                                            drag_threshold=config.DRAG_THRESHOLD,
                                            config=config)
            self.keeper.detector = self.detector
        else:
            self.detector = None
            touch_listener.on_gesture = self.gesture_queue.put

        self.mouse_down: Optional[tuple] = None
        # Ticks when a made shot or assist closed the sheet
        self.auto_closed_at: Optional[int] = None
        self.needs_redraw = True

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GRAY = (128, 128, 128)
        self.LIGHT_GRAY = (235, 235, 235)
        self.BLUE = (0, 90, 200)
        self.ORANGE = (230, 120, 0)
        self.HIGHLIGHT = (255, 236, 200)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 32)
        self.tiny_font = pygame.font.Font(None, 26)

    def on_player_updated(self, player_id: str) -> None:
        """Called from the confirmation timer thread once a stat is confirmed."""
        self.needs_redraw = True

    def run(self) -> None:
        """Run the board loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        self.close_sheet()
                elif self.detector is not None:
                    self.handle_mouse_event(event)

            while True:
                try:
                    gesture = self.gesture_queue.get_nowait()
                except queue.Empty:
                    break
                self.dispatch(self.scale_touch_gesture(gesture))

            if self.needs_redraw:
                self.needs_redraw = False
                self.draw()
            clock.tick(60)

    def handle_mouse_event(self, event) -> None:
        """Turn a mouse press/release pair into a one-finger gesture."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.mouse_down = (float(x), float(y), pygame.time.get_ticks() / 1000.0)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.mouse_down:
            sx, sy, started = self.mouse_down
            ex, ey = event.pos
            self.mouse_down = None
            gesture = self.detector.classify_gesture({0: (sx, sy, float(ex), float(ey), started)})
            self.dispatch(gesture)

    def scale_touch_gesture(self, gesture: Dict[str, Any]) -> Dict[str, Any]:
        """Map a gesture in touchscreen units onto window pixels."""
        if self.touch_listener is None:
            return gesture

        device_w, device_h = self.touch_listener.screen_size
        kx = self.layout.width / float(device_w)
        ky = self.layout.height / float(device_h)

        scaled = dict(gesture)
        if 'start' in gesture:
            x, y = gesture['start']
            scaled['start'] = (x * kx, y * ky)
        if 'positions' in gesture:
            scaled['positions'] = [(x * kx, y * ky) for x, y in gesture['positions']]
        if gesture.get('type') == 'drag':
            scaled['dx'] = gesture['dx'] * kx
            scaled['dy'] = gesture['dy'] * ky
        return scaled

    def dispatch(self, gesture: Dict[str, Any]) -> None:
        """Route a gesture to player selection, the close button or the keeper."""
        gesture_type = gesture.get('type')
        start = gesture.get('start')
        if gesture_type not in ('tap', 'drag'):
            return
        self.needs_redraw = True

        if self.keeper.session is None:
            if gesture_type == 'tap' and self._is_trailing_tap():
                return
            if gesture_type == 'tap' and start is not None:
                team_a, team_b = self.keeper.ledger.teams()
                player = self.layout.player_at(start, team_a, team_b)
                if player is not None:
                    self.open_sheet(player)
            return

        if gesture_type == 'tap' and start is not None and self.layout.in_close_button(start):
            self.close_sheet()
            return

        event = self.keeper.handle_gesture(gesture)
        if event is not None and event.ends_session:
            self.close_sheet()
            self.auto_closed_at = pygame.time.get_ticks()

    def _is_trailing_tap(self) -> bool:
        """A tap right after the sheet closed itself belongs to the closing gesture."""
        if self.auto_closed_at is None:
            return False
        elapsed = pygame.time.get_ticks() - self.auto_closed_at
        self.auto_closed_at = None
        return elapsed < self.config.DOUBLE_TAP_TIMEOUT

    def open_sheet(self, player: PlayerStat) -> None:
        self.keeper.select_player(player.id)
        self._reset_touch_taps()

    def close_sheet(self) -> None:
        self.keeper.close_session()
        self._reset_touch_taps()
        self.needs_redraw = True

    def _reset_touch_taps(self) -> None:
        if self.touch_listener is not None:
            self.touch_listener.reset_taps()

    def draw(self) -> None:
        """Render both teams and, when a player is selected, the gesture sheet."""
        self.screen.fill(self.WHITE)

        title = self.font.render("Basketball Boxscore", True, self.BLACK)
        self.screen.blit(title, (20, 18))

        teams = self.keeper.ledger.teams()
        for index, team in enumerate(teams):
            self.draw_team(index, self.config.TEAM_NAMES[index], team)

        if self.keeper.session is not None:
            self.draw_sheet()
        self.draw_banner()

        pygame.display.flip()

    def draw_team(self, index: int, name: str, players: List[PlayerStat]) -> None:
        panel = self.layout.panel(index)
        pygame.draw.rect(self.screen, self.GRAY, panel, 2)
        self.screen.blit(self.small_font.render(name, True, self.BLUE),
                         (panel.x + 10, panel.y + 10))

        columns = self.layout.column_offsets(index)
        header_y = self.layout.rows_top(index) - 26
        for x, label in zip(columns[1:], STAT_COLUMNS):
            self.screen.blit(self.tiny_font.render(label, True, self.GRAY), (x, header_y))

        selected_id = self.keeper.selected_player_id
        for position, player in enumerate(players):
            row = self.layout.row(index, position)
            if player.id == selected_id:
                pygame.draw.rect(self.screen, self.HIGHLIGHT, row)
            stats = player.counters()
            stats['field_goal_percentage'] = player.field_goal_percentage
            self.draw_row(columns, row, player.name, stat_cells(stats), self.BLACK)

        totals_row = self.layout.totals_row(index, len(players))
        pygame.draw.line(self.screen, self.GRAY, (totals_row.x, totals_row.y),
                         (totals_row.x + totals_row.w, totals_row.y), 1)
        self.draw_row(columns, totals_row, "Total", stat_cells(team_totals(players)), self.BLUE)

    def draw_row(self, columns: List[float], row: Box, name: str,
                 cells: List[str], color) -> None:
        text_y = row.y + 12
        self.screen.blit(self.small_font.render(name, True, color), (columns[0], text_y))
        for x, cell in zip(columns[1:], cells):
            self.screen.blit(self.small_font.render(cell, True, color), (x, text_y))

    def draw_sheet(self) -> None:
        overlay = pygame.Surface((self.layout.width, self.layout.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        self.screen.blit(overlay, (0, 0))

        sheet = self.layout.sheet()
        pygame.draw.rect(self.screen, self.WHITE, sheet, border_radius=16)

        player = self.keeper.selected_player
        heading = self.font.render(f"Gesture for {player.name}", True, self.BLACK)
        self.screen.blit(heading, (sheet.x + 30, sheet.y + 30))

        close = self.layout.close_button()
        pygame.draw.rect(self.screen, self.LIGHT_GRAY, close, border_radius=10)
        label = self.small_font.render("Done", True, self.BLUE)
        self.screen.blit(label, label.get_rect(center=close.center))

        cx, cy = sheet.center
        prompt = self.small_font.render("Swipe to log stat", True, self.GRAY)
        self.screen.blit(prompt, prompt.get_rect(center=(cx, cy)))

        hints = [
            "Right: Shot Attempt   Left: Rebound   Up: Steal   Down: Turnover",
            "Tap after an attempt: Shot Made   Double tap: Assist",
        ]
        for i, hint in enumerate(hints):
            txt = self.tiny_font.render(hint, True, self.GRAY)
            self.screen.blit(txt, txt.get_rect(center=(cx, sheet.y + sheet.h - 70 + i * 30)))

    def draw_banner(self) -> None:
        message = self.keeper.message
        if message:
            cx, cy = self.layout.sheet().center
            txt = self.font.render(message, True, self.WHITE)
            box = txt.get_rect(center=(cx, cy + 90)).inflate(40, 24)
            pygame.draw.rect(self.screen, (40, 40, 40), box, border_radius=10)
            self.screen.blit(txt, txt.get_rect(center=box.center))
            # Keep repainting so the banner disappears when its timer fires
            self.needs_redraw = True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gesture-driven basketball box score keeper")
    parser.add_argument("--store", default=KeeperConfig.STORE_FILE,
                        help="player store JSON file (default: %(default)s)")
    parser.add_argument("--players-per-team", type=int, default=KeeperConfig.PLAYERS_PER_TEAM,
                        help="players seeded per team when the store is empty")
    parser.add_argument("--threshold", type=float, default=KeeperConfig.DRAG_THRESHOLD,
                        help="minimum drag distance in pixels")
    parser.add_argument("--touch", action="store_true",
                        help="read gestures from an evdev touchscreen")
    parser.add_argument("--device", default=None,
                        help="evdev device path (default: first multitouch device)")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    """Entry point for the box score board."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = KeeperConfig(
        STORE_FILE=args.store,
        PLAYERS_PER_TEAM=args.players_per_team,
        DRAG_THRESHOLD=args.threshold,
    )

    ledger = StatLedger(PlayerStore(config.STORE_FILE))
    ledger.load_or_seed(config.PLAYERS_PER_TEAM)

    event_logger = StatLogger(config.DEBUG_LOG_FILE)
    keeper = BoxScoreKeeper(ledger, config, event_logger=event_logger)

    listener = None
    if args.touch:
        # Imported here so mouse mode runs without evdev
        from ..core.listener import TouchListener
        from ..device.device_manager import DeviceManager

        listener = TouchListener(lambda gesture: None, DeviceManager(args.device), config)
        if not listener.start():
            print("❌ No touchscreen found")
            return 1

    try:
        board = BoxScoreBoard(keeper, config, touch_listener=listener)
        board.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        keeper.shutdown()
        if listener is not None:
            listener.stop()
        event_logger.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
