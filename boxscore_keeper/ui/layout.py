"""
Screen layout and hit testing for the box score board.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..ledger.player_stat import PlayerStat

TITLE_HEIGHT = 70
MARGIN = 20
PANEL_HEADER_HEIGHT = 44
COLUMN_HEADER_HEIGHT = 30
ROW_HEIGHT = 44
CLOSE_BUTTON_SIZE = (120, 48)


class Box(NamedTuple):
    """Axis-aligned rectangle; usable directly as a pygame rect argument."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, pos: Tuple[float, float]) -> bool:
        px, py = pos
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)


class BoardLayout:
    """Rectangles for the two team panels, their player rows and the gesture sheet."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def panel(self, index: int) -> Box:
        panel_w = (self.width - 3 * MARGIN) / 2
        x = MARGIN + index * (panel_w + MARGIN)
        return Box(x, TITLE_HEIGHT, panel_w, self.height - TITLE_HEIGHT - MARGIN)

    def rows_top(self, index: int) -> float:
        return self.panel(index).y + PANEL_HEADER_HEIGHT + COLUMN_HEADER_HEIGHT

    def row(self, index: int, position: int) -> Box:
        panel = self.panel(index)
        return Box(panel.x, self.rows_top(index) + position * ROW_HEIGHT, panel.w, ROW_HEIGHT)

    def totals_row(self, index: int, team_size: int) -> Box:
        return self.row(index, team_size)

    def player_at(self, pos: Tuple[float, float],
                  team_a: Sequence[PlayerStat],
                  team_b: Sequence[PlayerStat]) -> Optional[PlayerStat]:
        """Return the player whose row contains ``pos``, if any."""
        for index, team in enumerate((team_a, team_b)):
            if not self.panel(index).contains(pos):
                continue
            offset = pos[1] - self.rows_top(index)
            if offset < 0:
                return None
            position = int(offset // ROW_HEIGHT)
            if position < len(team):
                return team[position]
            return None
        return None

    def sheet(self) -> Box:
        w = self.width * 0.8
        h = self.height * 0.8
        return Box((self.width - w) / 2, (self.height - h) / 2, w, h)

    def close_button(self) -> Box:
        sheet = self.sheet()
        bw, bh = CLOSE_BUTTON_SIZE
        return Box(sheet.x + sheet.w - bw - MARGIN, sheet.y + MARGIN, bw, bh)

    def in_sheet(self, pos: Tuple[float, float]) -> bool:
        return self.sheet().contains(pos)

    def in_close_button(self, pos: Tuple[float, float]) -> bool:
        return self.close_button().contains(pos)

    def column_offsets(self, index: int) -> List[float]:
        """X positions of the name column followed by the six stat columns."""
        panel = self.panel(index)
        name_w = panel.w * 0.28
        stat_w = (panel.w - name_w - MARGIN) / 6
        return [panel.x + MARGIN / 2] + [panel.x + name_w + i * stat_w for i in range(6)]
