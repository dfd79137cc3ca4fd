"""Tests for board layout hit testing."""

import pytest

from boxscore_keeper.ledger.player_stat import PlayerStat
from boxscore_keeper.ui.layout import ROW_HEIGHT, BoardLayout, Box


@pytest.fixture
def layout():
    return BoardLayout(1280, 800)


@pytest.fixture
def teams():
    players = [PlayerStat(name=f"Player {i}") for i in range(1, 11)]
    return players[:5], players[5:]


def test_box_contains():
    box = Box(10, 20, 100, 50)
    assert box.contains((10, 20))
    assert box.contains((109, 69))
    assert not box.contains((110, 20))
    assert not box.contains((9, 30))
    assert box.center == (60, 45)


def test_panels_do_not_overlap(layout):
    left, right = layout.panel(0), layout.panel(1)
    assert left.x + left.w <= right.x
    assert right.x + right.w <= layout.width


def test_player_at_row_centers(layout, teams):
    team_a, team_b = teams
    for index, team in enumerate(teams):
        for position, player in enumerate(team):
            assert layout.player_at(layout.row(index, position).center, team_a, team_b) is player


def test_player_at_outside_rows(layout, teams):
    team_a, team_b = teams
    header = layout.panel(0)
    assert layout.player_at((header.x + 5, header.y + 5), team_a, team_b) is None
    below = layout.row(0, len(team_a)).center
    assert layout.player_at(below, team_a, team_b) is None
    assert layout.player_at((5, 5), team_a, team_b) is None


def test_rows_follow_each_other(layout):
    assert layout.row(1, 3).y - layout.row(1, 2).y == ROW_HEIGHT


def test_close_button_inside_sheet(layout):
    button = layout.close_button()
    assert layout.in_sheet(button.center)
    assert layout.in_close_button(button.center)
    assert not layout.in_close_button(layout.sheet().center)


def test_column_offsets_are_increasing(layout):
    offsets = layout.column_offsets(0)
    assert len(offsets) == 7
    assert offsets == sorted(offsets)
