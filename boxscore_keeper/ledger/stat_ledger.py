"""
Player stat ledger: the only mutation path for player records.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Tuple, Union

from ..errors import UnknownPlayerError
from .player_stat import COUNTER_FIELDS, PlayerStat
from .stat_event import StatEvent

logger = logging.getLogger(__name__)

# Field increments applied for each event
EVENT_INCREMENTS: Dict[StatEvent, Dict[str, int]] = {
    StatEvent.REBOUND: {'rebounds': 1},
    StatEvent.SHOT_ATTEMPT: {'shots_attempted': 1},
    StatEvent.SHOT_MADE: {'shots_made': 1, 'points': 2},
    StatEvent.STEAL: {'steals': 1},
    StatEvent.TURNOVER: {'turnovers': 1},
    StatEvent.ASSIST: {'assists': 1},
}

PlayerRef = Union[PlayerStat, str]


def apply_event(player: PlayerStat, event: StatEvent) -> PlayerStat:
    """Return a copy of ``player`` with ``event`` counted; the input is left as is."""
    increments = EVENT_INCREMENTS[event]
    return player.copy(**{name: getattr(player, name) + delta
                          for name, delta in increments.items()})


def split_teams(players: List[PlayerStat]) -> Tuple[List[PlayerStat], List[PlayerStat]]:
    """Bisect the roster by position: first half is team A, the rest team B."""
    mid = len(players) // 2
    return list(players[:mid]), list(players[mid:])


def team_totals(players: List[PlayerStat]) -> Dict[str, float]:
    """Sum every counter across ``players`` and add the team field goal percentage."""
    totals: Dict[str, float] = {name: sum(getattr(p, name) for p in players)
                                for name in COUNTER_FIELDS}
    attempted = totals['shots_attempted']
    totals['field_goal_percentage'] = (
        100.0 * totals['shots_made'] / attempted if attempted else 0.0
    )
    return totals


class StatLedger:
    """
    Holds one record per player keyed by id.

    Every update replaces the record with the same id, both here and in the
    attached store, so roster order never decides which player is written.
    """

    def __init__(self, store=None):
        self.store = store
        self._players: 'OrderedDict[str, PlayerStat]' = OrderedDict()

    def load(self) -> List[PlayerStat]:
        """Replace the ledger contents with the store's players, in store order."""
        self._players.clear()
        if self.store is not None:
            for player in self.store.load_all():
                self._players[player.id] = player
        return self.players()

    def load_or_seed(self, players_per_team: int = 5) -> List[PlayerStat]:
        """Load the roster, seeding default players when the store is empty."""
        players = self.load()
        if players:
            return players

        total = players_per_team * 2
        for number in range(1, total + 1):
            self.add_player(PlayerStat(name=f"Player {number}"))
        logger.info(f"Seeded {total} default players")
        return self.players()

    def add_player(self, player: PlayerStat) -> PlayerStat:
        if player.id in self._players:
            raise ValueError(f"Player {player.id!r} is already in the ledger")
        if self.store is not None:
            self.store.insert(player)
        self._players[player.id] = player
        return player

    def get(self, player_id: str) -> PlayerStat:
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayerError(player_id) from None

    def players(self) -> List[PlayerStat]:
        return list(self._players.values())

    def teams(self) -> Tuple[List[PlayerStat], List[PlayerStat]]:
        return split_teams(self.players())

    def apply(self, player: PlayerRef, event: StatEvent) -> PlayerStat:
        """Count ``event`` for the player with the given identity and return the new record."""
        player_id = player.id if isinstance(player, PlayerStat) else player
        updated = apply_event(self.get(player_id), event)
        self._replace(updated)
        logger.debug(f"{event.label} recorded for {updated.name} ({player_id})")
        return updated

    def rename(self, player: PlayerRef, name: str) -> PlayerStat:
        player_id = player.id if isinstance(player, PlayerStat) else player
        updated = self.get(player_id).copy(name=name)
        self._replace(updated)
        return updated

    def _replace(self, player: PlayerStat):
        # The record changes only after the store accepted it
        if self.store is not None:
            self.store.update(player)
        self._players[player.id] = player

    def __len__(self):
        return len(self._players)

    def __contains__(self, player_id):
        return player_id in self._players
