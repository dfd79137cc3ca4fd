"""
JSON-file player store addressed by player identity.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from ..errors import StoreError, UnknownPlayerError
from ..ledger.player_stat import COUNTER_FIELDS, PlayerStat

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class PlayerStore:
    """
    Keeps player records keyed by id and mirrors them to a JSON file.

    Records keep their insertion order, which is the roster order used for
    the team split. With ``path=None`` nothing is written to disk. A change
    is kept only once the file has been written.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._players: Dict[str, PlayerStat] = {}
        self._loaded = False

    def load_all(self) -> List[PlayerStat]:
        """Return copies of all stored players in roster order."""
        if not self._loaded:
            self._players = self._read_file()
            self._loaded = True
        return [player.copy() for player in self._players.values()]

    def get(self, player_id: str) -> PlayerStat:
        self.load_all()
        if player_id not in self._players:
            raise UnknownPlayerError(player_id)
        return self._players[player_id].copy()

    def insert(self, player: PlayerStat):
        self.load_all()
        if player.id in self._players:
            raise StoreError(f"Player {player.id!r} is already stored")
        self._commit(player)

    def update(self, player: PlayerStat):
        """Replace the stored record with the same id."""
        self.load_all()
        if player.id not in self._players:
            raise UnknownPlayerError(player.id)
        self._commit(player)

    def __len__(self):
        self.load_all()
        return len(self._players)

    def _commit(self, player: PlayerStat):
        players = dict(self._players)
        players[player.id] = player.copy()
        self._write_file(players)
        self._players = players

    def _read_file(self) -> Dict[str, PlayerStat]:
        if self.path is None or not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load players from '{self.path}': {e}")
            raise StoreError(f"Could not read player store '{self.path}'") from e

        records = data.get('players') if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise StoreError(f"Invalid player store format in '{self.path}'")

        players = {}
        for i, item in enumerate(records):
            self._check_record(i, item)
            player = PlayerStat.from_dict(item)
            if player.id in players:
                raise StoreError(f"Player record {i} in '{self.path}' repeats id {player.id!r}")
            players[player.id] = player

        logger.info(f"Loaded {len(players)} players from '{self.path}'")
        return players

    def _check_record(self, index: int, item: Any):
        """Reject records whose counters are not non-negative integers."""
        if not isinstance(item, dict):
            raise StoreError(f"Player record {index} in '{self.path}' is not an object")

        for name in COUNTER_FIELDS:
            if name not in item:
                continue
            value = item[name]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise StoreError(
                    f"Player record {index} in '{self.path}' has invalid {name}: {value!r}"
                )

    def _write_file(self, players: Dict[str, PlayerStat]):
        if self.path is None:
            return

        data = {
            'version': STORE_VERSION,
            'players': [player.to_dict() for player in players.values()],
        }
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save players to '{self.path}': {e}")
            raise StoreError(f"Could not write player store '{self.path}'") from e
        logger.debug(f"Saved {len(players)} players to '{self.path}'")
