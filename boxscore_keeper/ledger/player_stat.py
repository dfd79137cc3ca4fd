"""
Per-player box score record.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict

COUNTER_FIELDS = (
    'points',
    'rebounds',
    'assists',
    'steals',
    'turnovers',
    'shots_made',
    'shots_attempted',
)


def _new_player_id() -> str:
    return uuid.uuid4().hex


@dataclass
class PlayerStat:
    """Running totals for one roster slot."""

    name: str
    id: str = field(default_factory=_new_player_id)
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    turnovers: int = 0
    shots_made: int = 0
    shots_attempted: int = 0

    @property
    def field_goal_percentage(self) -> float:
        """Made shots as a percentage of attempts; 0 when nothing was attempted."""
        if self.shots_attempted == 0:
            return 0.0
        return 100.0 * self.shots_made / self.shots_attempted

    def counters(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in COUNTER_FIELDS}

    def copy(self, **changes) -> 'PlayerStat':
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = {'id': self.id, 'name': self.name}
        data.update(self.counters())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlayerStat':
        """Build a record from stored data, defaulting missing counters to zero."""
        counters = {name: int(data.get(name, 0) or 0) for name in COUNTER_FIELDS}
        player_id = data.get('id') or _new_player_id()
        return cls(name=str(data.get('name', '')), id=str(player_id), **counters)
