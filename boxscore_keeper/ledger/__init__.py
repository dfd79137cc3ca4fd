"""
Player records, stat events and the ledger that applies them.
"""

from .stat_event import StatEvent
from .player_stat import PlayerStat
from .stat_ledger import StatLedger, apply_event, split_teams, team_totals

__all__ = [
    'StatEvent',
    'PlayerStat',
    'StatLedger',
    'apply_event',
    'split_teams',
    'team_totals'
]
