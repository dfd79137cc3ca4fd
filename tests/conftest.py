"""Shared fixtures."""

import pytest

from boxscore_keeper.config.settings import KeeperConfig
from boxscore_keeper.core.keeper import BoxScoreKeeper
from boxscore_keeper.ledger.stat_ledger import StatLedger
from boxscore_keeper.storage.player_store import PlayerStore


@pytest.fixture
def store():
    return PlayerStore()


@pytest.fixture
def ledger(store):
    ledger = StatLedger(store)
    ledger.load_or_seed(players_per_team=5)
    return ledger


@pytest.fixture
def slow_config():
    """Confirmation timers that never fire on their own during a test."""
    return KeeperConfig(CONFIRMATION_DELAY_MS=60000)


@pytest.fixture
def updates():
    return []


@pytest.fixture
def keeper(ledger, slow_config, updates):
    keeper = BoxScoreKeeper(ledger, slow_config, on_update=updates.append)
    yield keeper
    keeper.shutdown()
