"""Tests for the JSON player store."""

import json

import pytest

from boxscore_keeper.errors import StoreError, UnknownPlayerError
from boxscore_keeper.ledger.player_stat import PlayerStat
from boxscore_keeper.ledger.stat_event import StatEvent
from boxscore_keeper.ledger.stat_ledger import StatLedger
from boxscore_keeper.storage.player_store import PlayerStore


def test_missing_file_loads_empty(tmp_path):
    store = PlayerStore(str(tmp_path / "players.json"))
    assert store.load_all() == []
    assert not (tmp_path / "players.json").exists()


def test_roster_survives_restart(tmp_path):
    path = str(tmp_path / "players.json")

    ledger = StatLedger(PlayerStore(path))
    seeded = ledger.load_or_seed(players_per_team=5)
    ledger.apply(seeded[2], StatEvent.SHOT_ATTEMPT)
    ledger.apply(seeded[2], StatEvent.SHOT_MADE)

    reloaded = StatLedger(PlayerStore(path)).load_or_seed(players_per_team=5)
    assert [p.id for p in reloaded] == [p.id for p in seeded]
    player = reloaded[2]
    assert (player.points, player.shots_made, player.shots_attempted) == (2, 1, 1)


def test_file_layout(tmp_path):
    path = tmp_path / "players.json"
    store = PlayerStore(str(path))
    store.insert(PlayerStat(name="Forward", id="p1", steals=2))

    data = json.loads(path.read_text())
    assert data['version'] == 1
    assert data['players'] == [{
        'id': 'p1', 'name': 'Forward', 'points': 0, 'rebounds': 0, 'assists': 0,
        'steals': 2, 'turnovers': 0, 'shots_made': 0, 'shots_attempted': 0,
    }]


def test_update_replaces_by_id(tmp_path):
    store = PlayerStore(str(tmp_path / "players.json"))
    first = PlayerStat(name="First")
    second = PlayerStat(name="Second")
    store.insert(first)
    store.insert(second)

    store.update(second.copy(assists=3))
    assert [p.name for p in store.load_all()] == ["First", "Second"]
    assert store.get(first.id).assists == 0
    assert store.get(second.id).assists == 3


def test_update_unknown_player():
    store = PlayerStore()
    with pytest.raises(UnknownPlayerError):
        store.update(PlayerStat(name="Ghost"))


def test_insert_duplicate_id():
    store = PlayerStore()
    player = PlayerStat(name="Twin")
    store.insert(player)
    with pytest.raises(StoreError):
        store.insert(player)


def test_returned_records_are_copies():
    store = PlayerStore()
    player = PlayerStat(name="Wing")
    store.insert(player)
    loaded = store.load_all()[0]
    loaded.points = 99
    assert store.get(player.id).points == 0


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "players.json"
    path.write_text("{not json")
    with pytest.raises(StoreError):
        PlayerStore(str(path)).load_all()


def test_wrong_layout_raises(tmp_path):
    path = tmp_path / "players.json"
    path.write_text(json.dumps(["not", "an", "object"]))
    with pytest.raises(StoreError):
        PlayerStore(str(path)).load_all()


def test_in_memory_store_len():
    store = PlayerStore()
    store.insert(PlayerStat(name="A"))
    store.insert(PlayerStat(name="B"))
    assert len(store) == 2


def write_store(path, records):
    path.write_text(json.dumps({'version': 1, 'players': records}))


@pytest.mark.parametrize("value", ["abc", [1], {"n": 1}, -7, True, 1.5, None])
def test_invalid_counter_raises(tmp_path, value):
    path = tmp_path / "players.json"
    write_store(path, [
        {'id': 'a', 'name': 'A'},
        {'id': 'b', 'name': 'B', 'points': value},
    ])
    with pytest.raises(StoreError, match="record 1"):
        PlayerStore(str(path)).load_all()


def test_negative_counters_are_rejected(tmp_path):
    path = tmp_path / "players.json"
    write_store(path, [{'id': 'a', 'name': 'A', 'points': -7, 'shots_made': 3, 'shots_attempted': 1}])
    with pytest.raises(StoreError):
        StatLedger(PlayerStore(str(path))).load_or_seed()


def test_missing_counters_default_to_zero(tmp_path):
    path = tmp_path / "players.json"
    write_store(path, [{'id': 'a', 'name': 'A', 'rebounds': 4}])
    player = PlayerStore(str(path)).get('a')
    assert player.rebounds == 4
    assert player.points == 0


def test_duplicate_ids_raise(tmp_path):
    path = tmp_path / "players.json"
    write_store(path, [
        {'id': 'a', 'name': 'A'},
        {'id': 'a', 'name': 'A again'},
        {'id': 'c', 'name': 'C'},
    ])
    with pytest.raises(StoreError, match="repeats id 'a'"):
        StatLedger(PlayerStore(str(path))).load_or_seed()
    # The file is left as it was
    assert len(json.loads(path.read_text())['players']) == 3


def test_failed_write_keeps_previous_record(tmp_path):
    store = PlayerStore(str(tmp_path / "players.json"))
    player = PlayerStat(name="Center", id="p1")
    store.insert(player)

    store.path = str(tmp_path / "missing" / "players.json")
    with pytest.raises(StoreError):
        store.update(player.copy(rebounds=5))
    with pytest.raises(StoreError):
        store.insert(PlayerStat(name="Guard", id="p2"))

    assert store.get("p1").rebounds == 0
    assert len(store) == 1
