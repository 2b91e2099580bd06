import sqlite3

import pytest

from relaydb.dal import Dal
from relaydb.dsn import Dsn
from relaydb.relay_count import RelayCount
from relaydb.schema import Table

RELAY_TABLE = Table(
    "pcu_relay_cnt",
    "create table pcu_relay_cnt(relay_id integer primary key, close_cnt integer not null)",
    Dsn.MAIN,
)


@pytest.fixture
def paths(tmp_path):
    return {Dsn.MAIN: str(tmp_path / "main.db")}


def test_open_creates_tables_and_serves_relay_counts(paths):
    with Dal([RELAY_TABLE], paths, 1000) as dal:
        assert dal.relay_count.create(RelayCount(2, 3)) == 1
        assert dal.relay_count.get_by_relay_id(2) == RelayCount(2, 3)
        assert dal.deleter.running is True


def test_data_persists_across_sessions(paths):
    with Dal([RELAY_TABLE], paths, 1000) as dal:
        dal.relay_count.create(RelayCount(4, 9))
    with Dal([RELAY_TABLE], paths, 1000) as dal:
        assert dal.relay_count.get_by_relay_id(4) == RelayCount(4, 9)


def test_table_exists_in_file_after_close(paths):
    with Dal([RELAY_TABLE], paths, 1000):
        pass
    conn = sqlite3.connect(paths[Dsn.MAIN])
    try:
        rows = conn.execute(
            "select name from sqlite_master where name = 'pcu_relay_cnt'"
        ).fetchall()
    finally:
        conn.close()
    assert rows == [("pcu_relay_cnt",)]


def test_close_releases_everything(paths):
    dal = Dal([RELAY_TABLE], paths, 1000)
    dal.open()
    deleter = dal.deleter
    dal.close()
    assert dal.is_open is False
    assert dal.relay_count is None
    assert deleter.running is False


def test_open_twice_raises(paths):
    with Dal([RELAY_TABLE], paths, 1000) as dal:
        with pytest.raises(RuntimeError):
            dal.open()


def test_open_missing_directory_raises(tmp_path):
    bad = {Dsn.MAIN: str(tmp_path / "missing" / "main.db")}
    dal = Dal([RELAY_TABLE], bad, 1000)
    with pytest.raises(sqlite3.OperationalError):
        dal.open()
    assert dal.is_open is False


def test_default_path_comes_from_dsn():
    dal = Dal([])
    assert dal.paths[Dsn.MAIN] == "../../db/main.db"