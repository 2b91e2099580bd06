import pytest

from relaydb.dsn import Dsn, dsn_to_string


def test_main_path():
    assert dsn_to_string(Dsn.MAIN) == "../../db/main.db"


def test_accepts_plain_int():
    assert dsn_to_string(0) == dsn_to_string(Dsn.MAIN)


def test_every_dsn_has_a_path():
    paths = [dsn_to_string(dsn) for dsn in Dsn]
    assert len(paths) == len(Dsn)
    assert all(path.endswith(".db") for path in paths)


def test_main_is_first():
    assert Dsn(0) is Dsn.MAIN
    assert list(Dsn)[0] is Dsn.MAIN
    assert dsn_to_string(list(Dsn)[0]) == "../../db/main.db"


@pytest.mark.parametrize("bad", [-1, len(Dsn), 99])
def test_unknown_dsn_raises(bad):
    with pytest.raises(ValueError):
        dsn_to_string(bad)