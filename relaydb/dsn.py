"""Data source names: the databases the data access layer opens."""

from __future__ import annotations

import enum


class Dsn(enum.IntEnum):
    """Known data sources."""

    MAIN = 0


_PATHS: dict[Dsn, str] = {
    Dsn.MAIN: "../../db/main.db",
}


def dsn_to_string(dsn: int) -> str:
    """Return the database path for a data source; raise ValueError if unknown."""
    return _PATHS[Dsn(dsn)]