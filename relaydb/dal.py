"""The data access layer: databases, their tables and the objects that use them."""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable, Mapping, Optional

from relaydb.deleter import DAO_DELETER_TIMEOUT_10MIN, DaoDeleter
from relaydb.dsn import Dsn, dsn_to_string
from relaydb.relay_count import RelayCountDao
from relaydb.schema import SqliteMasterDao, Table, create_database

log = logging.getLogger(__name__)

_BUSY_TIMEOUT_S = 10.0


class Dal:
    """Opens every data source, creates missing tables and runs retention.

    Use as a context manager, or call :meth:`open` and :meth:`close`.
    """

    def __init__(
        self,
        tables: Iterable[Table],
        paths: Optional[Mapping[Dsn, str]] = None,
        interval_ms: int = DAO_DELETER_TIMEOUT_10MIN,
    ) -> None:
        self.tables = list(tables)
        self.paths = {dsn: (paths or {}).get(dsn, dsn_to_string(dsn)) for dsn in Dsn}
        self.interval_ms = interval_ms
        self.connections: dict[Dsn, sqlite3.Connection] = {}
        self.masters: dict[Dsn, SqliteMasterDao] = {}
        self.relay_count: Optional[RelayCountDao] = None
        self.deleter: Optional[DaoDeleter] = None

    @property
    def is_open(self) -> bool:
        return bool(self.connections)

    def open(self) -> None:
        """Open all databases, create their tables and start the deleter."""
        if self.is_open:
            raise RuntimeError("data access layer is already open")
        try:
            for dsn in Dsn:
                path = self.paths[dsn]
                conn = sqlite3.connect(
                    path, timeout=_BUSY_TIMEOUT_S, check_same_thread=False
                )
                conn.set_trace_callback(
                    lambda sql, _path=path: log.debug("sql path=%s %s", _path, sql)
                )
                self.connections[dsn] = conn
                self.masters[dsn] = SqliteMasterDao(conn, dsn)
            for master in self.masters.values():
                create_database(master, self.tables)
            self.relay_count = RelayCountDao(self.connections[Dsn.MAIN])
            self.deleter = DaoDeleter([self.relay_count.retain], self.interval_ms)
            self.deleter.start()
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        """Stop the deleter and close every database."""
        if self.deleter is not None:
            self.deleter.stop()
            self.deleter = None
        self.relay_count = None
        self.masters.clear()
        for conn in self.connections.values():
            conn.close()
        self.connections.clear()

    def __enter__(self) -> "Dal":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()