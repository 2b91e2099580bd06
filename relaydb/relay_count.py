"""Data access for the close counts of the main-circuit relays."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

_CREATE = "insert into pcu_relay_cnt(relay_id,close_cnt) values(?,?)"
_SELECT = "select relay_id from pcu_relay_cnt where relay_id = ?"
_GET_BY_RELAY_ID = "select relay_id,close_cnt from pcu_relay_cnt where relay_id=?"
_UPDATE_BY_RELAY_ID = "update pcu_relay_cnt set close_cnt=? where relay_id=?"
_DELETE_BY_RELAY_ID = "delete from pcu_relay_cnt where relay_id=?"


@dataclass
class RelayCount:
    """How many times one relay has closed."""

    relay_id: int
    close_cnt: int


class RelayCountDao:
    """Reads and writes rows of the ``pcu_relay_cnt`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _write(self, sql: str, params: tuple) -> int:
        with self.connection:
            cursor = self.connection.execute(sql, params)
        return cursor.rowcount

    def create(self, record: RelayCount) -> int:
        """Insert ``record`` unless its relay already has a row.

        Returns the number of rows changed: 0 when the relay already exists.
        """
        exists = self.connection.execute(_SELECT, (record.relay_id,)).fetchone()
        if exists is not None:
            return 0
        return self._write(_CREATE, (record.relay_id, record.close_cnt))

    def get_by_relay_id(self, relay_id: int) -> Optional[RelayCount]:
        """Return the row for ``relay_id``, or None when there is none."""
        row = self.connection.execute(_GET_BY_RELAY_ID, (relay_id,)).fetchone()
        if row is None:
            return None
        return RelayCount(relay_id=int(row[0]), close_cnt=int(row[1]))

    def update_by_relay_id(self, relay_id: int, record: RelayCount) -> int:
        """Set the close count of ``relay_id``; return the rows changed."""
        return self._write(_UPDATE_BY_RELAY_ID, (record.close_cnt, relay_id))

    def delete_by_relay_id(self, relay_id: int) -> int:
        """Delete the row of ``relay_id``; return the rows removed."""
        return self._write(_DELETE_BY_RELAY_ID, (relay_id,))

    def retain(self) -> bool:
        """Retention policy of this table: every row is kept."""
        return True