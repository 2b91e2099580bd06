"""Table creation driven by the ``sqlite_master`` catalogue."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Iterable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Table:
    """A table: its name, the statement that creates it and its data source."""

    table_name: str
    create_table_stmt: str
    dsn: int


class SqliteMasterDao:
    """Reads the catalogue of one database."""

    def __init__(self, connection: sqlite3.Connection, dsn: int) -> None:
        self.connection = connection
        self.dsn = dsn

    def count_by_name(self, name: str) -> int:
        """Return how many catalogue entries carry ``name``."""
        row = self.connection.execute(
            "select count(*) from sqlite_master where name = ?", (name,)
        ).fetchone()
        return int(row[0])


def create_table(dao: SqliteMasterDao, table: Table) -> bool:
    """Create ``table`` unless it exists.

    Returns True if the table was created and False if it already existed.
    A failing statement is rolled back and its sqlite3.Error re-raised.
    """
    if dao.count_by_name(table.table_name) > 0:
        return False

    conn = dao.connection
    conn.execute("BEGIN")
    try:
        conn.execute(table.create_table_stmt)
    except sqlite3.Error as exc:
        log.error("label=create_db sql_err=%s", exc)
        conn.rollback()
        raise
    conn.commit()
    return True


def create_database(dao: SqliteMasterDao, tables: Iterable[Table]) -> list[Table]:
    """Create the tables that belong to the dao's data source.

    Existing tables are left untouched. Returns the tables that could not
    be created.
    """
    failed: list[Table] = []
    for table in tables:
        if table.dsn != dao.dsn:
            continue
        try:
            create_table(dao, table)
        except sqlite3.Error:
            log.debug(
                "label=create_db msg=create_error table_name=%s dsn=%d",
                table.table_name,
                table.dsn,
            )
            failed.append(table)
    return failed