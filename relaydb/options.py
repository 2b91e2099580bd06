"""Typed query options: a value, the SQL fragment it fills, and its type."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class DaoType(enum.IntEnum):
    """Storage type of a value bound into a statement."""

    INT32 = 0
    INT64 = 1
    FLOAT32 = 2
    FLOAT64 = 3
    TEXT = 4
    NULL = 5


@dataclass(frozen=True)
class DaoOption:
    """One condition of a query: the value, its SQL fragment and its type."""

    value: Any
    sql_part: str
    type: DaoType


def new_option_list() -> list[DaoOption]:
    """Return a new, empty list of options."""
    return []