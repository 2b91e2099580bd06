"""A FIFO pool of reusable connections."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class ConnPool(Generic[T]):
    """Idle connections handed out first in, first out."""

    def __init__(self) -> None:
        self._conns: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._conns)

    def __iter__(self) -> Iterator[T]:
        return iter(self._conns)

    def __contains__(self, conn: object) -> bool:
        return conn in self._conns

    def get(self) -> T:
        """Take the oldest connection; raise IndexError when the pool is empty."""
        if not self._conns:
            raise IndexError("connection pool is empty")
        return self._conns.popleft()

    def add(self, conn: T) -> None:
        self._conns.append(conn)

    def remove(self, conn: T) -> bool:
        """Remove the first matching connection; return whether one was found."""
        try:
            self._conns.remove(conn)
        except ValueError:
            return False
        return True