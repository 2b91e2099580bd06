"""Periodic runner of data retention policies."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional

log = logging.getLogger(__name__)

DAO_DELETER_TIMEOUT_10MIN = 1000 * 60 * 10  # ms

RetentionPolicy = Callable[[], bool]


class DaoDeleter:
    """Runs every retention policy once per interval on a background thread."""

    def __init__(
        self,
        policies: Iterable[RetentionPolicy],
        interval_ms: int = DAO_DELETER_TIMEOUT_10MIN,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.policies = list(policies)
        self.interval_ms = interval_ms
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> list[int]:
        """Run each policy in order; return the indices of those that failed."""
        failed: list[int] = []
        for i, policy in enumerate(self.policies):
            try:
                ok = policy()
            except Exception:
                log.exception("retention policy %d raised", i)
                ok = False
            if not ok:
                log.debug("run error i=%d", i)
                failed.append(i)
        return failed

    def _run(self) -> None:
        while not self._stopped.wait(self.interval_ms / 1000):
            self.run_once()

    def start(self) -> None:
        """Start the timer thread; raise RuntimeError if it already runs."""
        if self.running:
            raise RuntimeError("deleter is already running")
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name="dao-deleter", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the timer thread and wait for it to finish."""
        self._stopped.set()
        if self._thread is not None:
            if self._thread is not threading.current_thread():
                self._thread.join()
            self._thread = None

    def __enter__(self) -> "DaoDeleter":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()