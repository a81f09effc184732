"""Periodic triggers decoupled from any host loop."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol


class Ticker(Protocol):
    """Calls ``callback`` every ``interval`` seconds until stopped."""

    @property
    def running(self) -> bool: ...

    def start(self, interval: float, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class ThreadTicker(Ticker):
    """Ticker backed by a daemon thread waiting on an event."""

    def __init__(self, name: str = "keepsake-autosave", join_timeout: float = 5.0) -> None:
        self._name = name
        self._join_timeout = join_timeout
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError("Ticker interval must be positive")

        self.stop()
        # Each run gets its own event so a stale thread never observes a cleared flag.
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop,
            args=(interval, callback, self._stop_event),
            name=self._name,
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self._join_timeout)

    @staticmethod
    def _loop(interval: float, callback: Callable[[], None], stop_event: threading.Event) -> None:
        while not stop_event.wait(interval):
            callback()


class ManualTicker(Ticker):
    """Ticker driven explicitly by the host (or a test) through ``tick``."""

    def __init__(self) -> None:
        self.interval: float | None = None
        self.starts = 0
        self._callback: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError("Ticker interval must be positive")
        self.stop()
        self.interval = interval
        self.starts += 1
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()
