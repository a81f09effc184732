"""Auto-save scheduling: interval flushes and host lifecycle signals."""

from __future__ import annotations

from collections.abc import Callable

from keepsake.common import create_logger
from keepsake.config import PersistenceSettings

from .tickers import ThreadTicker, Ticker

logger = create_logger("scheduler")

type SchedulerFactory = Callable[[Callable[[], object], PersistenceSettings], AutoSaveScheduler]


class AutoSaveScheduler:
    """Triggers a flush periodically and on pause, focus loss or quit.

    The scheduler never raises out of a trigger: a failing flush is logged and
    the periodic trigger keeps running.
    """

    def __init__(
        self,
        flush: Callable[[], object],
        *,
        interval: float = 0.0,
        save_on_pause: bool = False,
        save_on_focus_lost: bool = False,
        save_on_quit: bool = True,
        ticker: Ticker | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError("Auto-save interval must not be negative")
        self._flush = flush
        self.interval = interval
        self.save_on_pause = save_on_pause
        self.save_on_focus_lost = save_on_focus_lost
        self.save_on_quit = save_on_quit
        self._ticker = ticker if ticker is not None else ThreadTicker()

    @classmethod
    def from_settings(
        cls,
        flush: Callable[[], object],
        settings: PersistenceSettings,
        ticker: Ticker | None = None,
    ) -> AutoSaveScheduler:
        return cls(
            flush,
            interval=settings.auto_save_interval,
            save_on_pause=settings.save_on_pause,
            save_on_focus_lost=settings.save_on_focus_lost,
            save_on_quit=settings.save_on_quit,
            ticker=ticker,
        )

    @property
    def running(self) -> bool:
        return self._ticker.running

    def start(self) -> None:
        """Start the periodic trigger. Restarts it when already running."""
        if self.interval <= 0:
            logger.debug("Interval auto-save disabled")
            return

        self._ticker.stop()
        self._ticker.start(self.interval, self._on_tick)
        logger.info("Auto-save started", interval=self.interval)

    def stop(self) -> None:
        if self._ticker.running:
            logger.info("Auto-save stopped")
        self._ticker.stop()

    def notify_pause(self, paused: bool) -> None:
        if paused and self.save_on_pause:
            self._run_flush("pause")

    def notify_focus(self, has_focus: bool) -> None:
        if not has_focus and self.save_on_focus_lost:
            self._run_flush("focus_lost")

    def notify_quit(self) -> None:
        self.stop()
        if self.save_on_quit:
            self._run_flush("quit")

    def _on_tick(self) -> None:
        self._run_flush("interval")

    def _run_flush(self, trigger: str) -> None:
        logger.debug("Auto-save triggered", trigger=trigger)
        try:
            self._flush()
        except Exception:
            logger.exception("Auto-save flush failed", trigger=trigger)
