"""Auto-save scheduling."""

from .auto_save import AutoSaveScheduler, SchedulerFactory
from .tickers import ManualTicker, ThreadTicker, Ticker

__all__ = [
    "AutoSaveScheduler",
    "ManualTicker",
    "SchedulerFactory",
    "ThreadTicker",
    "Ticker",
]
