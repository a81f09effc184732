from .clock import Clock, utc_now
from .directories import AppDirectories

__all__ = ["AppDirectories", "Clock", "utc_now"]
