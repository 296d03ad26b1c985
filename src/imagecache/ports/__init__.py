"""Port interfaces for imagecache."""

from .cache import CachePort
from .clock import ClockPort
from .logger import LoggerPort

__all__ = ["CachePort", "ClockPort", "LoggerPort"]
