"""Adapter implementations for imagecache."""

from .cache_fs import FsCacheAdapter
from .clock_utc import UtcClockAdapter
from .logger_std import StdLoggerAdapter

__all__ = ["FsCacheAdapter", "StdLoggerAdapter", "UtcClockAdapter"]
