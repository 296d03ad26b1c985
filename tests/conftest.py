"""Shared fixtures for imagecache tests."""

import logging
from typing import Any

import pytest

from imagecache.adapters import FsCacheAdapter, UtcClockAdapter
from imagecache.core import CacheRoot, ImageCacheService


class RecordingLogger:
    """Logger double keeping every call for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("debug", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("info", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("warning", message, kwargs))

    def log_operation(self, op: str, key: str, sizes=None, durations=None, **kwargs: Any) -> None:
        self.records.append(("operation", op, {"key": key, "sizes": sizes, **kwargs}))


@pytest.fixture
def cache_root(tmp_path):
    """Cache root nested two levels below a fresh temp dir, not yet created."""
    return CacheRoot(tmp_path / "appdata" / "image_cache")


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def service(cache_root, logger):
    return ImageCacheService(
        cache=FsCacheAdapter(cache_root),
        clock=UtcClockAdapter(),
        logger=logger,
    )


@pytest.fixture(autouse=True)
def _reset_imagecache_logger():
    """Drop handlers added by logger adapters during the test."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name == "imagecache" or name.startswith("imagecache."):
            log = logging.getLogger(name)
            for handler in list(log.handlers):
                log.removeHandler(handler)
