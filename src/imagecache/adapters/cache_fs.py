"""Filesystem cache adapter."""

from pathlib import Path

from ..core.root import CacheRoot


class FsCacheAdapter:
    """Flat on-disk cache: one file per filename directly under the root."""

    def __init__(self, cache_root: CacheRoot):
        self.cache_root = cache_root

    @property
    def root(self) -> Path:
        return self.cache_root.path

    def path_for(self, filename: str) -> Path:
        return self.cache_root.join(filename)

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def write(self, filename: str, data: bytes) -> Path:
        path = self.path_for(filename)
        path.write_bytes(data)
        return path

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).exists()
