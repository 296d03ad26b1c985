"""Cache port interface."""

from pathlib import Path
from typing import Protocol


class CachePort(Protocol):
    """Port for cache operations."""

    @property
    def root(self) -> Path:
        """Directory holding cached files."""
        ...

    def path_for(self, filename: str) -> Path:
        """Get path where a cached file lives."""
        ...

    def ensure_root(self) -> None:
        """Create the cache directory if missing."""
        ...

    def write(self, filename: str, data: bytes) -> Path:
        """Write a cached file, replacing any previous content."""
        ...

    def exists(self, filename: str) -> bool:
        """Check if a cached file exists."""
        ...
