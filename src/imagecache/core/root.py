"""Cache root resolution.

The cache root is resolved once at startup and handed to every component that
touches the cache directory. It is never relocated afterwards, and the
directory itself is only created by the first store.
"""

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from .config import CACHE_SUBDIR, ImageCacheConfig
from .errors import InvalidFilenameError, StartupError

_SEPARATORS = ("/", "\\")


@dataclass(frozen=True, slots=True)
class CacheRoot:
    """Absolute path of the directory holding cached images."""

    path: Path

    @classmethod
    def resolve(cls, config: ImageCacheConfig) -> "CacheRoot":
        """Resolve the cache root from config or the platform data directory.

        Raises:
            StartupError: If the platform cannot supply a local data directory.
        """
        if config.cache_dir:
            return cls(Path(config.cache_dir).expanduser().absolute())

        try:
            app_data_dir = user_data_dir(appname=config.app_name, appauthor=False, roaming=False)
        except Exception as e:
            raise StartupError(f"Failed to get app data directory: {e}") from e
        if not app_data_dir:
            raise StartupError("Failed to get app data directory: platform returned no path")

        return cls(Path(app_data_dir).expanduser().absolute() / CACHE_SUBDIR)

    def join(self, filename: str) -> Path:
        """Return the path for ``filename`` directly under the root."""
        validate_filename(filename)
        return self.path / filename


def validate_filename(filename: str) -> None:
    """Reject anything that is not a single path segment.

    Raises:
        InvalidFilenameError: For empty names, separators, ``.``/``..`` or NUL bytes.
    """
    if not filename:
        raise InvalidFilenameError(filename, "empty name")
    if any(sep in filename for sep in _SEPARATORS):
        raise InvalidFilenameError(filename, "path separators are not allowed")
    if filename in (".", ".."):
        raise InvalidFilenameError(filename, "relative directory references are not allowed")
    if "\x00" in filename:
        raise InvalidFilenameError(filename, "NUL bytes are not allowed")
