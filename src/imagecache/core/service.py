"""Core ImageCacheService orchestration."""

from pathlib import Path

from ..ports import CachePort, ClockPort, LoggerPort
from . import codec
from .errors import NotFoundError, StorageIOError
from .root import validate_filename


class ImageCacheService:
    """Reads arbitrary files as base64 and stores/locates images in the cache."""

    def __init__(
        self,
        cache: CachePort,
        clock: ClockPort,
        logger: LoggerPort,
    ):
        self.cache = cache
        self.clock = clock
        self.logger = logger

    def read_file_as_text(self, path: str | Path) -> str:
        """Read any file and return its contents base64 encoded.

        The path is not restricted to the cache root.

        Raises:
            StorageIOError: If the path is missing, unreadable, a directory or contains a NUL byte.
        """
        start_time = self.clock.now()
        self.logger.info("Starting read operation", path=str(path))

        try:
            data = Path(path).read_bytes()
        except (OSError, ValueError) as e:
            raise StorageIOError(f"Failed to read file: {e}") from e

        encoded = codec.encode(data)

        duration = (self.clock.now() - start_time).total_seconds()
        self.logger.log_operation(
            op="read",
            key=str(path),
            sizes={"file": len(data), "encoded": len(encoded)},
            durations={"total": duration},
        )
        return encoded

    def store(self, filename: str, payload: str) -> str:
        """Decode ``payload`` and write it to ``filename`` under the cache root.

        An existing file with the same name is replaced. Nothing is written when
        the payload fails to decode.

        Returns:
            The filename, unchanged.

        Raises:
            InvalidFilenameError: If ``filename`` is not a single path segment.
            StorageIOError: If the cache directory or the file cannot be written.
            DecodeError: If ``payload`` is not valid base64.
        """
        start_time = self.clock.now()
        validate_filename(filename)
        self.logger.info("Starting store operation", filename=filename)

        try:
            self.cache.ensure_root()
        except OSError as e:
            raise StorageIOError(f"Failed to create cache directory: {e}") from e

        data = codec.decode(payload)

        try:
            path = self.cache.write(filename, data)
        except OSError as e:
            raise StorageIOError(f"Failed to write image file: {e}") from e

        duration = (self.clock.now() - start_time).total_seconds()
        self.logger.log_operation(
            op="store",
            key=filename,
            sizes={"file": len(data)},
            durations={"total": duration},
            path=str(path),
        )
        return filename

    def locate(self, filename: str) -> str:
        """Return the absolute path of a cached file.

        The check happens at call time only; the file may disappear afterwards.

        Raises:
            InvalidFilenameError: If ``filename`` is not a single path segment.
            NotFoundError: If no cached file has that name.
        """
        path = self.cache.path_for(filename)
        self.logger.debug("Resolved cache path", path=str(path))

        if not self.cache.exists(filename):
            raise NotFoundError(filename)

        return str(path)
