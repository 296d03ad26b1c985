"""Core domain errors."""


class ImageCacheError(Exception):
    """Base exception for imagecache errors."""

    pass


class StartupError(ImageCacheError):
    """Cache root could not be resolved; no cache operation can run."""

    pass


class StorageIOError(ImageCacheError):
    """Filesystem read, write or directory creation failed."""

    pass


class DecodeError(ImageCacheError):
    """Encoded payload is not valid base64."""

    pass


class InvalidFilenameError(ImageCacheError):
    """Filename is not a single path segment inside the cache root."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid cache filename {filename!r}: {reason}")


class NotFoundError(ImageCacheError):
    """Requested cache entry does not exist."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Image not found in cache: {filename}")
