"""Core domain logic for imagecache."""

from .codec import decode, encode
from .config import ImageCacheConfig
from .errors import (
    DecodeError,
    ImageCacheError,
    InvalidFilenameError,
    NotFoundError,
    StartupError,
    StorageIOError,
)
from .root import CacheRoot, validate_filename
from .service import ImageCacheService

__all__ = [
    "CacheRoot",
    "DecodeError",
    "ImageCacheConfig",
    "ImageCacheError",
    "ImageCacheService",
    "InvalidFilenameError",
    "NotFoundError",
    "StartupError",
    "StorageIOError",
    "decode",
    "encode",
    "validate_filename",
]
