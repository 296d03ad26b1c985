"""Centralized configuration for imagecache."""

import os
from dataclasses import dataclass

DEFAULT_APP_NAME = "imagecache"
CACHE_SUBDIR = "image_cache"


@dataclass(slots=True)
class ImageCacheConfig:
    """All imagecache configuration in one place.

    Environment variables (all optional):
        IMAGECACHE_APP_NAME:   Application identifier used to pick the platform's
                               per-application local data directory. Default "imagecache".
        IMAGECACHE_CACHE_DIR:  Explicit cache directory. Skips platform resolution.
        IMAGECACHE_LOG_LEVEL:  Logging level. Default "INFO".
    """

    app_name: str = DEFAULT_APP_NAME
    cache_dir: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls,
        *,
        log_level: str = "INFO",
        cache_dir: str | None = None,
    ) -> "ImageCacheConfig":
        """Build config from environment variables + explicit overrides."""
        return cls(
            app_name=os.environ.get("IMAGECACHE_APP_NAME", DEFAULT_APP_NAME),
            cache_dir=cache_dir or os.environ.get("IMAGECACHE_CACHE_DIR") or None,
            log_level=os.environ.get("IMAGECACHE_LOG_LEVEL", log_level),
        )
