"""Service wiring."""

from ..adapters import FsCacheAdapter, StdLoggerAdapter, UtcClockAdapter
from ..core import CacheRoot, ImageCacheConfig, ImageCacheService


def create_service(
    config: ImageCacheConfig | None = None,
    cache_root: CacheRoot | None = None,
) -> ImageCacheService:
    """Create service with wired adapters.

    Resolving the cache root may raise ``StartupError``; callers must let it
    stop startup.
    """
    config = config or ImageCacheConfig.from_env()
    root = cache_root or CacheRoot.resolve(config)

    cache = FsCacheAdapter(root)
    clock = UtcClockAdapter()
    logger = StdLoggerAdapter(level=config.log_level)

    return ImageCacheService(cache=cache, clock=clock, logger=logger)
