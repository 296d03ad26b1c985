"""Command bridge exposing cache operations to a host application.

Each command takes and returns plain strings. Failures reach the host as a
single message carried by :class:`CommandError`.
"""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from ..core import ImageCacheConfig, ImageCacheError, ImageCacheService
from .factory import create_service

READ_FILE = "read_file_as_base64"
SAVE_IMAGE = "save_image_to_cache"
GET_IMAGE_PATH = "get_image_cache_path"


class CommandError(Exception):
    """Failure reported back to the host as a message string."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CommandBridge:
    """Registry of named commands dispatched on worker threads."""

    def __init__(self, service: ImageCacheService):
        self.service = service
        self.handlers: dict[str, Callable[..., str]] = {
            READ_FILE: lambda path: service.read_file_as_text(path),
            SAVE_IMAGE: lambda filename, base64_data: service.store(filename, base64_data),
            GET_IMAGE_PATH: lambda filename: service.locate(filename),
        }

    @property
    def commands(self) -> list[str]:
        return sorted(self.handlers)

    async def invoke(self, name: str, **kwargs: Any) -> str:
        """Run command ``name`` and return its result.

        Raises:
            CommandError: For unknown commands, bad arguments and any cache failure.
        """
        handler = self.handlers.get(name)
        if handler is None:
            raise CommandError(f"Unknown command: {name}")

        try:
            inspect.signature(handler).bind(**kwargs)
        except TypeError as e:
            raise CommandError(f"Invalid arguments for {name}: {e}") from e

        try:
            return await asyncio.to_thread(handler, **kwargs)
        except ImageCacheError as e:
            self.service.logger.warning("Command failed", command=name, error=str(e))
            raise CommandError(str(e)) from e


def build_bridge(config: ImageCacheConfig | None = None) -> CommandBridge:
    """Resolve the cache root and register commands.

    ``StartupError`` propagates unchanged so the host can refuse to start.
    """
    return CommandBridge(create_service(config))
