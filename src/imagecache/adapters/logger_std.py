"""Standard library logging adapter."""

import logging
from typing import Any


class StdLoggerAdapter:
    """Logger writing ``message key=value ...`` lines through :mod:`logging`."""

    def __init__(self, name: str = "imagecache", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def log_operation(
        self,
        op: str,
        key: str,
        sizes: dict[str, int] | None = None,
        durations: dict[str, float] | None = None,
        **kwargs: Any,
    ) -> None:
        fields: dict[str, Any] = {"op": op, "key": key}
        for name, value in (sizes or {}).items():
            fields[f"size_{name}"] = value
        for name, value in (durations or {}).items():
            fields[f"duration_{name}"] = round(value, 6)
        fields.update(kwargs)
        self._log(logging.INFO, "Operation completed", fields)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if fields:
            suffix = " ".join(f"{k}={v}" for k, v in fields.items())
            message = f"{message} {suffix}"
        self.logger.log(level, message)
