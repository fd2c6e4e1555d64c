import logging
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import Any, Callable, Optional

import simplejson
from colorlog import ColoredFormatter

from onbalance.files import home_path

_log = logging.getLogger(__name__)

_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return simplejson.dumps(
            {
                "severity": record.levelname,
                "time": created.isoformat().replace("+00:00", "Z"),
                "logger": record.name,
                "message": super().format(record),
            },
            use_decimal=True,
        )


_FORMATTERS: dict[str, Callable[[], Optional[logging.Formatter]]] = {
    "default": lambda: None,
    "color": lambda: ColoredFormatter(
        fmt="%(log_color)s%(levelname)s:%(name)s:%(reset)s%(message)s", log_colors=_LOG_COLORS
    ),
    "json": JsonFormatter,
}


def configure(cfg: dict[str, Any]) -> None:
    """Replaces the root handlers according to the `log_*` keys of a config loaded through
    `onbalance.config.load`."""
    log_level = cfg.get("log_level", "info")
    log_format = cfg.get("log_format", "default")
    log_outputs = cfg.get("log_outputs", ["stdout"])
    logging.basicConfig(
        handlers=create_handlers(
            log_format,
            log_outputs,
            log_directory=cfg.get("log_directory", "logs"),
            # Values from the environment arrive as strings.
            log_backup_count=int(cfg.get("log_backup_count", 0)),
        ),
        level=logging.getLevelName(log_level.upper()),
        force=True,
    )
    _log.info(f"log level: {log_level}; format: {log_format}; outputs: {log_outputs}")


def create_handlers(
    log_format: str = "default",
    log_outputs: list[str] = ["stdout"],
    log_directory: str = "logs",
    log_backup_count: int = 0,
) -> list[logging.Handler]:
    if log_format not in _FORMATTERS:
        raise NotImplementedError(f"{log_format=}")
    unknown = [o for o in log_outputs if o not in ("stdout", "file")]
    if unknown:
        raise NotImplementedError(f"{unknown=}")

    handlers: list[logging.Handler] = []
    if "stdout" in log_outputs:
        handlers.append(logging.StreamHandler(stream=sys.stdout))
    if "file" in log_outputs:
        # Rotated at UTC midnight under `~/.onbalance/<log_directory>`.
        handlers.append(
            TimedRotatingFileHandler(
                home_path(log_directory) / "log",
                when="midnight",
                utc=True,
                backupCount=log_backup_count,
            )
        )

    formatter = _FORMATTERS[log_format]()
    if formatter:
        for handler in handlers:
            handler.setFormatter(formatter)
    return handlers
