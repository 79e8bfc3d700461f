"""Logging setup for the COREKIT CLI.

Records go to a Rich console handler on stderr, filtered by the -v/-q
verbosity. An optional log file receives every DEBUG record of the run,
whatever the console level. Records from other libraries are shown with a
"[library]" prefix so they stand out from COREKIT's own lines.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_PREFIX = "corekit"
DEFAULT_LEVEL = logging.WARNING

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d: %(message)s"

logger = logging.getLogger(__name__)


class OriginFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set `record.origin`: empty for COREKIT loggers, "[library] " otherwise."""

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".")[0]
        record.origin = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Shift WARNING one level per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = DEFAULT_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def console_handler(
    level: int = DEFAULT_LEVEL, *, color: bool = True, debug: bool = False
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Debug mode forces DEBUG.
        color: Mirrors click-extra's --color/--no-color.
        debug: Show logger names and source paths next to each line.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if debug else "%(origin)s%(message)s")
    )
    handler.addFilter(OriginFilter())
    return handler


def file_handler(path: Path) -> logging.FileHandler:
    """Build a handler writing every DEBUG record to `path`, truncated per run."""
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(
    level: int,
    *,
    color: bool = True,
    debug: bool = False,
    log_file: Path | None = None,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers for one CLI run.

    The root logger passes everything through; the handlers do the
    filtering. `logger_levels` then raises or lowers individual loggers,
    which affects the console and the log file alike.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(level, color=color, debug=debug)
    ]
    if log_file is not None:
        handlers.append(file_handler(log_file))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug(
        "Console level %s, log file %s",
        logging.getLevelName(handlers[0].level),
        log_file or "<none>",
    )
    return handlers
