import logging
import sys
from typing import Optional, TextIO, Tuple

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below *threshold*."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Tuple[logging.Handler, logging.Handler]:
    """Replace the root handlers with one stdout and one stderr handler.

    Records below ``stderr_level`` go to stdout, the rest to stderr. Validation
    reports are printed to stdout, so diagnostics that must survive piping the
    report into another tool are routed to stderr.

    Returns:
        The ``(stdout_handler, stderr_handler)`` pair that was installed
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=stdout or sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))

    stderr_handler = logging.StreamHandler(stream=stderr or sys.stderr)
    stderr_handler.setLevel(stderr_level)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return stdout_handler, stderr_handler


def resolve_level(level_name: str, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, falling back to *default*."""
    level = logging.getLevelName(str(level_name).strip().upper())
    return level if isinstance(level, int) else default
