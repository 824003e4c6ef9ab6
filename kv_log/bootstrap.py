# Process-wide default logger and destination setup.
#
# Set the default once during startup, before other threads log. Code that can
# take a Logger as a parameter should; get_logger() is a fallback.

from __future__ import annotations
import logging, sys
from typing import IO, Optional

from .logging import Logger
from .render import EncodingPolicy, prefix_drop
from .stdlog import DESTINATION, StdLogger

DEFAULT_FORMAT = "%(filename)s:%(lineno)d: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _default_handler() -> Optional[logging.Handler]:
    # Unconfigured, the destination writes INFO and up to stderr.
    dest = logging.getLogger(DESTINATION)
    if dest.handlers:
        return None
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    dest.addHandler(handler)
    if dest.level == logging.NOTSET:
        dest.setLevel(logging.INFO)
    return handler


_global_logger: Logger = StdLogger(1)
_handler: Optional[logging.Handler] = _default_handler()


def get_logger() -> Logger:
    return _global_logger


def set_logger(logger: Logger) -> None:
    """Replace the default logger. Not safe once other threads are logging."""
    global _global_logger
    _global_logger = logger


def init(
    calldepth: int = 1,
    *,
    destination: Optional[logging.Logger] = None,
    policy: EncodingPolicy = prefix_drop,
    emit_level: int = logging.INFO,
) -> Logger:
    """Install a StdLogger built from these options as the default and return it."""
    logger = StdLogger(calldepth, destination=destination, policy=policy, emit_level=emit_level)
    set_logger(logger)
    return logger


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Send the kv_log destination to ``stream`` (stderr by default).

    Safe to call again: the default stderr handler, or the one installed by a
    previous call, is replaced.
    """
    global _handler
    dest = logging.getLogger(DESTINATION)
    if _handler is not None:
        dest.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    dest.addHandler(_handler)
    dest.setLevel(getattr(logging, level.upper(), logging.INFO))
    dest.propagate = False
    return dest
