# Structured logging facade: the Logger contract and its function adapter.
#
# A log event is a flat sequence of alternating keys and values, e.g.
#   logger.log("msg", "cache miss", "key", k, "lvl", "debug")

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol


@dataclass(frozen=True)
class Result:
    """Outcome of one ``Logger.log`` call. Callers are not expected to check it."""

    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


OK = Result()


class Logger(Protocol):
    """Anything that can log a sequence of alternating keys and values.

    Implementations must be safe for concurrent use from multiple threads, and
    must copy ``keyvals`` before retaining or modifying it.
    """

    def log(self, *keyvals: Any) -> Result: ...


class LoggerFunc:
    """Adapter that lets a plain function act as a Logger.

    ``LoggerFunc(f).log(*keyvals)`` calls ``f(*keyvals)`` and returns its result.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[..., Result]) -> None:
        self._fn = fn

    def log(self, *keyvals: Any) -> Result:
        return self._fn(*keyvals)

    __call__ = log

    def __repr__(self) -> str:
        return f"LoggerFunc({self._fn!r})"
