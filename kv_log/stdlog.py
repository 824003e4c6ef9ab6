# Reference backend: one logfmt line per call, written through stdlib logging.

from __future__ import annotations
import logging
from typing import Any, Optional

from .logging import OK, Result
from .render import EncodingPolicy, prefix_drop, render_line

DESTINATION = "kv_log"


class StdLogger:
    """Logger that writes each event as a single line to a ``logging.Logger``.

    Output looks like ``warn: the message: p1=1 p2="param 2"``: the level, the
    message, then the remaining pairs in logfmt. ``calldepth`` is the number of
    frames to skip when attributing file and line; 1 names the caller of
    ``log``. Wrappers that add frames of their own should raise it to match.
    """

    def __init__(
        self,
        calldepth: int = 1,
        *,
        destination: Optional[logging.Logger] = None,
        policy: EncodingPolicy = prefix_drop,
        emit_level: int = logging.INFO,
    ) -> None:
        self.calldepth = calldepth
        self.destination = destination or logging.getLogger(DESTINATION)
        self.policy = policy
        self.emit_level = emit_level

    def log(self, *keyvals: Any) -> Result:
        line = render_line(keyvals, self.policy)
        # stacklevel=1 would name this frame.
        self.destination.log(self.emit_level, line, stacklevel=self.calldepth + 1)
        return OK

    def __repr__(self) -> str:
        return f"StdLogger(calldepth={self.calldepth}, destination={self.destination.name!r})"
