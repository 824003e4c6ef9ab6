# Rendering of one log event to one line. Everything here is pure.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, Tuple

from .errors import EncodingError
from .flatten import flatten
from .logfmt import encode_keyval, marshal_keyvals
from .text import to_text

MESSAGE_KEY = "msg"
LEVEL_KEYS = ("level", "lvl")

KeyVal = Tuple[str, Any]
EncodingPolicy = Callable[[Sequence[KeyVal]], str]


@dataclass
class Classified:
    message: str = ""
    level: str = ""
    pairs: List[KeyVal] = field(default_factory=list)


def classify(flat: Sequence[Any]) -> Classified:
    """Pull msg and level/lvl out of a flattened sequence; last occurrence wins."""
    c = Classified()
    for i in range(0, len(flat) - 1, 2):
        key, value = flat[i], flat[i + 1]
        if key == MESSAGE_KEY:
            c.message = to_text(value)
        elif key in LEVEL_KEYS:
            c.level = to_text(value)
        else:
            c.pairs.append((key, value))
    return c


def _keyvals(pairs: Sequence[KeyVal]) -> List[Any]:
    return [x for pair in pairs for x in pair]


def _drop_front(pairs: Sequence[KeyVal], strict: bool) -> str:
    pairs = list(pairs)
    while pairs:
        try:
            return marshal_keyvals(_keyvals(pairs), strict=strict)
        except EncodingError:
            # cannot marshal the pairs, so keep removing the first until it works
            pairs = pairs[1:]
    return ""


def prefix_drop(pairs: Sequence[KeyVal]) -> str:
    """Strict encoding; on failure retry without the first pair.

    A bad value hides itself and every pair before it.
    """
    return _drop_front(pairs, strict=True)


def substitute(pairs: Sequence[KeyVal]) -> str:
    """Write the error text in place of values that cannot be encoded.

    Key failures still fall back to dropping pairs from the front.
    """
    return _drop_front(pairs, strict=False)


def skip_pair(pairs: Sequence[KeyVal]) -> str:
    """Encode pair by pair and omit only the pairs that fail."""
    parts = []
    for key, value in pairs:
        try:
            parts.append(encode_keyval(key, value))
        except EncodingError:
            continue
    return " ".join(parts)


def compose(level: str, message: str, fragment: str) -> str:
    return ": ".join(s for s in (level, message, fragment) if s)


def render_line(keyvals: Sequence[Any], policy: EncodingPolicy = prefix_drop) -> str:
    """Flatten, classify and encode ``keyvals`` into the line StdLogger writes."""
    c = classify(flatten(keyvals))
    return compose(c.level, c.message, policy(c.pairs))


__all__ = [
    "Classified",
    "EncodingPolicy",
    "classify",
    "compose",
    "prefix_drop",
    "render_line",
    "skip_pair",
    "substitute",
]
