from __future__ import annotations
from typing import Any


def to_text(value: Any) -> str:
    """Convert a message, level or key to text. Never raises.

    ``str`` is used unchanged, a value whose class defines ``__str__`` renders
    through it, anything else falls back to ``repr``.
    """
    if isinstance(value, str):
        return value
    try:
        if type(value).__str__ is not object.__str__:
            return str(value)
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"
