# Flatten nested key/value groups into one alternating key/value list.

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterable, List, NamedTuple, Optional, Sequence

from .text import to_text


class Pair(NamedTuple):
    """A single key/value unit that can appear anywhere a key is expected."""

    key: Any
    value: Any


class Group(list):
    """An explicit nested list of alternating keys and values.

    A plain list in a key position is an ordinary value; only Group expands.
    """


def _keyvals_of(item: Any) -> Any:
    try:
        fn = getattr(item, "keyvals", None)
    except Exception:
        return None
    return fn if callable(fn) else None


def _is_group(item: Any) -> bool:
    return isinstance(item, (Group, Mapping)) or _keyvals_of(item) is not None


class _Flattener:
    def __init__(self) -> None:
        self.out: List[Any] = []
        self.placeholders = 0
        self.active: set = set()

    def placeholder(self) -> str:
        self.placeholders += 1
        return f"_p{self.placeholders}"

    def add(self, key: Any, value: Any) -> None:
        self.out.append(key if isinstance(key, str) else to_text(key))
        self.out.append(value)

    def expand(self, item: Any) -> Optional[Iterable[Any]]:
        """Return the alternating items of a group, or None to treat it as a value."""
        if id(item) in self.active:
            return None
        if isinstance(item, Group):
            return item
        try:
            if isinstance(item, Mapping):
                return [Pair(k, v) for k, v in item.items()]
            return list(_keyvals_of(item)())
        except Exception:
            return None

    def walk(self, items: Sequence[Any]) -> None:
        i, n = 0, len(items)
        while i < n:
            item = items[i]
            if isinstance(item, str):
                if i + 1 < n:
                    self.add(item, items[i + 1])
                    i += 2
                else:
                    self.add(self.placeholder(), item)
                    i += 1
                continue
            if isinstance(item, Pair):
                self.add(item.key, item.value)
                i += 1
                continue
            sub = self.expand(item) if _is_group(item) else None
            if sub is None:
                self.add(self.placeholder(), item)
            else:
                self.active.add(id(item))
                try:
                    self.walk(list(sub))
                finally:
                    self.active.discard(id(item))
            i += 1


def flatten(keyvals: Sequence[Any]) -> List[Any]:
    """Return a new flat list of alternating str keys and values.

    ``Pair``, ``Group``, mappings and objects with a ``keyvals()`` method are
    expanded where a key is expected. Values without a key get the placeholder
    keys ``_p1``, ``_p2``, ... The input is not modified.
    """
    f = _Flattener()
    f.walk(list(keyvals))
    return f.out


__all__ = ["Group", "Pair", "flatten"]
