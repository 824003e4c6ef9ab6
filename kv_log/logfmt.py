# logfmt key=value encoder.
#
# Strict mode raises on anything it cannot render; lenient mode writes the
# error text in place of a bad value and skips pairs with unsupported key types.

from __future__ import annotations
import io, numbers, socket, types
from collections.abc import Mapping, Set
from typing import Any, Sequence

from .errors import (
    EncodingError,
    InvalidKeyError,
    MarshalerError,
    NilKeyError,
    UnsupportedKeyType,
    UnsupportedValueType,
)

_REPLACEMENT = "\ufffd"
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}

# Types with no sensible single-token rendering: composites, handles, code.
_UNSUPPORTED = (
    Mapping,
    list,
    tuple,
    Set,
    io.IOBase,
    socket.socket,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    types.GeneratorType,
    type,
)


def _invalid_rune(ch: str) -> bool:
    return ch <= " " or ch == "=" or ch == '"' or ch == _REPLACEMENT


def _has_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def _key_text(key: Any) -> str:
    if key is None:
        raise NilKeyError()
    if isinstance(key, str):
        s = key
    elif isinstance(key, (bytes, bytearray)):
        s = bytes(key).decode("utf-8", errors="replace")
    elif _has_str(key) and not isinstance(key, _UNSUPPORTED):
        try:
            s = str(key)
        except Exception as e:
            raise MarshalerError(key, e) from e
    else:
        raise UnsupportedKeyType(key)
    s = "".join(ch for ch in s if not _invalid_rune(ch))
    if not s:
        raise InvalidKeyError()
    return s


def quote(s: str) -> str:
    """Double-quote ``s`` with logfmt escapes."""
    out = ['"']
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch < " ":
            out.append("\\u%04x" % ord(ch))
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _string_value(s: str, literal: bool = True) -> str:
    # A literal "null" string must not read back as a missing value.
    if literal and s == "null":
        return '"null"'
    if any(_invalid_rune(ch) for ch in s):
        return quote(s)
    return s


def _value_text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _string_value(value)
    if isinstance(value, (bytes, bytearray)):
        return _string_value(bytes(value).decode("utf-8", errors="replace"))
    if isinstance(value, numbers.Number):
        try:
            s = str(value)
        except Exception as e:
            raise MarshalerError(value, e) from e
        return _string_value(s, literal=False)
    if isinstance(value, _UNSUPPORTED):
        raise UnsupportedValueType(value)
    if isinstance(value, BaseException) or _has_str(value):
        try:
            s = str(value)
        except Exception as e:
            raise MarshalerError(value, e) from e
        return _string_value(s)
    raise UnsupportedValueType(value)


def encode_keyval(key: Any, value: Any) -> str:
    """Encode one pair strictly as ``key=value``."""
    return f"{_key_text(key)}={_value_text(value)}"


def marshal_keyvals(keyvals: Sequence[Any], *, strict: bool = True) -> str:
    """Encode alternating keys and values as one logfmt fragment.

    An odd-length sequence is padded with ``None``. With ``strict=False`` a
    value that cannot be encoded is replaced by the quoted error message and a
    pair whose key type is unsupported is skipped; nil and invalid keys still
    raise.
    """
    kvs = list(keyvals)
    if len(kvs) % 2 == 1:
        kvs.append(None)
    parts = []
    for i in range(0, len(kvs), 2):
        k, v = kvs[i], kvs[i + 1]
        try:
            parts.append(encode_keyval(k, v))
        except UnsupportedKeyType:
            if strict:
                raise
        except (UnsupportedValueType, MarshalerError) as e:
            if strict:
                raise
            parts.append(f"{_key_text(k)}={_string_value(str(e))}")
    return " ".join(parts)


__all__ = ["EncodingError", "encode_keyval", "marshal_keyvals", "quote"]
