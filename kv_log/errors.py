# Errors raised by the logfmt encoder. The StdLogger backend never lets them escape.

from __future__ import annotations
from typing import Any, Optional


class EncodingError(ValueError):
    """Base class for key=value encoding failures."""


class NilKeyError(EncodingError):
    def __init__(self) -> None:
        super().__init__("nil key")


class InvalidKeyError(EncodingError):
    def __init__(self) -> None:
        super().__init__("invalid key")


class UnsupportedKeyType(EncodingError):
    def __init__(self, key: Any = None) -> None:
        self.type = type(key)
        super().__init__("unsupported key type")


class UnsupportedValueType(EncodingError):
    def __init__(self, value: Any = None) -> None:
        self.type = type(value)
        super().__init__("unsupported value type")


class MarshalerError(EncodingError):
    """A value's own text conversion raised.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, value: Any, err: Optional[BaseException] = None) -> None:
        self.type = type(value)
        self.err = err
        super().__init__(f"error calling __str__ for {self.type.__name__}: {err}")
