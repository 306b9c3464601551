"""Translators between a node's stored data and the values callers want."""

from __future__ import annotations

import copy
import re
from typing import Any, Optional

_INT_RE = re.compile(r"[+-]?\d+\Z")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z")
_BOOL_WORDS = {"0": False, "1": True, "false": False, "true": True}


class IdTranslator:
    """A translator that stores and returns copies of values unchanged."""

    def get_value(self, value: Any) -> Any:
        return copy.copy(value)

    def put_value(self, value: Any) -> Any:
        return copy.copy(value)

    def __eq__(self, other: object) -> bool:
        return type(other) is IdTranslator

    def __hash__(self) -> int:
        return hash(IdTranslator)


class StreamTranslator:
    """Translates between string data and values of one type.

    ``get_value`` returns None when the text cannot be read as the type.
    Surrounding whitespace is ignored except when the type is ``str``.
    """

    def __init__(self, type_: type) -> None:
        self.type_ = type_

    def __repr__(self) -> str:
        return f"StreamTranslator({self.type_.__name__})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StreamTranslator) and other.type_ is self.type_

    def __hash__(self) -> int:
        return hash((StreamTranslator, self.type_))

    def get_value(self, data: str) -> Optional[Any]:
        if self.type_ is str:
            return data
        text = data.strip()
        if self.type_ is bool:
            return _BOOL_WORDS.get(text)
        if self.type_ is int:
            return int(text) if _INT_RE.match(text) else None
        if self.type_ is float:
            return float(text) if _FLOAT_RE.match(text) else None
        try:
            return self.type_(text)
        except (ValueError, TypeError, ArithmeticError):
            return None

    def put_value(self, value: Any) -> Optional[str]:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return repr(value)
        return str(value)


class _AnyTranslator:
    """Stores copies of values and only returns them when the type matches."""

    def __init__(self, type_: type) -> None:
        self.type_ = type_

    def get_value(self, value: Any) -> Optional[Any]:
        return value if isinstance(value, self.type_) else None

    def put_value(self, value: Any) -> Any:
        return copy.copy(value)


def translator_between(internal_type: type, external_type: type) -> Any:
    """Return the default translator from ``internal_type`` to ``external_type``."""
    if internal_type is external_type:
        return IdTranslator()
    if internal_type is str:
        return StreamTranslator(external_type)
    if internal_type is object:
        return _AnyTranslator(external_type)
    raise TypeError(
        f"no translator between {internal_type.__name__} "
        f"and {external_type.__name__}"
    )