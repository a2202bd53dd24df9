"""Conversion between the string data of a tree node and typed values."""

from __future__ import annotations

import re
from typing import Any, Optional

# Characters that a text stream treats as whitespace.
_WS = " \t\n\v\f\r"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_SUPPORTED = (str, int, float, bool)


class StreamTranslator:
    """Translate between strings and values the way text streams read and write them.

    Leading and trailing whitespace around a value is skipped; anything else
    left over after the value makes the conversion fail.
    """

    def __init__(self, kind: type) -> None:
        if kind not in _SUPPORTED:
            raise TypeError(f"no stream translation for {kind!r}")
        self.kind = kind

    def get_value(self, text: str) -> Optional[Any]:
        """Return the value read from ``text``, or None if it cannot be read."""
        token = text.strip(_WS)
        if not token:
            return None
        if self.kind is bool:
            return self._read_bool(token)
        if self.kind is int:
            return int(token) if _INT_RE.fullmatch(token) else None
        if self.kind is float:
            return float(token) if _FLOAT_RE.fullmatch(token) else None
        if any(c in _WS for c in token):
            return None
        return token

    def put_value(self, value: Any) -> Optional[str]:
        """Return the text form of ``value``, or None if it cannot be written."""
        try:
            if self.kind is bool:
                return "true" if value else "false"
            if self.kind is int:
                return str(int(value))
            if self.kind is float:
                return format(float(value), ".17g")
            return str(value)
        except (TypeError, ValueError, OverflowError):
            return None

    @staticmethod
    def _read_bool(token: str) -> Optional[bool]:
        if _INT_RE.fullmatch(token):
            number = int(token)
            if number in (0, 1):
                return bool(number)
            return None
        if token == "true":
            return True
        if token == "false":
            return False
        return None


class _IdentityTranslator:
    """Pass strings through unchanged."""

    kind = str

    def get_value(self, text: Any) -> Optional[str]:
        return text if isinstance(text, str) else None

    def put_value(self, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


def translator_for(kind: type):
    """Return the default translator between node data and ``kind``."""
    if kind is str:
        return _IdentityTranslator()
    return StreamTranslator(kind)