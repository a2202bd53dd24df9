"""UTF-8 handling for JSON text: character classes and code point transcoding."""

from __future__ import annotations

from typing import Tuple, Union

Char = Union[str, int]

_HEX_DIGITS = {
    **{c: ord(c) - ord("0") for c in "0123456789"},
    **{c: ord(c) - ord("A") + 10 for c in "ABCDEF"},
    **{c: ord(c) - ord("a") + 10 for c in "abcdef"},
}

_BYTE_ORDER_MARK_LEAD = 0xEF


class EncodingError(ValueError):
    """Raised when the input is not a valid sequence of code units."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid code sequence at offset {position}")
        self.position = position


def _as_char(c: Char) -> str:
    return chr(c) if isinstance(c, int) else c


def is_ws(c: Char) -> bool:
    """Return True for the four whitespace characters JSON allows."""
    return _as_char(c) in (" ", "\t", "\n", "\r")


def decode_hexdigit(c: Char) -> int:
    """Return the value of a hexadecimal digit, or -1 if ``c`` is not one."""
    return _HEX_DIGITS.get(_as_char(c), -1)


def _is_trail(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def _trail_count(lead: int) -> int:
    """Return how many trailing bytes follow ``lead``, or -1 if it cannot lead."""
    index = (lead & 0x7F) >> 3
    if index < 8:
        return -1  # a trailing byte on its own
    if index < 12:
        return 1
    if index < 14:
        return 2
    if index == 14:
        return 3
    return -1  # four or five trailing bytes are not allowed


def transcode_codepoint(data: bytes, pos: int) -> Tuple[bytes, int]:
    """Read one code point from ``data`` at ``pos``.

    Returns the bytes that make it up and the position after it. Control
    characters below 0x20, stray trailing bytes, disallowed lead bytes and
    truncated sequences raise EncodingError.
    """
    lead = data[pos]
    if lead <= 0x7F:
        if lead < 0x20:
            raise EncodingError(pos)
        return bytes((lead,)), pos + 1
    trailing = _trail_count(lead)
    if trailing < 0:
        raise EncodingError(pos)
    end = pos + 1 + trailing
    for index in range(pos + 1, end):
        if index >= len(data) or not _is_trail(data[index]):
            raise EncodingError(index)
    return bytes(data[pos:end]), end


def skip_codepoint(data: bytes, pos: int) -> int:
    """Validate one code point at ``pos`` and return the position after it."""
    _, end = transcode_codepoint(data, pos)
    return end


def _trail(bits: int) -> int:
    return 0x80 | (bits & 0x3F)


def feed_codepoint(codepoint: int) -> bytes:
    """Return the UTF-8 bytes of ``codepoint``; nothing for values above 0x10FFFF."""
    if codepoint < 0:
        raise ValueError(f"negative code point {codepoint}")
    if codepoint <= 0x7F:
        return bytes((codepoint,))
    if codepoint <= 0x7FF:
        return bytes((0xC0 | (codepoint >> 6), _trail(codepoint)))
    if codepoint <= 0xFFFF:
        return bytes(
            (0xE0 | (codepoint >> 12), _trail(codepoint >> 6), _trail(codepoint))
        )
    if codepoint <= 0x10FFFF:
        return bytes(
            (
                0xF0 | (codepoint >> 18),
                _trail(codepoint >> 12),
                _trail(codepoint >> 6),
                _trail(codepoint),
            )
        )
    return b""


def skip_introduction(data: bytes, pos: int) -> int:
    """Skip a byte order mark at ``pos``; return the position after it."""
    if pos < len(data) and data[pos] == _BYTE_ORDER_MARK_LEAD:
        return min(pos + 3, len(data))
    return pos