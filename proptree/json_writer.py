"""Serialization of property trees as JSON text."""

from __future__ import annotations

import io
from typing import Iterator, TextIO, Union

from .errors import JsonParserError
from .tree import Tree

_HEX = "0123456789ABCDEF"

_SHORT_ESCAPES = {
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "/": "\\/",
    '"': '\\"',
    "\\": "\\\\",
}


def _passes_through(code: int) -> bool:
    return (
        code in (0x20, 0x21)
        or 0x23 <= code <= 0x2E
        or 0x30 <= code <= 0x5B
        or 0x5D <= code <= 0xFF
    )


def _escape_char(ch: str) -> str:
    code = ord(ch)
    if _passes_through(code):
        return ch
    short = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    code = min(code, 0xFFFF)
    return "\\u" + "".join(_HEX[(code >> shift) & 0xF] for shift in (12, 8, 4, 0))


def create_escapes(s: Union[str, bytes]) -> Union[str, bytes]:
    """Escape the characters that JSON strings cannot hold literally.

    Characters up to 0xFF other than quote, backslash and slash pass through;
    everything above is written as ``\\uXXXX``. Bytes are treated as single
    units, so UTF-8 input passes through unchanged.
    """
    if isinstance(s, bytes):
        return create_escapes(s.decode("latin-1")).encode("latin-1")  # type: ignore[union-attr]
    return "".join(_escape_char(ch) for ch in s)


def verify_json(tree: Tree, depth: int = 0) -> bool:
    """Return True if ``tree`` can be represented as JSON.

    The root may not carry data, and no node may carry both data and children.
    """
    if depth == 0 and tree.data:
        return False
    if tree.data and not tree.empty():
        return False
    return all(verify_json(child, depth + 1) for _, child in tree)


def _chunks(tree: Tree, indent: int, pretty: bool) -> Iterator[str]:
    if indent > 0 and tree.empty():
        yield f'"{create_escapes(tree.data)}"'
        return
    is_array = indent > 0 and tree.count("") == len(tree)
    yield "[" if is_array else "{"
    if pretty:
        yield "\n"
    remaining = len(tree)
    for key, child in tree:
        remaining -= 1
        if pretty:
            yield " " * (4 * (indent + 1))
        if not is_array:
            yield f'"{create_escapes(key)}":'
            if pretty:
                yield " "
        yield from _chunks(child, indent + 1, pretty)
        if remaining:
            yield ","
        if pretty:
            yield "\n"
    if pretty:
        yield " " * (4 * indent)
    yield "]" if is_array else "}"


def write_json(
    stream: TextIO, tree: Tree, pretty: bool = True, filename: str = ""
) -> None:
    """Write ``tree`` to ``stream`` as JSON followed by a newline.

    Raises JsonParserError if the tree cannot be represented or the stream
    fails.
    """
    if not verify_json(tree, 0):
        raise JsonParserError(
            "ptree contains data that cannot be represented in JSON format",
            filename,
            0,
        )
    try:
        for chunk in _chunks(tree, 0, pretty):
            stream.write(chunk)
        stream.write("\n")
        stream.flush()
    except (OSError, ValueError) as exc:
        raise JsonParserError("write error", filename, 0) from exc


def to_json_string(tree: Tree, pretty: bool = True) -> str:
    """Return the JSON text of ``tree``, ending with a newline."""
    buffer = io.StringIO()
    write_json(buffer, tree, pretty)
    return buffer.getvalue()