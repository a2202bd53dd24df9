"""A recognizer for the grammar of the INFO property tree format.

The grammar, without the ``#include`` directive::

    escape_seq = one of 0 a b f n r t v " ' \\
    chr        = any char but whitespace, \\ { } # "   |  '\\' escape_seq
    qchr       = any char but " newline \\           |  '\\' escape_seq
    string     = chr+                               (no skipping inside)
    qstring    = '"' qchr* '"'                      (no skipping inside)
    cstring    = '"' qchr* '"' '\\'                 (no skipping inside)
    key        = string | qstring
    value      = string | qstring | cstring+ qstring | nothing
    entry      = key value ['{' entry* '}']
    info       = entry* end

Between tokens, whitespace and comments running from ``;`` to the end of the
line are skipped. Alternatives are tried in order and the first that matches
is taken.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

_SPACE = frozenset(" \t\n\v\f\r")
_ESCAPES = frozenset("0abfnrtv\"'\\")
_CHR_EXCLUDED = _SPACE | frozenset('\\{}#"')
_QCHR_EXCLUDED = frozenset('"\n\\')
_LINE_ENDS = frozenset("\r\n")

SAMPLE_DATA = (
    "\n"
    "key1 data1\n"
    "{\n"
    "\tkey data\n"
    "}\n"
    'key2 "data2  " {\n'
    "\tkey data\n"
    "}\n"
    'key3 "data"\n'
    '\t "3" {\n'
    "\tkey data\n"
    "}\n"
    "\n"
    '"key4" data4\n'
    "{\n"
    "\tkey data\n"
    "}\n"
    '"key.5" "data.5" { \n'
    "\tkey data \n"
    "}\n"
    '"key6" "data"\n'
    '\t   "6" {\n'
    "\tkey data\n"
    "}\n"
    "   \n"
    "key1 data1\n"
    "{\n"
    "\tkey data\n"
    "}\n"
    'key2 "data2  " {\n'
    "\tkey data\n"
    "}\n"
    'key3 "data"\n'
    '\t "3" {\n'
    "\tkey data\n"
    "}\n"
    "\n"
    '"key4" data4\n'
    "{\n"
    "\tkey data\n"
    "}\n"
    '"key.5" "data.5" {\n'
    "\tkey data\n"
    "}\n"
    '"key6" "data"\n'
    '\t   "6" {\n'
    "\tkey data\n"
    "}\n"
    '\\\\key\\t7 data7\\n\\"data7\\"\n'
    "{\n"
    "\tkey data\n"
    "}\n"
    '"\\\\key\\t8" "data8\\n\\"data8\\""\n'
    "{\n"
    "\tkey data\n"
    "}\n"
    "\n",
    "key1\nkey2\nkey3\nkey4\n",
)


class _Recognizer:
    """Recursive-descent matcher; each rule returns the end position or None."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.end = len(text)

    def skip(self, pos: int) -> int:
        text, end = self.text, self.end
        while pos < end:
            c = text[pos]
            if c in _SPACE:
                pos += 1
            elif c == ";":
                pos += 1
                while pos < end and text[pos] not in _LINE_ENDS:
                    pos += 1
            else:
                break
        return pos

    def escape(self, pos: int) -> Optional[int]:
        if (
            pos + 1 < self.end
            and self.text[pos] == "\\"
            and self.text[pos + 1] in _ESCAPES
        ):
            return pos + 2
        return None

    def chr(self, pos: int) -> Optional[int]:
        if pos >= self.end:
            return None
        if self.text[pos] not in _CHR_EXCLUDED:
            return pos + 1
        return self.escape(pos)

    def qchr(self, pos: int) -> Optional[int]:
        if pos >= self.end:
            return None
        if self.text[pos] not in _QCHR_EXCLUDED:
            return pos + 1
        return self.escape(pos)

    def string(self, pos: int) -> Optional[int]:
        pos = self.skip(pos)
        nxt = self.chr(pos)
        if nxt is None:
            return None
        while nxt is not None:
            pos = nxt
            nxt = self.chr(pos)
        return pos

    def _quoted(self, pos: int) -> Optional[int]:
        if pos >= self.end or self.text[pos] != '"':
            return None
        pos += 1
        nxt = self.qchr(pos)
        while nxt is not None:
            pos = nxt
            nxt = self.qchr(pos)
        if pos < self.end and self.text[pos] == '"':
            return pos + 1
        return None

    def qstring(self, pos: int) -> Optional[int]:
        return self._quoted(self.skip(pos))

    def cstring(self, pos: int) -> Optional[int]:
        after = self._quoted(self.skip(pos))
        if after is not None and after < self.end and self.text[after] == "\\":
            return after + 1
        return None

    def key(self, pos: int) -> Optional[int]:
        found = self.string(pos)
        return found if found is not None else self.qstring(pos)

    def value(self, pos: int) -> int:
        for rule in (self.string, self.qstring, self._continued):
            found = rule(pos)
            if found is not None:
                return found
        return pos

    def _continued(self, pos: int) -> Optional[int]:
        nxt = self.cstring(pos)
        if nxt is None:
            return None
        while nxt is not None:
            pos = nxt
            nxt = self.cstring(pos)
        return self.qstring(pos)

    def entry(self, pos: int) -> Optional[int]:
        after_key = self.key(pos)
        if after_key is None:
            return None
        pos = self.value(after_key)
        block = self.block(pos)
        return pos if block is None else block

    def block(self, pos: int) -> Optional[int]:
        pos = self.skip(pos)
        if pos >= self.end or self.text[pos] != "{":
            return None
        pos = self.entries(pos + 1)
        pos = self.skip(pos)
        if pos < self.end and self.text[pos] == "}":
            return pos + 1
        return None

    def entries(self, pos: int) -> int:
        nxt = self.entry(pos)
        while nxt is not None:
            pos = nxt
            nxt = self.entry(pos)
        return pos

    def info(self) -> bool:
        return self.skip(self.entries(0)) == self.end


def info_parse(text: str) -> bool:
    """Return True if the whole of ``text`` matches the INFO grammar."""
    return _Recognizer(text).info()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check INFO files named on the command line, or the built-in samples."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        documents = [Path(name).read_text(encoding="utf-8") for name in args]
    else:
        documents = list(SAMPLE_DATA)
    for text in documents:
        outcome = "Success" if info_parse(text) else "Failure"
        print(f"Parse result: {outcome}")
    return 0


if __name__ == "__main__":
    sys.exit(main())