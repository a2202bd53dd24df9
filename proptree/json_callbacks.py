"""Parser callbacks that build a property tree from JSON events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List

from .ptree import PTree

_NULL = "null"
_TRUE = "true"
_FALSE = "false"


class _Kind(enum.Enum):
    ARRAY = enum.auto()
    OBJECT = enum.auto()
    KEY = enum.auto()
    LEAF = enum.auto()


@dataclass
class _Layer:
    kind: _Kind
    tree: PTree


class StandardCallbacks:
    """Receive JSON parse events and assemble them into a PTree.

    Scalars become node data as their source text (``null``, ``true`` and
    ``false`` for the literals); array elements are stored under empty keys.
    """

    _tree_type = PTree

    def __init__(self) -> None:
        self._root = self._tree_type()
        self._key_buffer = ""
        self._stack: List[_Layer] = []

    # Events

    def on_null(self) -> None:
        self._new_value(_NULL)

    def on_boolean(self, b: bool) -> None:
        self._new_value(_TRUE if b else _FALSE)

    def on_number(self, text: Iterable[str]) -> None:
        self._new_value("".join(text))

    def on_begin_number(self) -> None:
        self._new_value()

    def on_digit(self, d: str) -> None:
        self._current_value += d

    def on_end_number(self) -> None:
        pass

    def on_begin_string(self) -> None:
        self._new_value()

    def on_code_units(self, units: Iterable[str]) -> None:
        self._current_value += "".join(units)

    def on_code_unit(self, c: str) -> None:
        self._current_value += c

    def on_end_string(self) -> None:
        pass

    def on_begin_array(self) -> None:
        self._new_tree()
        self._stack[-1].kind = _Kind.ARRAY

    def on_end_array(self) -> None:
        self._close_container()

    def on_begin_object(self) -> None:
        self._new_tree()
        self._stack[-1].kind = _Kind.OBJECT

    def on_end_object(self) -> None:
        self._close_container()

    def output(self) -> PTree:
        """Return the tree built so far."""
        return self._root

    def is_key(self) -> bool:
        """Return True while an object member's key is being read."""
        return bool(self._stack) and self._stack[-1].kind is _Kind.KEY

    # Current value, for subclasses that decorate the data

    @property
    def _current_value(self) -> str:
        layer = self._stack[-1]
        if layer.kind is _Kind.KEY:
            return self._key_buffer
        return layer.tree.data

    @_current_value.setter
    def _current_value(self, text: str) -> None:
        layer = self._stack[-1]
        if layer.kind is _Kind.KEY:
            self._key_buffer = text
        else:
            layer.tree.data = text

    # Stack management

    def _close_container(self) -> None:
        if self._stack[-1].kind is _Kind.LEAF:
            self._stack.pop()
        self._stack.pop()

    def _new_tree(self) -> PTree:
        while True:
            if not self._stack:
                self._stack.append(_Layer(_Kind.LEAF, self._root))
                return self._root
            layer = self._stack[-1]
            if layer.kind is _Kind.LEAF:
                self._stack.pop()
                continue
            if layer.kind is _Kind.ARRAY:
                child = layer.tree.push_back("", self._tree_type())
            elif layer.kind is _Kind.KEY:
                child = layer.tree.push_back(self._key_buffer, self._tree_type())
                layer.kind = _Kind.OBJECT
            else:
                raise RuntimeError("an object member must start with its key")
            self._stack.append(_Layer(_Kind.LEAF, child))
            return child

    def _new_value(self, text: str = "") -> None:
        """Position on a fresh value (or key) and set it to ``text``."""
        while self._stack and self._stack[-1].kind is _Kind.LEAF:
            self._stack.pop()
        if self._stack and self._stack[-1].kind is _Kind.OBJECT:
            self._stack[-1].kind = _Kind.KEY
            self._key_buffer = ""
        else:
            self._new_tree()
        self._current_value = text