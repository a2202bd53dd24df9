"""Property trees: trees of string data addressed by dotted paths."""

from __future__ import annotations

import copy
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import PTreeBadData, PTreeBadPath
from .translator import translator_for
from .tree import Tree

PathLike = Union[str, Sequence[str]]

_MISSING = object()
_SEPARATOR = "."


def _split_path(path: PathLike) -> List[str]:
    """Return the key fragments a path names, outermost first."""
    if isinstance(path, str):
        return path.split(_SEPARATOR) if path else []
    return list(path)


def _dump_path(path: PathLike) -> str:
    if isinstance(path, str):
        return path
    return _SEPARATOR.join(path)


def _kind_of(value: Any) -> type:
    for kind in (bool, int, float, str):
        if isinstance(value, kind):
            return kind
    return type(value)


class PTree(Tree):
    """A tree with string data, navigated by dot-separated key paths.

    A path is either a string such as ``"a.b.c"`` or a sequence of key
    fragments, which allows keys that themselves contain dots. The empty
    path names the tree itself.
    """

    # Path navigation

    def _walk(self, path: PathLike) -> Optional["PTree"]:
        node: Optional[Tree] = self
        for fragment in _split_path(path):
            node = node.find(fragment)
            if node is None:
                return None
        return node  # type: ignore[return-value]

    def _force_path(self, path: PathLike) -> Tuple["PTree", str]:
        fragments = _split_path(path)
        if not fragments:
            raise ValueError("empty path not allowed when placing a child")
        node: PTree = self
        for fragment in fragments[:-1]:
            child = node.find(fragment)
            if child is None:
                child = node.push_back(fragment, type(self)())
            node = child  # type: ignore[assignment]
        return node, fragments[-1]

    def _adopt(self, child: Tree) -> "PTree":
        """Return ``child`` as a tree of this tree's own type."""
        if type(child) is type(self):
            return child  # type: ignore[return-value]
        converted = type(self)(child.data)
        for key, grandchild in child:
            converted.push_back(key, converted._adopt(grandchild))
        return converted

    # Children by path

    def get_child(self, path: PathLike, default: Any = _MISSING) -> "PTree":
        """Return the node at ``path``; ``default`` or PTreeBadPath if there is none."""
        node = self._walk(path)
        if node is None:
            if default is _MISSING:
                raise PTreeBadPath("No such node", _dump_path(path))
            return default
        return node

    def get_child_optional(self, path: PathLike) -> Optional["PTree"]:
        """Return the node at ``path``, or None."""
        return self._walk(path)

    def put_child(self, path: PathLike, child: Tree) -> "PTree":
        """Place a copy of ``child`` at ``path``, replacing the first node there.

        Missing intermediate nodes are created. Returns the stored node.
        """
        parent, fragment = self._force_path(path)
        value = self._adopt(child)
        existing = parent.find(fragment)
        if existing is not None:
            existing.swap(copy.copy(value))
            return existing  # type: ignore[return-value]
        return parent.push_back(fragment, value)  # type: ignore[return-value]

    def add_child(self, path: PathLike, child: Tree) -> "PTree":
        """Append a copy of ``child`` at ``path``, even if a node exists there."""
        parent, fragment = self._force_path(path)
        return parent.push_back(fragment, self._adopt(child))  # type: ignore[return-value]

    # Values

    def get_value(self, kind: Optional[type] = None, default: Any = _MISSING) -> Any:
        """Return the data converted to ``kind``.

        Without ``kind`` the type of ``default`` is used, or ``str``. If the
        conversion fails, ``default`` is returned when given, otherwise
        PTreeBadData is raised.
        """
        if kind is None:
            kind = str if default is _MISSING else _kind_of(default)
        result = self.get_value_optional(kind)
        if result is not None:
            return result
        if default is not _MISSING:
            return default
        raise PTreeBadData(
            f'conversion of data to type "{kind.__name__}" failed', self.data
        )

    def get_value_optional(self, kind: type = str) -> Any:
        """Return the data converted to ``kind``, or None if it cannot be."""
        return translator_for(kind).get_value(self.data)

    def get(self, path: PathLike, kind: Optional[type] = None, default: Any = _MISSING) -> Any:
        """Return the data at ``path`` converted to ``kind``.

        With ``default``, it is returned when the node is missing or its data
        does not convert; otherwise PTreeBadPath or PTreeBadData is raised.
        """
        if default is _MISSING:
            return self.get_child(path).get_value(kind)
        if kind is None:
            kind = _kind_of(default)
        result = self.get_optional(path, kind)
        return default if result is None else result

    def get_optional(self, path: PathLike, kind: type = str) -> Any:
        """Return the converted data at ``path``, or None."""
        child = self.get_child_optional(path)
        if child is None:
            return None
        return child.get_value_optional(kind)

    def put_value(self, value: Any) -> None:
        """Store the text form of ``value`` as this node's data."""
        kind = _kind_of(value)
        text = translator_for(kind).put_value(value)
        if text is None:
            raise PTreeBadData(
                f'conversion of type "{kind.__name__}" to data failed', None
            )
        self.data = text

    def put(self, path: PathLike, value: Any) -> "PTree":
        """Set the data at ``path``, creating the node if needed; return the node."""
        child = self.get_child_optional(path)
        if child is None:
            child = self.put_child(path, type(self)())
        child.put_value(value)
        return child

    def add(self, path: PathLike, value: Any) -> "PTree":
        """Append a new node at ``path`` holding ``value``; return it."""
        child = self.add_child(path, type(self)())
        child.put_value(value)
        return child


class IPTree(PTree):
    """A property tree whose keys compare without regard to case."""

    @staticmethod
    def _normalize_key(key: str) -> str:
        return key.lower()


def _iter_nodes(tree: Tree) -> Iterable[Tuple[str, Tree]]:
    for key, child in tree:
        yield key, child
        yield from _iter_nodes(child)