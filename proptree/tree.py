"""An ordered container of keyed child trees, each carrying a data value."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple


@dataclass
class _Slot:
    key: str
    child: "Tree"
    serial: int


class Tree:
    """A node holding ``data`` and a sequence of ``(key, child)`` pairs.

    Children keep the order in which they were placed. Lookup by key goes
    through an ordered view in which equivalent keys keep the order they were
    added in. Children are stored by value: inserting a tree stores a copy.
    """

    __hash__ = None  # type: ignore[assignment]

    # Whether keys compare without regard to letter case.
    _ignore_case = False

    def __init__(self, data: Any = "") -> None:
        self.data = data
        self._slots: List[_Slot] = []
        self._next_serial = 0

    # Key comparison

    @classmethod
    def _normalize_key(cls, key: str) -> str:
        """Return the form of ``key`` that lookups and equality compare."""
        return key.lower() if cls._ignore_case else key

    def _same_key(self, a: str, b: str) -> bool:
        return self._normalize_key(a) == self._normalize_key(b)

    def _make_slot(self, key: str, child: "Tree") -> _Slot:
        slot = _Slot(key, copy.copy(child), self._next_serial)
        self._next_serial += 1
        return slot

    # Container view

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Tuple[str, "Tree"]]:
        return ((slot.key, slot.child) for slot in self._slots)

    def __reversed__(self) -> Iterator[Tuple[str, "Tree"]]:
        return ((slot.key, slot.child) for slot in reversed(self._slots))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        if len(self) != len(other) or self.data != other.data:
            return False
        return all(
            self._same_key(mine.key, theirs.key) and mine.child == theirs.child
            for mine, theirs in zip(self._slots, other._slots)
        )

    def __copy__(self) -> "Tree":
        duplicate = type(self)(self.data)
        duplicate._slots = [
            _Slot(slot.key, copy.copy(slot.child), slot.serial)
            for slot in self._slots
        ]
        duplicate._next_serial = self._next_serial
        return duplicate

    def __repr__(self) -> str:
        children = ", ".join(f"{key!r}: {child!r}" for key, child in self)
        return f"{type(self).__name__}({self.data!r}, {{{children}}})"

    def empty(self) -> bool:
        """Return True if the node has no children."""
        return not self._slots

    def front(self) -> Tuple[str, "Tree"]:
        """Return the first ``(key, child)`` pair."""
        if not self._slots:
            raise IndexError("front of a tree without children")
        slot = self._slots[0]
        return slot.key, slot.child

    def back(self) -> Tuple[str, "Tree"]:
        """Return the last ``(key, child)`` pair."""
        if not self._slots:
            raise IndexError("back of a tree without children")
        slot = self._slots[-1]
        return slot.key, slot.child

    def insert(self, index: int, key: str, child: "Tree") -> "Tree":
        """Insert a copy of ``child`` under ``key`` before ``index``; return the stored copy."""
        slot = self._make_slot(key, child)
        self._slots.insert(index, slot)
        return slot.child

    def erase_at(self, index: int) -> Tuple[str, "Tree"]:
        """Remove and return the pair at ``index``."""
        slot = self._slots.pop(index)
        return slot.key, slot.child

    def push_front(self, key: str, child: "Tree") -> "Tree":
        """Add a copy of ``child`` first; return the stored copy."""
        return self.insert(0, key, child)

    def push_back(self, key: str, child: "Tree") -> "Tree":
        """Add a copy of ``child`` last; return the stored copy."""
        slot = self._make_slot(key, child)
        self._slots.append(slot)
        return slot.child

    def pop_front(self) -> Tuple[str, "Tree"]:
        """Remove and return the first pair."""
        if not self._slots:
            raise IndexError("pop from a tree without children")
        return self.erase_at(0)

    def pop_back(self) -> Tuple[str, "Tree"]:
        """Remove and return the last pair."""
        if not self._slots:
            raise IndexError("pop from a tree without children")
        return self.erase_at(-1)

    def reverse(self) -> None:
        """Reverse the order of the children in place."""
        self._slots.reverse()

    def sort(
        self, key: Optional[Callable[[Tuple[str, "Tree"]], Any]] = None
    ) -> None:
        """Stably sort the children, by their keys unless ``key`` is given.

        ``key`` receives each ``(key, child)`` pair.
        """
        if key is None:
            self._slots.sort(key=lambda slot: slot.key)
        else:
            self._slots.sort(key=lambda slot: key((slot.key, slot.child)))

    # Associative view

    def _ordered_slots(self) -> List[_Slot]:
        return sorted(
            self._slots,
            key=lambda slot: (self._normalize_key(slot.key), slot.serial),
        )

    def ordered(self) -> Iterator[Tuple[str, "Tree"]]:
        """Iterate the pairs in key order; equal keys in the order they were added."""
        return ((slot.key, slot.child) for slot in self._ordered_slots())

    def _matching(self, key: str) -> List[_Slot]:
        wanted = self._normalize_key(key)
        matches = [s for s in self._slots if self._normalize_key(s.key) == wanted]
        matches.sort(key=lambda slot: slot.serial)
        return matches

    def find(self, key: str) -> Optional["Tree"]:
        """Return the first child added under ``key``, or None."""
        matches = self._matching(key)
        return matches[0].child if matches else None

    def equal_range(self, key: str) -> List[Tuple[str, "Tree"]]:
        """Return every pair whose key is equivalent to ``key``, in ordered view order."""
        return [(slot.key, slot.child) for slot in self._matching(key)]

    def count(self, key: str) -> int:
        """Return how many children have a key equivalent to ``key``."""
        return len(self._matching(key))

    def erase(self, key: str) -> int:
        """Remove every child under ``key``; return how many were removed."""
        wanted = self._normalize_key(key)
        kept = [s for s in self._slots if self._normalize_key(s.key) != wanted]
        removed = len(self._slots) - len(kept)
        self._slots = kept
        return removed

    # Property tree view

    def clear(self) -> None:
        """Reset the data to the empty string and remove all children."""
        self.data = ""
        self._slots = []

    def swap(self, other: "Tree") -> None:
        """Exchange data and children with ``other``."""
        self.data, other.data = other.data, self.data
        self._slots, other._slots = other._slots, self._slots
        self._next_serial, other._next_serial = (
            other._next_serial,
            self._next_serial,
        )