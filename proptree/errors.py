"""Exception hierarchy for property trees and their file parsers."""

from __future__ import annotations

from typing import Any


class PTreeError(RuntimeError):
    """Base class of every error raised by property tree operations."""


class PTreeBadData(PTreeError):
    """Raised when the data of a node cannot be converted as requested."""

    def __init__(self, message: str, data: Any) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


class PTreeBadPath(PTreeError):
    """Raised when a path does not name any node of the tree."""

    def __init__(self, message: str, path: Any) -> None:
        super().__init__(f"{message} ({path})")
        self.message = message
        self.path = path


class FileParserError(PTreeError):
    """Raised when reading or writing a file format fails."""

    def __init__(self, message: str, filename: str, line: int) -> None:
        self.message = message
        self.filename = filename
        self.line = line
        super().__init__(self._describe(message, filename, line))

    @staticmethod
    def _describe(message: str, filename: str, line: int) -> str:
        where = filename if filename else "<unspecified file>"
        if line > 0:
            where = f"{where}({line})"
        return f"{where}: {message}"


class InfoParserError(FileParserError):
    """Raised by the INFO format reader and writer."""


class JsonParserError(FileParserError):
    """Raised by the JSON format reader and writer."""