"""Exception hierarchy for property trees and their file parsers."""

from __future__ import annotations

from typing import Any


class PtreeError(RuntimeError):
    """Base class for all property tree errors."""


class PtreeBadData(PtreeError):
    """Raised when a node's data cannot be translated to the requested type."""

    def __init__(self, message: str, data: Any) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


def _describe_path(path: Any) -> str:
    dump = getattr(path, "dump", None)
    if callable(dump):
        return dump()
    return str(path)


class PtreeBadPath(PtreeError):
    """Raised when a path does not lead to an existing node."""

    def __init__(self, message: str, path: Any) -> None:
        super().__init__(f"{message} ({_describe_path(path)})")
        self.message = message
        self.path = path


class FileParserError(PtreeError):
    """Raised when reading or writing a file format fails."""

    def __init__(self, message: str, filename: str = "", line: int = 0) -> None:
        self.message = message
        self.filename = filename
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        where = self.filename or "<unspecified file>"
        if self.line > 0:
            where += f"({self.line})"
        return f"{where}: {self.message}"

    def with_location(self, filename: str, line: int) -> "FileParserError":
        """Return an error of the same kind carrying the given location."""
        return type(self)(self.message, filename, line)


class IniParserError(FileParserError):
    """Error in INI formatted data."""


class InfoParserError(FileParserError):
    """Error in INFO formatted data."""


class JsonParserError(FileParserError):
    """Error in JSON formatted data."""


class XmlParserError(FileParserError):
    """Error in XML formatted data."""