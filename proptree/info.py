"""Reading property trees from INFO formatted data."""

from __future__ import annotations

import enum
import os
from typing import IO, List, Optional, Tuple, Union

from .errors import InfoParserError
from .ptree import Ptree

MAX_INCLUDE_DEPTH = 100

_SPACES = frozenset(" \t\n\r\v\f")
_ESCAPES = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


def expand_escapes(text: str) -> str:
    """Replace the known backslash escape sequences in ``text``."""
    result = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            result.append(ch)
            continue
        escaped = next(chars, None)
        if escaped is None:
            raise InfoParserError("character expected after backslash")
        try:
            result.append(_ESCAPES[escaped])
        except KeyError:
            raise InfoParserError("unknown escape sequence") from None
    return "".join(result)


class _Cursor:
    """Position within a single line of input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def char(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self) -> None:
        self.pos += 1

    def skip_whitespace(self) -> None:
        while self.char in _SPACES and self.char:
            self.pos += 1

    def at_line_end(self) -> bool:
        return self.char in ("", ";")


def _read_word(cur: _Cursor) -> str:
    cur.skip_whitespace()
    start = cur.pos
    while cur.char and cur.char not in _SPACES and cur.char != ";":
        cur.advance()
    return expand_escapes(cur.text[start:cur.pos])


def _read_string(cur: _Cursor, allow_continuation: bool) -> Tuple[str, bool]:
    """Read a quoted string; the flag tells whether a continuation follows."""
    cur.skip_whitespace()
    if cur.char != '"':
        raise InfoParserError('expected "')
    cur.advance()
    escaped = False
    start = cur.pos
    while (escaped or cur.char != '"') and cur.char:
        escaped = not escaped and cur.char == "\\"
        cur.advance()
    if cur.char != '"':
        raise InfoParserError("unexpected end of line")
    result = expand_escapes(cur.text[start:cur.pos])
    cur.advance()
    cur.skip_whitespace()
    if cur.char != "\\":
        return result, False
    if not allow_continuation:
        raise InfoParserError("unexpected \\")
    cur.advance()
    cur.skip_whitespace()
    if not cur.at_line_end():
        raise InfoParserError("expected end of line after \\")
    return result, True


def _read_key(cur: _Cursor) -> str:
    cur.skip_whitespace()
    if cur.char == '"':
        return _read_string(cur, False)[0]
    return _read_word(cur)


def _read_data(cur: _Cursor) -> Tuple[str, bool]:
    cur.skip_whitespace()
    if cur.char == '"':
        return _read_string(cur, True)
    return _read_word(cur), False


class _State(enum.Enum):
    KEY = enum.auto()
    DATA = enum.auto()
    DATA_CONT = enum.auto()


def _include(cur: _Cursor, target: Ptree, filename: str, line_no: int,
             depth: int) -> None:
    directive = _read_word(cur)
    if directive != "include":
        raise InfoParserError("unknown directive", filename, line_no)
    if depth > MAX_INCLUDE_DEPTH:
        raise InfoParserError(
            "include depth too large, probably recursive include",
            filename, line_no,
        )
    inc_name = _read_string(cur, False)[0]
    try:
        with open(inc_name, encoding="utf-8") as stream:
            text = stream.read()
    except (OSError, UnicodeError):
        raise InfoParserError(
            "cannot open include file " + inc_name, filename, line_no
        ) from None
    _parse(text, target, inc_name, depth + 1)
    cur.skip_whitespace()
    if cur.char:
        raise InfoParserError("expected end of line", filename, line_no)


def _parse(text: str, ptree: Ptree, filename: str, depth: int) -> None:
    state = _State.KEY
    last: Optional[Ptree] = None
    stack: List[Ptree] = [ptree]
    line_no = 0
    try:
        for line_no, line in enumerate(text.split("\n"), start=1):
            cur = _Cursor(line.split("\0", 1)[0])
            cur.skip_whitespace()
            if cur.char == "#":
                cur.advance()
                _include(cur, stack[-1], filename, line_no, depth)
                continue

            while True:
                cur.skip_whitespace()
                if cur.at_line_end():
                    if state is _State.DATA:
                        state = _State.KEY
                    break

                if state is _State.KEY:
                    if cur.char == "{":
                        if last is None:
                            raise InfoParserError("unexpected {")
                        stack.append(last)
                        last = None
                        cur.advance()
                    elif cur.char == "}":
                        if len(stack) <= 1:
                            raise InfoParserError("unmatched }")
                        stack.pop()
                        last = None
                        cur.advance()
                    else:
                        last = stack[-1].push_back(_read_key(cur))
                        state = _State.DATA

                elif state is _State.DATA:
                    assert last is not None
                    if cur.char == "{":
                        stack.append(last)
                        last = None
                        cur.advance()
                        state = _State.KEY
                    elif cur.char == "}":
                        if len(stack) <= 1:
                            raise InfoParserError("unmatched }")
                        stack.pop()
                        last = None
                        cur.advance()
                        state = _State.KEY
                    else:
                        data, more = _read_data(cur)
                        last.data = data
                        state = _State.DATA_CONT if more else _State.KEY

                else:
                    assert last is not None
                    if cur.char != '"':
                        raise InfoParserError(
                            'expected " after \\ in previous line'
                        )
                    data, more = _read_string(cur, True)
                    last.data = last.get_value(str) + data
                    state = _State.DATA_CONT if more else _State.KEY

        if len(stack) != 1:
            raise InfoParserError("unmatched {")
    except InfoParserError as exc:
        if exc.line == 0:
            raise exc.with_location(filename, line_no) from None
        raise


def read_info(stream: Union[str, IO[str]], ptree: Ptree,
              filename: str = "") -> None:
    """Replace the contents of ``ptree`` with the INFO data in ``stream``.

    ``stream`` is a text stream or a string. Included files are opened by
    the name given in the directive. On error ``ptree`` is left untouched
    and InfoParserError is raised.
    """
    text = stream if isinstance(stream, str) else stream.read()
    local = Ptree(ignore_case=ptree.ignore_case)
    _parse(text, local, filename, 0)
    ptree.swap(local)


def read_info_file(filename: Union[str, "os.PathLike[str]"], ptree: Ptree,
                   default: Optional[Ptree] = None) -> None:
    """Replace the contents of ``ptree`` with the INFO data in a file.

    If ``default`` is given, any error makes ``ptree`` a copy of it instead
    of raising.
    """
    name = os.fspath(filename)
    try:
        try:
            with open(name, encoding="utf-8") as stream:
                text = stream.read()
        except (OSError, UnicodeError) as exc:
            raise InfoParserError("cannot open file", name, 0) from exc
        read_info(text, ptree, name)
    except InfoParserError:
        if default is None:
            raise
        ptree.swap(default.copy())