"""Reading and writing property trees as INI data."""

from __future__ import annotations

import os
from typing import IO, Iterable, Optional, Union

from .errors import IniParserError
from .ptree import Ptree

Source = Union[str, Iterable[str]]
FileName = Union[str, "os.PathLike[str]"]


def validate_flags(flags: int) -> bool:
    """Whether ``flags`` are valid for the INI writer (none are supported)."""
    return flags == 0


def _lines(source: Source) -> Iterable[str]:
    if isinstance(source, str):
        return source.splitlines()
    return source


def _has_data(node: Ptree) -> bool:
    return node.data not in ("", None)


def _norm(ptree: Ptree, key: str) -> str:
    return key.lower() if ptree.ignore_case else key


def read_ini(source: Source, ptree: Ptree) -> None:
    """Replace the contents of ``ptree`` with the INI data in ``source``.

    ``source`` is a text stream, any iterable of lines, or a string.
    On error ``ptree`` is left untouched and IniParserError is raised.
    """
    local = Ptree(ignore_case=ptree.ignore_case)
    section: Optional[Ptree] = None

    for line_no, raw in enumerate(_lines(source), start=1):
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line[0] == "[":
            if section is not None and section.empty():
                local.pop_back()
            end = line.find("]")
            if end < 0:
                raise IniParserError("unmatched '['", "", line_no)
            key = line[1:end].strip()
            if local.find(key) is not None:
                raise IniParserError("duplicate section name", "", line_no)
            section = local.push_back(key)
        else:
            container = local if section is None else section
            eqpos = line.find("=")
            if eqpos < 0:
                raise IniParserError(
                    "'=' character not found in line", "", line_no
                )
            if eqpos == 0:
                raise IniParserError("key expected", "", line_no)
            key = line[:eqpos].strip()
            data = line[eqpos + 1:].strip()
            if container.find(key) is not None:
                raise IniParserError("duplicate key name", "", line_no)
            container.push_back(key, Ptree(data))

    if section is not None and section.empty():
        local.pop_back()

    ptree.swap(local)


def read_ini_file(filename: FileName, ptree: Ptree,
                  encoding: Optional[str] = None) -> None:
    """Replace the contents of ``ptree`` with the INI data in a file."""
    name = os.fspath(filename)
    try:
        stream = open(name, encoding=encoding)
    except OSError as exc:
        raise IniParserError("cannot open file", name, 0) from exc
    with stream:
        try:
            read_ini(stream, ptree)
        except IniParserError as exc:
            raise exc.with_location(name, exc.line) from None


def _check_dupes(ptree: Ptree) -> None:
    seen = set()
    for key, _ in ptree:
        norm = _norm(ptree, key)
        if norm in seen:
            raise IniParserError("duplicate key", "", 0)
        seen.add(norm)


def _write_keys(stream: IO[str], ptree: Ptree, throw_on_children: bool) -> None:
    for key, child in ptree:
        if not child.empty():
            if throw_on_children:
                raise IniParserError("ptree is too deep", "", 0)
            continue
        stream.write(f"{key}={child.get_value(str)}\n")


def _write_sections(stream: IO[str], ptree: Ptree) -> None:
    for key, child in ptree:
        if child.empty():
            continue
        _check_dupes(child)
        if _has_data(child):
            raise IniParserError("mixed data and children", "", 0)
        stream.write(f"[{key}]\n")
        _write_keys(stream, child, True)


def write_ini(stream: IO[str], ptree: Ptree, flags: int = 0) -> None:
    """Write ``ptree`` to ``stream`` as INI.

    The root may not hold data, no node may hold both data and children,
    the tree may be at most two levels deep and keys on each level must be
    unique.
    """
    if not validate_flags(flags):
        raise ValueError(f"invalid INI writer flags: {flags!r}")
    if _has_data(ptree):
        raise IniParserError("ptree has data on root", "", 0)
    _check_dupes(ptree)
    _write_keys(stream, ptree, False)
    _write_sections(stream, ptree)


def write_ini_file(filename: FileName, ptree: Ptree, flags: int = 0,
                   encoding: Optional[str] = None) -> None:
    """Write ``ptree`` as INI to the named file."""
    name = os.fspath(filename)
    try:
        stream = open(name, "w", encoding=encoding)
    except OSError as exc:
        raise IniParserError("cannot open file", name, 0) from exc
    with stream:
        try:
            write_ini(stream, ptree, flags)
            stream.flush()
        except IniParserError as exc:
            raise exc.with_location(name, exc.line) from None
        except (OSError, UnicodeError) as exc:
            raise IniParserError("write error", name, 0) from exc