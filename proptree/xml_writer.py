"""Writing property trees as XML."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Optional, Union

from .errors import XmlParserError
from .ptree import Ptree

XMLATTR = "<xmlattr>"
XMLCOMMENT = "<xmlcomment>"
XMLTEXT = "<xmltext>"

_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
}


@dataclass(frozen=True)
class XmlWriterSettings:
    """Layout of written XML; an ``indent_count`` above 0 pretty-prints."""

    indent_char: str = " "
    indent_count: int = 0
    encoding: str = "utf-8"


def encode_char_entities(text: str) -> str:
    """Replace XML special characters with character entities."""
    return "".join(_ENTITIES.get(ch, ch) for ch in text)


def _has_data(node: Ptree) -> bool:
    return node.data not in ("", None)


class _Writer:
    def __init__(self, stream: IO[str], settings: XmlWriterSettings) -> None:
        self.stream = stream
        self.settings = settings
        self.pretty = settings.indent_count > 0

    def indent(self, level: int) -> None:
        self.stream.write(self.settings.indent_char
                          * (level * self.settings.indent_count))

    def comment(self, text: str, level: int, separate_line: bool) -> None:
        if separate_line:
            self.indent(level)
        self.stream.write(f"<!--{text}-->")
        if separate_line:
            self.stream.write("\n")

    def text(self, text: str, level: int, separate_line: bool) -> None:
        if separate_line:
            self.indent(level)
        self.stream.write(encode_char_entities(text))
        if separate_line:
            self.stream.write("\n")

    def element(self, key: str, node: Ptree, level: int) -> None:
        write = self.stream.write
        has_elements = False
        has_attrs_only = not _has_data(node)
        for child_key, _ in node:
            if child_key != XMLATTR:
                has_attrs_only = False
                if child_key != XMLTEXT:
                    has_elements = True
                    break

        if not _has_data(node) and node.empty():
            if level >= 0:
                self.indent(level)
                write(f"<{key}/>")
                if self.pretty:
                    write("\n")
            return

        if level >= 0:
            self.indent(level)
            write(f"<{key}")
            attribs = node.find(XMLATTR)
            if attribs is not None:
                for name, value in attribs:
                    encoded = encode_char_entities(value.get_value(str))
                    write(f' {name}="{encoded}"')
            if has_attrs_only:
                write("/>")
                if self.pretty:
                    write("\n")
            else:
                write(">")
                if has_elements and self.pretty:
                    write("\n")

        if _has_data(node):
            self.text(node.get_value(str), level + 1,
                      has_elements and self.pretty)

        for child_key, child in node:
            if child_key == XMLATTR:
                continue
            if child_key == XMLCOMMENT:
                self.comment(child.get_value(str), level + 1, self.pretty)
            elif child_key == XMLTEXT:
                self.text(child.get_value(str), level + 1,
                          has_elements and self.pretty)
            else:
                self.element(child_key, child, level + 1)

        if level >= 0 and not has_attrs_only:
            if has_elements:
                self.indent(level)
            write(f"</{key}>")
            if self.pretty:
                write("\n")


def write_xml(stream: IO[str], ptree: Ptree,
              settings: Optional[XmlWriterSettings] = None,
              filename: str = "") -> None:
    """Write ``ptree`` to a text stream as an XML document.

    Children keyed ``<xmlattr>``, ``<xmlcomment>`` and ``<xmltext>`` become
    attributes, comments and text respectively.
    """
    settings = settings or XmlWriterSettings()
    try:
        stream.write(f'<?xml version="1.0" encoding="{settings.encoding}"?>\n')
        _Writer(stream, settings).element("", ptree, -1)
        flush = getattr(stream, "flush", None)
        if callable(flush):
            flush()
    except (OSError, UnicodeError) as exc:
        raise XmlParserError("write error", filename, 0) from exc


def write_xml_file(filename: Union[str, "os.PathLike[str]"], ptree: Ptree,
                   settings: Optional[XmlWriterSettings] = None) -> None:
    """Write ``ptree`` as an XML document to the named file."""
    settings = settings or XmlWriterSettings()
    name = os.fspath(filename)
    try:
        stream = open(name, "w", encoding=settings.encoding)
    except (OSError, LookupError) as exc:
        raise XmlParserError("cannot open file", name, 0) from exc
    with stream:
        write_xml(stream, ptree, settings, name)