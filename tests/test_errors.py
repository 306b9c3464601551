import pytest

from proptree.errors import (
    FileParserError,
    InfoParserError,
    IniParserError,
    JsonParserError,
    PtreeBadData,
    PtreeBadPath,
    PtreeError,
    XmlParserError,
)


class _FakePath:
    def __init__(self, text):
        self.text = text

    def dump(self):
        return self.text


def test_bad_path_message_contains_dumped_path():
    err = PtreeBadPath("No such node", _FakePath("non.existent.path"))
    assert "non.existent.path" in str(err)
    assert str(err).startswith("No such node")
    assert err.path.dump() == "non.existent.path"


def test_bad_path_accepts_plain_string():
    err = PtreeBadPath("No such node", "a.b")
    assert "a.b" in str(err)
    assert err.path == "a.b"


def test_bad_data_keeps_data():
    err = PtreeBadData("conversion failed", "non convertible to int")
    assert err.data == "non convertible to int"
    assert str(err) == "conversion failed"


def test_errors_are_ptree_errors():
    bad_data = PtreeBadData("x", 1)
    assert isinstance(bad_data, PtreeError)
    assert bad_data.data == 1
    assert str(bad_data) == "x"
    bad_path = PtreeBadPath("x", "p")
    assert isinstance(bad_path, RuntimeError)
    assert bad_path.path == "p"
    assert "p" in str(bad_path)


@pytest.mark.parametrize(
    "cls", [IniParserError, InfoParserError, JsonParserError, XmlParserError]
)
def test_parser_errors_are_file_parser_errors(cls):
    err = cls("bad", "f.txt", 3)
    assert isinstance(err, FileParserError)
    assert err.message == "bad"
    assert err.filename == "f.txt"
    assert err.line == 3
    moved = err.with_location("g.txt", 5)
    assert type(moved) is cls
    assert moved.line == 5


def test_file_parser_error_attributes():
    err = JsonParserError("read error", "data.json", 7)
    assert err.message == "read error"
    assert err.filename == "data.json"
    assert err.line == 7
    assert "read error" in str(err)
    assert "data.json" in str(err)


def test_with_location_keeps_class_and_message():
    err = InfoParserError("unmatched {", "", 0)
    moved = err.with_location("settings.info", 4)
    assert type(moved) is InfoParserError
    assert moved.message == "unmatched {"
    assert moved.filename == "settings.info"
    assert moved.line == 4
    assert err.line == 0