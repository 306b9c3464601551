import io

import pytest

from proptree.settings import main, process_settings, process_settings_without_trick

FULL = "settings\n{\n    setting1 7\n    setting2 2.5\n    setting3 hello\n}\n"
PARTIAL = "settings\n{\n    setting1 3\n}\n"
NONE = "other\n{\n    x 1\n}\n"


@pytest.fixture
def files(tmp_path):
    paths = {}
    for name, text in (("full", FULL), ("partial", PARTIAL), ("none", NONE)):
        path = tmp_path / f"{name}.info"
        path.write_text(text, encoding="utf-8")
        paths[name] = str(path)
    return paths


def test_full_settings(files):
    out = io.StringIO()
    process_settings(files["full"], out)
    assert out.getvalue() == (
        f"\n    Processing {files['full']}\n"
        "        Setting 1 is 7\n"
        "        Setting 2 is 2.5\n"
        "        Setting 3 is hello\n"
    )


def test_partial_settings_use_defaults(files):
    out = io.StringIO()
    process_settings(files["partial"], out)
    assert out.getvalue().splitlines()[2:] == [
        "        Setting 1 is 3",
        "        Setting 2 is 0",
        "        Setting 3 is default",
    ]


def test_missing_section_uses_defaults(files):
    out = io.StringIO()
    process_settings(files["none"], out)
    assert out.getvalue().splitlines()[2:] == [
        "        Setting 1 is 0",
        "        Setting 2 is 0",
        "        Setting 3 is default",
    ]


@pytest.mark.parametrize("name", ["full", "partial", "none"])
def test_both_ways_agree(files, name):
    with_trick = io.StringIO()
    without_trick = io.StringIO()
    process_settings(files[name], with_trick)
    process_settings_without_trick(files[name], without_trick)
    assert with_trick.getvalue() == without_trick.getvalue()
    assert f"Processing {files[name]}" in without_trick.getvalue()


def test_unconvertible_value_falls_back(tmp_path):
    path = tmp_path / "bad.info"
    path.write_text("settings { setting1 abc }\n", encoding="utf-8")
    out = io.StringIO()
    process_settings(str(path), out)
    assert out.getvalue().splitlines()[2] == "        Setting 1 is 0"


def test_main_processes_all_files(files, capsys):
    assert main([files["full"], files["none"]]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Processing settings with empty-ptree-trick:\n")
    assert "\nProcessing settings without empty-ptree-trick:\n" in text
    assert text.count(f"Processing {files['full']}") == 2
    assert text.count("Setting 3 is default") == 2


def test_main_reports_errors(tmp_path, capsys):
    missing = str(tmp_path / "missing.info")
    assert main([missing]) == 0
    text = capsys.readouterr().out
    assert "Error: " in text
    assert "cannot open file" in text