"""Report settings from an INFO file, falling back to defaults."""

from __future__ import annotations

import sys
from typing import IO, Iterable, List, Optional

from .errors import PtreeError
from .info import read_info_file
from .ptree import Ptree

DEFAULT_FILES = (
    "settings_fully-existent.info",
    "settings_partially-existent.info",
    "settings_non-existent.info",
)

_EMPTY = Ptree()


def _report(out: IO[str], filename: str, setting1: int, setting2: float,
            setting3: str) -> None:
    out.write(f"\n    Processing {filename}\n")
    out.write(f"        Setting 1 is {setting1}\n")
    out.write(f"        Setting 2 is {setting2:g}\n")
    out.write(f"        Setting 3 is {setting3}\n")


def process_settings(filename: str, out: Optional[IO[str]] = None) -> None:
    """Print the settings, reading a missing section as an empty tree."""
    out = out if out is not None else sys.stdout
    pt = Ptree()
    read_info_file(filename, pt)
    settings = pt.get_child("settings", _EMPTY)
    _report(
        out,
        filename,
        settings.get("setting1", default=0),
        settings.get("setting2", default=0.0),
        settings.get("setting3", default="default"),
    )


def process_settings_without_trick(filename: str,
                                   out: Optional[IO[str]] = None) -> None:
    """Print the settings, handling a missing section explicitly."""
    out = out if out is not None else sys.stdout
    pt = Ptree()
    read_info_file(filename, pt)
    settings = pt.get_child_optional("settings")
    if settings is not None:
        _report(
            out,
            filename,
            settings.get("setting1", default=0),
            settings.get("setting2", default=0.0),
            settings.get("setting3", default="default"),
        )
    else:
        _report(out, filename, 0, 0.0, "default")


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Process each settings file both ways; report errors and return 0."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    files = args or list(DEFAULT_FILES)
    out = sys.stdout
    try:
        out.write("Processing settings with empty-ptree-trick:\n")
        for name in files:
            process_settings(name, out)
        out.write("\nProcessing settings without empty-ptree-trick:\n")
        for name in files:
            process_settings_without_trick(name, out)
    except (PtreeError, OSError) as exc:
        out.write(f"Error: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())