"""Point installed JetBrains IDEs at shared config and system directories."""

import os
import sys
from typing import Optional, Union

PathLike = Union[str, os.PathLike]

_PROPERTIES = (
    ("idea.config.path", "${idea.home.path}/../../config"),
    ("idea.system.path", "${idea.home.path}/../../system"),
)

_ESCAPES = {"\f": "\\f", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\\": "\\\\"}

_SKIPPED_IDES = {"Fleet"}


def _escape(text: str, special: str = "") -> str:
    return "".join(
        _ESCAPES.get(char, "\\" + char if char in special else char) for char in text
    )


def default_app_path() -> str:
    """Return $JPU_PATH, or the toolbox apps folder under $SCOOP."""
    app_path = os.environ.get("JPU_PATH", "")
    if app_path:
        return app_path
    scoop = os.environ.get("SCOOP", "")
    return os.path.join(scoop, "persist", "jetbrains-toolbox", "apps")


def find_max_version(version_dir: PathLike) -> str:
    """Return the greatest version directory name, ignoring ``.plugins`` ones ("" if none)."""
    try:
        entries = list(os.scandir(version_dir))
    except OSError:
        return ""
    versions = [
        entry.name
        for entry in entries
        if entry.is_dir() and os.path.splitext(entry.name)[1] != ".plugins"
    ]
    return max(versions, default="")


def modify_properties(app_path: PathLike, ide_name: str, max_version: str) -> str:
    """Write the portable path settings over the start of the IDE's idea.properties.

    The file must already exist; its path is returned.
    """
    path = os.path.join(app_path, ide_name, "ch-0", max_version, "bin", "idea.properties")
    text = "".join(f"{_escape(key, ' :')} = {_escape(value)}\n" for key, value in _PROPERTIES)
    with open(path, "r+b") as handle:
        handle.write(text.encode("utf-8"))
    return path


def main(argv: Optional[list[str]] = None) -> int:
    """Update idea.properties of the newest version of every installed IDE."""
    app_path = default_app_path()
    print("Using app path: ", app_path)
    try:
        ides = sorted(os.listdir(app_path))
    except OSError:
        return 0
    for ide in ides:
        if ide in _SKIPPED_IDES:
            continue
        max_version = find_max_version(os.path.join(app_path, ide, "ch-0"))
        try:
            modify_properties(app_path, ide, max_version)
        except OSError as exc:
            print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())