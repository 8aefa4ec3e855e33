"""Reader for the .gitmodules submodule registry."""

import re
from pathlib import Path

from autocommiter.config import GITMODULES_FILENAME


_PATH_RE = re.compile(r"^\s*path\s*=\s*(.+)$", re.IGNORECASE | re.MULTILINE)


def parse_submodule_paths(text: str) -> set[str]:
    """Extract every `path = ...` value from .gitmodules text."""
    return {m.group(1).strip().replace("\\", "/") for m in _PATH_RE.finditer(text)}


def read_submodule_paths(root: Path) -> set[str]:
    """Return the submodule paths declared in root/.gitmodules.

    A missing or unreadable file yields an empty set. Declared paths are not
    checked against the file system.
    """
    try:
        text = (Path(root) / GITMODULES_FILENAME).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return set()
    return parse_submodule_paths(text)
