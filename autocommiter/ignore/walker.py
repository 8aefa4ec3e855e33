"""Repository walk that finds nested git repositories.

Directories that cannot be listed are skipped and the walk carries on, so
the result can be incomplete on partially inaccessible trees. Callers that
care can pass a list to collect the skipped paths.
"""

import os
from pathlib import Path
from typing import Optional

from autocommiter.config import GIT_DIR_NAME
from autocommiter.ignore.patterns import Matcher


def _relative(root: str, path: str) -> str:
    rel = os.path.relpath(path, root)
    if rel == os.curdir:
        return ""
    return rel.replace(os.sep, "/")


def find_nested_repo_parents(
    root: Path,
    is_ignored: Matcher,
    skipped: Optional[list[str]] = None,
) -> list[str]:
    """Find directories below root that contain their own .git directory.

    Args:
        root: Repository root to walk.
        is_ignored: Predicate over repository-relative paths. Ignored
            directories are not descended into.
        skipped: If given, receives the relative path ("" for the root) of
            every directory that could not be listed.

    Returns:
        Relative, forward-slash paths of the nested repositories' top-level
        directories, deduplicated, in walk order. The root itself is never
        reported.
    """
    root_str = str(root)
    found: list[str] = []
    seen: set[str] = set()

    def walk(directory: str) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            if skipped is not None:
                skipped.append(_relative(root_str, directory))
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if not is_dir:
                continue

            if entry.name == GIT_DIR_NAME:
                parent = _relative(root_str, directory)
                if parent and parent not in seen:
                    seen.add(parent)
                    found.append(parent)
                continue

            if is_ignored(_relative(root_str, entry.path)):
                continue

            walk(entry.path)

    walk(root_str)
    return found
