"""Keep .gitignore protecting secrets and nested repositories.

A single pass appends whatever is missing and never reorders or removes
existing lines:

- every pattern in REQUIRED_PATTERNS that no existing line covers
- "<path>/" for every nested repository that is neither a declared
  submodule nor already ignored

Every appended line covers itself on the next pass, so running the resolver
twice in a row changes the file at most once.
"""

from pathlib import Path
from typing import Optional

from autocommiter.config import (
    GITIGNORE_COMMENT_PREFIX,
    GITIGNORE_FILENAME,
    GITMODULES_FILENAME,
    REQUIRED_PATTERNS,
)
from autocommiter.ignore.patterns import (
    build_ignore_matcher,
    compile_pattern,
    escape_pattern,
    parse_ignore_lines,
)
from autocommiter.ignore.submodules import read_submodule_paths
from autocommiter.ignore.walker import find_nested_repo_parents


def is_pattern_covered(required: str, existing: list[str]) -> bool:
    """Return True if some existing line already provides required."""
    if required in existing:
        return True
    return any(compile_pattern(line)(required) for line in existing)


def _declared_by_own_registry(repo_root: Path, nested: str) -> bool:
    # Substring heuristic: the nested repo's own .gitmodules mentions it.
    registry = repo_root / nested / GITMODULES_FILENAME
    try:
        if not registry.is_file():
            return False
        return nested in registry.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def read_gitignore(repo_root: Path) -> str:
    """Return the exact text of repo_root/.gitignore, or "" if there is none.

    Line endings are kept as they are on disk.

    Raises:
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    gitignore = Path(repo_root) / GITIGNORE_FILENAME
    try:
        with gitignore.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return ""


def plan_gitignore_additions(
    repo_root: Path,
    existing_lines: list[str],
    skipped: Optional[list[str]] = None,
) -> list[str]:
    """Compute the lines a reconciliation pass would append.

    Args:
        repo_root: Repository root.
        existing_lines: Parsed patterns of the current .gitignore.
        skipped: Optional list receiving directories the walk could not list.

    Returns:
        Comment and pattern lines to append, in order. Empty if the file is
        already safe.
    """
    to_append: list[str] = []

    for required in REQUIRED_PATTERNS:
        if not is_pattern_covered(required, existing_lines):
            to_append.append(f"{GITIGNORE_COMMENT_PREFIX} ensure {required}")
            to_append.append(required)

    is_ignored = build_ignore_matcher(existing_lines)
    nested_parents = find_nested_repo_parents(repo_root, is_ignored, skipped)
    submodules = read_submodule_paths(repo_root)

    for nested in nested_parents:
        if nested in submodules or is_ignored(nested):
            continue
        if _declared_by_own_registry(repo_root, nested):
            continue
        to_append.append(f"{GITIGNORE_COMMENT_PREFIX} ignore nested repo {nested}")
        to_append.append(escape_pattern(f"{nested}/"))

    return to_append


def ensure_gitignore_safety(repo_root: Path, skipped: Optional[list[str]] = None) -> bool:
    """Reconcile repo_root/.gitignore once.

    Args:
        repo_root: Repository root.
        skipped: Optional list receiving directories the walk could not list.

    Returns:
        True if .gitignore was rewritten. False if nothing was missing, or
        if the file exists but could not be read or written.
    """
    repo_root = Path(repo_root)
    gitignore = repo_root / GITIGNORE_FILENAME

    try:
        existing = read_gitignore(repo_root)
    except (OSError, UnicodeDecodeError):
        # Unreadable content must not be clobbered by a rewrite
        return False

    to_append = plan_gitignore_additions(repo_root, parse_ignore_lines(existing), skipped)
    if not to_append:
        return False

    separator = "\n" if existing and not existing.endswith("\n") else ""
    content = existing + separator + "\n".join(to_append) + "\n"
    try:
        with open(gitignore, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError:
        return False
    return True
