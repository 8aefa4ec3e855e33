"""Per-file change analysis for staged files.

Each staged file is reduced to a short token that the digest compressor
embeds verbatim:

- "<added>+/<removed>-" from numstat (binary files count as 0/0)
- the first line of a zero-context diff, cut to 40 characters
- "unchanged", "mod" or "err" when nothing better is available
"""

import re
from dataclasses import dataclass

from autocommiter.git.exceptions import GitError
from autocommiter.git.runner import PathLike, _run_git_command, get_staged_files


HUNK_SAMPLE_CHARS = 40


@dataclass(frozen=True)
class FileChange:
    """One staged file and its change token."""

    file: str
    change: str


def _parse_count(field: str) -> int:
    if field == "-":
        return 0
    try:
        return int(field)
    except ValueError:
        return 0


def analyze_file_change(cwd: PathLike, file: str) -> str:
    """Produce a very short description of a file's staged diff.

    Args:
        cwd: Repository directory to run git in.
        file: Repository-relative path of the staged file.

    Returns:
        The change token. Never raises for git failures.
    """
    try:
        numstat = _run_git_command(["diff", "--staged", "--numstat", "--", file], cwd=cwd)
        if not numstat:
            return "unchanged"

        # numstat: added<TAB>removed<TAB>path
        parts = numstat.splitlines()[0].split("\t")
        if len(parts) >= 3:
            added = _parse_count(parts[0])
            removed = _parse_count(parts[1])
            return f"{added}+/{removed}-"

        hunks = _run_git_command(["diff", "--staged", "--unified=0", "--", file], cwd=cwd)
        if not hunks:
            return "mod"
        first = next((line.strip() for line in hunks.splitlines() if line.strip()), "mod")
        return re.sub(r"\s+", " ", first[:HUNK_SAMPLE_CHARS])
    except GitError:
        return "err"


def build_file_changes(cwd: PathLike) -> list[FileChange]:
    """Analyze every staged file, preserving git's ordering."""
    return [FileChange(file=f, change=analyze_file_change(cwd, f)) for f in get_staged_files(cwd)]
