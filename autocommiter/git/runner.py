"""Git command runner and repository operations.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- stage_all_changes, get_staged_files, commit, push: commit workflow steps
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from autocommiter.git.exceptions import GitError


PathLike = Union[str, Path]


def _run_git_command(args: list[str], cwd: Optional[PathLike] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the current directory.

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root(cwd: Optional[PathLike] = None) -> Path:
    """Get the root directory of the enclosing git repository.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
        return Path(root)
    except GitError:
        raise GitError("Not inside a git repository. Run this command from within a git repo.")


def stage_all_changes(cwd: PathLike) -> None:
    """Stage every change in the working tree (git add .)."""
    _run_git_command(["add", "."], cwd=cwd)


def get_staged_files(cwd: PathLike) -> list[str]:
    """Return staged file paths in the order git reports them."""
    output = _run_git_command(["diff", "--staged", "--name-only"], cwd=cwd)
    return [line.strip() for line in output.splitlines() if line.strip()]


def commit(cwd: PathLike, message: str) -> str:
    """Commit the index with the given message.

    Returns:
        git's summary output for the new commit.
    """
    return _run_git_command(["commit", "-m", message], cwd=cwd)


def push(cwd: PathLike) -> None:
    """Push the current branch to its upstream."""
    _run_git_command(["push"], cwd=cwd)
