"""Git helpers for autocommiter.

- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root, stage_all_changes, get_staged_files, commit, push
- analyzer: FileChange, analyze_file_change, build_file_changes
"""

from autocommiter.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

from autocommiter.git.runner import (
    _run_git_command,
    commit,
    get_repo_root,
    get_staged_files,
    push,
    stage_all_changes,
)

from autocommiter.git.analyzer import (
    FileChange,
    analyze_file_change,
    build_file_changes,
)


__all__ = [
    "GitError",
    "NoStagedChangesError",
    "_run_git_command",
    "commit",
    "get_repo_root",
    "get_staged_files",
    "push",
    "stage_all_changes",
    "FileChange",
    "analyze_file_change",
    "build_file_changes",
]
