"""Exceptions raised by the git helpers."""


class GitError(Exception):
    """A git invocation failed or git is unavailable."""

    pass


class NoStagedChangesError(GitError):
    """Raised when the index holds nothing to commit."""

    pass
