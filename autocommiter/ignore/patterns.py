"""Approximate .gitignore pattern matching.

Only a subset of gitignore semantics is supported:

- exact path equality
- directory patterns ("build/") match the directory itself and anything
  below it
- "*" matches any run of characters (including "/") and "?" matches one
  character; everything else is literal

There is no "**", no character classes and no "!" negation. Patterns are
matched against whole repository-relative paths with forward slashes, not
against basenames. A leading backslash escapes the first character, so
"\\#notes/" names a directory called "#notes" rather than a comment.
"""

import re
from typing import Callable, Iterable


Matcher = Callable[[str], bool]


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into a regex source string anchored at both ends."""
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return "^" + "".join(parts) + "$"


_ESCAPED_LEADING = ("#", "!")


def _needs_escape(ch: str) -> bool:
    return ch in _ESCAPED_LEADING or ch.isspace()


def escape_pattern(path: str) -> str:
    """Make a literal path safe to write as an ignore line.

    Without the backslash a leading "#" reads as a comment and leading
    whitespace is trimmed on the next read. git would treat a leading "!"
    as a negation.
    """
    if path and _needs_escape(path[0]):
        return "\\" + path
    return path


def _unescape(pattern: str) -> str:
    if len(pattern) > 1 and pattern[0] == "\\" and _needs_escape(pattern[1]):
        return pattern[1:]
    return pattern


def _never(path: str) -> bool:
    return False


def _compile_glob(pattern: str) -> Matcher:
    try:
        regex = re.compile(glob_to_regex(pattern))
    except re.error:
        # Not reachable while glob_to_regex escapes every literal character
        return _never
    return lambda path: regex.fullmatch(path) is not None


def compile_pattern(pattern: str) -> Matcher:
    """Build a predicate that tells whether a path is matched by pattern.

    Args:
        pattern: One trimmed line of an ignore file.

    Returns:
        A callable taking a repository-relative, forward-slash path. A
        pattern that cannot be compiled yields a matcher that never matches.
    """
    pattern = _unescape(pattern)

    if pattern.endswith("/"):
        directory = pattern[:-1]

        def match_directory(path: str) -> bool:
            return path == pattern or path == directory or path.startswith(pattern)

        return match_directory

    glob = _compile_glob(pattern)

    def match(path: str) -> bool:
        return path == pattern or glob(path)

    return match


def pattern_matches(pattern: str, path: str) -> bool:
    """Return True if pattern matches path."""
    return compile_pattern(pattern)(path)


def parse_ignore_lines(text: str) -> list[str]:
    """Extract trimmed, non-empty, non-comment lines from ignore file text."""
    lines = []
    for raw in re.split(r"\r?\n", text):
        line = raw.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


def build_ignore_matcher(patterns: Iterable[str]) -> Matcher:
    """Combine patterns into a single "is this path ignored" predicate."""
    matchers = [compile_pattern(p) for p in patterns]

    def is_ignored_path(path: str) -> bool:
        return any(m(path) for m in matchers)

    return is_ignored_path


def is_ignored(path: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern matches path."""
    return build_ignore_matcher(patterns)(path)
