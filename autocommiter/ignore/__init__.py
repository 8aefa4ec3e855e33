"""Ignore-file safety for autocommiter.

- patterns: approximate glob matcher for .gitignore lines
- walker: nested repository discovery
- submodules: .gitmodules reader
- resolver: ensure_gitignore_safety reconciliation pass
"""

from autocommiter.ignore.patterns import (
    build_ignore_matcher,
    compile_pattern,
    escape_pattern,
    glob_to_regex,
    is_ignored,
    parse_ignore_lines,
    pattern_matches,
)
from autocommiter.ignore.walker import find_nested_repo_parents
from autocommiter.ignore.submodules import parse_submodule_paths, read_submodule_paths
from autocommiter.ignore.resolver import (
    ensure_gitignore_safety,
    is_pattern_covered,
    plan_gitignore_additions,
    read_gitignore,
)


__all__ = [
    "build_ignore_matcher",
    "compile_pattern",
    "escape_pattern",
    "glob_to_regex",
    "is_ignored",
    "parse_ignore_lines",
    "pattern_matches",
    "find_nested_repo_parents",
    "parse_submodule_paths",
    "read_submodule_paths",
    "ensure_gitignore_safety",
    "is_pattern_covered",
    "plan_gitignore_additions",
    "read_gitignore",
]
