"""Tests for autocommiter.ignore.walker and autocommiter.ignore.submodules."""

import os

from autocommiter.ignore.patterns import build_ignore_matcher
from autocommiter.ignore.submodules import parse_submodule_paths, read_submodule_paths
from autocommiter.ignore.walker import find_nested_repo_parents


def _nothing_ignored(path):
    return False


class TestFindNestedRepoParents:
    """Tests for find_nested_repo_parents function."""

    def test_root_repository_not_reported(self, mock_repo_root):
        """Test that the root's own .git is never reported."""
        assert find_nested_repo_parents(mock_repo_root, _nothing_ignored) == []

    def test_finds_nested_repository(self, mock_repo_root, make_tree):
        """Test discovery of a nested repository."""
        make_tree(mock_repo_root, dirs=["libs/foo/.git", "src"])

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored)

        assert result == ["libs/foo"]

    def test_results_are_sorted_and_unique(self, mock_repo_root, make_tree):
        """Test deterministic walk order."""
        make_tree(mock_repo_root, dirs=["b/.git", "a/.git", "c/d/.git"])

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored)

        assert result == ["a", "b", "c/d"]

    def test_continues_below_nested_repository(self, mock_repo_root, make_tree):
        """Test that siblings of a nested .git are still walked."""
        make_tree(mock_repo_root, dirs=["outer/.git", "outer/inner/.git"])

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored)

        assert result == ["outer", "outer/inner"]

    def test_does_not_enter_git_directory(self, mock_repo_root, make_tree):
        """Test that .git internals are never walked."""
        make_tree(mock_repo_root, dirs=["pkg/.git/modules/sub/.git", ".git/modules/x/.git"])

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored)

        assert result == ["pkg"]

    def test_skips_ignored_directories(self, mock_repo_root, make_tree):
        """Test that ignored subtrees are not descended into."""
        make_tree(mock_repo_root, dirs=["build/cache/.git", "keep/.git"])

        result = find_nested_repo_parents(mock_repo_root, build_ignore_matcher(["build/"]))

        assert result == ["keep"]

    def test_git_marker_detected_even_if_ignored(self, mock_repo_root, make_tree):
        """Test that a .git directory counts even when a pattern matches it."""
        make_tree(mock_repo_root, dirs=["tool/.git"])

        result = find_nested_repo_parents(mock_repo_root, build_ignore_matcher(["*.git"]))

        assert result == ["tool"]

    def test_git_file_is_not_a_boundary(self, mock_repo_root, make_tree):
        """Test that only .git directories are boundaries."""
        make_tree(mock_repo_root, files={"worktree/.git": "gitdir: ../.git/worktrees/w\n"})

        assert find_nested_repo_parents(mock_repo_root, _nothing_ignored) == []

    def test_does_not_follow_symlinks(self, mock_repo_root, make_tree):
        """Test that symlinked directories are not walked."""
        make_tree(mock_repo_root, dirs=["real/.git"])
        os.symlink(mock_repo_root / "real", mock_repo_root / "link", target_is_directory=True)

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored)

        assert result == ["real"]

    def test_unlistable_directory_is_skipped(self, mock_repo_root, make_tree, mocker):
        """Test that listing errors are swallowed and reported on request."""
        make_tree(mock_repo_root, dirs=["locked/sub/.git", "open/repo/.git"])
        real_scandir = os.scandir

        def flaky_scandir(path):
            if str(path).endswith("locked"):
                raise PermissionError("denied")
            return real_scandir(path)

        mocker.patch("autocommiter.ignore.walker.os.scandir", side_effect=flaky_scandir)
        skipped = []

        result = find_nested_repo_parents(mock_repo_root, _nothing_ignored, skipped)

        assert result == ["open/repo"]
        assert skipped == ["locked"]

    def test_unlistable_root(self, temp_dir):
        """Test that a missing root yields an empty result."""
        skipped = []

        result = find_nested_repo_parents(temp_dir / "missing", _nothing_ignored, skipped)

        assert result == []
        assert skipped == [""]


class TestSubmodulePaths:
    """Tests for the .gitmodules reader."""

    def test_missing_file(self, temp_dir):
        """Test that a missing registry gives an empty set."""
        assert read_submodule_paths(temp_dir) == set()

    def test_reads_paths(self, temp_dir):
        """Test extraction of declared paths."""
        (temp_dir / ".gitmodules").write_text(
            '[submodule "foo"]\n'
            "\tpath = libs/foo\n"
            "\turl = https://example.com/foo.git\n"
            '[submodule "bar"]\n'
            "    path=vendor/bar  \n"
            "    url = https://example.com/bar.git\n",
            encoding="utf-8",
        )

        assert read_submodule_paths(temp_dir) == {"libs/foo", "vendor/bar"}

    def test_key_is_case_insensitive(self):
        """Test that PATH and Path keys are recognized."""
        assert parse_submodule_paths("PATH = a\nPath = b\n") == {"a", "b"}

    def test_normalizes_backslashes(self):
        """Test that Windows separators become forward slashes."""
        assert parse_submodule_paths("path = vendor\\lib\\x\n") == {"vendor/lib/x"}

    def test_ignores_other_keys(self):
        """Test that only path keys are consulted."""
        assert parse_submodule_paths("url = https://host/path = nope\nbranch = main\n") == set()

    def test_undecodable_file(self, temp_dir):
        """Test that an unreadable registry gives an empty set."""
        (temp_dir / ".gitmodules").write_bytes(b"path = \xff\xfe\n")

        assert read_submodule_paths(temp_dir) == set()
