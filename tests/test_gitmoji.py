"""Tests for autocommiter.gitmoji module."""

import random

from autocommiter.gitmoji import (
    GITMOJIS,
    MAX_SCORE,
    calculate_fuzzy_score,
    find_best_gitmoji,
    get_gitmojified_message,
    get_random_gitmoji,
    prepend_gitmoji,
)


def _by_code(code):
    return next(g for g in GITMOJIS if g.code == code)


class TestFuzzyScore:
    """Tests for calculate_fuzzy_score function."""

    def test_keyword_hit(self):
        """Test the weight of a full keyword match."""
        # docs: 40 + 10, documentation: 10 for its "doc" prefix
        assert calculate_fuzzy_score("update docs", _by_code(":memo:")) == 60

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        memo = _by_code(":memo:")
        assert calculate_fuzzy_score("UPDATE DOCS", memo) == calculate_fuzzy_score("update docs", memo)

    def test_score_is_capped(self):
        """Test the upper bound."""
        assert calculate_fuzzy_score("fix bug issue error crash", _by_code(":bug:")) == MAX_SCORE

    def test_no_match(self):
        """Test a message unrelated to the gitmoji."""
        assert calculate_fuzzy_score("zzz", _by_code(":bug:")) == 0


class TestFindBestGitmoji:
    """Tests for find_best_gitmoji function."""

    def test_bug_fix(self):
        """Test that a fix maps to the bug gitmoji."""
        assert find_best_gitmoji("Fix crash in parser").code == ":bug:"

    def test_feature(self):
        """Test that a new feature maps to sparkles."""
        assert find_best_gitmoji("Add new login feature").code == ":sparkles:"

    def test_no_match(self):
        """Test that weak matches are rejected."""
        assert find_best_gitmoji("zzz qqq") is None

    def test_blank_message(self):
        """Test that blank messages never match."""
        assert find_best_gitmoji("") is None
        assert find_best_gitmoji("   ") is None


class TestGitmojifiedMessage:
    """Tests for message decoration."""

    def test_prepend(self):
        """Test the emoji prefix format."""
        assert prepend_gitmoji("Fix x", _by_code(":bug:")) == "🐛 Fix x"

    def test_best_match_prefix(self):
        """Test decoration with the best match."""
        assert get_gitmojified_message("Fix crash in parser") == "🐛 Fix crash in parser"

    def test_random_fallback(self):
        """Test that unmatched messages get a random gitmoji."""
        result = get_gitmojified_message("zzz qqq", rng=random.Random(7))

        emoji, _, rest = result.partition(" ")
        assert rest == "zzz qqq"
        assert emoji in {g.emoji for g in GITMOJIS}

    def test_random_gitmoji_uses_rng(self):
        """Test that a seeded generator gives a repeatable choice."""
        assert get_random_gitmoji(random.Random(3)) == get_random_gitmoji(random.Random(3))

    def test_codes_are_unique(self):
        """Test the integrity of the gitmoji list."""
        codes = [g.code for g in GITMOJIS]
        assert len(codes) == len(set(codes))
