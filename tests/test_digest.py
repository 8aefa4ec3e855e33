"""Tests for autocommiter.digest module."""

import json

from autocommiter.digest import compress_to_json, escape_json_string
from autocommiter.git import FileChange


def _full(changes):
    entries = ",".join(
        f'{{"f":"{escape_json_string(fc.file)}","c":"{escape_json_string(fc.change)}"}}'
        for fc in changes
    )
    return '{"files":[' + entries + "]}"


class TestEscapeJsonString:
    """Tests for escape_json_string function."""

    def test_plain_text_unchanged(self):
        """Test that ordinary characters pass through."""
        assert escape_json_string("src/app.py") == "src/app.py"

    def test_escapes_quote_and_backslash(self):
        """Test escaping of double quotes and backslashes."""
        assert escape_json_string('a"b\\c') == 'a\\"b\\\\c'

    def test_escapes_newlines(self):
        """Test escaping of newline and carriage return."""
        assert escape_json_string("a\nb\rc") == "a\\nb\\rc"

    def test_escapes_other_control_characters(self):
        """Test that tabs and other control characters become unicode escapes."""
        assert escape_json_string("a\tb\x01") == "a\\u0009b\\u0001"

    def test_non_ascii_kept(self):
        """Test that non-ASCII text is not escaped."""
        assert escape_json_string("café/ß.txt") == "café/ß.txt"


class TestCompressToJson:
    """Tests for compress_to_json function."""

    def test_empty_input(self):
        """Test that an empty list gives an empty files array."""
        assert compress_to_json([], 400) == '{"files":[]}'

    def test_full_fidelity_when_it_fits(self, sample_file_changes):
        """Test that nothing is degraded when the full digest fits."""
        result = compress_to_json(sample_file_changes, 400)

        assert result == _full(sample_file_changes)
        parsed = json.loads(result)
        assert parsed["files"][0] == {"f": "src/app.py", "c": "12+/3-"}
        assert len(parsed["files"]) == 4

    def test_exact_budget_is_accepted(self, sample_file_changes):
        """Test that a digest exactly as long as the budget is returned."""
        full = _full(sample_file_changes)

        assert compress_to_json(sample_file_changes, len(full)) == full
        assert compress_to_json(sample_file_changes, len(full) - 1) != full

    def test_default_budget_is_400(self):
        """Test that the default budget is 400 characters."""
        changes = [FileChange(file=f"module_{i:03d}.py", change="100+/20-") for i in range(40)]

        result = compress_to_json(changes)

        assert len(result) <= 400

    def test_drops_tail_entries_first(self):
        """Test that trailing files are dropped before tokens are shortened."""
        changes = [FileChange(file=f"file_{i:02d}.py", change="10+/2-") for i in range(50)]

        result = compress_to_json(changes, 200)

        parsed = json.loads(result)["files"]
        assert [e["f"] for e in parsed] == [f"file_{i:02d}.py" for i in range(5)]
        assert all(e["c"] == "10+/2-" for e in parsed)
        assert len(result) <= 200

    def test_shortens_change_tokens(self):
        """Test that verbosity tiers shorten the change token."""
        changes = [FileChange(file="a.py", change="x" * 100)]

        result = compress_to_json(changes, 40)

        assert result == '{"files":[{"f":"a.py","c":"xxxxxx"}]}'

    def test_twelve_character_tier(self):
        """Test that the 12-character tier is tried before shorter ones."""
        changes = [FileChange(file="a.py", change="abcdefghijklmnop")]

        result = compress_to_json(changes, 43)

        assert json.loads(result)["files"][0]["c"] == "abcdefghijkl"

    def test_fallback_when_nothing_fits(self):
        """Test the minimal representation when even one entry is too long."""
        result = compress_to_json([FileChange(file="a.txt", change="12+/3-")], 10)

        assert result == '{"files":[{"f":"a.txt","c":"mod"}]}'

    def test_fallback_uses_basename_of_first_file(self):
        """Test that the fallback keeps only the first file's basename."""
        changes = [
            FileChange(file="very/deeply/nested/path/component.tsx", change="5+/5-"),
            FileChange(file="other.py", change="1+/0-"),
        ]

        result = compress_to_json(changes, 30)

        assert json.loads(result) == {"files": [{"f": "component.tsx", "c": "mod"}]}
        # Accepted edge case: the fallback is not re-checked against the budget
        assert len(result) > 30

    def test_fallback_with_trailing_slash(self):
        """Test that an empty basename falls back to the full path."""
        result = compress_to_json([FileChange(file="vendor/", change="1+/0-")], 5)

        assert json.loads(result) == {"files": [{"f": "vendor/", "c": "mod"}]}

    def test_escaped_values_round_trip(self):
        """Test that awkward characters survive as valid JSON."""
        changes = [FileChange(file='we"ird\\name\n.py', change="a\rb\tc")]

        parsed = json.loads(compress_to_json(changes, 400))

        assert parsed["files"][0] == {"f": 'we"ird\\name\n.py', "c": "a\rb\tc"}

    def test_escaping_counts_toward_budget(self):
        """Test that the budget is measured on the escaped text."""
        changes = [FileChange(file='"' * 10, change="1+/0-")]
        # Unescaped, the full entry would fit in 50 characters
        result = compress_to_json(changes, 50)

        assert len(result) == 50
        assert json.loads(result)["files"][0] == {"f": '"' * 10, "c": "1+/"}

    def test_budget_respected_and_order_kept(self, sample_file_changes):
        """Test budget, non-emptiness and ordering over a range of budgets."""
        names = [fc.file for fc in sample_file_changes]

        for budget in range(38, 260):
            result = compress_to_json(sample_file_changes, budget)
            parsed = json.loads(result)["files"]

            assert len(result) <= budget
            assert len(parsed) >= 1
            assert [e["f"] for e in parsed] == names[: len(parsed)]

    def test_does_not_mutate_input(self, sample_file_changes):
        """Test that the input list is left untouched."""
        before = list(sample_file_changes)

        compress_to_json(sample_file_changes, 50)

        assert sample_file_changes == before
