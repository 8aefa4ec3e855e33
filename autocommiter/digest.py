"""Size-bounded JSON digest of staged changes.

The digest is what the inference prompt sees of the working tree, so it has
to fit a fixed character budget no matter how many files are staged:

    {"files":[{"f":"src/app.py","c":"12+/3-"},{"f":"README.md","c":"1+/0-"}]}

It is degraded progressively. Change tokens are first shortened through a
fixed series of verbosity tiers, and within each tier entries are dropped
from the tail. Earlier entries are therefore treated as more important, and
callers express priority through input order.
"""

import json
from typing import Callable, Sequence

from autocommiter.config import DEFAULT_DIGEST_BUDGET
from autocommiter.git.analyzer import FileChange


_PREFIX = '{"files":['
_SUFFIX = "]}"

FALLBACK_CHANGE = "mod"

# Most to least detailed
VERBOSITY_TIERS: tuple[Callable[[str], str], ...] = (
    lambda c: c,
    lambda c: c[:12],
    lambda c: c[:6],
    lambda c: c[:3],
    lambda c: c[:1],
)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
}


def escape_json_string(value: str) -> str:
    """Escape a string for embedding between JSON double quotes.

    Backslash, double quote, newline and carriage return get their short
    escapes; any other control character becomes a \\u00XX escape.
    """
    out = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch < " ":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _entry(file: str, change: str) -> str:
    return f'{{"f":"{escape_json_string(file)}","c":"{escape_json_string(change)}"}}'


def _fitting_count(entries: list[str], max_len: int) -> int:
    """Largest number of leading entries whose serialization fits max_len."""
    length = len(_PREFIX) + len(_SUFFIX)
    keep = 0
    for i, entry in enumerate(entries):
        length += len(entry) + (1 if i else 0)
        if length > max_len:
            break
        keep = i + 1
    return keep


def compress_to_json(file_changes: Sequence[FileChange], max_len: int = DEFAULT_DIGEST_BUDGET) -> str:
    """Serialize file changes into a JSON digest no longer than max_len.

    Args:
        file_changes: Staged file changes, most important first.
        max_len: Character budget for the returned string.

    Returns:
        A JSON string. It holds at least one entry when file_changes is
        non-empty. If not even a single one-character entry fits, the
        basename of the first file with change "mod" is returned without
        checking it against the budget.
    """
    if not file_changes:
        return _PREFIX + _SUFFIX

    for tier in VERBOSITY_TIERS:
        entries = [_entry(fc.file, tier(fc.change)) for fc in file_changes]
        keep = _fitting_count(entries, max_len)
        if keep:
            return _PREFIX + ",".join(entries[:keep]) + _SUFFIX

    first = file_changes[0].file
    name = first.split("/")[-1] or first
    return json.dumps(
        {"files": [{"f": name, "c": FALLBACK_CHANGE}]},
        separators=(",", ":"),
        ensure_ascii=False,
    )
