"""Prompt construction and response cleanup for commit messages."""

SYSTEM_PROMPT = "You are a helpful assistant."

USER_PROMPT_TEMPLATE = """Write a git commit message for the staged changes summarized below.

Rules:
- Output ONLY the commit message. No markdown fences. No quotes. No commentary.
- First line in imperative mood (e.g., "Add feature" not "Added feature"), <=72 chars.
- Optionally follow with a blank line and up to 5 short "- " bullet lines.
- Only describe changes listed in the summary. Do not invent other changes.

The summary is JSON: "files" lists staged files in priority order, "f" is the
path and "c" describes the change, either as "<added>+/<removed>-" line
counts or as a short diff fragment. Values may be truncated and trailing
files may be omitted to fit a size limit.

CHANGES:
{digest}"""


def build_commit_prompt(digest: str) -> str:
    """Build the user prompt around a compressed change digest."""
    return USER_PROMPT_TEMPLATE.format(digest=digest)


def clean_commit_message(raw_response: str) -> str:
    """Strip markdown fences, wrapping quotes and surrounding whitespace.

    Args:
        raw_response: Text returned by the model.

    Returns:
        The commit message, possibly empty.
    """
    cleaned = raw_response.strip()

    # Remove markdown code fences if the model included them despite instructions
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()

    for quote in ('"', "'", "`"):
        if len(cleaned) >= 2 and cleaned.startswith(quote) and cleaned.endswith(quote):
            cleaned = cleaned[1:-1].strip()
            break

    return cleaned
