"""Inspection commands: run the .gitignore check or print the change digest."""

from pathlib import Path

import typer

from autocommiter.config import DEFAULT_DIGEST_BUDGET
from autocommiter.digest import compress_to_json
from autocommiter.git import GitError, NoStagedChangesError, build_file_changes, get_repo_root
from autocommiter.ignore import (
    ensure_gitignore_safety,
    parse_ignore_lines,
    plan_gitignore_additions,
    read_gitignore,
)


def _explain_unchanged(repo_root: Path) -> None:
    """Fail if .gitignore was left alone because it could not be read or written."""
    try:
        existing = read_gitignore(repo_root)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Could not read .gitignore: {e}", err=True)
        raise typer.Exit(1)

    if plan_gitignore_additions(repo_root, parse_ignore_lines(existing)):
        typer.echo("Could not update .gitignore: it still lacks required patterns.", err=True)
        raise typer.Exit(1)


def protect_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List directories that could not be scanned",
    ),
) -> None:
    """Make sure .gitignore covers secrets and nested repositories."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    skipped: list[str] = []
    if ensure_gitignore_safety(repo_root, skipped=skipped):
        typer.echo("✓ Updated .gitignore to protect sensitive files and nested repos.")
    else:
        _explain_unchanged(repo_root)
        typer.echo(".gitignore already protects sensitive files and nested repos.")

    if verbose and skipped:
        typer.echo()
        typer.echo("Directories that could not be scanned:")
        for path in skipped:
            typer.echo(f"  - {path or '.'}")


def digest_command(
    max_chars: int = typer.Option(
        DEFAULT_DIGEST_BUDGET,
        "--max-chars",
        min=1,
        help="Character budget for the digest",
    ),
) -> None:
    """Print the change digest for what is currently staged."""
    try:
        repo_root = get_repo_root()
        file_changes = build_file_changes(repo_root)
        if not file_changes:
            raise NoStagedChangesError("No staged changes.")
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    digest = compress_to_json(file_changes, max_chars)
    typer.echo(digest)
    typer.echo(f"{len(file_changes)} staged file(s), {len(digest)}/{max_chars} chars", err=True)
