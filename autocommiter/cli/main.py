"""Default CLI command: generate a commit message and commit."""

from typing import Optional

import typer

from autocommiter.config import DEFAULT_DIGEST_BUDGET
from autocommiter.digest import compress_to_json
from autocommiter.git import (
    GitError,
    NoStagedChangesError,
    build_file_changes,
    commit,
    get_repo_root,
    push,
    stage_all_changes,
)
from autocommiter.gitmoji import get_gitmojified_message
from autocommiter.global_config import GlobalConfigError, load_settings
from autocommiter.ignore import ensure_gitignore_safety
from autocommiter.llm import LLMError, MissingAPIKeyError, generate_commit_message


def _show_message(message: str) -> None:
    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)
    typer.echo("")


def main_command(
    ctx: typer.Context,
    push_after: bool = typer.Option(
        False,
        "--push",
        "-p",
        help="Push to the upstream branch after committing",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Commit without asking for confirmation",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the generated message without committing",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override the configured model for this run",
    ),
    gitmoji: Optional[bool] = typer.Option(
        None,
        "--gitmoji/--no-gitmoji",
        help="Override the configured gitmoji prefix setting",
    ),
    max_digest_chars: int = typer.Option(
        DEFAULT_DIGEST_BUDGET,
        "--max-digest-chars",
        min=1,
        help="Character budget for the change summary sent to the model",
    ),
) -> None:
    """Stage all changes, generate a commit message and commit."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_settings()
        overrides = {}
        if model:
            overrides["model"] = model
        if gitmoji is not None:
            overrides["gitmoji"] = gitmoji
        if overrides:
            settings = settings.model_copy(update=overrides)

        # Step 1: Protect secrets and nested repos before anything is staged
        repo_root = get_repo_root()
        if ensure_gitignore_safety(repo_root):
            typer.echo("✓ Updated .gitignore to protect sensitive files and nested repos.", err=True)

        # Step 2: Stage and summarize
        typer.echo("Staging changes...", err=True)
        stage_all_changes(repo_root)
        file_changes = build_file_changes(repo_root)
        if not file_changes:
            raise NoStagedChangesError("nothing to commit (working tree clean)")

        digest = compress_to_json(file_changes, max_digest_chars)

        # Step 3: Generate and decorate
        typer.echo(f"Generating commit message with {settings.model}...", err=True)
        message = generate_commit_message(settings, digest)
        if settings.gitmoji:
            message = get_gitmojified_message(message)

        _show_message(message)

        if dry_run:
            typer.echo("Dry run: nothing committed.", err=True)
            raise typer.Exit(0)

        if not yes:
            confirm = typer.prompt(
                "Commit with this message? [Y/n]",
                default="y",
                show_default=False,
            )
            if confirm.lower() not in ("y", "yes", ""):
                typer.echo("Commit cancelled.", err=True)
                raise typer.Exit(0)

        # Step 4: Commit (and push)
        output = commit(repo_root, message)
        typer.echo("Commit successful!", err=True)
        if output:
            typer.echo(output)

        if push_after:
            typer.echo("Pushing...", err=True)
            push(repo_root)
            typer.echo("Push successful!", err=True)

    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
