"""CLI entry point for autocommiter."""

import typer

from autocommiter.cli.config import config_app
from autocommiter.cli.main import main_command
from autocommiter.cli.protect import digest_command, protect_command

# Main application
app = typer.Typer(
    name="autocommiter",
    help="autocommiter: AI-generated commit messages with .gitignore safety checks",
    add_completion=False,
)

app.add_typer(config_app, name="config")

app.command("protect")(protect_command)
app.command("digest")(digest_command)

# Default behavior when no subcommand is given
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "digest_command",
    "main_command",
    "protect_command",
]
