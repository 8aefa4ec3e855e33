"""CLI commands for global configuration management."""

from typing import Optional

import typer

from autocommiter import global_config
from autocommiter.config import API_KEY_ENV_VAR
from autocommiter.llm import fetch_available_models, get_cached_models, update_cached_models

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global autocommiter configuration in ~/.autocommiter/",
    add_completion=False,
)


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        settings = global_config.load_settings()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Current autocommiter configuration (~/.autocommiter/):")
    typer.echo()
    typer.echo(f"  Model: {settings.model}")
    typer.echo(f"  Gitmoji: {'enabled' if settings.gitmoji else 'disabled'}")
    if settings.api_key:
        typer.echo(f"  API Key ({API_KEY_ENV_VAR}): {_mask(settings.api_key)}")
    else:
        typer.echo(f"  API Key ({API_KEY_ENV_VAR}): not set")


@config_app.command("set-key")
def config_set_key() -> None:
    """Set or update the GitHub Models API key."""
    api_key = typer.prompt("Enter your GitHub Models API key", hide_input=True).strip()
    if not api_key:
        typer.echo("API key cannot be empty.", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_api_key(api_key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✓ API key saved")


@config_app.command("set-model")
def config_set_model(
    model: Optional[str] = typer.Argument(
        None,
        help="Model id (optional, will prompt if not provided)",
    ),
) -> None:
    """Select the model used to generate commit messages."""
    models = get_cached_models()

    if not model:
        typer.echo("Available models:")
        for i, m in enumerate(models, 1):
            label = f"{m.friendly_name} ({m.id})" if m.friendly_name and m.friendly_name != m.id else m.id
            typer.echo(f"  {i}. {label}")

        choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=1)
        if choice < 1 or choice > len(models):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)
        model = models[choice - 1].id
    elif model not in {m.id for m in models}:
        typer.echo(f"Warning: {model} is not in the list of known models")
        if not typer.confirm("Continue anyway?", default=False):
            raise typer.Exit(0)

    try:
        global_config.set_selected_model(model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Model set to: {model}")


@config_app.command("list-models")
def config_list_models(
    refresh: bool = typer.Option(
        False,
        "--refresh",
        "-r",
        help="Fetch the current model list from GitHub Models and cache it",
    ),
) -> None:
    """List known chat-completion models."""
    if refresh:
        api_key = global_config.get_api_key()
        if not api_key:
            typer.echo("No API key configured. Run 'autocommiter config set-key' first.", err=True)
            raise typer.Exit(1)
        models = fetch_available_models(api_key)
        update_cached_models(models)
    else:
        models = get_cached_models()

    selected = global_config.get_selected_model()
    typer.echo("Available models:")
    typer.echo()
    for m in models:
        marker = "*" if m.id == selected else "•"
        line = f"  {marker} {m.id}"
        if m.summary:
            line += f" - {m.summary}"
        typer.echo(line)


@config_app.command("gitmoji")
def config_gitmoji(
    state: str = typer.Argument(..., help="on or off"),
) -> None:
    """Enable or disable gitmoji prefixes."""
    value = state.lower()
    if value not in ("on", "off"):
        typer.echo(f"Invalid value: {state} (expected 'on' or 'off')", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_gitmoji_enabled(value == "on")
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Gitmoji {'enabled' if value == 'on' else 'disabled'}")
