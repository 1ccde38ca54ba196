"""Config command for viewing and managing giac configuration."""

import typer
from rich.markup import escape

from ..app import app, console
from ...config import (
    get_config,
    get_config_file,
    parse_bool,
    reset_config,
)


VALID_KEYS = {
    "spec.path",
    "cli.interactive",
}

BOOL_FIELDS = {
    "interactive",
}

LEVEL_KEY_PREFIX = "defaults.levels."


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, unset, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. spec.path, cli.interactive, defaults.levels.telisme)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify giac configuration.

    Examples:
        giac config show
        giac config set spec.path ~/prompts/spec.yml
        giac config set cli.interactive false
        giac config set defaults.levels.telisme 5
        giac config unset defaults.levels.telisme
        giac config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] giac config set <key> <value>")
            _print_available_keys()
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "unset":
        if not key:
            console.print("[red]Usage:[/red] giac config unset <key>")
            raise typer.Exit(1)
        _unset_config(key)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {escape(action)}")
        console.print("Valid actions: show, set, unset, reset")
        raise typer.Exit(1)


def _print_available_keys() -> None:
    console.print()
    console.print("Available keys:")
    for k in sorted(VALID_KEYS):
        console.print(f"  {k}")
    console.print(f"  {LEVEL_KEY_PREFIX}<axis>")


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]GIAC Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Spec[/bold cyan]")
    console.print(f"  path        = {escape(config.spec.path)}")

    console.print()
    console.print("[bold cyan]CLI[/bold cyan]")
    console.print(f"  interactive = {config.cli.interactive}")

    console.print()
    console.print("[bold cyan]Default levels[/bold cyan] (used when not interactive)")
    if config.defaults.levels:
        for axis, level in config.defaults.levels.items():
            console.print(f"  {escape(axis)} = {escape(level)}")
    else:
        console.print("  [dim]none[/dim]")

    console.print()
    config_file = get_config_file()
    if config_file.exists():
        console.print(f"Config file: {config_file}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({config_file})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    config = get_config()

    if key.startswith(LEVEL_KEY_PREFIX):
        axis = key[len(LEVEL_KEY_PREFIX) :]
        if not axis:
            console.print(f"[red]Invalid key:[/red] {escape(key)}")
            raise typer.Exit(1)
        config.defaults.levels[axis] = value
    elif key in VALID_KEYS:
        zone, field_name = key.split(".", 1)
        target = config.spec if zone == "spec" else config.cli

        if field_name in BOOL_FIELDS:
            try:
                setattr(target, field_name, parse_bool(value))
            except ValueError:
                console.print(f"[red]Invalid boolean value:[/red] {escape(value)}")
                raise typer.Exit(1)
        else:
            setattr(target, field_name, value)
    else:
        console.print(f"[red]Unknown key:[/red] {escape(key)}")
        _print_available_keys()
        raise typer.Exit(1)

    config.save()
    reset_config()

    console.print(f"[green]✓[/green] Set {escape(key)} = {escape(value)}")
    console.print(f"  Saved to {get_config_file()}")


def _unset_config(key: str):
    """Remove a default level."""
    if not key.startswith(LEVEL_KEY_PREFIX):
        console.print(
            f"[red]Only {LEVEL_KEY_PREFIX}<axis> keys can be unset:[/red] {escape(key)}"
        )
        raise typer.Exit(1)

    config = get_config()
    axis = key[len(LEVEL_KEY_PREFIX) :]
    if config.defaults.levels.pop(axis, None) is None:
        console.print(f"No default level set for {escape(axis)}")
        return

    config.save()
    reset_config()
    console.print(f"[green]✓[/green] Unset {escape(key)}")


def _reset_config():
    """Reset config to defaults."""
    config_file = get_config_file()
    if config_file.exists():
        config_file.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {config_file}")
    else:
        console.print("Config already at defaults (no config file exists)")
