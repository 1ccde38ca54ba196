"""Core CLI app definition and global state."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="giac",
    help="Build behavior prompts from a GIAC axis specification.",
    no_args_is_help=False,
)

console = Console()
# Logs go to stderr; stdout carries command output only.
err_console = Console(stderr=True)

# Extra tokens (axis flags, --fr/--en) are parsed by giac.cli.args, not by click.
PASSTHROUGH_CONTEXT = {"allow_extra_args": True, "ignore_unknown_options": True}

# Global state (set by callback)
_json_mode = False
_spec_path: Path | None = None


def get_json_mode() -> bool:
    """Get current JSON mode state."""
    return _json_mode


def get_spec_path() -> Path:
    """Spec path from --spec, else from config (GIAC_SPEC_PATH / config file)."""
    if _spec_path is not None:
        return _spec_path
    from ..config import get_config

    return Path(get_config().spec.path)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("giac").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"giac {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output machine-readable JSON instead of human-friendly text",
            is_eager=True,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    spec: Annotated[
        Path | None,
        typer.Option(
            "--spec",
            help="Spec file path (default: config spec.path, ./spec.yml)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info logs")
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug logs")] = False,
):
    """GIAC: tune an assistant's behavior along the axes of a spec.

    Running `giac` with no command builds a prompt, asking for every axis.
    Use --json for machine-readable output.
    """
    global _json_mode, _spec_path
    _json_mode = json_output
    _spec_path = spec
    setup_logging(verbose=verbose, debug=debug)

    if ctx.invoked_subcommand is None:
        from .commands.build import run_build

        raise typer.Exit(run_build([]))


# Import commands to register them with the app
from .commands import (  # noqa: E402, F401
    build,
    spec,
    config_cmd,
)
