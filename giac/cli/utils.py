"""CLI utilities for dual-mode output (human-friendly + machine-readable).

Commands write through an Output handler so that both modes share one code
path:
- Human mode (default): Rich formatting with colors and tables
- Machine mode (--json): structured JSON printed once at the end

Example:
    out = Output(console=console, json_mode=get_json_mode())
    out.header("GIAC Specification")
    out.table("Axes", ["Priority", "Axis"], [["1", "telisme"]])
    raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.errors import SpecValidationError
from ..core.models.spec import Spec


class ExitCode:
    """Standardized exit codes for CLI commands.

        0 = Success
        1 = Validation error (spec could not be loaded or validated)
        2 = Axis not found
        10 = User cancelled
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    AXIS_NOT_FOUND = 2
    USER_CANCELLED = 10


class Output(BaseModel):
    """Dual-mode output handler for CLI commands.

    In human mode: Uses Rich for terminal output with colors and formatting.
    In JSON mode: Collects structured data and outputs JSON at the end.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        """Output a warning message."""
        if self.json_mode:
            warning_obj: dict[str, Any] = {"message": message}
            if suggestion:
                warning_obj["suggestion"] = suggestion
            self._data["warnings"].append(warning_obj)
        else:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {message}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def text(self, message: str) -> None:
        """Output Rich-formatted text (human mode only)."""
        if not self.json_mode:
            self.console.print(message)

    def plain(self, message: str) -> None:
        """Output text verbatim: no markup, highlighting or wrapping (human mode only)."""
        if not self.json_mode:
            self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def blank(self) -> None:
        """Output a blank line (human mode only)."""
        if not self.json_mode:
            self.console.print()

    def header(self, title: str) -> None:
        """Output a section header (human mode only)."""
        if not self.json_mode:
            self.console.print(f"[bold]=== {title} ===[/bold]")

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
        styles: list[str] | None = None,
    ) -> None:
        """Output a formatted table.

        Args:
            title: Table title
            columns: Column headers
            rows: Table rows (list of lists)
            data_key: Key to use in JSON output (defaults to snake_case of title)
            styles: Optional Rich styles for each column
        """
        key = data_key or title.lower().replace(" ", "_")

        if self.json_mode:
            self._data[key] = [dict(zip(columns, row)) for row in rows]
        else:
            table = Table(title=title, show_header=True, header_style="bold")
            for i, col in enumerate(columns):
                style = styles[i] if styles and i < len(styles) else None
                table.add_column(col, style=style)
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        """Set arbitrary data in JSON output."""
        self._data[key] = value

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        Returns the exit code that should be passed to typer.Exit.
        """
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str, ensure_ascii=False))

        return self._exit_code


def load_spec_or_exit(path: Path, out: Output, error_prefix: str) -> Spec:
    """Load the spec at ``path``, or report the failure and exit.

    Load/validation failure is the one error class that aborts a command.
    """
    try:
        return Spec.from_yaml(path)
    except SpecValidationError as e:
        out.error(
            f"{error_prefix}: {escape(str(e))}", exit_code=ExitCode.VALIDATION_ERROR
        )
        raise typer.Exit(out.finish())
