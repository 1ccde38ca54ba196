"""Spec command: display the specification or a single axis."""

import typer
from rich.markup import escape

from ...core.models.spec import Axis, Language, Spec
from ...core.resolution import get_axes_in_priority, resolve_axis
from ...prompt.builder import flatten_text
from ..app import app, console, get_json_mode, get_spec_path
from ..args import resolve_language
from ..messages import get_messages
from ..utils import ExitCode, Output, load_spec_or_exit


def _show_spec(spec: Spec, lang: Language, out: Output) -> None:
    msg = get_messages(lang)
    out.header(msg.title_specification)
    out.plain(spec.localized("description", lang))
    out.blank()

    rows = [
        [
            str(axis.priority),
            axis.id,
            axis.localized("name", lang),
            ", ".join(axis.initials),
            str(len(axis.levels)),
        ]
        for axis in get_axes_in_priority(spec)
    ]
    out.table(
        msg.label_axis,
        [
            msg.label_priority,
            "ID",
            msg.label_name,
            msg.label_initials,
            msg.label_levels,
        ],
        rows,
        data_key="axes",
    )
    out.set_data("description", spec.localized("description", lang))

    if not out.json_mode:
        for axis in get_axes_in_priority(spec):
            out.blank()
            out.text(f"[bold]{escape(axis.localized('name', lang))}[/bold]")
            description = escape(axis.localized("description", lang))
            out.text(f"[dim]{msg.label_description}: {description}[/dim]")


def _show_axis(axis: Axis, lang: Language, out: Output) -> None:
    msg = get_messages(lang)
    out.header(axis.localized("name", lang))
    initials = escape(", ".join(axis.initials))
    description = escape(axis.localized("description", lang))
    out.text(f"[dim]{msg.label_initials}: {initials}[/dim]")
    out.text(f"[dim]{msg.label_description}: {description}[/dim]")
    out.blank()

    rows = [
        [
            str(definition.level),
            definition.localized("name", lang),
            flatten_text(definition.localized("prompt", lang)),
        ]
        for definition in axis.levels
    ]
    out.table(
        msg.label_levels,
        [msg.label_level, msg.label_name, "Prompt"],
        rows,
        data_key="levels",
    )
    out.set_data("axis", axis.id)
    out.set_data("name", axis.localized("name", lang))
    out.set_data("initials", list(axis.initials))


@app.command("spec")
@app.command("show", hidden=True)
def spec_command(
    axis: str | None = typer.Argument(
        None, help="Axis to show (id, initial, or FR/EN name)"
    ),
    axis_option: str | None = typer.Option(
        None, "--axis", "-a", help="Axis to show (same as the positional argument)"
    ),
    fr: bool = typer.Option(False, "--fr", help="French output"),
    en: bool = typer.Option(False, "--en", help="English output"),
):
    """
    Show the specification, or the levels of one axis.

    Examples:
        giac spec
        giac spec telisme --en
        giac spec --axis Densité
    """
    out = Output(console=console, json_mode=get_json_mode())
    lang = resolve_language({"fr": fr, "en": en})
    msg = get_messages(lang)
    spec = load_spec_or_exit(get_spec_path(), out, msg.error_retrieving_spec)

    axis_input = axis_option or axis
    if axis_input:
        resolved = resolve_axis(spec, axis_input)
        if resolved is None:
            out.error(
                f"{msg.error_axis_not_found}: {escape(axis_input)}",
                suggestion=msg.help_axis_identifier,
                exit_code=ExitCode.AXIS_NOT_FOUND,
            )
            raise typer.Exit(out.finish())
        _show_axis(resolved, lang, out)
    else:
        _show_spec(spec, lang, out)

    raise typer.Exit(out.finish())
