"""Interactive profile completion.

Asks the user for a level on every axis the command line left unset. Invalid
answers are reported and the same axis is asked again until it resolves.
"""

from collections.abc import Callable

import typer
from rich.console import Console
from rich.markup import escape

from ..core.models.profile import PartialProfile, Profile, get_missing_axes
from ..core.models.spec import Axis, Language, Level, Spec
from ..core.resolution import get_axis_by_id, get_axis_ids, get_level, resolve_level
from .messages import get_messages


AskFn = Callable[[str], str]


def _default_ask(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def validate_level_input(axis: Axis, raw: str) -> Level | None:
    """Resolve a typed answer to a level of ``axis`` (None if blank or unknown)."""
    trimmed = raw.strip()
    if not trimmed:
        return None
    return resolve_level(axis, trimmed)


def format_level(axis: Axis, level: Level) -> str:
    """Display a level with both names, e.g. ``5 (Expliquer / Explain)``."""
    definition = get_level(axis, level)
    if definition is None:
        return str(level)
    return f"{level} ({definition.name_fr} / {definition.name_en})"


def format_available_levels(axis: Axis, lang: Language) -> str:
    """One ``  <level>: <name>`` line per level of the axis."""
    return "\n".join(
        f"  {definition.level}: {definition.localized('name', lang)}"
        for definition in axis.levels
    )


def prompt_for_axis(
    axis: Axis,
    lang: Language,
    ask: AskFn,
    console: Console,
) -> Level | None:
    """Show the axis and its levels, then ask once. None if the answer is invalid."""
    msg = get_messages(lang)
    axis_name = axis.localized("name", lang)

    console.print()
    console.print(f"[bold]{escape(axis_name)}[/bold]")
    description = axis.localized("description", lang)
    if description:
        console.print(f"[dim]{escape(description)}[/dim]")
    console.print(msg.prompt_available_levels)
    console.print(format_available_levels(axis, lang), markup=False, highlight=False)

    answer = ask(f"{msg.prompt_choose_level} {axis_name}")
    level = validate_level_input(axis, answer)
    if level is None:
        console.print(f"[red]✗[/red] {msg.error_invalid_level_input}: {escape(repr(answer))}")
    return level


def build_profile_interactively(
    spec: Spec,
    partial: PartialProfile,
    lang: Language,
    *,
    ask: AskFn | None = None,
    console: Console | None = None,
) -> Profile:
    """Complete ``partial`` by asking for every missing axis, by priority.

    Args:
        spec: Governing specification
        partial: Values already chosen (not modified)
        lang: Language for labels and level names
        ask: Reads one answer given a prompt text (defaults to typer.prompt)
        console: Rich console used for display

    Returns:
        A profile with a value for every axis of the spec
    """
    ask = ask or _default_ask
    console = console or Console()
    profile: Profile = dict(partial)

    for axis_ref in get_missing_axes(partial, get_axis_ids(spec)):
        axis = get_axis_by_id(spec, axis_ref)
        if axis is None or not axis.levels:
            # Nothing can be answered for an axis without levels.
            continue
        level: Level | None = None
        while level is None:
            level = prompt_for_axis(axis, lang, ask, console)
        profile[axis.id] = level

    return profile
