"""Build command: generate a prompt from axis flags, env vars and prompts."""

import logging

import typer

from ...config import get_config
from ...core.models.profile import create_profile, get_missing_axes
from ...core.resolution import get_axis_ids, resolve_profile_values
from ...prompt.builder import build_prompt, format_profile_summary
from ..app import PASSTHROUGH_CONTEXT, app, console, get_json_mode, get_spec_path
from ..args import parse_args, parse_flags, resolve_language
from ..interactive import build_profile_interactively
from ..messages import get_messages
from ..utils import ExitCode, Output, load_spec_or_exit


logger = logging.getLogger(__name__)


def run_build(
    tokens: list[str],
    *,
    interactive: bool | None = None,
    show_profile: bool = False,
) -> int:
    """Run the build flow and return the exit code.

    Args:
        tokens: Raw axis/language tokens (e.g. ["-t", "5", "--en"])
        interactive: Ask for missing axes; None means use the config setting
        show_profile: Print the selected profile before the prompt
    """
    json_mode = get_json_mode()
    out = Output(console=console, json_mode=json_mode)

    lang = resolve_language(parse_flags(tokens))
    msg = get_messages(lang)
    spec = load_spec_or_exit(get_spec_path(), out, msg.error_retrieving_spec)

    parsed = parse_args(spec, tokens)
    config = get_config()
    if interactive is None:
        interactive = config.cli.interactive

    missing = get_missing_axes(parsed.profile, get_axis_ids(spec))
    if missing and interactive and not json_mode:
        out.warning(msg.info_interactive_mode_activated)
        try:
            profile = build_profile_interactively(
                spec, parsed.profile, parsed.lang, console=console
            )
        except typer.Abort:
            out.blank()
            out.error(msg.info_cancelled, exit_code=ExitCode.USER_CANCELLED)
            return out.finish()
    else:
        if missing:
            logger.info("Filling %d missing axes from defaults", len(missing))
        defaults = resolve_profile_values(spec, config.defaults.levels)
        profile = create_profile(parsed.profile, defaults)

    prompt = build_prompt(spec, profile, parsed.lang)

    if show_profile:
        out.blank()
        out.header(msg.title_selected_profile)
        out.plain(format_profile_summary(spec, profile, parsed.lang))
        out.blank()
        out.header(msg.title_generated_prompt)

    out.plain(prompt)
    out.set_data("lang", parsed.lang)
    out.set_data("profile", profile)
    out.set_data("prompt", prompt)
    return out.finish()


@app.command("build", context_settings=PASSTHROUGH_CONTEXT)
@app.command("prompt", context_settings=PASSTHROUGH_CONTEXT, hidden=True)
def build_command(
    ctx: typer.Context,
    interactive: bool | None = typer.Option(
        None,
        "--interactive/--no-interactive",
        help="Ask for axes not given on the command line (default: config cli.interactive)",
    ),
    show_profile: bool = typer.Option(
        False, "--show-profile", help="Print the selected profile before the prompt"
    ),
):
    """
    Generate a prompt from a profile of axis levels.

    Axis values are given with the axis id, an initial or an alias, as a
    number or a level name (FR or EN). A <AXIS>_VALUE environment variable
    overrides the flags for that axis. Language: --fr (default) or --en, or
    GIAC_LANG.

    Examples:
        giac build --telisme=5 -c 3 --density "Niveau 2" --en
        TELISME_VALUE=8 giac build --no-interactive
    """
    raise typer.Exit(
        run_build(list(ctx.args), interactive=interactive, show_profile=show_profile)
    )
