"""Merge CLI tokens and environment variables into a partial profile.

Token grammar:
    --key=value, -k=value     set key to value
    --key value, -k value     set key to value (value must not start with "-")
    --key, -k                 boolean flag

Precedence:
    axis values: <AXIS>_VALUE env var > CLI flags (id, aliases, initials)
    language:    --fr/--en flag > GIAC_LANG env var > "fr"

The two directions differ on purpose and are covered by tests.
"""

import logging
import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..core.models.profile import PartialProfile
from ..core.models.spec import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Axis,
    AxisId,
    Language,
    Spec,
)
from ..core.resolution import get_axes_in_priority, resolve_level


logger = logging.getLogger(__name__)

LANG_ENV_VAR = "GIAC_LANG"

# Legacy and localized flag names, mapped to the axis id they select.
AXIS_ALIASES: dict[str, str] = {
    "initiative": "telisme",
    "challenge": "confrontation",
    "densité": "density",
    "énergie": "energy",
    "registre": "register",
}

Flags = dict[str, str | bool]


@dataclass
class ParsedArgs:
    """Result of merging CLI tokens and environment for one invocation."""

    profile: PartialProfile = field(default_factory=dict)
    lang: Language = DEFAULT_LANGUAGE


def parse_flags(tokens: Sequence[str]) -> Flags:
    """Parse flag tokens into a key -> value mapping.

    Non-flag tokens that are not consumed as a flag value are ignored. When a
    key repeats, the last occurrence wins.

    Examples:
        ["--telisme=5"]        -> {"telisme": "5"}
        ["-t", "5", "--en"]    -> {"t": "5", "en": True}
        ["--telisme", "-"]     -> {"telisme": True}   ("-" is reprocessed)
    """
    flags: Flags = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith("-") or token == "-":
            i += 1
            continue

        body = token[2:] if token.startswith("--") else token[1:]
        if "=" in body:
            key, _, value = body.partition("=")
            if key:
                flags[key] = value
            i += 1
            continue

        if not body:
            i += 1
            continue

        if i + 1 < len(tokens) and not tokens[i + 1].startswith("-"):
            flags[body] = tokens[i + 1]
            i += 2
        else:
            flags[body] = True
            i += 1
    return flags


def env_var_for_axis(axis: AxisId | str) -> str:
    """Environment variable carrying a value for ``axis`` (e.g. TELISME_VALUE)."""
    return re.sub(r"[^A-Z0-9]", "_", axis.upper()) + "_VALUE"


def flag_keys_for_axis(axis: Axis) -> list[str]:
    """Lowercased flag keys that select ``axis``, in the order they are consulted.

    The axis id first, then aliases from AXIS_ALIASES, then each initial.
    """
    keys = [axis.id.lower()]
    keys.extend(alias for alias, target in AXIS_ALIASES.items() if target == axis.id)
    keys.extend(initial.lower() for initial in axis.initials)
    return list(dict.fromkeys(keys))


def _is_set(value: str | bool | None) -> bool:
    return value is True or value == "true"


def resolve_language(flags: Flags, environ: Mapping[str, str] | None = None) -> Language:
    """Pick the output language: CLI flag > GIAC_LANG > default.

    If both --fr and --en are given, --en wins.
    """
    env = os.environ if environ is None else environ
    lang: Language = DEFAULT_LANGUAGE

    env_lang = env.get(LANG_ENV_VAR)
    if env_lang in SUPPORTED_LANGUAGES:
        lang = env_lang
    elif env_lang is not None:
        logger.debug("Ignoring unsupported %s=%r", LANG_ENV_VAR, env_lang)

    if _is_set(flags.get("fr")):
        lang = "fr"
    if _is_set(flags.get("en")):
        lang = "en"
    return lang


def parse_args(
    spec: Spec, tokens: Sequence[str], environ: Mapping[str, str] | None = None
) -> ParsedArgs:
    """Merge CLI tokens and environment variables into a ParsedArgs.

    For each axis (by priority), a resolvable <AXIS>_VALUE environment
    variable wins and the CLI flags for that axis are not consulted.
    Otherwise the first flag key (see flag_keys_for_axis) whose value
    resolves to a level of the axis is used. Values that do not resolve are
    ignored.
    """
    env = os.environ if environ is None else environ
    flags = parse_flags(tokens)
    # Axis keys match case-insensitively.
    axis_flags = {key.lower(): value for key, value in flags.items()}
    profile: PartialProfile = {}

    for axis in get_axes_in_priority(spec):
        env_name = env_var_for_axis(axis.id)
        env_value = env.get(env_name)
        if env_value is not None:
            level = resolve_level(axis, env_value)
            if level is not None:
                logger.debug("Axis '%s' = %r from %s", axis.id, level, env_name)
                profile[axis.id] = level
                continue
            logger.debug("Ignoring %s=%r: not a level of '%s'", env_name, env_value, axis.id)

        for key in flag_keys_for_axis(axis):
            value = axis_flags.get(key)
            if value is None:
                continue
            level = resolve_level(axis, str(value))
            if level is not None:
                logger.debug("Axis '%s' = %r from --%s", axis.id, level, key)
                profile[axis.id] = level
                break
            logger.debug("Ignoring --%s=%r: not a level of '%s'", key, value, axis.id)

    return ParsedArgs(profile=profile, lang=resolve_language(flags, env))
