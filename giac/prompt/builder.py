"""Prompt assembly.

Renders a spec + profile into the final instruction text. Pure computation,
no I/O: the same inputs always produce the same text.
"""

import logging
import re
from collections.abc import Mapping

from ..core.models.spec import UNSPECIFIED_LEVEL, AxisId, Language, Level, Spec
from ..core.resolution import get_axes_in_priority, get_level, max_level


logger = logging.getLogger(__name__)

INTRO_LINES: dict[Language, str] = {
    "fr": "Instructions relatives au comportement :",
    "en": "Behavior instructions:",
}

PROFILE_LABELS: dict[Language, str] = {
    "fr": "Profil:",
    "en": "Profile:",
}

_LINE_BREAK_RE = re.compile(r"\s*[\r\n]+\s*")


def flatten_text(text: str) -> str:
    """Collapse embedded line breaks (and the spaces around them) to one space."""
    return _LINE_BREAK_RE.sub(" ", text).strip()


def format_level_value(level: Level, maximum: int | None) -> str:
    """Render a level as ``<level>/<max>``, or the bare sentinel."""
    if level == UNSPECIFIED_LEVEL or maximum is None:
        return str(level)
    return f"{level}/{maximum}"


def build_prompt(spec: Spec, profile: Mapping[AxisId, Level], lang: Language) -> str:
    """Build the prompt text for ``profile`` in ``lang``.

    Lines, in order:
        1. the spec's global prompt fragment
        2. the localized behavior-instructions intro
        3. one line per axis, by ascending priority

    An axis with no profile entry falls back to its unspecified level when it
    defines one. An axis whose level is not defined in the spec (absent entry
    without fallback, or a level the spec no longer has) is left out.
    """
    lines = [spec.localized("prompt_fragment", lang), INTRO_LINES[lang]]

    for axis in get_axes_in_priority(spec):
        level = profile.get(axis.id, UNSPECIFIED_LEVEL)
        definition = get_level(axis, level)
        if definition is None:
            logger.debug("Skipping axis '%s': no level %r defined", axis.id, level)
            continue

        value = format_level_value(definition.level, max_level(axis))
        text = flatten_text(definition.localized("prompt", lang))
        lines.append(f"- {axis.localized('name', lang)} {value}: {text}")

    return "\n".join(lines)


def format_profile_summary(
    spec: Spec, profile: Mapping[AxisId, Level], lang: Language
) -> str:
    """One-line summary such as ``Profil: Télisme=5 Confrontation=3``."""
    parts = [
        f"{axis.localized('name', lang)}={profile.get(axis.id, UNSPECIFIED_LEVEL)}"
        for axis in get_axes_in_priority(spec)
    ]
    return f"{PROFILE_LABELS[lang]} {' '.join(parts)}"


class PromptBuilder:
    """Use-case wrapper around build_prompt."""

    def execute(
        self, spec: Spec, profile: Mapping[AxisId, Level], lang: Language
    ) -> str:
        return build_prompt(spec, profile, lang)
