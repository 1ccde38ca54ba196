"""Resolve free-form user input to canonical axes and levels.

Matching is exact: input is trimmed and compared case-insensitively, numbers
are accepted only when they are a defined level of the axis. There is no
fuzzy or partial matching. Misses return None; the ``require_*`` variants
raise instead.
"""

import logging
import re
from collections.abc import Mapping

from .errors import AxisNotFoundError, InvalidLevelError
from .models.profile import PartialProfile
from .models.spec import UNSPECIFIED_LEVEL, Axis, AxisId, Level, LevelDefinition, Spec


logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _normalize(text: str) -> str:
    return text.strip().lower()


# =============================================================================
# Lookups
# =============================================================================


def get_axis_by_id(spec: Spec, axis: AxisId) -> Axis | None:
    """Get an axis by its exact id."""
    return spec.axes.get(axis)


def get_axis_ids(spec: Spec) -> list[AxisId]:
    """All axis ids, sorted by priority."""
    return [axis.id for axis in get_axes_in_priority(spec)]


def get_axes_in_priority(spec: Spec) -> list[Axis]:
    """All axes sorted by ascending priority."""
    return sorted(spec.axes.values(), key=lambda axis: axis.priority)


def get_level(axis: Axis, level: Level) -> LevelDefinition | None:
    """Get the definition of ``level`` on ``axis`` by exact equality."""
    for definition in axis.levels:
        if definition.level == level and type(definition.level) is type(level):
            return definition
    return None


def max_level(axis: Axis) -> int | None:
    """Largest numeric level defined on the axis, or None if it has none."""
    numeric = [d.level for d in axis.levels if isinstance(d.level, int)]
    return max(numeric) if numeric else None


# =============================================================================
# Resolution
# =============================================================================


def resolve_axis(spec: Spec, value: str) -> Axis | None:
    """Resolve an axis from its id, one of its initials, or its FR/EN name.

    Matching order: id, initials, French name, English name. The first match
    wins.
    """
    normalized = _normalize(value)
    if not normalized:
        return None
    axes = list(spec.axes.values())

    for axis in axes:
        if _normalize(axis.id) == normalized:
            return axis
    for axis in axes:
        if any(_normalize(initial) == normalized for initial in axis.initials):
            return axis
    for axis in axes:
        if _normalize(axis.name_fr) == normalized:
            return axis
    for axis in axes:
        if _normalize(axis.name_en) == normalized:
            return axis
    return None


def _resolve_number(axis: Axis, value: int | float) -> Level | None:
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if get_level(axis, value) is not None:
        return value
    return None


def resolve_level(axis: Axis, value: str | int | float) -> Level | None:
    """Resolve a level from a number, a level name (FR or EN), or the sentinel.

    Numbers, and strings that parse losslessly to an integer, must match a
    level defined on the axis. The sentinel ``-`` resolves only if the axis
    defines an unspecified level. Otherwise the French names are tried, then
    the English names.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _resolve_number(axis, value)

    normalized = _normalize(value)
    if not normalized:
        return None

    if normalized == UNSPECIFIED_LEVEL:
        if get_level(axis, UNSPECIFIED_LEVEL) is not None:
            return UNSPECIFIED_LEVEL
        return None

    if _INTEGER_RE.fullmatch(normalized):
        return _resolve_number(axis, int(normalized))

    for definition in axis.levels:
        if _normalize(definition.name_fr) == normalized:
            return definition.level
    for definition in axis.levels:
        if _normalize(definition.name_en) == normalized:
            return definition.level
    return None


def require_axis(spec: Spec, value: str) -> Axis:
    """Like resolve_axis, but raise AxisNotFoundError on a miss."""
    axis = resolve_axis(spec, value)
    if axis is None:
        raise AxisNotFoundError(value)
    return axis


def require_level(axis: Axis, value: str | int | float) -> Level:
    """Like resolve_level, but raise InvalidLevelError on a miss."""
    level = resolve_level(axis, value)
    if level is None:
        raise InvalidLevelError(axis.id, value)
    return level


def resolve_profile_values(
    spec: Spec, values: Mapping[str, str | int]
) -> PartialProfile:
    """Resolve a mapping of axis references to level references.

    Keys may be any axis reference accepted by resolve_axis, values any level
    reference accepted by resolve_level. Entries that do not resolve are
    dropped with a warning.
    """
    profile: PartialProfile = {}
    for key, raw in values.items():
        axis = resolve_axis(spec, key)
        if axis is None:
            logger.warning("Ignoring default for unknown axis %r", key)
            continue
        level = resolve_level(axis, raw)
        if level is None:
            logger.warning("Ignoring invalid default %r for axis '%s'", raw, axis.id)
            continue
        profile[axis.id] = level
    return profile
