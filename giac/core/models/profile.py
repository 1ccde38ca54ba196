"""Profile models: the level chosen for each axis.

A PartialProfile maps AxisId to Level, with absent axes meaning "not chosen
yet". A Profile has the same shape but covers every axis of its spec; the only
way from one to the other is through completion (defaults or the interactive
flow), checked with ``is_complete``.
"""

from collections.abc import Mapping, Sequence

from .spec import AxisId, Level


PartialProfile = dict[AxisId, Level]
Profile = dict[AxisId, Level]


def create_profile(
    partial: Mapping[AxisId, Level],
    defaults: Mapping[AxisId, Level] | None = None,
) -> Profile:
    """Fill the axes missing from ``partial`` with values from ``defaults``.

    Values already present in ``partial`` are never overridden. An axis absent
    from both mappings stays absent, so callers that need a complete profile
    must supply defaults for every axis or go through interactive completion.

    Example:
        >>> create_profile({"telisme": 8}, {"telisme": 5, "density": 5})
        {'telisme': 8, 'density': 5}
    """
    profile: Profile = {
        axis: level for axis, level in partial.items() if level is not None
    }
    for axis, level in (defaults or {}).items():
        if axis not in profile and level is not None:
            profile[axis] = level
    return profile


def is_complete(partial: Mapping[AxisId, Level], axis_ids: Sequence[AxisId]) -> bool:
    """True if every id in ``axis_ids`` has a value in ``partial``."""
    return all(partial.get(axis) is not None for axis in axis_ids)


def get_missing_axes(
    partial: Mapping[AxisId, Level], axis_ids: Sequence[AxisId]
) -> list[AxisId]:
    """Ids from ``axis_ids`` with no value in ``partial``, in the order given.

    Callers pass the spec's axes sorted by priority, so the result is the
    order in which missing axes should be asked for.
    """
    missing: list[AxisId] = []
    for axis in axis_ids:
        if partial.get(axis) is None and axis not in missing:
            missing.append(axis)
    return missing
