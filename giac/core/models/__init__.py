"""Pydantic models and profile helpers for GIAC.

- spec.py: LevelDefinition, Axis, Spec, AxisId and the level sentinel
- profile.py: PartialProfile / Profile and completion helpers
"""

from .spec import (
    AxisId,
    Level,
    Language,
    UNSPECIFIED_LEVEL,
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
    axis_id,
    LevelDefinition,
    Axis,
    Spec,
)
from .profile import (
    PartialProfile,
    Profile,
    create_profile,
    is_complete,
    get_missing_axes,
)

__all__ = [
    "AxisId",
    "Level",
    "Language",
    "UNSPECIFIED_LEVEL",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "axis_id",
    "LevelDefinition",
    "Axis",
    "Spec",
    "PartialProfile",
    "Profile",
    "create_profile",
    "is_complete",
    "get_missing_axes",
]
