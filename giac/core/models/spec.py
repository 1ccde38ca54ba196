"""Specification models and YAML I/O for GIAC.

A Spec is the full bilingual description of the behavioral axes a prompt can
be tuned along:

- LevelDefinition: one selectable point on an axis, with its prompt fragment
- Axis: a named dimension with priority, initials and its level list
- Spec: global header fragment plus the axes, keyed by AxisId

The set of axes is entirely data-driven. Validity of a level is defined per
axis by membership in its level list, never by a numeric range.
"""

import logging
from pathlib import Path
from typing import Annotated, Any, Literal, NewType

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..errors import SpecValidationError


logger = logging.getLogger(__name__)


# =============================================================================
# Identifiers and levels
# =============================================================================

AxisId = NewType("AxisId", str)

UNSPECIFIED_LEVEL: Literal["-"] = "-"

Level = int | Literal["-"]

Language = Literal["fr", "en"]
SUPPORTED_LANGUAGES: tuple[Language, ...] = ("fr", "en")
DEFAULT_LANGUAGE: Language = "fr"


def axis_id(raw: str) -> AxisId:
    """Build an AxisId from a raw key.

    The key is stripped of surrounding whitespace; empty keys are rejected.

    Raises:
        ValueError: If the key is empty or not a string.
    """
    if not isinstance(raw, str):
        raise ValueError(f"Axis id must be a string, got {type(raw).__name__}")
    key = raw.strip()
    if not key:
        raise ValueError("Axis id must be a non-empty string")
    return AxisId(key)


# =============================================================================
# Models
# =============================================================================


class BilingualModel(BaseModel):
    """Base for models carrying ``<field>_fr`` / ``<field>_en`` text pairs."""

    model_config = ConfigDict(frozen=True)

    def localized(self, field: str, lang: Language) -> str:
        """Return the ``field`` text for ``lang`` (e.g. ``localized("name", "en")``)."""
        return getattr(self, f"{field}_{lang}")


class LevelDefinition(BilingualModel):
    """A selectable level on an axis."""

    level: Annotated[int, Field(ge=0)] | Literal["-"]
    name_fr: str
    name_en: str
    description_fr: str = ""
    description_en: str = ""
    prompt_fr: str = ""
    prompt_en: str = ""

    @property
    def is_unspecified(self) -> bool:
        return self.level == UNSPECIFIED_LEVEL


class Axis(BilingualModel):
    """A behavioral dimension with its discrete levels."""

    id: AxisId
    priority: Annotated[int, Field(ge=0)]
    initials: list[str] = Field(default_factory=list)
    name_fr: str
    name_en: str
    description_fr: str = ""
    description_en: str = ""
    levels: list[LevelDefinition] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: Any) -> AxisId:
        return axis_id(value)

    @model_validator(mode="after")
    def _unique_levels(self) -> "Axis":
        seen: set[Level] = set()
        for definition in self.levels:
            if definition.level in seen:
                raise ValueError(
                    f"axis '{self.id}' defines level {definition.level!r} more than once"
                )
            seen.add(definition.level)
        return self


class Spec(BilingualModel):
    """Complete bilingual specification: header fragment plus axes."""

    description_fr: str = ""
    description_en: str = ""
    prompt_fragment_fr: str
    prompt_fragment_en: str
    axes: dict[AxisId, Axis] = Field(default_factory=dict)

    @field_validator("axes", mode="before")
    @classmethod
    def _inject_axis_ids(cls, value: Any) -> Any:
        """Fill each axis ``id`` from its mapping key when the document omits it."""
        if not isinstance(value, dict):
            return value
        axes: dict[str, Any] = {}
        for key, raw in value.items():
            if isinstance(raw, dict) and "id" not in raw:
                raw = {**raw, "id": key}
            axes[key] = raw
        return axes

    @model_validator(mode="after")
    def _check_axes(self) -> "Spec":
        priorities: dict[int, AxisId] = {}
        for key, axis in self.axes.items():
            if key != axis.id:
                raise ValueError(f"axis key '{key}' does not match axis id '{axis.id}'")
            if axis.priority in priorities:
                raise ValueError(
                    f"duplicate axis priority {axis.priority} "
                    f"('{priorities[axis.priority]}' and '{axis.id}')"
                )
            priorities[axis.priority] = axis.id
        return self

    def to_yaml(self, path: Path | str) -> None:
        """Save spec to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json")
        for axis in data["axes"].values():
            axis.pop("id", None)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Spec":
        """Load and validate a spec from a YAML file.

        Raises:
            SpecValidationError: If the file is missing, is not valid YAML,
                or does not match the spec schema.
        """
        path = Path(path)
        logger.debug("Loading spec from %s", path)

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise SpecValidationError(f"Cannot read spec file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise SpecValidationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise SpecValidationError(f"Spec file {path} must contain a mapping")

        try:
            spec = cls.model_validate(data)
        except ValidationError as e:
            raise SpecValidationError(f"Invalid spec {path}: {e}") from e

        logger.info("Loaded spec %s (%d axes)", path, len(spec.axes))
        return spec
