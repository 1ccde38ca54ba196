"""Tests for spec models, AxisId construction and YAML loading."""

import pytest
from pydantic import ValidationError

from giac.core.errors import SpecValidationError
from giac.core.models.spec import UNSPECIFIED_LEVEL, Axis, Spec, axis_id

from conftest import make_axis, make_level, make_spec


SPEC_YAML = """\
description_fr: Description FR
description_en: Description EN
prompt_fragment_fr: Fragment FR
prompt_fragment_en: Fragment EN
axes:
  telisme:
    priority: 1
    initials: [T]
    name_fr: Télisme
    name_en: Telism
    description_fr: Desc FR
    description_en: Desc EN
    levels:
      - level: "-"
        name_fr: Non spécifié
        name_en: Unspecified
        prompt_fr: fais comme tu sens
        prompt_en: use your judgement
      - level: 5
        name_fr: Niveau 5
        name_en: Level 5
        prompt_fr: Prompt niveau 5
        prompt_en: Level 5 prompt
  density:
    priority: 2
    initials: [D]
    name_fr: Densité
    name_en: Density
    description_fr: Desc FR
    description_en: Desc EN
    levels:
      - level: 0
        name_fr: Concis
        name_en: Concise
"""


class TestAxisId:
    def test_strips_whitespace(self):
        assert axis_id("  telisme ") == "telisme"

    def test_keeps_key_opaque(self):
        assert axis_id("Mood-Level") == "Mood-Level"
        assert axis_id(" Telisme ") == "Telisme"

    def test_spec_keeps_key_case(self):
        spec = make_spec(make_axis("Telisme", 1, [make_level(0)]))
        assert list(spec.axes) == ["Telisme"]
        assert spec.axes["Telisme"].id == "Telisme"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_rejects_empty(self, raw):
        with pytest.raises(ValueError):
            axis_id(raw)

    def test_rejects_non_string(self):
        with pytest.raises(ValueError):
            axis_id(42)


class TestModels:
    def test_axis_rejects_duplicate_levels(self):
        with pytest.raises(ValidationError, match="more than once"):
            make_axis("telisme", 1, [make_level(5), make_level(5, name_fr="Autre")])

    def test_level_rejects_negative(self):
        with pytest.raises(ValidationError):
            make_level(-1)

    def test_level_accepts_sentinel(self):
        definition = make_level(UNSPECIFIED_LEVEL)
        assert definition.is_unspecified

    def test_spec_rejects_duplicate_priorities(self):
        with pytest.raises(ValidationError, match="duplicate axis priority"):
            make_spec(
                make_axis("telisme", 1, [make_level(0)]),
                make_axis("density", 1, [make_level(0)]),
            )

    def test_spec_fills_axis_id_from_key(self):
        spec = Spec.model_validate(
            {
                "prompt_fragment_fr": "FR",
                "prompt_fragment_en": "EN",
                "axes": {
                    "energy": {
                        "priority": 0,
                        "name_fr": "Énergie",
                        "name_en": "Energy",
                        "levels": [{"level": 3, "name_fr": "Trois", "name_en": "Three"}],
                    }
                },
            }
        )
        assert spec.axes["energy"].id == "energy"

    def test_spec_rejects_key_id_mismatch(self):
        axis = make_axis("telisme", 1, [make_level(0)])
        with pytest.raises(ValidationError, match="does not match"):
            Spec(
                prompt_fragment_fr="FR",
                prompt_fragment_en="EN",
                axes={"density": axis},
            )

    def test_localized(self):
        axis = make_axis("telisme", 1, [make_level(0)], name_fr="Télisme", name_en="Telism")
        assert axis.localized("name", "fr") == "Télisme"
        assert axis.localized("name", "en") == "Telism"

    def test_models_are_frozen(self):
        axis = make_axis("telisme", 1, [make_level(0)])
        with pytest.raises(ValidationError):
            axis.priority = 3


class TestYamlLoading:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text(SPEC_YAML, encoding="utf-8")

        spec = Spec.from_yaml(path)

        assert set(spec.axes) == {"telisme", "density"}
        telisme = spec.axes["telisme"]
        assert isinstance(telisme, Axis)
        assert telisme.levels[0].level == UNSPECIFIED_LEVEL
        assert telisme.levels[1].level == 5
        assert spec.axes["density"].levels[0].prompt_fr == ""

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text(SPEC_YAML, encoding="utf-8")
        spec = Spec.from_yaml(path)

        copy_path = tmp_path / "copy" / "spec.yml"
        spec.to_yaml(copy_path)

        assert Spec.from_yaml(copy_path) == spec

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecValidationError, match="Cannot read"):
            Spec.from_yaml(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text("axes: [unclosed", encoding="utf-8")
        with pytest.raises(SpecValidationError, match="Invalid YAML"):
            Spec.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(SpecValidationError, match="mapping"):
            Spec.from_yaml(path)

    def test_schema_error(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text("prompt_fragment_fr: only french\n", encoding="utf-8")
        with pytest.raises(SpecValidationError, match="Invalid spec"):
            Spec.from_yaml(path)

    def test_duplicate_priority_in_file(self, tmp_path):
        path = tmp_path / "spec.yml"
        path.write_text(
            SPEC_YAML.replace("    priority: 2\n", "    priority: 1\n"),
            encoding="utf-8",
        )
        with pytest.raises(SpecValidationError, match="duplicate axis priority"):
            Spec.from_yaml(path)
