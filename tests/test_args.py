"""Tests for CLI token parsing and env/CLI merging."""

import pytest

from giac.cli.args import (
    env_var_for_axis,
    flag_keys_for_axis,
    parse_args,
    parse_flags,
    resolve_language,
)
from giac.core.models.spec import UNSPECIFIED_LEVEL

from conftest import make_axis, make_level, make_spec


class TestParseFlags:
    @pytest.mark.parametrize(
        "tokens,expected",
        [
            (["--telisme=5"], {"telisme": "5"}),
            (["-t=5"], {"t": "5"}),
            (["-t", "5", "--en"], {"t": "5", "en": True}),
            (["--telisme", "Niveau 5"], {"telisme": "Niveau 5"}),
            (["--telisme", "--en"], {"telisme": True, "en": True}),
            (["--telisme", "-"], {"telisme": True}),
            (["--telisme=-"], {"telisme": "-"}),
            (["stray", "--c=3", "other"], {"c": "3"}),
            (["-t", "3", "-t", "5"], {"t": "5"}),
            (["--density=a=b"], {"density": "a=b"}),
            (["--=5", "--", "-"], {}),
            ([], {}),
        ],
    )
    def test_grammar(self, tokens, expected):
        assert parse_flags(tokens) == expected


class TestAxisKeys:
    def test_env_var_name(self):
        assert env_var_for_axis("telisme") == "TELISME_VALUE"
        assert env_var_for_axis("mood-level") == "MOOD_LEVEL_VALUE"

    def test_flag_keys(self, confrontation_axis):
        assert flag_keys_for_axis(confrontation_axis) == [
            "confrontation",
            "challenge",
            "c",
        ]

    def test_flag_keys_deduplicated(self):
        axis = make_axis("t", 1, [make_level(0)], initials=["T", "t"])
        assert flag_keys_for_axis(axis) == ["t"]


class TestResolveLanguage:
    def test_default_is_french(self):
        assert resolve_language({}, {}) == "fr"

    def test_env(self):
        assert resolve_language({}, {"GIAC_LANG": "en"}) == "en"

    def test_unsupported_env_ignored(self):
        assert resolve_language({}, {"GIAC_LANG": "de"}) == "fr"

    def test_cli_flag_beats_env(self):
        assert resolve_language({"fr": True}, {"GIAC_LANG": "en"}) == "fr"
        assert resolve_language({"en": "true"}, {"GIAC_LANG": "fr"}) == "en"

    def test_en_wins_when_both_given(self):
        assert resolve_language({"fr": True, "en": True}, {}) == "en"

    def test_false_flag_value_is_not_set(self):
        assert resolve_language({"en": "false"}, {}) == "fr"

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("GIAC_LANG", "en")
        assert resolve_language({}) == "en"


class TestParseArgs:
    @pytest.mark.parametrize(
        "tokens",
        [
            ["--telisme=5"],
            ["--telisme", "5"],
            ["-t", "5"],
            ["-t=5"],
            ["--telisme", "Niveau 5"],
            ["--telisme", "level 5"],
        ],
    )
    def test_equivalent_forms(self, two_axis_spec, tokens):
        assert parse_args(two_axis_spec, tokens, environ={}).profile == {"telisme": 5}

    def test_alias(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, ["--challenge", "3"], environ={})
        assert parsed.profile == {"confrontation": 3}

    def test_id_checked_before_aliases(self, two_axis_spec):
        parsed = parse_args(
            two_axis_spec, ["--challenge", "3", "--confrontation", "0"], environ={}
        )
        assert parsed.profile == {"confrontation": 0}

    def test_alias_checked_before_initials(self, two_axis_spec):
        parsed = parse_args(
            two_axis_spec, ["-c", "0", "--challenge", "3"], environ={}
        )
        assert parsed.profile == {"confrontation": 3}

    def test_legacy_alias_beats_initial(self):
        axis = make_axis(
            "telisme", 1, [make_level(5), make_level(10)], initials=["T"]
        )
        parsed = parse_args(
            make_spec(axis), ["--initiative", "10", "-t", "5"], environ={}
        )
        assert parsed.profile == {"telisme": 10}

    def test_flag_names_are_case_insensitive(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, ["--TELISME=5", "-C", "3"], environ={})
        assert parsed.profile == {"telisme": 5, "confrontation": 3}

    def test_mixed_case_axis_id_matches_lowercase_flag(self):
        axis = make_axis("Telisme", 1, [make_level(5)], initials=["X"])
        spec = make_spec(axis)
        assert parse_args(spec, ["--telisme=5"], environ={}).profile == {"Telisme": 5}
        assert parse_args(spec, [], environ={"TELISME_VALUE": "5"}).profile == {
            "Telisme": 5
        }

    def test_invalid_value_falls_through_to_next_key(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, ["--telisme", "7", "-t", "5"], environ={})
        assert parsed.profile == {"telisme": 5}

    def test_invalid_values_are_ignored(self, two_axis_spec):
        parsed = parse_args(
            two_axis_spec, ["-t", "7", "--confrontation", "beaucoup"], environ={}
        )
        assert parsed.profile == {}

    def test_unknown_flags_are_ignored(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, ["--mood", "5", "-t", "0"], environ={})
        assert parsed.profile == {"telisme": 0}

    def test_env_value_beats_cli(self, two_axis_spec):
        parsed = parse_args(
            two_axis_spec, ["-t", "5"], environ={"TELISME_VALUE": "10"}
        )
        assert parsed.profile == {"telisme": 10}

    def test_env_value_by_name(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, [], environ={"CONFRONTATION_VALUE": "Level 3"})
        assert parsed.profile == {"confrontation": 3}

    def test_invalid_env_value_falls_back_to_cli(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, ["-t", "5"], environ={"TELISME_VALUE": "7"})
        assert parsed.profile == {"telisme": 5}

    def test_env_from_process(self, two_axis_spec, monkeypatch):
        monkeypatch.setenv("TELISME_VALUE", "0")
        parsed = parse_args(two_axis_spec, ["-t", "10"])
        assert parsed.profile == {"telisme": 0}

    def test_language_precedence_differs_from_axis_precedence(self, two_axis_spec):
        parsed = parse_args(
            two_axis_spec,
            ["-t", "5", "--fr"],
            environ={"TELISME_VALUE": "10", "GIAC_LANG": "en"},
        )
        # Env wins for the axis, the flag wins for the language.
        assert parsed.profile == {"telisme": 10}
        assert parsed.lang == "fr"

    def test_language_from_env(self, two_axis_spec):
        parsed = parse_args(two_axis_spec, [], environ={"GIAC_LANG": "en"})
        assert parsed.lang == "en"
        assert parsed.profile == {}

    def test_sentinel_value(self):
        axis = make_axis(
            "telisme",
            1,
            [make_level(UNSPECIFIED_LEVEL, "Non spécifié", "Unspecified"), make_level(5)],
        )
        spec = make_spec(axis)
        assert parse_args(spec, ["--telisme=-"], environ={}).profile == {
            "telisme": UNSPECIFIED_LEVEL
        }
        # "-" after a flag is not taken as its value.
        assert parse_args(spec, ["--telisme", "-"], environ={}).profile == {}
