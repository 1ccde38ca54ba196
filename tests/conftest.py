"""Shared fixtures: isolated config/env and small in-memory specs."""

import os

import pytest

from giac import config as giac_config
from giac.core.models.spec import Axis, LevelDefinition, Spec


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point the config file at tmp_path and clear GIAC-related env vars."""
    monkeypatch.setattr(giac_config, "CONFIG_FILE", tmp_path / "config" / "config.json")
    for name in list(os.environ):
        if name.startswith("GIAC_") or name.endswith("_VALUE"):
            monkeypatch.delenv(name, raising=False)
    giac_config.reset_config()
    yield
    giac_config.reset_config()


def make_level(level, name_fr=None, name_en=None, **kwargs) -> LevelDefinition:
    return LevelDefinition(
        level=level,
        name_fr=name_fr or f"Niveau {level}",
        name_en=name_en or f"Level {level}",
        description_fr=kwargs.get("description_fr", f"Description niveau {level}"),
        description_en=kwargs.get("description_en", f"Level {level} description"),
        prompt_fr=kwargs.get("prompt_fr", f"Prompt niveau {level}"),
        prompt_en=kwargs.get("prompt_en", f"Level {level} prompt"),
    )


def make_axis(id, priority, levels, initials=None, name_fr=None, name_en=None) -> Axis:
    return Axis(
        id=id,
        priority=priority,
        initials=initials if initials is not None else [id[0].upper()],
        name_fr=name_fr or id.capitalize(),
        name_en=name_en or id.capitalize(),
        description_fr=f"Description {id} FR",
        description_en=f"Description {id} EN",
        levels=levels,
    )


def make_spec(*axes: Axis) -> Spec:
    return Spec(
        description_fr="Description FR",
        description_en="Description EN",
        prompt_fragment_fr="Fragment FR global",
        prompt_fragment_en="Global fragment EN",
        axes={axis.id: axis for axis in axes},
    )


@pytest.fixture
def telisme_axis() -> Axis:
    return make_axis(
        "telisme",
        1,
        [make_level(0), make_level(5), make_level(10)],
        initials=["T"],
        name_fr="Télisme",
        name_en="Telism",
    )


@pytest.fixture
def confrontation_axis() -> Axis:
    return make_axis(
        "confrontation",
        2,
        [make_level(0), make_level(3)],
        initials=["C"],
        name_fr="Confrontation",
        name_en="Challenge",
    )


@pytest.fixture
def two_axis_spec(telisme_axis, confrontation_axis) -> Spec:
    return make_spec(telisme_axis, confrontation_axis)
