"""Configuration management for GIAC.

Sections:
- spec: where the axis specification document lives
- cli: interactive completion toggle
- defaults: per-axis default levels used when interactive completion is off

Config resolution order (highest priority first):
1. Programmatic (GiacConfig constructed in code)
2. Environment variables (GIAC_SPEC_PATH, GIAC_INTERACTIVE)
3. Config file (~/.config/giac/config.json, managed by `giac config`)
4. Hardcoded defaults

The output language is not part of this config: it comes from GIAC_LANG and
the --fr/--en flags only.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "giac"
CONFIG_FILE = CONFIG_DIR / "config.json"


def get_config_file() -> Path:
    """Current config file path."""
    return CONFIG_FILE


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean setting ("true"/"false", "1"/"0", "yes"/"no", "on"/"off").

    Raises:
        ValueError: If the value is not a recognized boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class SpecConfig:
    """Location of the specification document."""

    path: str = "./spec.yml"


@dataclass
class CliConfig:
    """Command-line behavior."""

    interactive: bool = True


@dataclass
class DefaultsConfig:
    """Default levels, keyed by axis reference (id, initial or name)."""

    levels: dict[str, str] = field(default_factory=dict)


@dataclass
class GiacConfig:
    """Top-level GIAC configuration.

    Examples:
        # Package use
        config = GiacConfig(spec=SpecConfig(path="prompts/spec.yml"))

        # CLI use, loads from ~/.config/giac/config.json
        config = GiacConfig.load()
    """

    spec: SpecConfig = field(default_factory=SpecConfig)
    cli: CliConfig = field(default_factory=CliConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "GiacConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()
        config_file = get_config_file()

        # Layer 1: config file
        if config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
                else:
                    logger.warning("Ignoring config %s: not a JSON object", config_file)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", config_file, exc)

        # Layer 2: env var overrides
        if val := os.environ.get("GIAC_SPEC_PATH"):
            config.spec.path = val
        if val := os.environ.get("GIAC_INTERACTIVE"):
            try:
                config.cli.interactive = parse_bool(val)
            except ValueError:
                logger.warning("Invalid GIAC_INTERACTIVE=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to the config file."""
        config_file = get_config_file()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display and persistence."""
        return {
            "spec": asdict(self.spec),
            "cli": asdict(self.cli),
            "defaults": asdict(self.defaults),
        }


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: GiacConfig, data: dict) -> None:
    """Apply a dict of values onto a GiacConfig."""
    spec = data.get("spec")
    if isinstance(spec, dict) and isinstance(spec.get("path"), str):
        config.spec.path = spec["path"]

    cli = data.get("cli")
    if isinstance(cli, dict) and "interactive" in cli:
        value = cli["interactive"]
        if isinstance(value, bool):
            config.cli.interactive = value
        else:
            try:
                config.cli.interactive = parse_bool(str(value))
            except ValueError:
                logger.warning("Invalid cli.interactive=%r in config, ignoring", value)

    defaults = data.get("defaults")
    if isinstance(defaults, dict) and isinstance(defaults.get("levels"), dict):
        config.defaults.levels = {
            str(axis): str(level) for axis, level in defaults["levels"].items()
        }


# =============================================================================
# Global config singleton
# =============================================================================

_config: GiacConfig | None = None


def get_config() -> GiacConfig:
    """Get the global GiacConfig instance.

    First call loads from file + env vars. Subsequent calls return the cached
    instance. Use configure() to replace it programmatically.
    """
    global _config
    if _config is None:
        _config = GiacConfig.load()
    return _config


def configure(config: GiacConfig) -> None:
    """Set the global GiacConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
