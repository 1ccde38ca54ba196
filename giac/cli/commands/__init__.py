"""CLI commands for GIAC."""

from . import (
    build,
    spec,
    config_cmd,
)

__all__ = [
    "build",
    "spec",
    "config_cmd",
]
