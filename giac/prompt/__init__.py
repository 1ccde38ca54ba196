"""Prompt assembly from a spec and a complete profile."""

from .builder import PromptBuilder, build_prompt, format_profile_summary

__all__ = ["PromptBuilder", "build_prompt", "format_profile_summary"]
