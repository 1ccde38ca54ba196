"""GIAC: build behavior prompts from a bilingual axis specification."""

__version__ = "0.1.0"
