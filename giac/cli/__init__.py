"""Command-line interface for GIAC."""
