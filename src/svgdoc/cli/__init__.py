"""Command-line interface for svgdoc.

This module provides the CLI using Typer with rich output for
user-friendly feedback.
"""

from svgdoc.cli.app import cli, main

__all__ = ["cli", "main"]
