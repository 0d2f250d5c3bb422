"""Command-line interface for epicycle.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Pipeline diagnostics (threshold, polarity corrections, boundary size)
- Table of the largest epicycles
- Optional PNG stroke of the reconstructed curve
- Verbose/quiet output modes
"""

from epicycle.cli.app import cli, main

__all__ = ["cli", "main"]
