"""CLI commands for Tarot Timer.

This package provides the command-line interface for Tarot Timer,
including the daily timeline, journal and card catalog commands.
"""

from tarot_timer.cli.main import cli, main

__all__ = ["cli", "main"]
