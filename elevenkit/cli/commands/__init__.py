"""CLI commands package."""

from elevenkit.cli.commands import speech

__all__ = [
    'speech',
]
