"""Command line adapter."""

from .app import ExitCode, cli

__all__ = [
    "ExitCode",
    "cli",
]
