"""Console host: prompts on the terminal and prints fields to stdout."""

from __future__ import annotations

import asyncio

import click


class ConsoleHost:
    """
    HostEnvironment for the command line.

    Targets are output slot numbers; each delivered field is printed on its
    own line, optionally prefixed with a label for the slot.
    """

    def __init__(self, labels: dict[int, str] | None = None) -> None:
        """
        Initialize the console host.

        Args:
            labels: Optional slot number to label mapping, e.g. ``{0: "username"}``.
        """
        self._labels = labels or {}

    async def read_line(self, prompt: str) -> str:
        """Prompt for a line on the terminal without blocking the event loop."""
        return await asyncio.to_thread(click.prompt, prompt.rstrip().rstrip(":"), type=str, err=True)

    async def deliver_text(self, target: int, text: str) -> None:
        """Print text to stdout."""
        label = self._labels.get(target)
        click.echo(f"{label}: {text}" if label else text)

    async def advance_target(self, target: int) -> int:
        """Move to the next output slot."""
        return target + 1
