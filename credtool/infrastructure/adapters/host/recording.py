"""In-memory host that records deliveries, used by the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordingHost:
    """
    HostEnvironment that keeps delivered text keyed by target.

    Targets advance through ``field_order``; reading a line returns the
    preset ``answer``.
    """

    field_order: list[str] = field(default_factory=lambda: ["username", "password"])
    answer: str = ""
    delivered: dict[Any, str] = field(default_factory=dict)

    async def read_line(self, prompt: str) -> str:  # noqa: ARG002
        """Return the preset answer."""
        return self.answer

    async def deliver_text(self, target: Any, text: str) -> None:
        """Remember text for the target."""
        self.delivered[target] = text

    async def advance_target(self, target: Any) -> Any:
        """Return the field following target, or the same target at the end."""
        try:
            position = self.field_order.index(target)
        except ValueError:
            return target
        return self.field_order[min(position + 1, len(self.field_order) - 1)]
