"""Seed selector value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeedSelector:
    """
    Which seed line of the derive-mode output to use.

    ``0`` means the most recent seed; ``n > 0`` means the n-th line
    (1-indexed) of the output.
    """

    value: int = 0

    def __post_init__(self) -> None:
        """Validate the selector is not negative."""
        if self.value < 0:
            msg = f"Seed selector must be >= 0, got {self.value}"
            raise ValueError(msg)

    @property
    def is_most_recent(self) -> bool:
        """True when no specific seed line was requested."""
        return self.value == 0

    @property
    def line_index(self) -> int:
        """Zero-based line index of the requested seed."""
        return self.value - 1
