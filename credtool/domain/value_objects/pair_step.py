"""Step of the username-then-password workflow."""

from enum import StrEnum, auto


class PairStep(StrEnum):
    """Which half of a username/password retrieval is meant."""

    USERNAME = auto()
    PASSWORD = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case PairStep.USERNAME:
                return "username"
            case PairStep.PASSWORD:
                return "password"
