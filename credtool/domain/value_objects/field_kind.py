"""Credential field kind value object."""

from enum import StrEnum, auto


class FieldKind(StrEnum):
    """Kind of credential field extracted from the tool output."""

    PASSWORD = auto()
    USERNAME = auto()

    def __str__(self) -> str:
        return self.value
