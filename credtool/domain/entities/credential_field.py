"""Credential field entity holding a single extracted token."""

from dataclasses import dataclass, field
from typing import Self

from ..value_objects import FieldKind


@dataclass(frozen=True, slots=True)
class CredentialField:
    """A username or password token handed straight to the caller."""

    kind: FieldKind
    value: str = field(repr=False)

    @classmethod
    def password(cls, value: str) -> Self:
        """Create a password field."""
        return cls(kind=FieldKind.PASSWORD, value=value)

    @classmethod
    def username(cls, value: str) -> Self:
        """Create a username (hint) field."""
        return cls(kind=FieldKind.USERNAME, value=value)
