"""Domain entities - Objects produced by parsing tool output."""

from .credential_field import CredentialField
from .seed_entry import SeedEntry

__all__ = [
    "CredentialField",
    "SeedEntry",
]
