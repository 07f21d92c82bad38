"""Seed entry entity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeedEntry:
    """A seed tag and the selector index that picks its password."""

    index: int
    tag: str
