"""Domain value objects - Immutable objects defined by their attributes."""

from .field_kind import FieldKind
from .pair_step import PairStep
from .seed_selector import SeedSelector

__all__ = [
    "FieldKind",
    "PairStep",
    "SeedSelector",
]
