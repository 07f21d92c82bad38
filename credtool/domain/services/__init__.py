"""Domain services - Stateless operations on domain objects."""

from .output_parser import OutputParser

__all__ = ["OutputParser"]
