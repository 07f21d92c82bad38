"""Domain exceptions."""

from typing import ClassVar


class DomainError(Exception):
    """Base exception for domain errors."""

    code: ClassVar[str] = "domain_error"


class IndexOutOfRangeError(DomainError):
    """Raised when the requested seed line is not in the tool output."""

    code: ClassVar[str] = "index_out_of_range"


class MalformedOutputError(DomainError):
    """Raised when a password line has no extractable token."""

    code: ClassVar[str] = "malformed_output"


class NoMatchError(DomainError):
    """Raised when the tool output carries no username hint."""

    code: ClassVar[str] = "no_match"
