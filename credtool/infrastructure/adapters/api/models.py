"""API request and response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class IdentifierRequest(BaseModel):
    """Request naming a password id."""

    identifier: str = Field(min_length=1, description="Password id passed to the tool")


class PasswordRequest(IdentifierRequest):
    """Request for a password."""

    seed: int = Field(default=0, ge=0, description="0 for the most recent seed, n for the n-th line")


class FieldResponse(BaseModel):
    """A single credential field."""

    kind: Literal["username", "password"]
    value: str


class SeedResponse(BaseModel):
    """A seed tag and its selector index."""

    index: int
    tag: str


class SeedsResponse(BaseModel):
    """Seed listing."""

    seeds: list[SeedResponse]


class PairResponse(BaseModel):
    """Result of the username-then-password workflow."""

    success: bool
    username: str | None = None
    password: str | None = None
    username_delivered: bool = False
    failed_step: Literal["username", "password"] | None = None
    error: str | None = Field(default=None, description="Error code of the failed step")
    detail: str | None = None


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
