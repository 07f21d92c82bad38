"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ....application.exceptions import (
    ApplicationError,
    ProcessExitError,
    ProcessSpawnError,
    ToolTimeoutError,
)
from ....domain.exceptions import (
    DomainError,
    IndexOutOfRangeError,
    MalformedOutputError,
    NoMatchError,
)
from ..host import RecordingHost
from .models import (
    ErrorResponse,
    FieldResponse,
    HealthResponse,
    IdentifierRequest,
    PairResponse,
    PasswordRequest,
    SeedResponse,
    SeedsResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.use_cases import RetrieveCredentials
    from ....domain.entities import CredentialField

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[Exception], int] = {
    NoMatchError: status.HTTP_404_NOT_FOUND,
    IndexOutOfRangeError: status.HTTP_404_NOT_FOUND,
    MalformedOutputError: status.HTTP_502_BAD_GATEWAY,
    ProcessExitError: status.HTTP_502_BAD_GATEWAY,
    ProcessSpawnError: status.HTTP_503_SERVICE_UNAVAILABLE,
    ToolTimeoutError: status.HTTP_504_GATEWAY_TIMEOUT,
}


def _status_for(exc: Exception) -> int:
    """Map a typed failure to an HTTP status."""
    for exc_type, code in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_to_response(credential: CredentialField) -> FieldResponse:
    return FieldResponse(kind=credential.kind.value, value=credential.value)


def create_app(
    retriever: RetrieveCredentials,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        retriever: Use case serving the credential requests.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="credtool API",
        description="Retrieve usernames and passwords from gnu-pw-mgr for local front ends. "
        "Intended to listen on the loopback interface only.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.exception_handler(DomainError)
    @app.exception_handler(ApplicationError)
    async def retrieval_error_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Render typed failures with their error code."""
        return JSONResponse(
            status_code=_status_for(exc),
            content=ErrorResponse(error=exc.code, detail=str(exc)).model_dump(),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:  # noqa: ARG001
        """Reject bad input that got past request validation."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(error="invalid_request", detail=str(exc)).model_dump(),
        )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/username",
        response_model=FieldResponse,
        tags=["Credentials"],
        summary="Get username hint",
        responses={404: {"model": ErrorResponse, "description": "No hint in tool output"}},
    )
    async def get_username(body: IdentifierRequest) -> FieldResponse:
        return _field_to_response(await retriever.get_username(body.identifier))

    @app.post(
        "/api/v1/password",
        response_model=FieldResponse,
        tags=["Credentials"],
        summary="Get password",
        responses={404: {"model": ErrorResponse, "description": "Seed line not present"}},
    )
    async def get_password(body: PasswordRequest) -> FieldResponse:
        return _field_to_response(await retriever.get_password(body.identifier, body.seed))

    @app.post(
        "/api/v1/pair",
        response_model=PairResponse,
        tags=["Credentials"],
        summary="Get username then password",
        description="Failures are reported in the body together with whether the "
        "username had already been delivered.",
    )
    async def get_pair(body: PasswordRequest) -> PairResponse:
        host = RecordingHost()
        result = await retriever.get_username_then_password(
            body.identifier, body.seed, host, target="username"
        )
        return PairResponse(
            success=result.success,
            username=host.delivered.get("username"),
            password=host.delivered.get("password"),
            username_delivered=result.username_delivered,
            failed_step=result.failed_step.value if result.failed_step else None,
            error=result.error.code if result.error else None,
            detail=str(result.error) if result.error else None,
        )

    @app.post(
        "/api/v1/seeds",
        response_model=SeedsResponse,
        tags=["Credentials"],
        summary="List seed tags",
    )
    async def list_seeds(body: IdentifierRequest) -> SeedsResponse:
        seeds = await retriever.list_seeds(body.identifier)
        return SeedsResponse(seeds=[SeedResponse(index=s.index, tag=s.tag) for s in seeds])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
