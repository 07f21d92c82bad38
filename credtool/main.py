#!/usr/bin/env python3
"""
credtool

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .application.use_cases import RetrieveCredentials
from .infrastructure.adapters import ConsoleHost, GnuPwMgrTool
from .infrastructure.adapters.cli import cli

if TYPE_CHECKING:
    from fastapi import FastAPI

    from .application.ports import PasswordTool
    from .infrastructure.config import Settings

logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings, *, password_tool: PasswordTool | None = None) -> None:
        """
        Initialize container with settings.

        Args:
            settings: Loaded application settings.
            password_tool: Replaces the gnu-pw-mgr adapter when given.
        """
        self._settings = settings
        self._password_tool = password_tool

    @property
    def settings(self) -> Settings:
        """Application settings."""
        return self._settings

    def create_password_tool(self) -> PasswordTool:
        """Create the password tool adapter."""
        if self._password_tool is not None:
            return self._password_tool
        return GnuPwMgrTool(self._settings.pw_mgr_config)

    def create_retriever(self) -> RetrieveCredentials:
        """Create the retrieval use case with its dependencies."""
        return RetrieveCredentials(password_tool=self.create_password_tool())

    def create_console_host(self, labels: dict[int, str] | None = None) -> ConsoleHost:
        """Create the terminal host adapter."""
        return ConsoleHost(labels=labels)

    def create_api_app(self) -> FastAPI:
        """Create the FastAPI application."""
        from .infrastructure.adapters.api import create_app

        return create_app(retriever=self.create_retriever(), version=__version__)

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        uvicorn.run(
            self.create_api_app(),
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )


def main() -> None:
    """Main entry point."""
    cli.main(prog_name="credtool", obj=ApplicationContainer)


if __name__ == "__main__":
    main()
