"""Application settings loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property

from ..adapters.gnu_pw_mgr import GnuPwMgrConfig

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Password tool
    pw_mgr_command: str = field(default_factory=lambda: _env_str("CREDTOOL_PW_MGR", "gnu-pw-mgr"))
    timeout_seconds: float = field(default_factory=lambda: _env_float("CREDTOOL_TIMEOUT", 10.0))

    # Logging
    log_level: str = field(default_factory=lambda: _env_str("CREDTOOL_LOG_LEVEL", "WARNING"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("CREDTOOL_API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: _env_int("CREDTOOL_API_PORT", 8765))

    def validate(self) -> None:
        """Validate settings."""
        problems: list[str] = []

        if not self.pw_mgr_command.strip():
            problems.append("CREDTOOL_PW_MGR must not be empty")
        if self.timeout_seconds <= 0:
            problems.append(f"CREDTOOL_TIMEOUT must be positive, got {self.timeout_seconds}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            problems.append(f"CREDTOOL_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        if not 0 < self.api_port < 65536:
            problems.append(f"CREDTOOL_API_PORT out of range: {self.api_port}")

        if problems:
            msg = f"Invalid settings: {'; '.join(problems)}"
            raise ValueError(msg)

    @property
    def log_level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())

    @cached_property
    def pw_mgr_config(self) -> GnuPwMgrConfig:
        """Get password tool configuration."""
        return GnuPwMgrConfig(
            command=self.pw_mgr_command,
            timeout=self.timeout_seconds,
        )


def load_settings(**overrides: object) -> Settings:
    """
    Load and validate settings from environment.

    Keyword overrides (e.g. from command line options) replace the
    environment value when not None.
    """
    settings = Settings()
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)
    settings.validate()
    return settings
