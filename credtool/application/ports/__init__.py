"""Application ports - Interfaces for external adapters."""

from .host_environment import HostEnvironment
from .password_tool import PasswordTool

__all__ = [
    "HostEnvironment",
    "PasswordTool",
]
