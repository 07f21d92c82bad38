"""gnu-pw-mgr adapter."""

from .client import GnuPwMgrConfig, GnuPwMgrTool

__all__ = [
    "GnuPwMgrConfig",
    "GnuPwMgrTool",
]
