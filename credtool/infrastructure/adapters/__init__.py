"""Infrastructure adapters - Implementations of application ports."""

from .gnu_pw_mgr import GnuPwMgrConfig, GnuPwMgrTool
from .host import ConsoleHost, RecordingHost

__all__ = [
    "ConsoleHost",
    "GnuPwMgrConfig",
    "GnuPwMgrTool",
    "RecordingHost",
]
