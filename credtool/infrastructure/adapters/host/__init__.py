"""Host environment adapter implementations."""

from .console import ConsoleHost
from .recording import RecordingHost

__all__ = [
    "ConsoleHost",
    "RecordingHost",
]
