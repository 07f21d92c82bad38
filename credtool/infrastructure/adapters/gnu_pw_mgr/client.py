"""Subprocess client for the gnu-pw-mgr command line tool."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import signal
from dataclasses import dataclass
from typing import ClassVar

from ....application.exceptions import ProcessExitError, ProcessSpawnError, ToolTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GnuPwMgrConfig:
    """Configuration for running gnu-pw-mgr."""

    command: str = "gnu-pw-mgr"
    timeout: float = 10.0
    encoding: str = "utf-8"


class GnuPwMgrTool:
    """
    Runs gnu-pw-mgr and returns its standard output.

    Implements the PasswordTool port. The password id is always passed as
    its own argv element; no shell is involved.
    """

    NO_HEADER_FLAG: ClassVar[str] = "-H"

    def __init__(self, config: GnuPwMgrConfig) -> None:
        """Initialize the client."""
        self._config = config

    @property
    def config(self) -> GnuPwMgrConfig:
        """Client configuration."""
        return self._config

    async def derive(self, identifier: str) -> str:
        """Run ``gnu-pw-mgr -H <identifier>``."""
        return await self._run(self.NO_HEADER_FLAG, identifier)

    async def lookup(self, identifier: str) -> str:
        """Run ``gnu-pw-mgr <identifier>``."""
        return await self._run(identifier)

    async def _run(self, *args: str) -> str:
        """
        Spawn the tool, wait for it to exit and collect stdout.

        Raises:
            ProcessSpawnError: If the executable is missing or not runnable.
            ProcessExitError: If the tool exits non-zero.
            ToolTimeoutError: If the tool runs past the configured timeout.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                self._config.command,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            msg = f"Cannot run {self._config.command!r}: {e.strerror or e}"
            logger.error(msg)
            raise ProcessSpawnError(msg) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self._config.timeout
            )
        except TimeoutError as e:
            _kill_process_group(process)
            await process.wait()
            msg = f"{self._config.command!r} did not finish within {self._config.timeout:g}s"
            logger.error(msg)
            raise ToolTimeoutError(msg) from e

        if process.returncode != 0:
            error_text = stderr.decode(self._config.encoding, errors="replace").strip()
            logger.error("%s exited with status %d", self._config.command, process.returncode)
            raise ProcessExitError(process.returncode, error_text)

        return stdout.decode(self._config.encoding, errors="replace")


def _kill_process_group(process: asyncio.subprocess.Process) -> None:
    """Kill the tool and anything it spawned; it leads its own session."""
    with contextlib.suppress(ProcessLookupError):
        if hasattr(os, "killpg"):
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()
