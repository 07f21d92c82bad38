"""Port for the password derivation tool - driven/secondary port."""

from typing import Protocol


class PasswordTool(Protocol):
    """
    Port for invoking the external password derivation tool.

    This is a driven (secondary) port. Implementations run the tool and
    return its captured standard output; parsing stays in the domain.
    """

    async def derive(self, identifier: str) -> str:
        """
        Run the tool in derive mode (one ``<tag> <password>`` line per seed).

        Args:
            identifier: Password id, passed to the tool as a single argument.

        Returns:
            Captured standard output.

        Raises:
            ProcessSpawnError: If the tool cannot be started.
            ProcessExitError: If the tool exits with a failure status.
            ToolTimeoutError: If the tool does not finish in time.
        """
        ...

    async def lookup(self, identifier: str) -> str:
        """
        Run the tool in its default mode (header with login hint).

        Raises:
            ProcessSpawnError: If the tool cannot be started.
            ProcessExitError: If the tool exits with a failure status.
            ToolTimeoutError: If the tool does not finish in time.
        """
        ...
