"""Port for the host front end - the collaborator that shows results."""

from typing import Any, Protocol


class HostEnvironment(Protocol):
    """
    Port for the front end embedding the retriever.

    A target is whatever the host uses to name a destination (a form
    field, an output slot); the application treats it as opaque.
    """

    async def read_line(self, prompt: str) -> str:
        """Read one line of text from the user."""
        ...

    async def deliver_text(self, target: Any, text: str) -> None:
        """Place text at the given target."""
        ...

    async def advance_target(self, target: Any) -> Any:
        """Return the next logical target after the given one."""
        ...
