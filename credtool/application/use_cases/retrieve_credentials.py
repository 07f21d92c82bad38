"""Use case for retrieving usernames and passwords from the password tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...domain.exceptions import DomainError
from ...domain.services import OutputParser
from ...domain.value_objects import PairStep, SeedSelector
from ..exceptions import ApplicationError

if TYPE_CHECKING:
    from ...domain.entities import CredentialField, SeedEntry
    from ..ports import HostEnvironment, PasswordTool

logger = logging.getLogger(__name__)

PASSWORD_ID_PROMPT = "Password ID: "

RetrievalError = DomainError | ApplicationError


@dataclass(frozen=True, slots=True)
class PairResult:
    """Result of the username-then-password workflow."""

    username: CredentialField | None
    password: CredentialField | None
    username_delivered: bool
    failed_step: PairStep | None = None
    error: RetrievalError | None = None

    @property
    def success(self) -> bool:
        """Check if both fields were retrieved and delivered."""
        return self.error is None

    @property
    def partial(self) -> bool:
        """Check if the username went out but the password step failed."""
        return self.username_delivered and self.failed_step is PairStep.PASSWORD


class RetrieveCredentials:
    """
    Use case for pulling credential fields out of the password tool.

    Each call runs the tool once and parses its output; nothing is cached
    and the password id is never logged.
    """

    def __init__(self, password_tool: PasswordTool, parser: OutputParser | None = None) -> None:
        """
        Initialize the use case.

        Args:
            password_tool: Adapter that runs the external tool.
            parser: Output parser, defaults to the standard one.
        """
        self._tool = password_tool
        self._parser = parser or OutputParser()

    async def get_password(self, identifier: str, seed: SeedSelector | int = 0) -> CredentialField:
        """
        Derive the password for the identifier.

        Args:
            identifier: Password id.
            seed: Seed selector; 0 picks the most recent seed.

        Returns:
            The password field.
        """
        selector = seed if isinstance(seed, SeedSelector) else SeedSelector(seed)
        output = await self._tool.derive(_require_identifier(identifier))
        password = self._parser.parse_password(output, selector)
        logger.info("Password retrieved (seed selector %d)", selector.value)
        return password

    async def get_username(self, identifier: str) -> CredentialField:
        """Look up the username hint recorded for the identifier."""
        output = await self._tool.lookup(_require_identifier(identifier))
        username = self._parser.parse_username(output)
        logger.info("Username hint retrieved")
        return username

    async def list_seeds(self, identifier: str) -> list[SeedEntry]:
        """List the seed tags available for the identifier."""
        output = await self._tool.derive(_require_identifier(identifier))
        seeds = self._parser.parse_seeds(output)
        logger.info("Found %d seed(s)", len(seeds))
        return seeds

    async def get_username_then_password(
        self,
        identifier: str,
        seed: SeedSelector | int,
        host: HostEnvironment,
        target: Any,
    ) -> PairResult:
        """
        Deliver the username to the target, advance, then deliver the password.

        The two steps are not atomic. A failure in the password step leaves
        the username delivered and is reported in the result rather than
        raised.

        Args:
            identifier: Password id.
            seed: Seed selector for the password step.
            host: Front end receiving the fields.
            target: Where the username goes.

        Returns:
            PairResult describing what was delivered and which step failed.

        Raises:
            ValueError: If the identifier is blank or the seed is negative;
                nothing is delivered in that case.
        """
        _require_identifier(identifier)
        selector = seed if isinstance(seed, SeedSelector) else SeedSelector(seed)

        try:
            username = await self.get_username(identifier)
        except (DomainError, ApplicationError) as e:
            logger.warning("Username step failed: %s", e.code)
            return PairResult(
                username=None,
                password=None,
                username_delivered=False,
                failed_step=PairStep.USERNAME,
                error=e,
            )

        await host.deliver_text(target, username.value)
        next_target = await host.advance_target(target)

        try:
            password = await self.get_password(identifier, selector)
        except (DomainError, ApplicationError) as e:
            logger.warning("Username delivered but password step failed: %s", e.code)
            return PairResult(
                username=username,
                password=None,
                username_delivered=True,
                failed_step=PairStep.PASSWORD,
                error=e,
            )

        await host.deliver_text(next_target, password.value)
        return PairResult(username=username, password=password, username_delivered=True)


async def prompt_identifier(host: HostEnvironment) -> str:
    """Ask the host for a password id."""
    return _require_identifier(await host.read_line(PASSWORD_ID_PROMPT))


def _require_identifier(identifier: str) -> str:
    """Reject blank identifiers before anything is spawned."""
    if not identifier or not identifier.strip():
        msg = "Password ID must not be empty"
        raise ValueError(msg)
    return identifier
