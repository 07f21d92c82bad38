"""Command line interface."""

from __future__ import annotations

import asyncio
import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Any, NoReturn

import click

from ....application.exceptions import (
    ApplicationError,
    ConfigurationError,
    ProcessExitError,
    ProcessSpawnError,
    ToolTimeoutError,
)
from ....application.use_cases import prompt_identifier
from ....domain.exceptions import (
    DomainError,
    IndexOutOfRangeError,
    MalformedOutputError,
    NoMatchError,
)
from ...config import load_settings
from ...config.settings import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from ....application.ports import HostEnvironment

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes, one per failure kind."""

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
    PROCESS_SPAWN_FAILURE = 3
    PROCESS_NONZERO_EXIT = 4
    INDEX_OUT_OF_RANGE = 5
    MALFORMED_OUTPUT = 6
    NO_MATCH = 7
    TIMEOUT = 8
    CONFIGURATION = 9


EXIT_CODES: dict[str, ExitCode] = {
    ProcessSpawnError.code: ExitCode.PROCESS_SPAWN_FAILURE,
    ProcessExitError.code: ExitCode.PROCESS_NONZERO_EXIT,
    IndexOutOfRangeError.code: ExitCode.INDEX_OUT_OF_RANGE,
    MalformedOutputError.code: ExitCode.MALFORMED_OUTPUT,
    NoMatchError.code: ExitCode.NO_MATCH,
    ToolTimeoutError.code: ExitCode.TIMEOUT,
    ConfigurationError.code: ExitCode.CONFIGURATION,
}

MESSAGES: dict[str, str] = {
    ProcessSpawnError.code: "password tool could not be started",
    ProcessExitError.code: "password tool reported an error",
    IndexOutOfRangeError.code: "no such seed",
    MalformedOutputError.code: "password tool printed no password",
    NoMatchError.code: "no username hint recorded",
    ToolTimeoutError.code: "password tool timed out",
    ConfigurationError.code: "configuration error",
}


def exit_code_for(exc: DomainError | ApplicationError) -> ExitCode:
    """Exit code for a typed failure."""
    return EXIT_CODES.get(exc.code, ExitCode.FAILURE)


def _fail(exc: DomainError | ApplicationError, prefix: str = "") -> NoReturn:
    """Report a typed failure on stderr and exit with its code."""
    message = MESSAGES.get(exc.code, exc.code)
    click.echo(f"credtool: {prefix}{message}: {exc}", err=True)
    click.get_current_context().exit(exit_code_for(exc))


def _run(coro: Coroutine[Any, Any, None]) -> None:
    """Run a command coroutine and turn failures into exit codes."""
    try:
        asyncio.run(coro)
    except (DomainError, ApplicationError) as e:
        _fail(e)
    except ValueError as e:
        raise click.UsageError(str(e)) from e


async def _resolve_identifier(words: tuple[str, ...], host: HostEnvironment) -> str:
    """Join identifier words, or prompt for one when none were given."""
    if words:
        return " ".join(words)
    return await prompt_identifier(host)


def configure_logging(level: int) -> None:
    """Send log records to stderr; stdout carries credentials."""
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger().setLevel(level)


identifier_argument = click.argument("identifier", nargs=-1)
seed_option = click.option(
    "--seed",
    "-s",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Seed to use: 0 for the most recent, n for the n-th seed.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="credtool")
@click.option("--tool", "pw_mgr_command", metavar="PATH", help="gnu-pw-mgr executable to run.")
@click.option("--timeout", "timeout_seconds", type=float, help="Seconds to wait for the tool.")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    help="Logging level for stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    pw_mgr_command: str | None,
    timeout_seconds: float | None,
    log_level: str | None,
) -> None:
    """Retrieve usernames and passwords from gnu-pw-mgr.

    IDENTIFIER words are joined with single spaces; when omitted, the
    password id is read from the terminal.
    """
    from ....main import ApplicationContainer

    factory = ctx.obj or ApplicationContainer
    try:
        settings = load_settings(
            pw_mgr_command=pw_mgr_command,
            timeout_seconds=timeout_seconds,
            log_level=log_level,
        )
    except ValueError as e:
        _fail(ConfigurationError(str(e)))

    configure_logging(settings.log_level_number)
    ctx.obj = factory(settings)


@cli.command("get-password")
@identifier_argument
@seed_option
@click.pass_obj
def get_password(container: Any, identifier: tuple[str, ...], seed: int) -> None:
    """Print the password for IDENTIFIER."""
    host = container.create_console_host()
    retriever = container.create_retriever()

    async def run() -> None:
        password_id = await _resolve_identifier(identifier, host)
        password = await retriever.get_password(password_id, seed)
        await host.deliver_text(0, password.value)

    _run(run())


@cli.command("get-username")
@identifier_argument
@click.pass_obj
def get_username(container: Any, identifier: tuple[str, ...]) -> None:
    """Print the username hint recorded for IDENTIFIER."""
    host = container.create_console_host()
    retriever = container.create_retriever()

    async def run() -> None:
        password_id = await _resolve_identifier(identifier, host)
        username = await retriever.get_username(password_id)
        await host.deliver_text(0, username.value)

    _run(run())


@cli.command("get-pair")
@identifier_argument
@seed_option
@click.option("--labels", is_flag=True, help="Prefix each line with its field name.")
@click.pass_obj
def get_pair(container: Any, identifier: tuple[str, ...], seed: int, labels: bool) -> None:
    """Print the username, then the password, for IDENTIFIER."""
    host = container.create_console_host(
        labels={0: "username", 1: "password"} if labels else None
    )
    retriever = container.create_retriever()

    async def run() -> None:
        password_id = await _resolve_identifier(identifier, host)
        result = await retriever.get_username_then_password(password_id, seed, host, target=0)
        if result.error is not None:
            prefix = "username delivered, but password step failed: " if result.partial else ""
            _fail(result.error, prefix=prefix)

    _run(run())


@cli.command("seeds")
@identifier_argument
@click.pass_obj
def seeds(container: Any, identifier: tuple[str, ...]) -> None:
    """List seed tags for IDENTIFIER with the --seed value selecting each."""
    host = container.create_console_host()
    retriever = container.create_retriever()

    async def run() -> None:
        password_id = await _resolve_identifier(identifier, host)
        for entry in await retriever.list_seeds(password_id):
            click.echo(f"{entry.index}\t{entry.tag}")

    _run(run())


@cli.command("serve")
@click.option("--host", "api_host", help="Interface to bind (default from CREDTOOL_API_HOST).")
@click.option("--port", "api_port", type=click.IntRange(1, 65535), help="Port to listen on.")
@click.pass_obj
def serve(container: Any, api_host: str | None, api_port: int | None) -> None:
    """Serve the credential API for local front ends."""
    if api_host:
        container.settings.api_host = api_host
    if api_port:
        container.settings.api_port = api_port
    container.run_api()
