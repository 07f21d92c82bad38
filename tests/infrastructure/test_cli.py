"""Tests for the command line interface."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from credtool.application.exceptions import ProcessExitError, ProcessSpawnError, ToolTimeoutError
from credtool.infrastructure.adapters.cli import ExitCode, cli
from credtool.infrastructure.config import Settings
from credtool.main import ApplicationContainer

if TYPE_CHECKING:
    from tests.conftest import FakePasswordTool


@pytest.fixture
def invoke(fake_tool: FakePasswordTool, monkeypatch: pytest.MonkeyPatch):
    """Run the CLI with the fake password tool wired in."""
    monkeypatch.delenv("CREDTOOL_TIMEOUT", raising=False)
    monkeypatch.delenv("CREDTOOL_LOG_LEVEL", raising=False)

    def factory(settings: Settings) -> ApplicationContainer:
        return ApplicationContainer(settings, password_tool=fake_tool)

    def run(*args: str, input: str | None = None):
        return CliRunner().invoke(cli, list(args), obj=factory, input=input)

    return run


class TestGetPassword:
    """Tests for the get-password command."""

    def test_prints_most_recent_password(self, invoke) -> None:
        result = invoke("get-password", "example.com")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == "tokenC\n"

    def test_seed_option(self, invoke) -> None:
        result = invoke("get-password", "example.com", "--seed", "2")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == "tokenB\n"

    def test_identifier_words_joined(self, invoke, fake_tool: FakePasswordTool) -> None:
        invoke("get-password", "my", "bank")
        assert fake_tool.calls == [("derive", "my bank")]

    def test_prompts_when_identifier_missing(self, invoke, fake_tool: FakePasswordTool) -> None:
        result = invoke("get-password", input="example.com\n")
        assert result.exit_code == ExitCode.SUCCESS
        assert "Password ID" in result.output
        assert result.output.endswith("tokenC\n")
        assert fake_tool.calls == [("derive", "example.com")]

    def test_seed_out_of_range(self, invoke) -> None:
        result = invoke("get-password", "example.com", "--seed", "9")
        assert result.exit_code == ExitCode.INDEX_OUT_OF_RANGE
        assert "no such seed" in result.output

    def test_negative_seed_is_usage_error(self, invoke) -> None:
        result = invoke("get-password", "example.com", "--seed", "-1")
        assert result.exit_code == ExitCode.USAGE

    def test_malformed_output(self, invoke, fake_tool: FakePasswordTool) -> None:
        fake_tool.derive_output = ""
        result = invoke("get-password", "example.com")
        assert result.exit_code == ExitCode.MALFORMED_OUTPUT

    @pytest.mark.parametrize(
        ("error", "exit_code"),
        [
            (ProcessSpawnError("missing"), ExitCode.PROCESS_SPAWN_FAILURE),
            (ProcessExitError(2, "bad seed"), ExitCode.PROCESS_NONZERO_EXIT),
            (ToolTimeoutError("slow"), ExitCode.TIMEOUT),
        ],
    )
    def test_tool_failures_have_distinct_exit_codes(
        self, invoke, fake_tool: FakePasswordTool, error: Exception, exit_code: ExitCode
    ) -> None:
        fake_tool.derive_error = error
        result = invoke("get-password", "example.com")
        assert result.exit_code == exit_code


class TestGetUsername:
    """Tests for the get-username command."""

    def test_prints_hint(self, invoke) -> None:
        result = invoke("get-username", "example.com")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == "alice\n"

    def test_no_match(self, invoke, fake_tool: FakePasswordTool) -> None:
        fake_tool.lookup_output = "no hints here"
        result = invoke("get-username", "example.com")
        assert result.exit_code == ExitCode.NO_MATCH
        assert "no username hint recorded" in result.output


class TestGetPair:
    """Tests for the get-pair command."""

    def test_prints_username_then_password(self, invoke) -> None:
        result = invoke("get-pair", "example.com", "--seed", "1")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == "alice\ntokenA\n"

    def test_labels(self, invoke) -> None:
        result = invoke("get-pair", "example.com", "--labels")
        assert result.output == "username: alice\npassword: tokenC\n"

    def test_partial_delivery_reported(self, invoke, fake_tool: FakePasswordTool) -> None:
        fake_tool.derive_error = ProcessSpawnError("gnu-pw-mgr not found")
        result = invoke("get-pair", "example.com")
        assert result.exit_code == ExitCode.PROCESS_SPAWN_FAILURE
        assert result.output.startswith("alice\n")
        assert "username delivered, but password step failed" in result.output

    def test_username_failure(self, invoke, fake_tool: FakePasswordTool) -> None:
        fake_tool.lookup_output = "nothing"
        result = invoke("get-pair", "example.com")
        assert result.exit_code == ExitCode.NO_MATCH
        assert "username delivered" not in result.output
        assert ("derive", "example.com") not in fake_tool.calls


class TestSeeds:
    """Tests for the seeds command."""

    def test_lists_seed_tags(self, invoke) -> None:
        result = invoke("seeds", "example.com")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == "1\tseed1\n2\tseed2\n3\tseed3\n"
        assert "token" not in result.output


class TestGlobalOptions:
    """Tests for options applying to every command."""

    def test_log_level_applied_to_root_logger(self, invoke) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            result = invoke("--log-level", "debug", "get-username", "example.com")
            assert result.exit_code == ExitCode.SUCCESS
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_invalid_timeout_is_configuration_error(self, invoke) -> None:
        result = invoke("--timeout", "0", "get-password", "example.com")
        assert result.exit_code == ExitCode.CONFIGURATION
        assert "configuration error" in result.output

    def test_overrides_reach_settings(self, fake_tool: FakePasswordTool) -> None:
        seen: list[Settings] = []

        def factory(settings: Settings) -> ApplicationContainer:
            seen.append(settings)
            return ApplicationContainer(settings, password_tool=fake_tool)

        result = CliRunner().invoke(
            cli,
            ["--tool", "/opt/gnu-pw-mgr", "--timeout", "3", "get-username", "x"],
            obj=factory,
        )
        assert result.exit_code == ExitCode.SUCCESS
        assert seen[0].pw_mgr_command == "/opt/gnu-pw-mgr"
        assert seen[0].timeout_seconds == 3.0
