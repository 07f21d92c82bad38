"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from credtool.application.use_cases import RetrieveCredentials
from credtool.infrastructure.adapters import RecordingHost

HINT_OUTPUT = "hint: alice pw: secret123\n"
SEED_OUTPUT = "seed1 tokenA\nseed2 tokenB\nseed3 tokenC\n"


@dataclass
class FakePasswordTool:
    """PasswordTool double returning canned output or raising canned errors."""

    derive_output: str = SEED_OUTPUT
    lookup_output: str = HINT_OUTPUT
    derive_error: Exception | None = None
    lookup_error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def derive(self, identifier: str) -> str:
        self.calls.append(("derive", identifier))
        if self.derive_error is not None:
            raise self.derive_error
        return self.derive_output

    async def lookup(self, identifier: str) -> str:
        self.calls.append(("lookup", identifier))
        if self.lookup_error is not None:
            raise self.lookup_error
        return self.lookup_output


@pytest.fixture
def fake_tool() -> FakePasswordTool:
    """Password tool double with multi-seed and hint output."""
    return FakePasswordTool()


@pytest.fixture
def retriever(fake_tool: FakePasswordTool) -> RetrieveCredentials:
    """Retrieval use case wired to the fake tool."""
    return RetrieveCredentials(password_tool=fake_tool)


@pytest.fixture
def recording_host() -> RecordingHost:
    """Host that records deliveries by field name."""
    return RecordingHost(answer="example.com")
