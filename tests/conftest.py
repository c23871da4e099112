"""Shared pytest fixtures and configuration for the op-wrap test suite.

Guidelines
----------
* No real ``op`` invocation in any test.
* The command runner is faked at the client boundary.
* Core tests must be pure — no side effects.
* Session variables written to ``os.environ`` are removed after each test.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

import pytest

from op_wrap.core.models import CommandResult
from op_wrap.exceptions import CommandFailed


class FakeRunner:
    """In-memory :class:`CommandRunner` with scripted responses.

    Responses are matched against the space-joined command, in
    registration order.  A plain string must match exactly; a compiled
    pattern is searched.  Unregistered commands succeed with empty output.
    """

    def __init__(self) -> None:
        self._responses: list[tuple[str | re.Pattern[str], str, int]] = []
        self.calls: list[dict[str, Any]] = []

    def define(self, pattern: str | re.Pattern[str], *, stdout: str = "", status: int = 0) -> None:
        self._responses.append((pattern, stdout, status))

    def run(
        self,
        command: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        self.calls.append({"cmd": list(command), "env": dict(env or {})})
        text = " ".join(command)
        for pattern, stdout, status in self._responses:
            if self._matches(pattern, text):
                if status != 0:
                    raise CommandFailed(text, status, output=stdout)
                return CommandResult(stdout=stdout, status=status)
        return CommandResult(stdout="", status=0)

    def commands(self) -> list[str]:
        return [" ".join(call["cmd"]) for call in self.calls]

    def find_call(self, pattern: str | re.Pattern[str]) -> dict[str, Any] | None:
        for call in self.calls:
            if self._matches(pattern, " ".join(call["cmd"])):
                return call
        return None

    @staticmethod
    def _matches(pattern: str | re.Pattern[str], text: str) -> bool:
        if isinstance(pattern, str):
            return pattern == text
        return pattern.search(text) is not None


@pytest.fixture()
def fake_runner() -> FakeRunner:
    runner = FakeRunner()
    runner.define("op --version", stdout="2.25.0\n")
    return runner


@pytest.fixture(autouse=True)
def _clean_session_env() -> Iterator[None]:
    before = {key for key in os.environ if key.startswith("OP_SESSION_")}
    yield
    for key in [k for k in os.environ if k.startswith("OP_SESSION_")]:
        if key not in before:
            del os.environ[key]
