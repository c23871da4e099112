"""Protocols (interfaces) consumed by the client.

These define the contracts that infrastructure adapters must satisfy.
The client depends ONLY on these protocols — never on a concrete
runner — so tests and callers can inject their own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from op_wrap.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for command execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(
        self,
        command: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Execute *command* and return its captured output.

        Parameters
        ----------
        command:
            Argument tokens, program first.  Never interpreted by a shell.
        env:
            Extra environment variables visible to this one invocation
            only.  May be ``None``.

        Raises
        ------
        CommandFailed
            When the command exits non-zero **or** cannot be started at
            all.  Both cases surface as the same failure signal.
        """
        ...  # pragma: no cover
