"""``subprocess`` backed implementation of :class:`~op_wrap.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns processes.
``OSError`` from a missing or non-executable program is caught here and
re-raised as :class:`~op_wrap.exceptions.CommandFailed` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from typing import Final

from op_wrap.core.models import CommandResult
from op_wrap.exceptions import CommandFailed
from op_wrap.utils.log import log, redact_env

# POSIX shells report "command not found" as 127.
NOT_EXECUTABLE_STATUS: Final[int] = 127


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    Usage::

        runner = SubprocessRunner()
        result = runner.run(["op", "--version"])

    Commands are executed from an argument list, never through a shell,
    so values such as item titles need no quoting.  Extra environment
    variables are layered over :data:`os.environ` for the child process
    only; the parent environment is left untouched.
    """

    def run(
        self,
        command: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run *command* to completion and capture its output.

        Raises
        ------
        CommandFailed
            When the program exits non-zero or cannot be started.
        """
        argv = [str(token) for token in command]
        command_text = shlex.join(argv)
        log.debug("run: %s env=%s", command_text, redact_env(env))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                env=self._child_env(env),
                check=False,
            )
        except OSError as exc:
            raise CommandFailed(
                command_text,
                NOT_EXECUTABLE_STATUS,
                stderr=str(exc),
            ) from exc

        if completed.returncode != 0:
            log.debug("exit %s: %s", completed.returncode, command_text)
            raise CommandFailed(
                command_text,
                completed.returncode,
                output=completed.stdout or "",
                stderr=completed.stderr or "",
            )

        return CommandResult(
            stdout=completed.stdout or "",
            status=completed.returncode,
            stderr=completed.stderr or "",
        )

    @staticmethod
    def _child_env(env: Mapping[str, str] | None) -> dict[str, str] | None:
        """Merge *env* over the current environment, or inherit as is."""
        if not env:
            return None
        return {**os.environ, **env}
