"""Custom exception hierarchy for op-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`OpWrapError`.  Raw ``subprocess``/``OSError``/``json`` exceptions
must NEVER propagate beyond the client — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
OpWrapError
├── ToolNotFound
├── InvalidSelector
├── SigninFailed
├── CommandFailed
└── InvalidResponse
"""

from __future__ import annotations


class OpWrapError(Exception):
    """Base exception for all op-wrap errors.

    Every caller-visible error condition maps to a subclass of this
    exception so that applications can catch a single type.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tooling ---------------------------------------------------------------

class ToolNotFound(OpWrapError):
    """Raised when the ``op`` CLI cannot be probed at construction."""


# --- Caller input ----------------------------------------------------------

class InvalidSelector(OpWrapError, ValueError):
    """Raised when item lookup criteria are missing, ambiguous or malformed."""


# --- Authentication --------------------------------------------------------

class SigninFailed(OpWrapError):
    """Raised when ``op signin`` is rejected or yields no session token."""


# --- Command execution -----------------------------------------------------

class CommandFailed(OpWrapError):
    """Raised when an ``op`` invocation exits non-zero or cannot start.

    Carries everything needed to diagnose the failure without re-running
    the command.
    """

    def __init__(
        self,
        command: str,
        status: int,
        *,
        output: str = "",
        stderr: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Command failed with status {status}: {command}", hint=hint)
        self.command: str = command
        self.status: int = status
        self.output: str = output
        self.stderr: str = stderr


class InvalidResponse(OpWrapError):
    """Raised when ``op`` output cannot be decoded as the expected JSON."""
