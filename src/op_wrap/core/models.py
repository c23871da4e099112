"""Domain models for op-wrap.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Item selectors
# ---------------------------------------------------------------------------

class SelectorKind(str, Enum):
    """Which lookup criterion a :class:`Selector` was built from."""

    TITLE = "title"
    ID = "id"
    URL_SHARE = "url_share"
    URL_PRIVATE = "url_private"


@dataclass(frozen=True, slots=True)
class Selector:
    """One resolved item lookup criterion.

    Build instances with :meth:`Selector.parse` rather than directly so
    the validation rules are always applied.
    """

    kind: SelectorKind
    """The variant the caller's criterion resolved to."""

    value: str
    """The caller's input, verbatim."""

    @classmethod
    def parse(cls, **criteria: object) -> Selector:
        """Resolve exactly one of ``title``, ``id`` or ``url`` into a selector.

        See :func:`op_wrap.core.selector.parse_selector` for the rules.
        """
        from op_wrap.core.selector import parse_selector

        return parse_selector(**criteria)


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output of a successful command invocation."""

    stdout: str
    """Standard output, undecoded beyond text mode."""

    status: int = 0
    """Exit status.  Always ``0`` for results returned by a runner."""

    stderr: str = ""
    """Standard error, kept for diagnostics only."""
