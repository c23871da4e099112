"""op-wrap logging utilities.

The package logs through one standard-library logger, ``op_wrap``, and
stays silent until the application opts in with :func:`configure_logging`.
Output is rendered by Rich on stderr so it never mixes with captured
command output on stdout.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

log = logging.getLogger("op_wrap")
log.addHandler(logging.NullHandler())

REDACTED: Final[str] = "***"


def configure_logging(*, level: str = "INFO", show_path: bool = False) -> None:
    """Attach a Rich stderr handler to the ``op_wrap`` logger.

    Calling this again replaces the previous handler, so it is safe to
    invoke once per process or per test.

    Args:
        level: Logging level name (e.g. ``"INFO"``, ``"DEBUG"``).
        show_path: Whether Rich prints the emitting module path.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=show_path,
        markup=False,
        rich_tracebacks=False,
        log_time_format="%m-%d %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    log.handlers.clear()
    log.addHandler(handler)
    log.setLevel(resolved_level)
    log.propagate = False


def redact_env(env: Mapping[str, str] | None) -> dict[str, str]:
    """Return *env* with every value masked, for debug logging."""
    return {key: REDACTED for key in (env or {})}
