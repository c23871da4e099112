"""Infrastructure: ``op`` CLI detection and platform guidance.

This module locates the 1Password CLI on the system PATH and provides
platform-specific installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers decide how to surface guidance.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_EXECUTABLE: Final[str] = "op"

DOWNLOAD_URL: Final[str] = "https://developer.1password.com/docs/cli/get-started/"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OpCliStatus:
    """Result of an ``op`` detection probe.

    Attributes
    ----------
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the CLI on the current
        platform.  Empty when it is already present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_op_cli(executable: str = DEFAULT_EXECUTABLE) -> OpCliStatus:
    """Probe the system for the ``op`` binary.

    Returns an :class:`OpCliStatus` regardless of whether it is present —
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which(executable)

    if result is not None:
        resolved = Path(result).resolve()
        return OpCliStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return OpCliStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def install_hint(executable: str = DEFAULT_EXECUTABLE) -> str:
    """Build the hint attached to :class:`~op_wrap.exceptions.ToolNotFound`."""
    status = detect_op_cli(executable)
    if status.found:
        return (
            f"{executable} is {status.version_hint} but `{executable} --version` failed; "
            "check that it runs from this shell."
        )
    lines = ["Install the 1Password CLI using one of:"]
    lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return ("winget install AgileBits.1Password.CLI",)
    if system == "linux":
        return (
            "sudo apt install 1password-cli",
            "sudo dnf install 1password-cli",
        )
    if system == "darwin":
        return ("brew install 1password-cli",)
    return (f"Download the 1Password CLI from {DOWNLOAD_URL}",)
