"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: spawning
the ``op`` CLI and locating it on PATH.  Every raw ``OSError`` must be
caught here and re-raised as an :class:`~op_wrap.exceptions.OpWrapError`
subclass.

Rules
-----
* No imports from ``op_wrap.client``.
* No user-facing output (no ``print()``); diagnostics go to the logger.
* Must expose clean, typed interfaces consumed by the client.
"""

from op_wrap.infra.op_detector import OpCliStatus, detect_op_cli, install_hint
from op_wrap.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "OpCliStatus",
    "SubprocessRunner",
    "detect_op_cli",
    "install_hint",
]
