"""Shared utilities — logging and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond log handlers.
* Importable by any layer.
"""

from op_wrap.utils.log import configure_logging, log

__all__: list[str] = ["configure_logging", "log"]
