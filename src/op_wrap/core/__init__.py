"""Core layer — pure item logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or process I/O.
* No imports from ``op_wrap.client`` or ``op_wrap.infra``.
* All functions must be deterministic.
"""

from op_wrap.core.item import Item
from op_wrap.core.models import CommandResult, Selector, SelectorKind
from op_wrap.core.protocols import CommandRunner
from op_wrap.core.selector import parse_selector

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "Item",
    "Selector",
    "SelectorKind",
    "parse_selector",
]
