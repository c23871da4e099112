"""op-wrap — read 1Password items through the ``op`` command-line tool.

Built on the ``op`` CLI with a strict layered architecture: a pure core
(selectors, items), an infrastructure layer (subprocess execution) and a
thin client that wires the two together.
"""

from op_wrap.client import Client
from op_wrap.core.item import Item
from op_wrap.core.models import CommandResult, Selector, SelectorKind
from op_wrap.exceptions import (
    CommandFailed,
    InvalidResponse,
    InvalidSelector,
    OpWrapError,
    SigninFailed,
    ToolNotFound,
)
from op_wrap.version import __version__

__all__: list[str] = [
    "Client",
    "CommandFailed",
    "CommandResult",
    "InvalidResponse",
    "InvalidSelector",
    "Item",
    "OpWrapError",
    "Selector",
    "SelectorKind",
    "SigninFailed",
    "ToolNotFound",
    "__version__",
]
