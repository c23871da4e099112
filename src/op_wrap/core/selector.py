"""Selector resolution — turn caller lookup criteria into a :class:`Selector`.

Rules
-----
* Exactly one of ``title``, ``id`` or ``url`` must be non-empty.
* Unknown keys are rejected before counting, so key order never changes
  which error is raised.
* URLs must be a 1Password share URL or a private item link.
"""

from __future__ import annotations

from typing import Final

from op_wrap.core.models import Selector, SelectorKind
from op_wrap.exceptions import InvalidSelector

ALLOWED_KEYS: Final[tuple[str, ...]] = ("title", "id", "url")

SHARE_URL_PREFIX: Final[str] = "https://share.1password.com/"
PRIVATE_LINK_MARKER: Final[str] = "/open/i?"

_MISSING_MESSAGE: Final[str] = "must provide one of: title, id, or url"
_AMBIGUOUS_MESSAGE: Final[str] = "must provide exactly one of: title, id, or url"
_BAD_URL_MESSAGE: Final[str] = "URL must be a valid share URL or private link"


def parse_selector(**criteria: object) -> Selector:
    """Resolve *criteria* into exactly one :class:`Selector`.

    Raises
    ------
    InvalidSelector
        When no criterion, more than one criterion, an unknown key, or
        an unrecognised URL is given.
    """
    if any(key not in ALLOWED_KEYS for key in criteria):
        raise InvalidSelector(_MISSING_MESSAGE)

    provided = {
        key: value
        for key, value in criteria.items()
        if value is not None and value != ""
    }
    if not provided:
        raise InvalidSelector(_MISSING_MESSAGE)
    if len(provided) > 1:
        raise InvalidSelector(_AMBIGUOUS_MESSAGE)

    (key, value), = provided.items()
    if key == "title":
        return Selector(SelectorKind.TITLE, str(value))
    if key == "id":
        return Selector(SelectorKind.ID, str(value))
    return _parse_url(value)


def _parse_url(url: object) -> Selector:
    """Classify *url* as a share URL or a private item link."""
    if not isinstance(url, str):
        raise InvalidSelector(_BAD_URL_MESSAGE)
    if url.startswith(SHARE_URL_PREFIX):
        return Selector(SelectorKind.URL_SHARE, url)
    if PRIVATE_LINK_MARKER in url:
        return Selector(SelectorKind.URL_PRIVATE, url)
    raise InvalidSelector(
        _BAD_URL_MESSAGE,
        hint=f"Share URLs start with {SHARE_URL_PREFIX}; private links contain {PRIVATE_LINK_MARKER}",
    )
