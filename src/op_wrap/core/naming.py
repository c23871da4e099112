"""Accessor-name derivation for item field labels.

Turns free-form 1Password field labels into lower-case, underscore-joined
names and resolves collisions deterministically.  Pure functions only.
"""

from __future__ import annotations

import re
from collections.abc import Container
from typing import Final

FIELD_PREFIX: Final[str] = "field_"

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def tokenize_label(label: str) -> str:
    """Return the snake_case form of *label*.

    Examples::

        >>> tokenize_label("Security Question")
        'security_question'
        >>> tokenize_label("firstName")
        'first_name'
        >>> tokenize_label("APIKey")
        'api_key'

    Returns an empty string when *label* holds no letters or digits.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", label)
    name = _CASE_BOUNDARY.sub(r"\1_\2", name)
    name = _SEPARATORS.sub("_", name)
    return name.strip("_").lower()


def resolve_accessor_name(
    candidate: str,
    *,
    assigned: Container[str],
    data_keys: Container[str],
    reserved: Container[str],
) -> str:
    """Make *candidate* unique against fields, data keys and reserved names.

    A candidate that clashes with anything gets the ``field_`` prefix;
    if the prefixed name is still taken, the first free numeric suffix
    (``_2``, ``_3``, …) is appended.
    """

    def taken(name: str) -> bool:
        return name in assigned or name in data_keys or name in reserved

    name = candidate
    if taken(name):
        name = f"{FIELD_PREFIX}{name}"

    if not taken(name):
        return name

    suffix = 2
    while taken(f"{name}_{suffix}"):
        suffix += 1
    return f"{name}_{suffix}"
