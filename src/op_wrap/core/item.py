"""Read-only view over a decoded 1Password item.

An :class:`Item` wraps an arbitrarily shaped JSON object and exposes it
through two equivalent surfaces:

* keyed lookup — ``item["title"]`` / ``item.get("title")``
* attribute access — ``item.title``

Both resolve a name first against the accessors derived from the
``fields`` array, then against the top-level keys, and both apply the
same timestamp casting and memoization.

Guarantees
----------
* The caller's object (:attr:`Item.raw`) is never mutated.
* :meth:`Item.to_h` always returns a fresh deep copy.
* Accessor names are unique and never shadow data keys or ``Item``'s own
  attributes.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from typing import Any, ClassVar

from op_wrap.core.casting import cast_value, deep_copy
from op_wrap.core.naming import resolve_accessor_name, tokenize_label

_MISSING = object()


class Item:
    """Immutable wrapper around one item record returned by ``op item get``.

    Parameters
    ----------
    raw:
        The decoded JSON object.  Kept by reference as :attr:`raw`; all
        reads go through a private normalized copy.
    """

    RESERVED_NAMES: ClassVar[frozenset[str]] = frozenset()
    """Names a field accessor may never take.  Filled in below the class."""

    def __init__(self, raw: Mapping[Any, Any]) -> None:
        self._raw = raw
        self._data: dict[str, Any] = deep_copy(dict(raw))
        self._field_index: dict[str, dict[str, Any]] = self._index_fields()
        self._memo: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def raw(self) -> Mapping[Any, Any]:
        """The original object passed to the constructor."""
        return self._raw

    def to_h(self) -> dict[str, Any]:
        """Return a fresh deep copy of the normalized data (uncast values)."""
        return deep_copy(self._data)

    as_json = to_h

    def get(self, name: object, default: Any = None) -> Any:
        """Resolve *name*, returning *default* when it is not present."""
        value = self._resolve(str(name))
        return default if value is _MISSING else value

    def keys(self) -> list[str]:
        """Top-level data keys, in input order."""
        return list(self._data)

    def accessors(self) -> list[str]:
        """Field-derived accessor names, in registration order."""
        return list(self._field_index)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __getitem__(self, name: object) -> Any:
        return self.get(name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.  Private and dunder names
        # are never data, which keeps copy/pickle probes working.
        if name.startswith("_"):
            raise AttributeError(name)
        value = self._resolve(name)
        if value is _MISSING:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return value

    def __contains__(self, name: object) -> bool:
        key = str(name)
        return key in self._field_index or key in self._data

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._field_index) | set(self._data))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._data.get('id')!r}, "
            f"title={self._data.get('title')!r})"
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self, name: str) -> Any:
        """Field accessors first, then top-level keys; memoized per name."""
        cached = self._memo.get(name, _MISSING)
        if cached is not _MISSING:
            return cached

        if name in self._field_index:
            field = self._field_index[name]
            value = field["value"] if "value" in field else field
        elif name in self._data:
            value = self._data[name]
        else:
            return _MISSING

        resolved = cast_value(name, deep_copy(value))
        self._memo[name] = resolved
        return resolved

    def _index_fields(self) -> dict[str, dict[str, Any]]:
        """Map derived accessor names to their field objects."""
        fields = self._data.get("fields")
        if not isinstance(fields, list):
            return {}

        index: dict[str, dict[str, Any]] = {}
        for field in fields:
            if not isinstance(field, dict):
                continue
            label = field.get("label")
            if not isinstance(label, str) or not label:
                continue
            candidate = tokenize_label(label)
            if not candidate:
                continue
            name = resolve_accessor_name(
                candidate,
                assigned=index,
                data_keys=self._data,
                reserved=self.RESERVED_NAMES,
            )
            index[name] = field
        return index


Item.RESERVED_NAMES = frozenset(keyword.kwlist) | frozenset(
    name for name in dir(Item) if not name.startswith("_")
)
