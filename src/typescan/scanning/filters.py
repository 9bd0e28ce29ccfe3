"""Inclusion filters applied to scanned types."""

from __future__ import annotations

from typing import Callable, Sequence

__all__ = ["TypeFilter", "accepts", "namespace_filter", "namespace_of"]

TypeFilter = Callable[[type], bool]


def namespace_of(cls: type) -> str:
    """Return the dotted module path a class was defined in, or ``""``."""
    return getattr(cls, "__module__", None) or ""


def namespace_filter(anchor_type: type) -> TypeFilter:
    """Build a filter accepting types whose namespace starts with ``anchor_type``'s.

    This is a plain string prefix test, so an anchor in ``pkg.auth`` also
    accepts ``pkg.authz``.
    """
    expected = namespace_of(anchor_type)

    def _in_namespace(cls: type) -> bool:
        return namespace_of(cls).startswith(expected)

    _in_namespace.__qualname__ = f"namespace_filter({expected!r})"
    return _in_namespace


def accepts(filters: Sequence[TypeFilter], cls: type) -> bool:
    """Return True if ``cls`` passes the filter set.

    With no filters every type is accepted. Otherwise filters are OR-ed:
    one accepting filter is enough.
    """
    if not filters:
        return True
    return any(f(cls) for f in filters)
