"""Blank/present semantics for arbitrary objects.

An object is *blank* when it is absent-like: ``None``, ``False``, an empty
container, or text made only of whitespace. Numbers are never blank. Types
decide for themselves by implementing :class:`Blankable`, or get an adapter
through :func:`register_blank`::

    @register_blank(QuerySet)
    def _(qs: QuerySet) -> bool:
        return not qs.exists()
"""

from collections.abc import Sized
from functools import singledispatch
from numbers import Number
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Blankable(Protocol):
    """Object that knows whether it is blank."""

    def is_blank(self) -> bool: ...


@runtime_checkable
class Presentable(Protocol):
    """Object that knows whether it is present.

    Presence is usually the negation of blankness; implement this only when
    it is not.
    """

    def is_present(self) -> bool: ...


@singledispatch
def _blank_by_type(obj: Any) -> bool:
    if isinstance(obj, Sized):
        return len(obj) == 0
    return False


@_blank_by_type.register(type(None))
def _(obj: None) -> bool:
    return True


@_blank_by_type.register(bool)
def _(obj: bool) -> bool:
    return not obj


@_blank_by_type.register(Number)
def _(obj: Number) -> bool:
    return False


@_blank_by_type.register(str)
def _(obj: str) -> bool:
    return not obj.strip()


@_blank_by_type.register(bytes)
@_blank_by_type.register(bytearray)
def _(obj: bytes) -> bool:
    return not obj.strip()


register_blank = _blank_by_type.register


def _decides(obj: Any, method: str) -> bool:
    # Classes expose their methods as attributes too; only instances decide for themselves,
    # and only through a method, not a plain attribute of the same name.
    return not isinstance(obj, type) and callable(getattr(obj, method, None))


def is_blank(obj: Any) -> bool:
    """Return True if ``obj`` is blank."""
    if _decides(obj, "is_blank"):
        return bool(obj.is_blank())
    return _blank_by_type(obj)


def is_present(obj: Any) -> bool:
    """Return True if ``obj`` is present."""
    if _decides(obj, "is_present"):
        return bool(obj.is_present())
    return not is_blank(obj)


def presence(obj: T) -> T | None:
    """Return ``obj`` if it is present, otherwise None.

    >>> presence("  ") is None
    True
    >>> presence("name")
    'name'
    """
    return obj if is_present(obj) else None
