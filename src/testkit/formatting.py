"""Display forms used in assertion diagnostics."""

from typing import Any

from rich.pretty import pretty_repr

from testkit.config import get_settings


def format_value(value: Any) -> str:
    """Render ``value`` on a single line, bounded by the configured limits."""
    settings = get_settings()
    return pretty_repr(
        value,
        max_width=10_000,
        max_length=settings.repr_max_length,
        max_string=settings.repr_max_string,
    )


def format_callable(fn: Any) -> str:
    """Render a callable by its qualified name."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(fn)
