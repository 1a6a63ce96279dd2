from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from testkit.assertions._base import AssertionResult


ASSERTION_RESULTS_COLLECTOR: ContextVar[list[AssertionResult] | None] = ContextVar(
    "assertion_results_collector", default=None
)


def get_assertions_collector() -> list[AssertionResult] | None:
    """Get the list currently collecting assertion results, or None."""
    return ASSERTION_RESULTS_COLLECTOR.get()


@contextmanager
def assertions_collector(ctx: list[AssertionResult]) -> Iterator[None]:
    """Collect every `AssertionResult` created inside the ``with`` block.

    Parameters
    ----------
    ctx : list[AssertionResult]
        List the results are appended to, passing and failing alike.
    """
    token = ASSERTION_RESULTS_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        ASSERTION_RESULTS_COLLECTOR.reset(token)
