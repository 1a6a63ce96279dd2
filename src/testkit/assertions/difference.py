"""Assertions on how much a value changes while a block of code runs."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable, Mapping
from types import TracebackType
from typing import Any, overload

from testkit.assertions._base import AssertionResult, build_result, raise_for_failures
from testkit.assertions.probes import ProbeInput, ProbeSet
from testkit.config import get_settings

logger = logging.getLogger(__name__)


class DifferenceAssertion:
    """Checks that every probe changes by ``difference`` across a block.

    Usable as a context manager wrapping the block, or through :meth:`run`
    with the block as a callable. Before-values are sampled on enter; on a
    normal exit every after-value is sampled first and only then compared
    position by position. If the block raises, the exception propagates and
    nothing is compared.

    Parameters
    ----------
    probes : ProbeSet
        Probes sampled before and after the block.
    difference : int | float
        Expected change of every probe.
    message : str | None
        Prefix for failure diagnostics.
    fail_fast : bool
        Raise on the first mismatching probe instead of reporting all of them.

    Attributes
    ----------
    results : list[AssertionResult]
        Per-probe results, filled once the block has completed.
    """

    name = "assert_difference"

    def __init__(
        self,
        probes: ProbeSet,
        difference: int | float = 1,
        message: str | None = None,
        fail_fast: bool = True,
    ):
        self.probes = probes
        self.difference = difference
        self.message = message
        self.fail_fast = fail_fast
        self.results: list[AssertionResult] = []
        self._before: list[Any] | None = None
        self._entered = False

    def __enter__(self) -> DifferenceAssertion:
        if self._entered:
            raise RuntimeError("A DifferenceAssertion can only wrap one block")
        self._entered = True
        try:
            self._before = self.probes.sample()
        except BaseException:
            self.probes.release()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is None:
                self._verify()
        finally:
            self.probes.release()

    def __del__(self) -> None:
        if not getattr(self, "_entered", True):
            self.probes.release()
            warnings.warn(
                f"{self.name} was never entered; use it in a `with` statement or pass block=",
                RuntimeWarning,
                stacklevel=2,
            )

    def run(self, block: Callable[[], Any]) -> list[AssertionResult]:
        """Run ``block`` exactly once between the two samplings."""
        with self:
            block()
        return self.results

    def _diagnostic(self, label: str, expected: Any, actual: Any) -> str:
        error = f"{label} didn't change by {self.difference}.\nExpected {expected!r}, got {actual!r}"
        if self.message:
            error = f"{self.message}.\n{error}"
        return error

    def _verify(self) -> None:
        assert self._before is not None
        after = self.probes.sample()

        for probe, before_value, after_value in zip(self.probes, self._before, after):
            expected = before_value + self.difference
            passed = expected == after_value
            logger.debug(
                "%s: %s went from %r to %r (expected %r)",
                self.name,
                probe.label,
                before_value,
                after_value,
                expected,
            )
            result = build_result(
                name=self.name,
                passed=passed,
                message=self._diagnostic(probe.label, expected, after_value),
                reference=expected,
                actual=after_value,
            )
            self.results.append(result)
            if self.fail_fast:
                raise_for_failures([result])

        raise_for_failures(self.results)


@overload
def assert_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    difference: int | float = ...,
    message: str | None = ...,
    block: None = ...,
    *,
    namespace: Mapping[str, Any] | None = ...,
    fail_fast: bool | None = ...,
    stacklevel: int = ...,
) -> DifferenceAssertion: ...


@overload
def assert_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    difference: int | float = ...,
    message: str | None = ...,
    block: Callable[[], Any] = ...,
    *,
    namespace: Mapping[str, Any] | None = ...,
    fail_fast: bool | None = ...,
    stacklevel: int = ...,
) -> list[AssertionResult]: ...


def assert_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    difference: int | float = 1,
    message: str | None = None,
    block: Callable[[], Any] | None = None,
    *,
    namespace: Mapping[str, Any] | None = None,
    fail_fast: bool | None = None,
    stacklevel: int = 1,
) -> DifferenceAssertion | list[AssertionResult]:
    """Assert that the probed values change by ``difference`` across a block.

    Textual expressions are evaluated in the caller's scope, or against
    ``namespace`` when given::

        with assert_difference("Article.count()"):
            client.post("/articles", data={...})

        with assert_difference(["Article.count()", "Post.count()"], 2):
            ...

        assert_difference(lambda: len(outbox), -1, "A message should be sent", block=flush)

    Parameters
    ----------
    expressions
        A textual expression, a zero-argument callable, a `Probe`, or a list
        mixing those. Probes are compared position by position.
    difference
        Expected change of every probe. Defaults to +1.
    message
        Prepended to the failure diagnostic.
    block
        Zero-argument callable run exactly once. When omitted, a context
        manager wrapping the ``with`` body is returned instead; it checks
        nothing until used in a ``with`` statement, and warns with a
        ``RuntimeWarning`` if it is discarded unused.
    namespace
        Mapping textual expressions are evaluated against.
    fail_fast
        Stop at the first mismatching probe. Defaults to the ``fail_fast``
        setting.
    stacklevel
        Frame whose scope textual expressions are evaluated in; 1 is the
        direct caller. Wrappers increase it by one per level.

    Returns
    -------
    DifferenceAssertion | list[AssertionResult]
        The context manager when ``block`` is omitted, else the per-probe
        results.

    Raises
    ------
    AssertionFailedError
        If any probe did not change by ``difference``.
    """
    probes = ProbeSet.build(expressions, namespace=namespace, stacklevel=stacklevel + 1)
    if fail_fast is None:
        fail_fast = get_settings().fail_fast
    check = DifferenceAssertion(probes, difference, message, fail_fast)
    if block is None:
        return check
    return check.run(block)


@overload
def assert_no_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    message: str | None = ...,
    block: None = ...,
    *,
    namespace: Mapping[str, Any] | None = ...,
    fail_fast: bool | None = ...,
    stacklevel: int = ...,
) -> DifferenceAssertion: ...


@overload
def assert_no_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    message: str | None = ...,
    block: Callable[[], Any] = ...,
    *,
    namespace: Mapping[str, Any] | None = ...,
    fail_fast: bool | None = ...,
    stacklevel: int = ...,
) -> list[AssertionResult]: ...


def assert_no_difference(
    expressions: ProbeInput | Iterable[ProbeInput],
    message: str | None = None,
    block: Callable[[], Any] | None = None,
    *,
    namespace: Mapping[str, Any] | None = None,
    fail_fast: bool | None = None,
    stacklevel: int = 1,
) -> DifferenceAssertion | list[AssertionResult]:
    """Assert that the probed values are unchanged across a block.

    Same as ``assert_difference(expressions, 0, message, block)``::

        with assert_no_difference("Article.count()", "An Article should not be created"):
            client.post("/articles", data=invalid_attributes)
    """
    return assert_difference(
        expressions,
        0,
        message,
        block,
        namespace=namespace,
        fail_fast=fail_fast,
        stacklevel=stacklevel + 1,
    )
