"""Assertion result types and the primitives every helper builds on."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from testkit.context import get_assertions_collector

logger = logging.getLogger(__name__)


class AssertionMetadata(BaseModel):
    """Metadata for an assertion.

    Attributes
    ----------
    name : str
        Name of the assertion helper that produced the result.
    uuid : UUID
        Unique identifier for this evaluation instance.
    timestamp : datetime
        UTC timestamp when the assertion was evaluated.
    reference : Any
        Value the assertion expected.
    actual : Any
        Value actually observed.
    """

    name: str
    uuid: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    reference: Any = None
    actual: Any = None


class AssertionResult(BaseModel):
    """Result of evaluating a single assertion.

    Results created while an :func:`~testkit.context.assertions_collector`
    is active are appended to its list.

    Attributes
    ----------
    metadata : AssertionMetadata
        Contextual details about the evaluated assertion.
    passed : bool
        Whether the assertion passed.
    message : str | None
        Diagnostic explaining a failure; None when the assertion passed.
    """

    metadata: AssertionMetadata
    passed: bool
    message: str | None = None

    def model_post_init(self, __context: Any) -> None:
        if (collector := get_assertions_collector()) is not None:
            collector.append(self)


class AssertionFailedError(AssertionError):
    """AssertionError with the failing AssertionResult(s) attached.

    Attributes
    ----------
    assertion_result : AssertionResult
        The first failing result.
    failures : list[AssertionResult]
        Every failing result reported by this error.
    """

    def __init__(self, result: AssertionResult, failures: Sequence[AssertionResult] | None = None):
        self.assertion_result = result
        self.failures = list(failures) if failures else [result]
        details = "\n".join(f.message for f in self.failures if f.message)
        message = f"{result.metadata.name} failed"
        if details:
            message += f": {details}"
        super().__init__(message)


def build_result(
    *,
    name: str,
    passed: bool,
    message: str | None,
    reference: Any = None,
    actual: Any = None,
) -> AssertionResult:
    """Create an assertion result without raising on failure."""
    return AssertionResult(
        metadata=AssertionMetadata(name=name, reference=reference, actual=actual),
        passed=passed,
        message=None if passed else message,
    )


def raise_for_failures(results: Sequence[AssertionResult]) -> None:
    """Raise AssertionFailedError if any of ``results`` failed."""
    failures = [r for r in results if not r.passed]
    if failures:
        raise AssertionFailedError(failures[0], failures)


def assert_equal(expected: Any, actual: Any, message: str, *, name: str = "assert_equal") -> AssertionResult:
    """Check that ``actual`` equals ``expected``.

    Parameters
    ----------
    expected : Any
        Expected value.
    actual : Any
        Observed value.
    message : str
        Diagnostic used when the values differ.
    name : str
        Assertion name reported in the result metadata.

    Returns
    -------
    AssertionResult
        Result with ``passed=True``.

    Raises
    ------
    AssertionFailedError
        If the values are not equal.
    """
    passed = expected == actual
    logger.debug("%s: expected %r, got %r", name, expected, actual)
    result = build_result(name=name, passed=passed, message=message, reference=expected, actual=actual)
    raise_for_failures([result])
    return result


def assert_true(condition: Any, message: str, *, name: str = "assert_true", actual: Any = None) -> AssertionResult:
    """Check that ``condition`` is truthy.

    Raises
    ------
    AssertionFailedError
        If ``condition`` is falsy.
    """
    result = build_result(name=name, passed=bool(condition), message=message, reference=True, actual=actual)
    raise_for_failures([result])
    return result
