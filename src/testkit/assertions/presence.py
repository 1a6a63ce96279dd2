"""Assertions on blank/present semantics."""

import logging
from typing import Any

from testkit.assertions._base import AssertionResult, assert_true
from testkit.blank import is_blank, is_present
from testkit.formatting import format_value

logger = logging.getLogger(__name__)


def assert_blank(obj: Any, message: str | None = None) -> AssertionResult:
    """Assert that ``obj`` is blank.

    >>> assert_blank([]).passed
    True

    Raises
    ------
    AssertionFailedError
        With ``message``, or "<obj> is not blank" by default.
    """
    if message is None:
        message = f"{format_value(obj)} is not blank"
    blank = is_blank(obj)
    logger.debug("assert_blank: %r -> %s", obj, blank)
    return assert_true(blank, message, name="assert_blank", actual=obj)


def assert_present(obj: Any, message: str | None = None) -> AssertionResult:
    """Assert that ``obj`` is present.

    >>> assert_present({"data": "x"}).passed
    True

    Raises
    ------
    AssertionFailedError
        With ``message``, or "<obj> is blank" by default.
    """
    if message is None:
        message = f"{format_value(obj)} is blank"
    present = is_present(obj)
    logger.debug("assert_present: %r -> %s", obj, present)
    return assert_true(present, message, name="assert_present", actual=obj)
