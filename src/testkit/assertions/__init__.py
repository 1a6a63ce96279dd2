"""Assertion helpers for framework tests."""

from testkit.assertions._base import (
    AssertionFailedError,
    AssertionMetadata,
    AssertionResult,
    assert_equal,
    assert_true,
)
from testkit.assertions.difference import DifferenceAssertion, assert_difference, assert_no_difference
from testkit.assertions.mixin import AssertionsMixin
from testkit.assertions.presence import assert_blank, assert_present
from testkit.assertions.probes import EvaluationScope, Probe, ProbeSet

__all__ = [
    "AssertionFailedError",
    "AssertionMetadata",
    "AssertionResult",
    "AssertionsMixin",
    "DifferenceAssertion",
    "EvaluationScope",
    "Probe",
    "ProbeSet",
    "assert_blank",
    "assert_difference",
    "assert_equal",
    "assert_no_difference",
    "assert_present",
    "assert_true",
]
