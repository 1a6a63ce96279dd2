"""Testkit - assertion helpers for web application tests."""

from .assertions import (
    AssertionFailedError,
    AssertionResult,
    AssertionsMixin,
    Probe,
    assert_blank,
    assert_difference,
    assert_no_difference,
    assert_present,
)
from .blank import Blankable, is_blank, is_present, presence, register_blank
from .config import AssertionSettings, get_settings
from .context import assertions_collector
from .version import __version__


__all__ = [
    # Assertions
    "assert_difference",
    "assert_no_difference",
    "assert_blank",
    "assert_present",
    "AssertionsMixin",
    "AssertionFailedError",
    "AssertionResult",
    "Probe",
    # Blank/present
    "Blankable",
    "is_blank",
    "is_present",
    "presence",
    "register_blank",
    # Configuration
    "AssertionSettings",
    "get_settings",
    "assertions_collector",
]
