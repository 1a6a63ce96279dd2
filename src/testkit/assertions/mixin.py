"""unittest integration."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from testkit.assertions._base import AssertionResult
from testkit.assertions.difference import DifferenceAssertion, assert_difference, assert_no_difference
from testkit.assertions.presence import assert_blank, assert_present
from testkit.assertions.probes import ProbeInput


class AssertionsMixin:
    """Adds the difference and presence assertions to a ``unittest.TestCase``.

    Textual probe expressions resolve in the scope of the calling test method::

        class ArticlesTest(AssertionsMixin, unittest.TestCase):
            def test_create(self):
                with self.assertDifference("Article.count()"):
                    self.client.post("/articles", data={...})
    """

    def assertDifference(
        self,
        expressions: ProbeInput | Iterable[ProbeInput],
        difference: int | float = 1,
        msg: str | None = None,
        block: Callable[[], Any] | None = None,
        *,
        namespace: Mapping[str, Any] | None = None,
        fail_fast: bool | None = None,
    ) -> DifferenceAssertion | list[AssertionResult]:
        return assert_difference(
            expressions, difference, msg, block, namespace=namespace, fail_fast=fail_fast, stacklevel=2
        )

    def assertNoDifference(
        self,
        expressions: ProbeInput | Iterable[ProbeInput],
        msg: str | None = None,
        block: Callable[[], Any] | None = None,
        *,
        namespace: Mapping[str, Any] | None = None,
        fail_fast: bool | None = None,
    ) -> DifferenceAssertion | list[AssertionResult]:
        return assert_no_difference(
            expressions, msg, block, namespace=namespace, fail_fast=fail_fast, stacklevel=2
        )

    def assertBlank(self, obj: Any, msg: str | None = None) -> AssertionResult:
        return assert_blank(obj, msg)

    def assertPresent(self, obj: Any, msg: str | None = None) -> AssertionResult:
        return assert_present(obj, msg)
