"""Tests for the unittest.TestCase integration."""

import unittest

from testkit import AssertionFailedError, AssertionsMixin


class TestAssertionsMixin(AssertionsMixin, unittest.TestCase):
    def test_assert_difference_in_method_scope(self):
        articles = []
        with self.assertDifference("len(articles)"):
            articles.append("new")

    def test_assert_difference_with_block(self):
        articles = []
        results = self.assertDifference(lambda: len(articles), 2, block=lambda: articles.extend("ab"))
        self.assertTrue(all(r.passed for r in results))

    def test_assert_no_difference_in_method_scope(self):
        articles = ["one"]
        with self.assertNoDifference("len(articles)", "no article should be created"):
            pass

    def test_failure_is_an_assertion_error(self):
        counter = 1
        with self.assertRaises(AssertionError) as ctx:
            with self.assertDifference("counter", 1, "counter should grow"):
                pass

        self.assertIsInstance(ctx.exception, AssertionFailedError)
        self.assertIn("counter should grow.\n'counter' didn't change by 1", str(ctx.exception))

    def test_assert_blank_and_present(self):
        self.assertBlank("")
        self.assertPresent("x")
        with self.assertRaises(AssertionFailedError):
            self.assertPresent(None, "value required")

    def test_fail_fast_is_forwarded(self):
        state = {"a": 0, "b": 0}
        with self.assertRaises(AssertionFailedError) as ctx:
            self.assertDifference(["a", "b"], namespace=state, block=lambda: None, fail_fast=False)
        self.assertEqual(len(ctx.exception.failures), 2)

        with self.assertRaises(AssertionFailedError) as ctx:
            self.assertNoDifference(
                ["a", "b"], namespace=state, block=lambda: state.update(a=1, b=1), fail_fast=False
            )
        self.assertEqual(len(ctx.exception.failures), 2)
