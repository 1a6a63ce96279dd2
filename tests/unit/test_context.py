from testkit import AssertionResult, assert_blank, assert_difference, assertions_collector
from testkit.assertions import AssertionFailedError, assert_equal


def test_collector_receives_results_inside_scope():
    results: list[AssertionResult] = []

    with assertions_collector(results):
        first = assert_blank([])
        second = assert_equal(1, 1, "unused")

    assert results == [first, second]

    # Outside the scope, results are not collected.
    assert_blank("")
    assert len(results) == 2


def test_collector_receives_failing_results():
    results: list[AssertionResult] = []

    with assertions_collector(results):
        try:
            assert_blank([1])
        except AssertionFailedError:
            pass

    assert len(results) == 1
    assert results[0].passed is False
    assert results[0].message == "[1] is not blank"


def test_collector_receives_one_result_per_probe():
    results: list[AssertionResult] = []
    counts = [0, 0]

    def block():
        counts[0] += 1
        counts[1] += 1

    with assertions_collector(results):
        assert_difference([lambda: counts[0], lambda: counts[1]], block=block)

    assert [r.metadata.name for r in results] == ["assert_difference", "assert_difference"]


def test_nested_collectors_restore_outer():
    outer: list[AssertionResult] = []
    inner: list[AssertionResult] = []

    with assertions_collector(outer):
        with assertions_collector(inner):
            assert_blank(None)
        assert_blank(None)

    assert len(inner) == 1
    assert len(outer) == 1
