import pytest

from testkit.assertions.probes import EvaluationScope, Probe, ProbeSet

TOTAL = 3


def test_single_expression_becomes_one_probe():
    value = 4
    probes = ProbeSet.build("value * 2")
    assert len(probes) == 1
    assert probes.labels == ["'value * 2'"]
    assert probes.sample() == [8]


def test_expression_reads_current_locals():
    value = 1
    probes = ProbeSet.build("value")
    value = 2
    assert probes.sample() == [2]


def test_expression_reads_module_globals():
    assert ProbeSet.build("TOTAL + 1").sample() == [4]


def test_stacklevel_selects_outer_frame():
    def helper():
        return ProbeSet.build("marker", stacklevel=2)

    marker = "outer"
    assert helper().sample() == ["outer"]


def test_namespace_takes_precedence_over_frame():
    name = "frame"
    probes = ProbeSet.build("name", namespace={"name": "namespace"})
    assert probes.sample() == ["namespace"]


def test_mixed_inputs_keep_order():
    explicit = Probe(fn=lambda: "explicit", label="explicit")

    def from_callable() -> str:
        return "callable"

    probes = ProbeSet.build(["'text'", from_callable, explicit])
    assert probes.sample() == ["text", "callable", "explicit"]
    assert probes.labels[2] == "explicit"
    assert probes.labels[1].endswith("from_callable")


def test_tuple_of_probes():
    probes = ProbeSet.build((lambda: 1, lambda: 2))
    assert probes.sample() == [1, 2]


def test_released_scope_cannot_evaluate():
    probes = ProbeSet.build("1")
    probes.release()
    with pytest.raises(RuntimeError, match="released"):
        probes.sample()


def test_namespace_scope_survives_release():
    probes = ProbeSet.build("x", namespace={"x": 1})
    probes.release()
    assert probes.sample() == [1]


def test_evaluation_scope_requires_a_source():
    with pytest.raises(ValueError):
        EvaluationScope()


def test_rejects_unsupported_items():
    with pytest.raises(TypeError, match="got NoneType"):
        ProbeSet.build([lambda: 1, None])
