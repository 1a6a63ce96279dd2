"""Probes: value-producing functions sampled before and after a block runs."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import CodeType, FrameType
from typing import Any, Union

from testkit.formatting import format_callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Probe:
    """A labelled zero-argument function.

    Attributes
    ----------
    fn
        Returns the sampled value when called.
    label
        Display form of the probe used in diagnostics.
    """

    fn: Callable[[], Any]
    label: str

    def __call__(self) -> Any:
        return self.fn()

    @classmethod
    def from_callable(cls, fn: Callable[[], Any]) -> Probe:
        return cls(fn=fn, label=format_callable(fn))


ProbeInput = Union[str, Probe, Callable[[], Any]]


class EvaluationScope:
    """Where textual probe expressions are evaluated.

    Wraps either an explicit namespace mapping or a captured caller frame.
    Every evaluation builds a single globals mapping from the current
    contents of the frame (or namespace), so names rebound after the scope
    was captured resolve to their current values and locals stay visible
    inside lambdas, generator expressions and comprehensions.
    """

    def __init__(self, namespace: Mapping[str, Any] | None = None, frame: FrameType | None = None):
        if namespace is None and frame is None:
            raise ValueError("EvaluationScope needs a namespace or a frame")
        self._namespace = namespace
        self._frame = frame

    @classmethod
    def of_caller(cls, stacklevel: int = 1) -> EvaluationScope:
        """Capture the frame ``stacklevel`` levels above the function calling this."""
        frame = inspect.currentframe()
        if frame is None:
            raise RuntimeError(
                "Frame introspection is unavailable; pass namespace= to evaluate textual probes"
            )
        try:
            target = frame.f_back
            for _ in range(stacklevel):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                raise RuntimeError(f"No caller frame at stacklevel={stacklevel}")
            return cls(frame=target)
        finally:
            del frame

    def evaluate(self, code: CodeType) -> Any:
        if self._namespace is not None:
            return eval(code, dict(self._namespace))
        if self._frame is None:
            raise RuntimeError("Evaluation scope has already been released")
        return eval(code, {**self._frame.f_globals, **self._frame.f_locals})

    @property
    def holds_frame(self) -> bool:
        return self._frame is not None

    def release(self) -> None:
        """Drop the captured frame so it no longer keeps the caller's locals alive."""
        self._frame = None


def expression_probe(expression: str, scope: EvaluationScope) -> Probe:
    """Build a probe evaluating ``expression`` in ``scope``.

    The expression is compiled immediately, so a ``SyntaxError`` surfaces
    before any block runs.
    """
    code = compile(expression.strip(), "<probe>", "eval")
    return Probe(fn=lambda: scope.evaluate(code), label=repr(expression))


class ProbeSet:
    """Ordered probes, sampled together.

    Parameters
    ----------
    probes : list[Probe]
        Probes in comparison order.
    scope : EvaluationScope | None
        Scope shared by the textual probes, released by :meth:`release`.
    """

    def __init__(self, probes: list[Probe], scope: EvaluationScope | None = None):
        self.probes = probes
        self._scope = scope

    @classmethod
    def build(
        cls,
        expressions: ProbeInput | Iterable[ProbeInput],
        *,
        namespace: Mapping[str, Any] | None = None,
        stacklevel: int = 1,
    ) -> ProbeSet:
        """Build a probe set from a single probe input or a list of them.

        Parameters
        ----------
        expressions
            A textual expression, a zero-argument callable, a `Probe`, or an
            iterable mixing those.
        namespace
            Mapping textual expressions are evaluated against. When omitted
            they are evaluated in the scope of the caller frame selected by
            ``stacklevel``.
        stacklevel
            How many frames above ``build`` the evaluation scope lives; 1 is
            the direct caller.

        Raises
        ------
        TypeError
            If an input is neither a string, a callable nor a `Probe`.
        """
        if isinstance(expressions, (str, Probe)) or callable(expressions) or not isinstance(expressions, Iterable):
            items: list[Any] = [expressions]
        else:
            items = list(expressions)

        scope = None
        if any(isinstance(item, str) for item in items):
            if namespace is not None:
                scope = EvaluationScope(namespace=namespace)
            else:
                scope = EvaluationScope.of_caller(stacklevel)

        probes: list[Probe] = []
        try:
            for item in items:
                if isinstance(item, Probe):
                    probes.append(item)
                elif isinstance(item, str):
                    assert scope is not None
                    probes.append(expression_probe(item, scope))
                elif callable(item):
                    probes.append(Probe.from_callable(item))
                else:
                    raise TypeError(
                        f"Probe must be an expression string, a callable or a Probe, got {type(item).__name__}"
                    )
        except BaseException:
            if scope is not None:
                scope.release()
            raise
        return cls(probes, scope)

    def __len__(self) -> int:
        return len(self.probes)

    def __iter__(self):
        return iter(self.probes)

    @property
    def scope(self) -> EvaluationScope | None:
        return self._scope

    @property
    def labels(self) -> list[str]:
        return [probe.label for probe in self.probes]

    def sample(self) -> list[Any]:
        """Evaluate every probe, in order."""
        values = [probe() for probe in self.probes]
        logger.debug("Sampled %d probe(s): %r", len(values), values)
        return values

    def release(self) -> None:
        if self._scope is not None:
            self._scope.release()
