"""ChainEvaluator: folds a pipeline over an initial value.

Evaluation is fail-soft. When a step raises, the failure is recorded and
the value from before that step is carried forward, so the output is what
the chain would produce without the broken step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from powerstrings.core.errors import PowerStringsError, TransformerFailure
from powerstrings.core.ir import TransformerInvocation
from powerstrings.core.value import Value
from powerstrings.pipelines.applier import apply_invocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRecord:
    """Outcome of one pipeline step."""

    index: int
    transformer_id: str
    error: PowerStringsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ChainResult:
    """Final value of a chain run plus the per-step outcomes."""

    value: Value
    steps: list[StepRecord] = field(default_factory=list)

    @property
    def failures(self) -> list[StepRecord]:
        return [s for s in self.steps if not s.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


def _apply_step(value: Value, invocation: TransformerInvocation) -> Value:
    # Values nested past the interpreter recursion limit fail the step
    try:
        return apply_invocation(value, invocation)
    except RecursionError as exc:
        raise TransformerFailure(invocation.transformer_id, exc) from exc


class ChainEvaluator:
    """Runs invocations in order, isolating failures per step."""

    def __init__(self) -> None:
        self._stage_log: list[StepRecord] = []

    def run(self, initial: Value, pipeline: Iterable[TransformerInvocation]) -> ChainResult:
        value = initial
        steps: list[StepRecord] = []

        for index, invocation in enumerate(pipeline):
            try:
                value = _apply_step(value, invocation)
            except PowerStringsError as exc:
                logger.warning(
                    "Step %d (%s) failed and was skipped: %s",
                    index, invocation.transformer_id, exc,
                )
                steps.append(StepRecord(index, invocation.transformer_id, exc))
                continue
            logger.debug("Step %d applied: %s", index, invocation.describe())
            steps.append(StepRecord(index, invocation.transformer_id))

        self._stage_log = steps
        return ChainResult(value=value, steps=list(steps))

    @property
    def stage_log(self) -> list[StepRecord]:
        """Step outcomes of the most recent run."""
        return list(self._stage_log)


def run_chain(initial: Value, pipeline: Iterable[TransformerInvocation]) -> ChainResult:
    """Evaluate ``pipeline`` over ``initial`` with a fresh evaluator."""
    return ChainEvaluator().run(initial, pipeline)
