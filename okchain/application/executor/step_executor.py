# okchain/application/executor/step_executor.py
from __future__ import annotations

import time
import uuid
from typing import Any, List, Optional, Sequence

from okchain.application.executor.handler_registry import HandlerRegistry
from okchain.application.executor.recovery import RecoveryPhase
from okchain.application.outcome import StepOutcome
from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.bindings import Bindings
from okchain.domain.exceptions import ContractViolation, EmptySequenceError, MalformedOutcome
from okchain.domain.outcome import Outcome, normalize
from okchain.domain.steps.base import RecoveryClause, Step


class _Absent:
    def __repr__(self) -> str:
        return "ABSENT"


# result of evaluating no steps at all; never returned by execute()
ABSENT = _Absent()


class StepExecutor:
    """
    Evaluates a step list head to tail, stopping at the first failure.

    Each ``execute`` call gets fresh bindings and its own ``sequence_id``;
    the executor itself holds no per-run state.
    """

    def __init__(self, registry: HandlerRegistry, deps: ExecutionDeps):
        self._registry = registry
        self._deps = deps

    def execute(
        self,
        steps: Sequence[Step],
        recovery: Optional[Sequence[RecoveryClause]] = None,
    ) -> Outcome:
        deps = self._deps.with_logger(self._deps.logger.bind(sequence_id=uuid.uuid4().hex))

        try:
            result = self.evaluate(steps, deps)
            if result is ABSENT:
                raise EmptySequenceError()
            if recovery:
                result = RecoveryPhase(recovery).apply(result, deps)
        except ContractViolation as exc:
            deps.logger.error(
                "contract.violation",
                error_type=type(exc).__name__,
                expression=getattr(exc, "rhs", None) or getattr(exc, "expression", None),
            )
            raise

        deps.logger.debug("sequence.end", ok=result.is_success())
        return result

    def evaluate(self, steps: Sequence[Step], deps: ExecutionDeps) -> Any:
        """Run the steps without the recovery phase. Returns ``ABSENT`` for no steps."""
        step_list: List[Step] = list(steps)
        if not step_list:
            return ABSENT

        deps.logger.debug("sequence.start", steps=len(step_list))

        bindings = Bindings()
        outcome: Optional[StepOutcome] = None
        for index, step in enumerate(step_list):
            outcome = self._execute_step(index, step, bindings, deps)
            if outcome.halted:
                deps.logger.debug(
                    "sequence.short_circuit",
                    index=index,
                    expression=step.describe(),
                    reason=deps.describe(outcome.result.reason),
                )
                return outcome.result
            bindings = outcome.bindings

        return self._terminal(step_list[-1], outcome.result)

    def _execute_step(self, index: int, step: Step, bindings: Bindings, deps: ExecutionDeps) -> StepOutcome:
        handler = self._registry.get_handler(step)
        if not deps.trace_steps:
            return handler.handle(step, bindings, deps)

        deps.logger.debug(
            "step.start",
            index=index,
            step_type=type(step).__name__,
            expression=step.describe(),
        )
        t0 = time.perf_counter()

        outcome = handler.handle(step, bindings, deps)

        deps.logger.debug(
            "step.end",
            index=index,
            halted=outcome.halted,
            result=deps.describe(outcome.result),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return outcome

    def _terminal(self, step: Step, value: Any) -> Outcome:
        # the last value is the answer; it is not wrapped, only normalized
        try:
            return normalize(value)
        except MalformedOutcome:
            raise MalformedOutcome(value, expression=step.describe()) from None
