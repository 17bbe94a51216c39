# okchain/application/handlers/binding_handler.py
from __future__ import annotations

from typing import Any

from okchain.application.handlers.base import StepHandler
from okchain.application.outcome import StepOutcome
from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.bindings import Bindings, extend
from okchain.domain.exceptions import BindError
from okchain.domain.outcome import OK, Failure, Success, normalize
from okchain.domain.patterns import is_wildcard, match_binding
from okchain.domain.steps.binding import BindingStep


class BindingStepHandler(StepHandler):
    """
    Handles ``pattern <- expression``.

    Success values are matched into the scope, failures (flattened or not)
    halt the sequence, anything else is a ``BindError``.
    """

    def supports(self, step) -> bool:
        return isinstance(step, BindingStep)

    def handle(self, step: BindingStep, bindings: Bindings, deps: ExecutionDeps) -> StepOutcome:
        raw = step.expression(bindings)

        if isinstance(raw, Failure):
            return StepOutcome(bindings=bindings, result=normalize(raw), halted=True)

        if isinstance(raw, Success):
            if self._ignores_value(step.pattern):
                return StepOutcome(bindings=bindings, result=raw)
            matched = match_binding(step.pattern, raw.value)
            if matched is not None:
                return StepOutcome(bindings=extend(bindings, matched), result=raw)
        elif raw is OK and self._ignores_value(step.pattern):
            return StepOutcome(bindings=bindings, result=Success(OK))

        raise BindError(raw, lhs=step.pattern_text(), rhs=step.describe())

    def _ignores_value(self, pattern: Any) -> bool:
        return is_wildcard(pattern) or pattern is OK
