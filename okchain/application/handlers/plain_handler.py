# okchain/application/handlers/plain_handler.py
from __future__ import annotations

from okchain.application.handlers.base import StepHandler
from okchain.application.outcome import StepOutcome
from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.bindings import Bindings, extend
from okchain.domain.exceptions import BindError
from okchain.domain.patterns import match_binding, pattern_text
from okchain.domain.steps.plain import PlainStep


class PlainStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, PlainStep)

    def handle(self, step: PlainStep, bindings: Bindings, deps: ExecutionDeps) -> StepOutcome:
        value = step.expression(bindings)
        if step.pattern is None:
            return StepOutcome(bindings=bindings, result=value)

        matched = match_binding(step.pattern, value)
        if matched is None:
            raise BindError(value, lhs=pattern_text(step.pattern), rhs=step.describe())
        return StepOutcome(bindings=extend(bindings, matched), result=value)
