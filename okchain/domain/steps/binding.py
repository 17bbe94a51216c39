# okchain/domain/steps/binding.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from okchain.domain.bindings import Bindings
from okchain.domain.callables import ensure_unary
from okchain.domain.patterns import pattern_text
from okchain.domain.steps.base import Step


@dataclass(frozen=True)
class BindingStep(Step):
    """
    ``pattern <- expression``: the expression must return an outcome.

    Example:
        BindingStep("a", lambda env: safe_div(8, 2))
        BindingStep(("q", "r"), lambda env: divmod_checked(env.a, 3))
    """

    pattern: Any
    expression: Callable[[Bindings], Any]

    def __post_init__(self) -> None:
        ensure_unary(self.expression)

    def pattern_text(self) -> str:
        return pattern_text(self.pattern)
