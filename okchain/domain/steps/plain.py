# okchain/domain/steps/plain.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from okchain.domain.bindings import Bindings
from okchain.domain.callables import ensure_unary
from okchain.domain.steps.base import Step


@dataclass(frozen=True)
class PlainStep(Step):
    """
    Ordinary evaluation. The value is discarded unless this is the last step.

    With a ``pattern`` the raw value is matched and bound, e.g.
    ``PlainStep(lambda env: env.a + 1, pattern="b")``.
    """

    expression: Callable[[Bindings], Any]
    pattern: Any = None

    def __post_init__(self) -> None:
        ensure_unary(self.expression)
