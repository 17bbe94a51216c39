# okchain/application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from okchain.application.outcome import StepOutcome
from okchain.domain.bindings import Bindings
from okchain.domain.steps.base import Step

if TYPE_CHECKING:
    from okchain.application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    @abstractmethod
    def supports(self, step: Step) -> bool: ...

    @abstractmethod
    def handle(self, step: Step, bindings: Bindings, deps: "ExecutionDeps") -> StepOutcome: ...
