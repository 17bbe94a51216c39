# okchain/application/executor/handler_registry.py
from __future__ import annotations

from typing import List

from okchain.application.handlers.base import StepHandler
from okchain.domain.exceptions import UnsupportedStep
from okchain.domain.steps.base import Step


class HandlerRegistry:
    def __init__(self, handlers: List[StepHandler]):
        self._handlers = list(handlers)

    def get_handler(self, step: Step) -> StepHandler:
        for h in self._handlers:
            if h.supports(step):
                return h
        raise UnsupportedStep(step)
