# okchain/application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from okchain.application.ports.logger import LoggerPort
from okchain.application.services.value_summary import describe_value


@dataclass(frozen=True)
class ExecutionDeps:
    logger: LoggerPort
    trace_steps: bool = False
    log_values: bool = False
    max_value_length: int = 80

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)

    def describe(self, value: Any) -> str:
        return describe_value(value, self.log_values, self.max_value_length)
