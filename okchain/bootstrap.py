# okchain/bootstrap.py
"""Wiring of the default executor: settings, logger adapter, step handlers."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional, Sequence

from okchain.application.executor.handler_registry import HandlerRegistry
from okchain.application.executor.step_executor import StepExecutor
from okchain.application.handlers.binding_handler import BindingStepHandler
from okchain.application.handlers.plain_handler import PlainStepHandler
from okchain.application.ports.logger import LoggerPort
from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.outcome import Outcome
from okchain.domain.steps.base import RecoveryClause, Step
from okchain.infrastructure.config.settings import OkChainSettings, load_settings
from okchain.infrastructure.logging.console_logger import ConsoleLogger
from okchain.infrastructure.logging.loguru_logger import LoguruLogger


def build_logger(settings: OkChainSettings) -> LoggerPort:
    if settings.log_sink == "console":
        return ConsoleLogger(level=settings.log_level)
    return LoguruLogger(level=settings.log_level)


def build_executor(
    settings: Optional[OkChainSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> StepExecutor:
    settings = settings or OkChainSettings()
    registry = HandlerRegistry(handlers=[BindingStepHandler(), PlainStepHandler()])
    deps = ExecutionDeps(
        logger=logger or build_logger(settings),
        trace_steps=settings.trace_steps,
        log_values=settings.log_values,
        max_value_length=settings.max_value_length,
    )
    return StepExecutor(registry=registry, deps=deps)


@lru_cache(maxsize=1)
def default_executor() -> StepExecutor:
    return build_executor(load_settings())


def ok_with(
    steps: Sequence[Step],
    recover: Optional[Sequence[RecoveryClause]] = None,
    *,
    executor: Optional[StepExecutor] = None,
) -> Outcome:
    """
    Run ``steps`` with extract-or-abort semantics, then the ``recover`` clauses.

        ok_with([
            BindingStep("a", lambda env: safe_div(8, 2)),
            BindingStep("b", lambda env: safe_div(env.a, 2)),
            PlainStep(lambda env: Success(env.b)),
        ])
        # Success(2.0)
    """
    return (executor or default_executor()).execute(steps, recover)
