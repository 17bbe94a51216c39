import pytest

from okchain.application.executor.handler_registry import HandlerRegistry
from okchain.application.executor.recovery import RecoveryPhase
from okchain.application.executor.step_executor import StepExecutor
from okchain.application.handlers.binding_handler import BindingStepHandler
from okchain.application.handlers.plain_handler import PlainStepHandler
from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.exceptions import MalformedOutcome
from okchain.domain.outcome import OK, Failure, Success
from okchain.domain.patterns import ANY, Where
from okchain.domain.steps import BindingStep, PlainStep, RecoveryClause


def safe_div(a, b):
    if b == 0:
        return Failure("zero_division")
    return Success(a / b)


class MockLogger:
    def __init__(self):
        self.calls = []

    def debug(self, event, **fields):
        self.calls.append({"event": event, "level": "debug", **fields})

    def info(self, event, **fields):
        self.calls.append({"event": event, "level": "info", **fields})

    def error(self, event, **fields):
        self.calls.append({"event": event, "level": "error", **fields})

    def bind(self, **fields):
        return self


def failing_steps():
    return [
        BindingStep("a", lambda env: safe_div(8, 2)),
        BindingStep("_", lambda env: safe_div(env.a, 0)),
        PlainStep(lambda env: Success(env.a)),
    ]


class TestRecoveryInExecutor:
    def create_executor(self, logger=None):
        registry = HandlerRegistry(handlers=[BindingStepHandler(), PlainStepHandler()])
        return StepExecutor(registry=registry, deps=ExecutionDeps(logger=logger or MockLogger()))

    def test_matching_clause_rewrites_failure(self):
        executor = self.create_executor()
        result = executor.execute(
            failing_steps(),
            [
                RecoveryClause("other", lambda reason: Success("bob")),
                RecoveryClause("zero_division", lambda reason: Failure("inf")),
            ],
        )
        assert result == Failure("inf")

    def test_unmatched_clauses_fall_back_to_original_failure(self):
        executor = self.create_executor()
        result = executor.execute(
            failing_steps(),
            [RecoveryClause("other", lambda reason: Success("bob"))],
        )
        assert result == Failure("zero_division")

    def test_recovery_can_turn_failure_into_success(self):
        executor = self.create_executor()
        result = executor.execute(
            failing_steps(),
            [RecoveryClause("zero_division", lambda reason: Success(float("inf")))],
        )
        assert result == Success(float("inf"))

    def test_never_fires_on_success(self):
        calls = []
        executor = self.create_executor()
        result = executor.execute(
            [BindingStep("a", lambda env: safe_div(8, 2))],
            [RecoveryClause(ANY, lambda reason: calls.append(reason) or Failure("nope"))],
        )
        assert result == Success(4.0)
        assert calls == []

    def test_first_matching_clause_wins(self):
        executor = self.create_executor()
        result = executor.execute(
            failing_steps(),
            [
                RecoveryClause(ANY, lambda reason: Failure(("first", reason))),
                RecoveryClause("zero_division", lambda reason: Failure("second")),
            ],
        )
        assert result == Failure(("first", "zero_division"))

    def test_handler_receives_normalized_reason(self):
        seen = []
        executor = self.create_executor()
        executor.execute(
            [BindingStep("_", lambda env: Failure("type", "failure"))],
            [RecoveryClause(("type", ANY), lambda reason: seen.append(reason) or Failure(reason))],
        )
        assert seen == [("type", "failure")]

    def test_non_outcome_from_handler_is_malformed(self):
        executor = self.create_executor()
        with pytest.raises(MalformedOutcome) as exc_info:
            executor.execute(
                failing_steps(),
                [RecoveryClause("zero_division", lambda reason: "not_a_result", text="-> not_a_result")],
            )
        assert exc_info.value.value == "not_a_result"
        assert exc_info.value.expression == "-> not_a_result"

    def test_sentinel_from_handler_is_malformed(self):
        executor = self.create_executor()
        with pytest.raises(MalformedOutcome):
            executor.execute(failing_steps(), [RecoveryClause(ANY, lambda reason: OK)])

    def test_no_clauses_returns_result_as_is(self):
        executor = self.create_executor()
        assert executor.execute(failing_steps()) == Failure("zero_division")
        assert executor.execute(failing_steps(), []) == Failure("zero_division")


class TestRecoveryPhase:
    def test_flattened_failure_from_handler_is_normalized(self):
        phase = RecoveryPhase([RecoveryClause(ANY, lambda reason: Failure("wrapped", reason))])
        result = phase.apply(Failure("x"), ExecutionDeps(logger=MockLogger()))
        assert result == Failure(("wrapped", "x"))

    def test_where_pattern(self):
        phase = RecoveryPhase([RecoveryClause(Where(lambda r: r.startswith("zero")), lambda r: Success(0))])
        assert phase.apply(Failure("zero_division"), ExecutionDeps(logger=MockLogger())) == Success(0)

    def test_exception_type_pattern(self):
        phase = RecoveryPhase([
            RecoveryClause(("try_catch", ZeroDivisionError), lambda reason: Success("div")),
        ])
        result = phase.apply(Failure(("try_catch", ZeroDivisionError())), ExecutionDeps(logger=MockLogger()))
        assert result == Success("div")

    def test_integer_clause_skips_boolean_reason(self):
        phase = RecoveryPhase([
            RecoveryClause(1, lambda r: Success("one")),
            RecoveryClause(True, lambda r: Success("true")),
        ])
        deps = ExecutionDeps(logger=MockLogger())
        assert phase.apply(Failure(True), deps) == Success("true")
        assert phase.apply(Failure(1), deps) == Success("one")
        assert phase.apply(Failure(False), deps) == Failure(False)

    def test_logs_matched_clause(self):
        logger = MockLogger()
        phase = RecoveryPhase([
            RecoveryClause("other", lambda r: Success(1)),
            RecoveryClause("zero_division", lambda r: Failure("inf")),
        ])
        phase.apply(Failure("zero_division"), ExecutionDeps(logger=logger))
        assert logger.calls == [
            {"event": "recovery.matched", "level": "debug", "clause": 1, "pattern": "'zero_division'"},
        ]

    def test_logs_fallback(self):
        logger = MockLogger()
        phase = RecoveryPhase([RecoveryClause("other", lambda r: Success(1))])
        result = phase.apply(Failure("zero_division"), ExecutionDeps(logger=logger, log_values=True))
        assert result == Failure("zero_division")
        assert logger.calls == [
            {"event": "recovery.fallback", "level": "debug", "reason": "'zero_division'"},
        ]
