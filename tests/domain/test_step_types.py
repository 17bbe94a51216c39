import pytest

from okchain.domain.exceptions import BindError, ContractViolation, InvalidCallee
from okchain.domain.steps import BindingStep, PlainStep, RecoveryClause, Step


def fetch(env):
    return env


class TestBindingStep:
    def test_create(self):
        step = BindingStep("a", fetch)
        assert step.pattern == "a"
        assert step.expression is fetch
        assert step.text is None

    def test_describe_uses_expression_name(self):
        assert BindingStep("a", fetch).describe() == "fetch"

    def test_describe_prefers_text(self):
        assert BindingStep("a", fetch, text="safe_div(8, 2)").describe() == "safe_div(8, 2)"

    def test_pattern_text(self):
        assert BindingStep(("q", "r"), fetch).pattern_text() == "(q, r)"

    def test_expression_must_take_the_bindings(self):
        with pytest.raises(InvalidCallee):
            BindingStep("a", lambda: 1)
        with pytest.raises(InvalidCallee):
            BindingStep("a", "not callable")

    def test_frozen(self):
        step = BindingStep("a", fetch)
        with pytest.raises(Exception):  # FrozenInstanceError
            step.pattern = "b"


class TestPlainStep:
    def test_defaults_to_no_pattern(self):
        step = PlainStep(fetch)
        assert step.pattern is None
        assert isinstance(step, Step)

    def test_with_pattern(self):
        assert PlainStep(fetch, pattern="b").pattern == "b"

    def test_rejects_wrong_arity(self):
        with pytest.raises(InvalidCallee):
            PlainStep(lambda a, b: a)


class TestRecoveryClause:
    def test_create(self):
        clause = RecoveryClause("zero_division", lambda reason: reason)
        assert clause.pattern == "zero_division"

    def test_describe(self):
        def to_inf(reason):
            return reason

        assert RecoveryClause("x", to_inf).describe() == "TestRecoveryClause.test_describe.<locals>.to_inf"
        assert RecoveryClause("x", to_inf, text="-> inf").describe() == "-> inf"

    def test_handler_must_take_the_reason(self):
        with pytest.raises(InvalidCallee):
            RecoveryClause("x", lambda: None)


class TestBindError:
    def test_carries_diagnostics(self):
        err = BindError(("x", 4), lhs="a", rhs="safe_div(8, 2)")
        assert err.return_value == ("x", 4)
        assert err.lhs == "a"
        assert err.rhs == "safe_div(8, 2)"
        assert isinstance(err, ContractViolation)

    def test_message_layout(self):
        message = str(BindError(("x", 4), lhs="a", rhs="safe_div(8, 2)"))
        assert "no binding to right hand side value: '('x', 4)'" in message
        assert "a <- safe_div(8, 2)" in message
        assert "safe_div(8, 2) :: Success(a) | Failure(reason)" in message
        assert "safe_div(8, 2) :: ('x', 4)" in message
