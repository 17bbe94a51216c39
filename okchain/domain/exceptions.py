# okchain/domain/exceptions.py
from __future__ import annotations

from typing import Any, Optional


class ContractViolation(Exception):
    """Programmer error: something broke the outcome calling convention.

    These are never turned into a ``Failure``; they abort evaluation.
    """


class MalformedOutcome(ContractViolation):
    def __init__(self, value: Any, expression: Optional[str] = None):
        self.value = value
        self.expression = expression
        where = f" from `{expression}`" if expression else ""
        super().__init__(
            f"expected Success(...), Failure(...) or OK{where}, got: {value!r}"
        )


class BindError(ContractViolation):
    def __init__(self, return_value: Any, lhs: str, rhs: str):
        self.return_value = return_value
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(self._render())

    def _render(self) -> str:
        return (
            f"no binding to right hand side value: '{self.return_value!r}'\n"
            "\n"
            "    Code\n"
            f"      {self.lhs} <- {self.rhs}\n"
            "\n"
            "    Expected signature\n"
            f"      {self.rhs} :: Success({self.lhs}) | Failure(reason)\n"
            "\n"
            "    Actual values\n"
            f"      {self.rhs} :: {self.return_value!r}\n"
        )


class InvalidCallee(ContractViolation, TypeError):
    def __init__(self, callee: Any, detail: str):
        self.callee = callee
        self.detail = detail
        super().__init__(f"invalid callee {callee!r}: {detail}")


class EmptySequenceError(ContractViolation):
    def __init__(self) -> None:
        super().__init__("step sequence is empty")


class UnsupportedStep(ContractViolation):
    def __init__(self, step: Any):
        self.step = step
        super().__init__(f"No handler found for step: {type(step).__name__} ({step!r})")


class InvalidTags(ContractViolation, ValueError):
    pass
