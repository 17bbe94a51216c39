# okchain/application/chaining.py
"""
Bind primitive and the left-to-right pipe built on it.

    pipe(Success(6), Call(safe_div, 2), Call(double))   # Success(6.0)
    Success(6) >> Call(safe_div, 0) >> Call(double)     # Failure("zero_division")
"""
from __future__ import annotations

from functools import reduce
from typing import Any, Callable

from okchain.domain.callables import ensure_unary
from okchain.domain.exceptions import MalformedOutcome
from okchain.domain.outcome import Failure, Outcome, Success, is_outcome


def bind(outcome: Outcome, func: Callable[[Any], Any]) -> Any:
    """
    Pass the value of a success to ``func``; return a failure untouched.

    ``func``'s return value is trusted as is, it is not re-normalized.
    """
    ensure_unary(func)
    if isinstance(outcome, Success):
        return func(outcome.value)
    if isinstance(outcome, Failure):
        return outcome
    raise MalformedOutcome(outcome)


def chain(source: Any, call: Callable[[Any], Any]) -> Any:
    ensure_unary(call)
    if is_outcome(source):
        return bind(source, call)
    # a bare value starts the chain
    return call(source)


def pipe(source: Any, *calls: Callable[[Any], Any]) -> Any:
    return reduce(chain, calls, source)
