# okchain/domain/callables.py
from __future__ import annotations

import inspect
from typing import Any, Callable

from okchain.domain.exceptions import InvalidCallee


class Call:
    """
    A call still missing its leading argument.

    ``Call(safe_div, 2)(6)`` runs ``safe_div(6, 2)``; this is how a link of a
    chain receives the value flowing through it.
    """

    __slots__ = ("func", "args", "kwargs")

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any):
        if not callable(func):
            raise InvalidCallee(func, "not callable")
        _check_arity(func, (None, *args), kwargs)
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def __call__(self, value: Any) -> Any:
        return self.func(value, *self.args, **self.kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Call):
            return NotImplemented
        return (self.func, self.args, self.kwargs) == (other.func, other.args, other.kwargs)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rendered = ["_"]
        rendered.extend(repr(a) for a in self.args)
        rendered.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{describe_callable(self.func)}({', '.join(rendered)})"


def describe_callable(func: Any) -> str:
    if isinstance(func, Call):
        return repr(func)
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if name:
        return name
    return repr(func)


def ensure_unary(func: Any) -> Any:
    """Fail fast unless ``func`` can be called with exactly one positional argument."""
    if not callable(func):
        raise InvalidCallee(func, "not callable")
    if not isinstance(func, Call):
        _check_arity(func, (None,), {})
    return func


def _check_arity(func: Any, args: tuple, kwargs: dict) -> None:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # some builtins expose no signature
        return
    try:
        sig.bind(*args, **kwargs)
    except TypeError:
        raise InvalidCallee(
            func, f"cannot be called with {len(args)} positional argument(s) {sig}"
        ) from None
