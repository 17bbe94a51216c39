# okchain/domain/outcome.py
"""
Outcome model: ``Success(value)``, ``Failure(reason)`` and the bare ``OK`` marker.

A failure may be built flattened, with up to two discriminators in front of
the payload::

    Failure("type", "failure")            # reason == ("type", "failure")
    Failure("type", "sub_type", "failure")

``normalize`` collapses those into a single tuple reason.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Tuple, TypeVar

from okchain.domain.exceptions import MalformedOutcome

T = TypeVar("T")

MAX_FAILURE_PARTS = 3
VALUE_REQUIRED = "value_required"


class OkSentinel(Enum):
    """Zero-payload success marker, distinct from ``Success(...)``."""

    OK = "ok"

    def __repr__(self) -> str:
        return "OK"


OK = OkSentinel.OK


class Outcome:
    """Common base of ``Success`` and ``Failure``."""

    __slots__ = ()

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def __rshift__(self, call):
        """``outcome >> Call(f, x)`` is ``chain(outcome, Call(f, x))``."""
        from okchain.application.chaining import chain

        return chain(self, call)


@dataclass(frozen=True)
class Success(Outcome, Generic[T]):
    value: T


@dataclass(frozen=True, init=False, repr=False)
class Failure(Outcome):
    parts: Tuple[Any, ...]

    __match_args__ = ("reason",)

    def __init__(self, *parts: Any):
        if not 1 <= len(parts) <= MAX_FAILURE_PARTS:
            raise MalformedOutcome(parts)
        object.__setattr__(self, "parts", parts)

    @property
    def reason(self) -> Any:
        if len(self.parts) == 1:
            return self.parts[0]
        return self.parts

    @property
    def is_flattened(self) -> bool:
        return len(self.parts) > 1

    def __repr__(self) -> str:
        return f"Failure({', '.join(repr(p) for p in self.parts)})"


def normalize(raw: Any) -> Outcome:
    if isinstance(raw, Success):
        return raw
    if isinstance(raw, Failure):
        if raw.is_flattened:
            return Failure(raw.reason)
        return raw
    if raw is OK:
        return Success(OK)
    raise MalformedOutcome(raw)


def is_outcome(raw: Any) -> bool:
    return isinstance(raw, Outcome) or raw is OK


def is_success(raw: Any) -> bool:
    return isinstance(raw, Success) or raw is OK


def is_failure(raw: Any) -> bool:
    return isinstance(raw, Failure)


def success(value: Any) -> Success:
    return Success(value)


def failure(reason: Any) -> Failure:
    return Failure(reason)


def required(value: Any, reason: Any = VALUE_REQUIRED) -> Outcome:
    """Require a value not to be ``None``."""
    if value is None:
        return Failure(reason)
    return Success(value)
