# okchain/domain/patterns.py
"""
Structural patterns used by binding steps and recovery clauses.

Binding patterns treat strings as names (``"a"`` binds the value to ``a``);
reason patterns treat strings as literals, so ``"zero_division"`` matches the
reason ``"zero_division"``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from okchain.domain.callables import describe_callable
from okchain.domain.outcome import OK

WILDCARD = "_"


class _Any:
    _instance: Optional["_Any"] = None

    def __new__(cls) -> "_Any":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"


ANY = _Any()


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Where:
    predicate: Callable[[Any], bool]
    description: Optional[str] = None


def is_wildcard(pattern: Any) -> bool:
    return pattern is ANY or (isinstance(pattern, str) and pattern == WILDCARD)


def match_binding(pattern: Any, value: Any) -> Optional[Dict[str, Any]]:
    """Match ``value`` against ``pattern``; return the bound names, or None on mismatch."""
    bound: Dict[str, Any] = {}
    if _match(pattern, value, bound, names=True):
        return bound
    return None


def match_reason(pattern: Any, reason: Any) -> bool:
    return _match(pattern, reason, {}, names=False)


def _match(pattern: Any, value: Any, bound: Dict[str, Any], names: bool) -> bool:
    if pattern is ANY:
        return True
    if isinstance(pattern, str) and names:
        if pattern == WILDCARD:
            return True
        if pattern in bound:
            return _equal(bound[pattern], value)
        bound[pattern] = value
        return True
    if pattern is OK:
        return value is OK
    if isinstance(pattern, Literal):
        return _equal(pattern.value, value)
    if isinstance(pattern, Where):
        return bool(pattern.predicate(value))
    if isinstance(pattern, type):
        return isinstance(value, pattern)
    if isinstance(pattern, (tuple, list)):
        if not isinstance(value, (tuple, list)) or len(value) != len(pattern):
            return False
        return all(_match(p, v, bound, names) for p, v in zip(pattern, value))
    return _equal(pattern, value)


def _equal(expected: Any, value: Any) -> bool:
    # True == 1 and False == 0 in Python; a bool only matches a bool
    if isinstance(expected, bool) or isinstance(value, bool):
        return type(expected) is type(value) and expected == value
    return value == expected


def pattern_text(pattern: Any, names: bool = True) -> str:
    if pattern is ANY:
        return WILDCARD
    if isinstance(pattern, str) and names:
        return pattern
    if isinstance(pattern, Literal):
        return repr(pattern.value)
    if isinstance(pattern, Where):
        return pattern.description or f"where {describe_callable(pattern.predicate)}"
    if isinstance(pattern, type):
        return pattern.__name__
    if isinstance(pattern, tuple):
        inner = ", ".join(pattern_text(p, names) for p in pattern)
        return f"({inner},)" if len(pattern) == 1 else f"({inner})"
    if isinstance(pattern, list):
        return "[" + ", ".join(pattern_text(p, names) for p in pattern) + "]"
    return repr(pattern)
