# okchain/domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from okchain.domain.callables import describe_callable, ensure_unary


@dataclass(frozen=True)
class Step:
    text: Optional[str] = field(default=None, kw_only=True)

    def describe(self) -> str:
        if self.text:
            return self.text
        return describe_callable(getattr(self, "expression", None))


@dataclass(frozen=True)
class RecoveryClause:
    """``pattern -> handler(reason)``, tried against the reason of a terminal failure."""

    pattern: Any
    handler: Callable[[Any], Any]
    text: Optional[str] = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        ensure_unary(self.handler)

    def describe(self) -> str:
        return self.text or describe_callable(self.handler)
