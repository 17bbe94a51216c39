# okchain/application/executor/recovery.py
from __future__ import annotations

from typing import Any, List, Sequence

from okchain.application.services.execution_deps import ExecutionDeps
from okchain.domain.exceptions import MalformedOutcome
from okchain.domain.outcome import Failure, Outcome, Success, normalize
from okchain.domain.patterns import match_reason, pattern_text
from okchain.domain.steps.base import RecoveryClause


class RecoveryPhase:
    """
    Runs after a sequence and only acts on a failure.

    Clauses are tried in order against the failure reason; the first match
    produces the new outcome. With no match the failure is returned as is.
    """

    def __init__(self, clauses: Sequence[RecoveryClause]):
        self._clauses: List[RecoveryClause] = list(clauses)

    def apply(self, result: Outcome, deps: ExecutionDeps) -> Outcome:
        if not isinstance(result, Failure):
            return result

        reason = result.reason
        for index, clause in enumerate(self._clauses):
            if not match_reason(clause.pattern, reason):
                continue
            deps.logger.debug(
                "recovery.matched",
                clause=index,
                pattern=pattern_text(clause.pattern, names=False),
            )
            return self._validated(clause.handler(reason), clause)

        deps.logger.debug("recovery.fallback", reason=deps.describe(reason))
        return Failure(reason)

    def _validated(self, value: Any, clause: RecoveryClause) -> Outcome:
        if isinstance(value, (Success, Failure)):
            return normalize(value)
        raise MalformedOutcome(value, expression=clause.describe())
