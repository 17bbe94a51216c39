from okchain.domain.steps.base import Step, RecoveryClause
from okchain.domain.steps.binding import BindingStep
from okchain.domain.steps.plain import PlainStep

__all__ = [
    "Step",
    "RecoveryClause",
    "BindingStep",
    "PlainStep",
]
