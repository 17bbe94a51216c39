# okchain/application/outcome.py
from dataclasses import dataclass
from typing import Any

from okchain.domain.bindings import Bindings


@dataclass(frozen=True)
class StepOutcome:
    """What one handled step hands back to the executor.

    ``halted`` means the sequence stops here and ``result`` is its answer.
    """
    bindings: Bindings
    result: Any = None
    halted: bool = False
