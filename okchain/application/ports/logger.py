# okchain/application/ports/logger.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """
    Structured logger used by the executor.

    Events are dotted names ("sequence.start", "recovery.matched", ...) with
    keyword fields; adapters decide how they are rendered.
    """

    @abstractmethod
    def debug(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def info(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def error(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def bind(self, **fields: Any) -> "LoggerPort":
        """Return a logger attaching ``fields`` to every event (e.g. sequence_id)."""
        ...
