# okchain/domain/bindings.py
from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional


class Bindings:
    """
    Names bound so far in one evaluation. Immutable: ``extend`` returns a copy.

    Values are readable as ``env["a"]`` or ``env.a``. The class has no public
    methods, so any name can be bound and read back as an attribute.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bindings):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"nothing bound to {name!r}") from None

    def __repr__(self) -> str:
        return f"Bindings({self._values!r})"


def extend(bindings: Bindings, values: Mapping[str, Any]) -> Bindings:
    if not values:
        return bindings
    merged = dict(bindings._values)
    merged.update(values)
    return Bindings(merged)


def to_dict(bindings: Bindings) -> Dict[str, Any]:
    return dict(bindings._values)
