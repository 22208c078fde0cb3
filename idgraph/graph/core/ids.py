"""Identifier and value-slot helpers.

Node and edge ids are arbitrary hashable values chosen by the caller.
Edge ids may also be generated by the graph, in which case they are
``AutoEdgeId`` instances drawn from a per-graph counter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable

NodeId = Hashable
EdgeId = Hashable

# Backend attribute holding a node or edge value. Absent when unset.
VALUE_ATTR = "value"


class _UnsetType:
    """Type of the UNSET marker. There is exactly one instance."""

    _instance = None

    def __new__(cls) -> "_UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _UnsetType()


@dataclass(frozen=True, order=True)
class AutoEdgeId:
    """Edge id generated by a graph when the caller supplies none.

    Attributes:
        serial: Position in the owning graph's counter.
    """

    serial: int

    def __str__(self) -> str:
        return f"_auto:{self.serial}"


def value_attrs(value: Any) -> Dict[str, Any]:
    """Return backend attributes for a value slot (empty when unset)."""
    if value is UNSET:
        return {}
    return {VALUE_ATTR: value}


def value_from_attrs(attrs: Dict[str, Any]) -> Any:
    """Read a value slot back from backend attributes."""
    return attrs.get(VALUE_ATTR, UNSET)


def values_equal(left: Any, right: Any) -> bool:
    """Structural comparison of two value slots.

    UNSET is equal only to UNSET; everything else compares with ``==``.
    """
    if left is UNSET or right is UNSET:
        return left is right
    return bool(left == right)
