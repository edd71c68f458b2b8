from types import MappingProxyType
from typing import Mapping

from .schemas import AllocationTarget

ALLOCATIONS: Mapping[str, AllocationTarget] = MappingProxyType(
    {
        "conservative": AllocationTarget(stocks=30, bonds=50, real_estate=10, cash=10),
        "moderate": AllocationTarget(stocks=50, bonds=30, real_estate=15, cash=5),
        "aggressive": AllocationTarget(stocks=70, bonds=15, real_estate=10, cash=5),
    }
)


def select_allocation(risk: str) -> AllocationTarget:
    try:
        return ALLOCATIONS[risk]
    except KeyError:
        raise ValueError(f"Unknown risk tolerance: {risk!r}") from None
