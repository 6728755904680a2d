"""
HouseholdIndex

Stable-order map from a normalized Address to the individuals living there.

- Households iterate in the order their address was first seen.
- Occupants inside a household are kept sorted by ``individual_sort_key``
  (last name, first name). Occupants with an identical key stay in
  insertion order, and none are dropped.
- There is no removal or update; the index lives for one import run.
"""

from __future__ import annotations

from bisect import insort_right
from typing import Callable, Dict, Iterator, List, Tuple

from households.registry.entities import Address, Individual, individual_sort_key


SortKey = Callable[[Individual], Tuple[str, str]]


class HouseholdIndex:
    def __init__(self, sort_key: SortKey = individual_sort_key):
        self._sort_key = sort_key
        self._households: Dict[Address, List[Individual]] = {}

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def insert(self, individual: Individual) -> None:
        occupants = self._households.get(individual.address)
        if occupants is None:
            occupants = []
            self._households[individual.address] = occupants

        insort_right(occupants, individual, key=self._sort_key)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def entries(self) -> Iterator[Tuple[Address, Tuple[Individual, ...]]]:
        """
        Yield ``(address, occupants)`` pairs in first-seen address order.

        Each call returns a fresh iterator, so the sequence can be walked
        again after it is exhausted.
        """
        for address, occupants in self._households.items():
            yield address, tuple(occupants)

    def occupants(self, address: Address) -> Tuple[Individual, ...]:
        return tuple(self._households.get(address, ()))

    def addresses(self) -> List[Address]:
        return list(self._households)

    def occupant_count(self) -> int:
        return sum(len(occupants) for occupants in self._households.values())

    def __len__(self) -> int:
        return len(self._households)

    def __contains__(self, address: object) -> bool:
        return address in self._households

    def __iter__(self) -> Iterator[Tuple[Address, Tuple[Individual, ...]]]:
        return self.entries()

    def __repr__(self) -> str:
        return f"HouseholdIndex(households={len(self)}, occupants={self.occupant_count()})"
