from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


# -----------------------------
# Address (household key)
# -----------------------------

@dataclass(frozen=True, slots=True)
class Address:
    """
    Normalized physical address.

    Equality and hash come from the three normalized fields, so two
    records spelling the same address differently (once normalized) share
    one household. Instances are immutable and may be shared by many
    individuals.
    """
    address_line: str
    city: str
    state: str

    def display(self) -> str:
        return f"{self.address_line}, {self.city}, {self.state}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address_line": self.address_line,
            "city": self.city,
            "state": self.state,
        }


# -----------------------------
# Individual
# -----------------------------

@dataclass(frozen=True, slots=True)
class Individual:
    first_name: str
    last_name: str
    address: Address
    age: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address.to_dict(),
            "age": self.age,
        }


def individual_sort_key(individual: Individual) -> Tuple[str, str]:
    """Household ordering: last name, then first name."""
    return (individual.last_name, individual.first_name)
