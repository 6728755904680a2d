"""
Household registry: the Address / Individual value types and the
first-seen-ordered HouseholdIndex built from them.
"""

from households.registry.entities import Address, Individual, individual_sort_key
from households.registry.household_index import HouseholdIndex

__all__ = [
    "Address",
    "Individual",
    "individual_sort_key",
    "HouseholdIndex",
]
