"""
Household demographics report.

Renders a HouseholdIndex as plain text:

    Current Households:
    Household: '123 Main St, Seattle, WA' has 2 total occupant(s)
    Adult occupant(s):
    \tJane, Doe, '123 Main St, Seattle, WA', 30

Only occupants aged ``ADULT_AGE`` or older are listed under each household.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from rich.console import Console

from households.constants import ADULT_AGE
from households.registry import HouseholdIndex, Individual


def is_adult(individual: Individual) -> bool:
    return individual.age >= ADULT_AGE


def adult_occupants(occupants: Iterable[Individual]) -> List[Individual]:
    return [i for i in occupants if is_adult(i)]


def _occupant_line(individual: Individual) -> str:
    return (
        f"\t{individual.first_name}, {individual.last_name}, "
        f"'{individual.address.display()}', {individual.age}"
    )


def render_report(index: HouseholdIndex) -> List[str]:
    """Return the report as a list of lines (no trailing newlines)."""
    lines = ["Current Households:"]

    for address, occupants in index.entries():
        lines.append(
            f"Household: '{address.display()}' has {len(occupants)} total occupant(s)"
        )
        lines.append("Adult occupant(s):")
        lines.extend(_occupant_line(i) for i in adult_occupants(occupants))
        lines.append("")

    return lines


def print_report(index: HouseholdIndex, console: Optional[Console] = None) -> None:
    console = console or Console()
    # Written raw: no markup, wrapping or tab expansion of user data
    out = console.file
    for line in render_report(index):
        out.write(f"{line}\n")
    out.flush()


def household_summary(index: HouseholdIndex) -> Dict[str, Any]:
    adults = sum(len(adult_occupants(occupants)) for _, occupants in index.entries())
    return {
        "households": len(index),
        "occupants": index.occupant_count(),
        "adults": adults,
        "minors": index.occupant_count() - adults,
    }
