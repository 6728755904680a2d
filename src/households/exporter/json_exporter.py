from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from households.logging import get_logger
from households.registry import HouseholdIndex
from households.reporting import adult_occupants, household_summary

log = get_logger("json_exporter")


def index_to_dict(index: HouseholdIndex) -> Dict[str, Any]:
    """
    Convert a HouseholdIndex to a JSON-safe dict, keeping household
    and occupant order.
    """
    households = []
    for address, occupants in index.entries():
        households.append(
            {
                "address": address.to_dict(),
                "occupant_count": len(occupants),
                "adult_count": len(adult_occupants(occupants)),
                "occupants": [i.to_dict() for i in occupants],
            }
        )

    return {
        "counts": household_summary(index),
        "households": households,
    }


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None = None,
    pretty: bool = False,
) -> None:
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
        log.info("Wrote JSON export: %s", out)
    else:
        print(payload)
