from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from households.core.exceptions import RecordError


@dataclass
class ImportContext:
    """
    Shared import context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    skip_header: bool = False
    encoding: str = "utf-8"

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[RecordError] = field(default_factory=list)
