# src/households/loader/__init__.py

"""
Public interface for the record loader stack.

Intended usage from other parts of the project and tests:

    from households.loader import (
        QUOTED_TOKEN_RE,
        iter_numbered_lines,
        parse_address,
        parse_age,
        parse_line,
        tokenize_line,
    )
"""

from __future__ import annotations

from .file_loader import iter_numbered_lines
from .line_parser import (
    QUOTED_TOKEN_RE,
    parse_address,
    parse_age,
    parse_line,
    tokenize_line,
)


__all__ = [
    "QUOTED_TOKEN_RE",
    "iter_numbered_lines",
    "parse_address",
    "parse_age",
    "parse_line",
    "tokenize_line",
]
