# src/households/loader/line_parser.py

from __future__ import annotations

import re
from typing import List

from households.constants import AGE_VALUE_MAX, AGE_VALUE_MIN, RECORD_FIELD_COUNT
from households.core.exceptions import InvalidAge, MalformedRecord
from households.normalization.address_normalization import (
    capitalize,
    normalize_state,
    unify_address_line,
)
from households.registry.entities import Address, Individual

# A double-quoted span followed by a comma or the end of the line.
# Embedded or escaped quotes are not supported.
QUOTED_TOKEN_RE = re.compile(r'"([^"]*)"(?:,|$)')

# Optional sign followed by ASCII digits only
_AGE_RE = re.compile(r"[+-]?[0-9]+")


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> List[str]:
    """
    Extract the quoted field values of one record line, in order.

    Only the first ``RECORD_FIELD_COUNT`` quoted spans are kept; any extra
    spans are ignored.

    Raises:
        MalformedRecord: if fewer than ``RECORD_FIELD_COUNT`` spans are found.
    """
    raw = _strip_eol(line)

    fields: List[str] = []
    for match in QUOTED_TOKEN_RE.finditer(raw):
        fields.append(match.group(1))
        if len(fields) == RECORD_FIELD_COUNT:
            break

    if len(fields) != RECORD_FIELD_COUNT:
        raise MalformedRecord(f"Invalid record at line {lineno}", lineno)

    return fields


def parse_age(text: str, lineno: int = 0) -> int:
    """
    Parse the textual age. Signed decimal integers within the 32-bit range
    are accepted; negative values are rejected with ``InvalidAge``. Zero is
    a valid age.
    """
    if not _AGE_RE.fullmatch(text):
        raise MalformedRecord(f"Invalid age {text!r} at line {lineno}", lineno)

    age = int(text)
    if not AGE_VALUE_MIN <= age <= AGE_VALUE_MAX:
        raise MalformedRecord(f"Invalid age {text!r} at line {lineno}", lineno)
    if age < 0:
        raise InvalidAge(lineno)
    return age


def parse_address(address_line: str, city: str, state: str) -> Address:
    """Build a normalized Address from the raw address components."""
    return Address(
        address_line=unify_address_line(address_line),
        city=capitalize(city),
        state=normalize_state(state),
    )


def parse_line(line: str, lineno: int = 0) -> Individual:
    """
    Parse a single record line into an Individual.

    Field order:
        first name, last name, address line, city, state, age

    Example:
        '"John","Doe","123 Main St.","Seattle","WA","25"'

    Raises:
        MalformedRecord: wrong number of quoted fields or a non-numeric age.
        InvalidAge: a negative age.
    """
    first_name, last_name, address_line, city, state, age_text = tokenize_line(line, lineno)

    return Individual(
        first_name=first_name,
        last_name=last_name,
        address=parse_address(address_line, city, state),
        age=parse_age(age_text, lineno),
    )
