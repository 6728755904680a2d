"""
Fixed household rules.

These values are not configurable; they define the input record shape
and the adult threshold used by every report.
"""

ADULT_AGE = 18
RECORD_FIELD_COUNT = 6

# Ages are signed 32-bit integers; text outside this range is malformed
AGE_VALUE_MIN = -(2 ** 31)
AGE_VALUE_MAX = 2 ** 31 - 1

INVALID_AGE_MESSAGE = "Age should be positive value."
UNREADABLE_INPUT_MESSAGE = "Failed to read input file."
