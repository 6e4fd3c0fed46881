"""
sequence/
---------
Value-array helpers.  Public API:

    from sequence import generate_array, validate_values, validate_size
"""

from sequence.array import (
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_VALUE,
    MAX_VALUE,
    generate_array,
    validate_size,
    validate_values,
)

__all__ = [
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "MIN_VALUE",
    "MAX_VALUE",
    "generate_array",
    "validate_size",
    "validate_values",
]
