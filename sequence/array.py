"""
array.py - Value Sequence Helpers
==================================
The array being sorted is a plain Python list of numbers.  This module
owns the three things the rest of the code needs to know about it:

  1. Validation of caller-supplied values   (validate_values)
  2. Validation of a requested array size   (validate_size)
  3. Random array generation                (generate_array)

Everything here raises ValueError on bad input so callers can reject a
request before any trace is generated.
"""

import math
import numbers
import random
from typing import Iterable, List, Optional


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
DEFAULT_SIZE = 20
MAX_SIZE     = 200
MIN_VALUE    = 10       # smallest generated bar value
MAX_VALUE    = 109      # largest generated bar value (inclusive)


def validate_values(values: Iterable) -> List:
    """Return the values as a new list, or raise ValueError."""
    result = list(values)
    for idx, v in enumerate(result):
        # bool is an Integral, but True/False are not bar heights
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ValueError(f"Element {idx} is not a number: {v!r}")
        if not math.isfinite(v):
            raise ValueError(f"Element {idx} is not finite: {v!r}")
    return result


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValueError(f"Array size must be an integer, got {size!r}")
    if size < 0:
        raise ValueError(f"Array size must not be negative, got {size}")
    if size > MAX_SIZE:
        raise ValueError(f"Array size must be at most {MAX_SIZE}, got {size}")
    return int(size)


def generate_array(size: int = DEFAULT_SIZE, rng: Optional[random.Random] = None) -> List[int]:
    """Fresh list of `size` random integers in [MIN_VALUE, MAX_VALUE]."""
    size = validate_size(size)
    rng = rng or random.Random()
    return [rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(size)]
