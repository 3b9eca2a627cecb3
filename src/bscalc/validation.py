"""Input validation.

Runs before any timestamp arithmetic or pricing math.  Two checks, in order:

1. *Presence*: every required field must be supplied.  Under the default
   policy a numeric field that is exactly zero counts as not supplied, the
   same way the original form treated an empty box and a ``0`` alike.
2. *Range*: supplied values must lie in their domain (no negative prices,
   rates within [0, 100] percent, no infinities).
"""

from __future__ import annotations

import math
from datetime import datetime
from numbers import Real
from typing import Optional

from .config import DEFAULT_CONFIG, PricerConfig
from .core import NUMERIC_FIELDS, REQUIRED_FIELDS, PricingInputs
from .errors import MissingOrZeroFieldError, OutOfRangeError

__all__ = ["validate", "is_missing", "missing_fields"]

# field -> (lower, upper, description); None means unbounded
_RANGES = {
    "spot":           (0.0, None, "non-negative"),
    "strike":         (0.0, None, "non-negative"),
    "volatility_pct": (0.0, 100.0, "within [0, 100] percent"),
    "interest_pct":   (0.0, 100.0, "within [0, 100] percent"),
    "dividend_yield": (0.0, None, "non-negative"),
}


def is_missing(name: str, value, *, zero_is_missing: bool = True) -> bool:
    """Return True when *value* does not count as supplied for field *name*."""
    if value is None:
        return True
    if name in NUMERIC_FIELDS:
        if isinstance(value, bool) or not isinstance(value, Real):
            return True
        if math.isnan(value):
            return True
        return zero_is_missing and value == 0
    return not isinstance(value, datetime)


def missing_fields(inputs: PricingInputs, *, zero_is_missing: bool = True) -> list[str]:
    """Names of all required fields that are missing, in declaration order."""
    return [
        name for name in REQUIRED_FIELDS
        if is_missing(name, getattr(inputs, name), zero_is_missing=zero_is_missing)
    ]


def _check_range(name: str, value: float) -> None:
    lo, hi, allowed = _RANGES[name]
    if math.isinf(value) or value < lo or (hi is not None and value > hi):
        raise OutOfRangeError(name, value, allowed)


def validate(inputs: PricingInputs, config: Optional[PricerConfig] = None) -> None:
    """Check *inputs* and raise on the first failing rule.

    Raises
    ------
    MissingOrZeroFieldError
        One or more required fields are missing; ``error.fields`` lists all
        of them.
    OutOfRangeError
        A supplied value lies outside its domain.
    """
    config = config or DEFAULT_CONFIG
    missing = missing_fields(inputs, zero_is_missing=config.zero_is_missing)
    if missing:
        raise MissingOrZeroFieldError(missing)
    for name in NUMERIC_FIELDS:
        _check_range(name, getattr(inputs, name))
