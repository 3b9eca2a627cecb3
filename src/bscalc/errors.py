"""Exception hierarchy for the pricing engine.

Every failure is terminal for the calculation that raised it; callers fix
the inputs and call again.  All errors derive from ``ValueError`` so that
code written against plain ``ValueError`` keeps working.
"""

from __future__ import annotations

__all__ = [
    "PricingError",
    "ValidationError",
    "MissingOrZeroFieldError",
    "OutOfRangeError",
    "TimingError",
    "HorizonTooShortError",
    "NumericError",
    "ConfigError",
]


class PricingError(ValueError):
    """Base class for everything the engine raises."""


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------
class ValidationError(PricingError):
    """A required input is absent or unusable."""


class MissingOrZeroFieldError(ValidationError):
    """One or more required fields are absent (or zero, under the default policy).

    Parameters
    ----------
    fields : sequence of str
        Names of the offending ``PricingInputs`` fields, in declaration order.
    """

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(
            "validation failed: missing or zero field(s): " + ", ".join(self.fields)
        )


class OutOfRangeError(ValidationError):
    """A field is present but outside its allowed domain."""

    def __init__(self, field: str, value: float, allowed: str):
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(f"{field} must be {allowed}, got {value!r}")


# ---------------------------------------------------------------------------
# Time window
# ---------------------------------------------------------------------------
class TimingError(PricingError):
    """The (entry, expiry) pair cannot be turned into a pricing horizon."""


class HorizonTooShortError(TimingError):
    """Expiry is less than the minimum horizon after entry (or before it)."""

    def __init__(self, hours: int, min_hours: int = 24):
        self.hours = hours
        self.min_hours = min_hours
        super().__init__(
            f"expiry must be at least {min_hours} hours after entry "
            f"(got {hours} whole hours)"
        )


# ---------------------------------------------------------------------------
# Numerics / configuration
# ---------------------------------------------------------------------------
class NumericError(PricingError):
    """Degenerate inputs drove d1/d2 or an output to NaN or infinity."""


class ConfigError(PricingError):
    """Invalid configuration file or value."""
