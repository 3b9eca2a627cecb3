from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional


# ---------------------------------------------------------------------------
# Caller-supplied inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PricingInputs:
    """One calculation request, as collected by the presentation layer.

    Every field may be ``None`` so an empty form field stays distinguishable
    from a supplied value; ``validation.validate`` decides what is usable.

    Parameters
    ----------
    spot : float
        Underlying price at valuation time.
    strike : float
        Option strike price.
    period_start : datetime
        Entry / valuation instant.
    expiry : datetime
        Expiry instant.
    volatility_pct : float
        Annualised volatility in percent, e.g. ``18`` for 18%.
    interest_pct : float
        Annualised risk-free rate in percent.
    dividend_yield : float
        Continuous dividend yield in percent.
    """
    spot: Optional[float] = None
    strike: Optional[float] = None
    period_start: Optional[datetime] = None
    expiry: Optional[datetime] = None
    volatility_pct: Optional[float] = None
    interest_pct: Optional[float] = None
    dividend_yield: Optional[float] = None


NUMERIC_FIELDS = ("spot", "strike", "volatility_pct", "interest_pct", "dividend_yield")
TIMESTAMP_FIELDS = ("period_start", "expiry")
REQUIRED_FIELDS = (
    "spot", "strike", "period_start", "expiry",
    "volatility_pct", "interest_pct", "dividend_yield",
)


# ---------------------------------------------------------------------------
# Engine output
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PricingResult:
    """Premiums and Greeks from one successful calculation.

    Theta is per calendar day; rho and vega are per 1% move in rate / vol.
    Gamma and vega are shared by the call and the put.
    """
    call_premium: float
    put_premium: float
    call_delta: float
    put_delta: float
    gamma: float
    call_theta: float
    put_theta: float
    call_rho: float
    put_rho: float
    vega: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)
