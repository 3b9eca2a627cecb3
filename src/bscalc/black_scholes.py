"""Closed-form Black-Scholes premiums and Greeks.

``price`` is the engine entry point: it validates the request, converts the
time window into a year fraction and evaluates the formulas below with
``volt = volatility_pct / 100`` and ``rate = interest_pct / 100``::

    d1 = (ln(S/K) + (rate + volt^2/2) t) / (volt sqrt(t))
    d2 = (ln(S/K) + (rate - volt^2/2) t) / (volt sqrt(t))
    Kd = K exp(-rate t)

Theta is quoted per calendar day, rho and vega per 1% move.

The dividend yield is validated but left out of the formulas unless
``PricerConfig.apply_dividend_yield`` is set, in which case the usual
continuous-yield adjustment (spot carried at ``S exp(-q t)``) is used.
"""

from __future__ import annotations

import math
from math import exp, log, sqrt
from typing import NamedTuple, Optional

from .config import DEFAULT_CONFIG, PricerConfig
from .core import PricingInputs, PricingResult
from .errors import NumericError
from .normal import cdf, pdf
from .timing import DAYS_PER_YEAR, time_to_expiry
from .validation import validate

__all__ = ["PricingTerms", "terms", "price"]


class PricingTerms(NamedTuple):
    d1: float
    d2: float
    discounted_strike: float
    years: float


def terms(
    spot: float,
    strike: float,
    years: float,
    volt: float,
    rate: float,
    carry: float = 0.0,
) -> PricingTerms:
    """Compute d1, d2 and the discounted strike.

    *volt* and *rate* are decimals (0.18, not 18).  *carry* is the
    continuous dividend yield subtracted from the drift.

    Raises
    ------
    NumericError
        When ``spot/strike`` is not positive, ``volt * sqrt(years)`` is zero,
        or the results are not finite.
    """
    if not (spot > 0 and strike > 0):
        raise NumericError(f"spot and strike must be positive, got spot={spot}, strike={strike}")
    if years < 0:
        raise NumericError(f"time to expiry must be non-negative, got {years}")

    vol_sqrt_t = volt * sqrt(years)
    if vol_sqrt_t == 0 or not math.isfinite(vol_sqrt_t):
        raise NumericError(
            f"volatility * sqrt(t) must be non-zero and finite, got {vol_sqrt_t}"
        )

    log_m = log(spot / strike)
    drift = rate - carry
    d1 = (log_m + (drift + volt * volt / 2) * years) / vol_sqrt_t
    d2 = (log_m + (drift - volt * volt / 2) * years) / vol_sqrt_t
    discounted_strike = strike * exp(-rate * years)

    if not all(math.isfinite(v) for v in (d1, d2, discounted_strike)):
        raise NumericError(f"non-finite intermediate values: d1={d1}, d2={d2}")
    return PricingTerms(d1, d2, discounted_strike, years)


def price(inputs: PricingInputs, config: Optional[PricerConfig] = None) -> PricingResult:
    """Price the call and the put described by *inputs*.

    Raises
    ------
    ValidationError
        Missing or out-of-range fields (nothing else is evaluated).
    TimingError
        The window is shorter than the minimum horizon.
    NumericError
        Degenerate inputs produced NaN or infinity.
    """
    config = config or DEFAULT_CONFIG
    validate(inputs, config)
    tte = time_to_expiry(inputs.period_start, inputs.expiry, config)

    volt = inputs.volatility_pct / 100
    rate = inputs.interest_pct / 100
    q = inputs.dividend_yield / 100 if config.apply_dividend_yield else 0.0
    S = inputs.spot

    d1, d2, Kd, t = terms(S, inputs.strike, tte.years, volt, rate, q)
    sqrt_t = sqrt(t)
    disc_q = exp(-q * t)
    S_q = S * disc_q

    N_d1, N_d2 = cdf(d1), cdf(d2)
    N_md1, N_md2 = cdf(-d1), cdf(-d2)
    n_d1 = pdf(d1)

    # Common
    gamma = disc_q * n_d1 / (S * volt * sqrt_t)
    vega  = S_q * n_d1 * sqrt_t / 100
    decay = -S_q * n_d1 * volt / (2 * sqrt_t)

    call_delta = disc_q * N_d1
    result = PricingResult(
        call_premium=S_q * N_d1 - Kd * N_d2,
        put_premium=Kd * N_md2 - S_q * N_md1,
        call_delta=call_delta,
        put_delta=call_delta - disc_q,
        gamma=gamma,
        call_theta=(decay - rate * Kd * N_d2 + q * S_q * N_d1) / DAYS_PER_YEAR,
        put_theta=(decay + rate * Kd * N_md2 - q * S_q * N_md1) / DAYS_PER_YEAR,
        call_rho=Kd * t * N_d2 / 100,
        put_rho=-Kd * t * N_md2 / 100,
        vega=vega,
    )

    bad = [k for k, v in result.as_dict().items() if not math.isfinite(v)]
    if bad:
        raise NumericError(f"non-finite output(s): {', '.join(bad)}")
    return result
