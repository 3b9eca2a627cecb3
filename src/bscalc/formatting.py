# formatting.py
# Display precision for PricingResult; the engine itself never renders.

from __future__ import annotations

from .core import PricingResult

__all__ = ["DISPLAY_DECIMALS", "LABELS", "format_result", "render_table"]

DISPLAY_DECIMALS = {
    "call_premium": 2,
    "put_premium": 2,
    "call_delta": 3,
    "put_delta": 3,
    "gamma": 4,
    "call_theta": 3,
    "put_theta": 3,
    "call_rho": 3,
    "put_rho": 3,
    "vega": 3,
}

LABELS = {
    "call_premium": "Call Option Premium",
    "put_premium": "Put Option Premium",
    "call_delta": "Call Option Delta",
    "put_delta": "Put Option Delta",
    "gamma": "Option Gamma",
    "call_theta": "Call Option Theta",
    "put_theta": "Put Option Theta",
    "call_rho": "Call Option Rho",
    "put_rho": "Put Option Rho",
    "vega": "Option Vega",
}

# Two tables of five columns, as on the original pricing page
_TABLES = (
    ("call_premium", "put_premium", "call_delta", "put_delta", "gamma"),
    ("call_theta", "put_theta", "call_rho", "put_rho", "vega"),
)


def format_result(result: PricingResult) -> dict[str, str]:
    """Field name -> value rounded to its display precision."""
    values = result.as_dict()
    return {k: f"{values[k]:.{DISPLAY_DECIMALS[k]}f}" for k in DISPLAY_DECIMALS}


def render_table(result: PricingResult) -> str:
    """Plain-text rendering: header row and value row for each table."""
    formatted = format_result(result)
    blocks = []
    for keys in _TABLES:
        widths = [max(len(LABELS[k]), len(formatted[k])) for k in keys]
        header = "  ".join(LABELS[k].ljust(w) for k, w in zip(keys, widths))
        row = "  ".join(formatted[k].rjust(w) for k, w in zip(keys, widths))
        blocks.append(f"{header}\n{row}")
    return "\n\n".join(blocks)
