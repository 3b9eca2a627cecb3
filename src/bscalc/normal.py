# normal.py
# Standard normal CDF / PDF.  Accept scalars *or* NumPy arrays.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

__all__ = ["cdf", "pdf"]


def _out(values, x):
    return float(values) if np.ndim(x) == 0 else values


def cdf(x):
    """P(Z <= x) for Z ~ N(0, 1).

    ``scipy.stats.norm.cdf`` is evaluated through ``erfc`` and saturates to
    exactly 0.0 / 1.0 far in the tails rather than returning NaN.
    """
    x_arr = np.asarray(x, dtype=float)
    return _out(norm.cdf(x_arr), x)


def pdf(x):
    """Density (1/sqrt(2*pi)) * exp(-x**2 / 2)."""
    x_arr = np.asarray(x, dtype=float)
    return _out(norm.pdf(x_arr), x)
