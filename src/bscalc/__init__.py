# bscalc: Black-Scholes premium and Greeks calculator
# Public API

# Data model
from .core import PricingInputs, PricingResult

# Engine
from .black_scholes import price, terms, PricingTerms
from .validation import validate
from .timing import time_to_expiry, TimeToExpiry, parse_timestamp, default_window
from .normal import cdf, pdf

# Configuration
from .config import PricerConfig, DEFAULT_CONFIG, load_config

# Errors
from .errors import (
    PricingError, ValidationError, MissingOrZeroFieldError, OutOfRangeError,
    TimingError, HorizonTooShortError, NumericError, ConfigError,
)

# Presentation helpers
from .formatting import format_result, render_table

__all__ = [
    # Data model
    "PricingInputs", "PricingResult",
    # Engine
    "price", "terms", "PricingTerms", "validate",
    "time_to_expiry", "TimeToExpiry", "parse_timestamp", "default_window",
    "cdf", "pdf",
    # Configuration
    "PricerConfig", "DEFAULT_CONFIG", "load_config",
    # Errors
    "PricingError", "ValidationError", "MissingOrZeroFieldError",
    "OutOfRangeError", "TimingError", "HorizonTooShortError",
    "NumericError", "ConfigError",
    # Presentation
    "format_result", "render_table",
]

__version__ = "0.1.0"
