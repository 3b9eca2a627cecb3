# config.py
# Engine policy knobs and the YAML loader for them.

from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

__all__ = ["PricerConfig", "DEFAULT_CONFIG", "load_config", "config_from_mapping"]


@dataclass(frozen=True)
class PricerConfig:
    """Calculation policy.

    Parameters
    ----------
    zero_is_missing : bool
        Treat an exact zero in any numeric field as "not supplied" (default,
        matches the original form).  When ``False`` only ``None``/NaN are
        missing, so a zero rate or zero dividend yield is accepted.
    apply_dividend_yield : bool
        Use the continuous dividend yield in the formulas (Merton
        adjustment).  Off by default: the yield is validated but unused.
    min_horizon_hours : int
        Minimum whole hours between entry and expiry.
    """
    zero_is_missing: bool = True
    apply_dividend_yield: bool = False
    min_horizon_hours: int = 24

    def __post_init__(self):
        for name in ("zero_is_missing", "apply_dividend_yield"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")
        if isinstance(self.min_horizon_hours, bool) or not isinstance(self.min_horizon_hours, int):
            raise ConfigError(
                f"min_horizon_hours must be an int, got {self.min_horizon_hours!r}"
            )
        if self.min_horizon_hours < 0:
            raise ConfigError(
                f"min_horizon_hours must be non-negative, got {self.min_horizon_hours}"
            )


DEFAULT_CONFIG = PricerConfig()


def config_from_mapping(data: Mapping[str, Any] | None) -> PricerConfig:
    """Build a ``PricerConfig`` from a plain mapping, rejecting unknown keys."""
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, Mapping):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(PricerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config key(s): {', '.join(map(str, unknown))}")
    return PricerConfig(**data)


def load_config(path: str | Path) -> PricerConfig:
    """Load a ``PricerConfig`` from a YAML file.

    An empty file yields the defaults.  A top-level ``bscalc:`` section is
    honoured so the settings can live inside a larger application config.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if isinstance(data, Mapping) and "bscalc" in data:
        data = data["bscalc"]
    return config_from_mapping(data)
