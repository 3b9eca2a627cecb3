"""Tests for input validation."""

from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from bscalc import PricerConfig, PricingInputs
from bscalc.errors import MissingOrZeroFieldError, OutOfRangeError, ValidationError
from bscalc.validation import is_missing, missing_fields, validate

T0 = datetime(2024, 3, 1, 9, 15, 0)

GOOD = PricingInputs(
    spot=8400.0, strike=8600.0,
    period_start=T0, expiry=T0 + timedelta(days=31),
    volatility_pct=18.0, interest_pct=7.0, dividend_yield=0.5,
)

RELAXED = PricerConfig(zero_is_missing=False)


class TestPresence:
    def test_valid_inputs_pass(self):
        assert validate(GOOD) is None

    def test_empty_request_lists_every_field(self):
        with pytest.raises(MissingOrZeroFieldError) as exc:
            validate(PricingInputs())
        assert exc.value.fields == (
            "spot", "strike", "period_start", "expiry",
            "volatility_pct", "interest_pct", "dividend_yield",
        )

    @pytest.mark.parametrize("field", [
        "spot", "strike", "volatility_pct", "interest_pct", "dividend_yield",
    ])
    def test_zero_counts_as_missing(self, field):
        with pytest.raises(MissingOrZeroFieldError) as exc:
            validate(replace(GOOD, **{field: 0.0}))
        assert exc.value.fields == (field,)

    @pytest.mark.parametrize("field", ["spot", "interest_pct"])
    def test_nan_counts_as_missing(self, field):
        with pytest.raises(MissingOrZeroFieldError):
            validate(replace(GOOD, **{field: float("nan")}))

    @pytest.mark.parametrize("field", ["period_start", "expiry"])
    def test_missing_timestamp(self, field):
        with pytest.raises(MissingOrZeroFieldError) as exc:
            validate(replace(GOOD, **{field: None}))
        assert exc.value.fields == (field,)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate(replace(GOOD, spot=None))

    def test_message_names_fields(self):
        with pytest.raises(ValidationError, match="spot, dividend_yield"):
            validate(replace(GOOD, spot=0, dividend_yield=None))


class TestRelaxedPolicy:
    def test_zero_accepted(self):
        validate(replace(GOOD, interest_pct=0.0, dividend_yield=0.0), RELAXED)

    def test_none_still_missing(self):
        with pytest.raises(MissingOrZeroFieldError):
            validate(replace(GOOD, dividend_yield=None), RELAXED)

    def test_nan_still_missing(self):
        with pytest.raises(MissingOrZeroFieldError):
            validate(replace(GOOD, strike=float("nan")), RELAXED)


class TestRange:
    @pytest.mark.parametrize("field,value", [
        ("spot", -1.0),
        ("strike", -8600.0),
        ("volatility_pct", 100.5),
        ("volatility_pct", -18.0),
        ("interest_pct", 101.0),
        ("interest_pct", -0.5),
        ("dividend_yield", -0.1),
        ("spot", float("inf")),
    ])
    def test_out_of_range(self, field, value):
        with pytest.raises(OutOfRangeError) as exc:
            validate(replace(GOOD, **{field: value}))
        assert exc.value.field == field

    def test_bounds_inclusive(self):
        validate(replace(GOOD, volatility_pct=100.0, interest_pct=100.0))

    def test_presence_checked_first(self):
        with pytest.raises(MissingOrZeroFieldError):
            validate(replace(GOOD, spot=-1.0, strike=None))


class TestHelpers:
    def test_non_numeric_is_missing(self):
        assert is_missing("spot", "8400")
        assert is_missing("spot", True)

    def test_non_datetime_is_missing(self):
        assert is_missing("expiry", "2024-04-01 09:15:00")

    def test_integers_accepted(self):
        assert not is_missing("spot", 8400)

    def test_missing_fields_order(self):
        inputs = replace(GOOD, dividend_yield=0, spot=None)
        assert missing_fields(inputs) == ["spot", "dividend_yield"]
        assert missing_fields(inputs, zero_is_missing=False) == ["spot"]
