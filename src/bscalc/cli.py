"""Command-line front end.

Usage
-----
    bscalc price --spot 8400 --strike 8600 --volatility 18 --interest 7 \\
                 --dividend 0.5 --start "2024-03-01 09:15:00" \\
                 --expiry "2024-04-01 09:15:00"
    bscalc book --input requests.csv --output prices.json

Book CSV format
---------------
    id,spot,strike,period_start,expiry,volatility_pct,interest_pct,dividend_yield
    1,8400,8600,2024-03-01 09:15:00,2024-04-01 09:15:00,18,7,0.5

Blank cells are treated as missing.  Each row is priced on its own; a bad
row is reported in the output instead of aborting the run.
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
import sys
from dataclasses import fields, replace
from pathlib import Path

from .black_scholes import price
from .config import DEFAULT_CONFIG, PricerConfig, load_config
from .core import NUMERIC_FIELDS, PricingInputs, PricingResult
from .errors import PricingError
from .formatting import render_table
from .timing import default_window, parse_timestamp

logger = logging.getLogger(__name__)

RESULT_FIELDS = tuple(f.name for f in fields(PricingResult))


def _number(text):
    """Form-style number parsing: blank -> None, garbage -> NaN."""
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return float("nan")


def _config(args) -> PricerConfig:
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    if args.allow_zero:
        config = replace(config, zero_is_missing=False)
    if args.apply_dividend:
        config = replace(config, apply_dividend_yield=True)
    return config


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--allow-zero", dest="allow_zero", action="store_true",
                        help="accept zero rates/yields instead of treating them as missing")
    parser.add_argument("--apply-dividend", dest="apply_dividend", action="store_true",
                        help="include the dividend yield in the formulas")


# ---------------------------------------------------------------------------
# Single calculation
# ---------------------------------------------------------------------------
def cmd_price(args) -> int:
    config = _config(args)
    start_default, expiry_default = default_window()
    inputs = PricingInputs(
        spot=_number(args.spot),
        strike=_number(args.strike),
        period_start=start_default if args.start is None else parse_timestamp(args.start),
        expiry=expiry_default if args.expiry is None else parse_timestamp(args.expiry),
        volatility_pct=_number(args.volatility),
        interest_pct=_number(args.interest),
        dividend_yield=_number(args.dividend),
    )
    logger.debug("pricing %s with %s", inputs, config)

    try:
        result = price(inputs, config)
    except PricingError as e:
        logger.debug("calculation rejected: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        print(render_table(result))
    return 0


# ---------------------------------------------------------------------------
# Batch calculation
# ---------------------------------------------------------------------------
def _price_row(row: dict, config: PricerConfig) -> dict:
    inputs = PricingInputs(
        period_start=parse_timestamp(row.get("period_start")),
        expiry=parse_timestamp(row.get("expiry")),
        **{name: _number(row.get(name)) for name in NUMERIC_FIELDS},
    )
    result = price(inputs, config)
    return {"id": row.get("id", ""), **result.as_dict(), "error": None}


def cmd_book(args) -> int:
    config = _config(args)
    with open(args.input, newline="") as f:
        rows = list(csv.DictReader(f))

    logger.info("pricing %d requests from %s", len(rows), args.input)

    results = []
    for i, row in enumerate(rows):
        try:
            results.append(_price_row(row, config))
        except PricingError as e:
            logger.warning("row %d (id=%s): %s", i, row.get("id", "?"), e)
            results.append({"id": row.get("id", ""),
                            **{k: None for k in RESULT_FIELDS},
                            "error": str(e)})

    output_path = Path(args.output)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2)
    else:
        fieldnames = ["id", *RESULT_FIELDS, "error"]
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(results)

    failed = sum(1 for r in results if r["error"] is not None)
    print(f"Priced: {len(results) - failed}  |  Failed: {failed}  ->  {args.output}")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bscalc", description="Black-Scholes premium and Greeks calculator")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_price = sub.add_parser("price", help="price one call/put pair")
    p_price.add_argument("--spot")
    p_price.add_argument("--strike")
    p_price.add_argument("--start", default=None,
                         help="entry time, YYYY-MM-DD HH:MM:SS (24h); default now")
    p_price.add_argument("--expiry", default=None,
                         help="expiry time, YYYY-MM-DD HH:MM:SS (24h); default end of month")
    p_price.add_argument("--volatility", help="annual volatility, percent")
    p_price.add_argument("--interest", help="risk-free rate, percent")
    p_price.add_argument("--dividend", help="dividend yield, percent")
    p_price.add_argument("--json", action="store_true", help="print JSON instead of a table")
    add_common(p_price)
    p_price.set_defaults(func=cmd_price)

    p_book = sub.add_parser("book", help="price every row of a CSV file")
    p_book.add_argument("--input", required=True, help="CSV of requests")
    p_book.add_argument("--output", required=True, help="output path (.csv or .json)")
    add_common(p_book)
    p_book.set_defaults(func=cmd_book)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except PricingError as e:
        # config problems surface here
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
