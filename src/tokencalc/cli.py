"""Command-line entry point for the tokenomics calculator."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config.loader import load_config
from .engine.calculator import Results, compute
from .reporting.export import export_csv, export_json
from .validation.sanity_checks import SanityChecker

INPUT_OPTIONS = (
    ("--purchase-price", "purchase_price", float, "Average price of one purchase"),
    ("--purchases", "number_of_purchases", int, "Number of purchases in the session"),
    ("--period", "period", float, "Time since launch, in periods"),
    ("--review-quality", "review_quality", float, "Review quality between 0 and 1"),
    ("--return-probability", "return_probability", float, "Return probability between 0 and 1"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokencalc",
        description="Compute token emission, burn and price for a buyer session."
    )
    parser.add_argument("--config", help="YAML config file (defaults to the bundled one)")
    for flag, dest, kind, help_text in INPUT_OPTIONS:
        parser.add_argument(flag, dest=dest, type=kind, default=None, help=help_text)
    parser.add_argument("--json", action="store_true", help="Print the full result record as JSON")
    parser.add_argument("--export-json", metavar="PATH", help="Write results and config to a JSON file")
    parser.add_argument("--export-csv", metavar="PATH", help="Write per-purchase diagnostics to CSV")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_summary(results: Results) -> str:
    """Plain-text summary of the headline figures."""
    mint = results.breakdown.mint
    burn = results.breakdown.burn
    interp = results.breakdown.interpretation
    lines = [
        f"Minted tokens:        {results.total_minted_user:,.6f}",
        f"Token price:          {results.token_price:,.4f}",
        f"Burned tokens:        {results.total_burned:,.6f}",
        f"  destroyed (70%):    {results.burn_destroyed:,.6f}",
        f"  redistributed (30%): {results.burn_redistributed:,.6f}",
        f"Net tokens:           {results.net_tokens:,.6f}",
        "",
        f"Cashback:             {mint.cashback_percent * 100:.2f}%",
        f"Quality factor:       {mint.quality_factor:.4f}",
        f"DF first / last:      {mint.df_at_first_purchase:.6f} / {mint.df_at_last_purchase:.6f}",
        f"User cap usage:       {mint.cap_usage * 100:.4f}%",
        f"Discount:             {burn.discount_percent * 100:.2f}%",
        f"Discount total:       {burn.discount_total:,.2f}",
        f"Net value:            {interp.net_value:,.2f}",
        f"Effective return:     {interp.effective_return_percent * 100:.2f}%",
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    config = load_config(args.config)
    overrides = {
        dest: getattr(args, dest)
        for _, dest, _, _ in INPUT_OPTIONS
        if getattr(args, dest) is not None
    }
    inputs = config.inputs.model_copy(update=overrides)

    checker = SanityChecker(config)
    errors = checker.check_inputs(inputs)
    if errors:
        for error in errors:
            print(f"error: {error.message} ({error.details})", file=sys.stderr)
        return 2
    for warning in checker.check_params():
        print(f"warning: {warning.message}", file=sys.stderr)

    results = compute(inputs, config.system, config.market)

    if args.json:
        print(json.dumps(results.to_dict(), indent=2))
    else:
        print(format_summary(results))

    if args.export_json:
        export_json(results, args.export_json, config)
    if args.export_csv:
        export_csv(results, args.export_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
