"""CLI entrypoint for a live pulse scan."""

from __future__ import annotations

import argparse

from npd_engine.cli import BRAND_CHOICES, configure_logging, format_output, write_output
from npd_engine.models import BrandName


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="live-pulse",
        description="Scan live consumer friction for a brand and rank product opportunity briefs",
    )
    parser.add_argument("--brand", required=True, choices=BRAND_CHOICES, help="Brand to scan for")
    parser.add_argument("--offline", action="store_true", help="Skip the live search and use sample signals")
    parser.add_argument("--seed", type=int, default=None, help="Seed for score variance (reproducible output)")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output the result as JSON")
    parser.add_argument("--out", default=None, help="Write output to this path instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv

    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.verbose)

    import random

    from live_pulse.ingest import fetch_live_signals
    from live_pulse.simulated import simulated_signals
    from npd_engine.assembler import run_live_pulse_analysis

    brand = BrandName(args.brand)
    signals = simulated_signals(brand) if args.offline else fetch_live_signals(brand)
    rng = random.Random(args.seed) if args.seed is not None else None
    result = run_live_pulse_analysis(brand, signals, rng=rng)
    write_output(format_output(result, mode="json" if args.json_mode else "md"), args.out)


if __name__ == "__main__":
    main()
