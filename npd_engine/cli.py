"""CLI entrypoint for batch (CSV) opportunity analysis."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from npd_engine.models import AnalysisResult, BrandName

BRAND_CHOICES = [b.value for b in BrandName]


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in ("npd_engine", "live_pulse"):
        logging.getLogger(name).setLevel(logging.DEBUG)


def format_output(result: AnalysisResult, *, mode: str) -> str:
    if mode == "json":
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    from npd_engine.report import markdown_report

    return markdown_report(result)


def write_output(text: str, out: str | None) -> None:
    if out is None:
        print(text)
        return
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    print(f"Wrote {path}", file=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npd-analyze",
        description="Score consumer-friction CSV exports into ranked product opportunity briefs",
    )
    parser.add_argument("--brand", required=True, choices=BRAND_CHOICES, help="Brand to analyze for")
    parser.add_argument("--csv", required=True, help="Path to a CSV export (header row required)")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output the result as JSON")
    parser.add_argument("--out", default=None, help="Write output to this path instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv

    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.verbose)

    csv_path = Path(args.csv)
    if not csv_path.is_file():
        print(f"Error: CSV file not found: {csv_path}", file=sys.stderr)
        sys.exit(2)

    from npd_engine.assembler import run_analysis
    from npd_engine.csv_input import parse_csv

    rows = parse_csv(csv_path.read_text(encoding="utf-8-sig"))
    result = run_analysis(BrandName(args.brand), rows)
    write_output(format_output(result, mode="json" if args.json_mode else "md"), args.out)


if __name__ == "__main__":
    main()
