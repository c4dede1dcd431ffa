"""CSV parsing and row -> RawSignal mapping for batch analysis."""

from __future__ import annotations

import csv
import io
import logging

from npd_engine.friction import score_pain_intensity
from npd_engine.models import RawSignal

log = logging.getLogger(__name__)

CONTENT_KEYWORDS = ("body", "text", "comment", "review", "content", "title", "selftext", "description")
IMPACT_KEYWORDS = ("score", "upvotes", "likes", "ups", "votes", "points")


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text into rows keyed by header. Needs a header and at least one data row."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        return []

    reader = csv.reader(io.StringIO("\n".join(lines)), skipinitialspace=True)
    records = [[cell.strip() for cell in record] for record in reader]
    headers, body = records[0], records[1:]

    rows = []
    for values in body:
        if not any(values):
            continue
        rows.append({h: values[i] if i < len(values) else "" for i, h in enumerate(headers)})
    return rows


def detect_columns(headers: list[str]) -> tuple[str | None, str | None]:
    """Return (content_column, impact_column), picking the first header matching each keyword set."""
    content_col: str | None = None
    impact_col: str | None = None
    for header in headers:
        lower = header.lower().strip()
        if content_col is None and any(k in lower for k in CONTENT_KEYWORDS):
            content_col = header
        if impact_col is None and any(k in lower for k in IMPACT_KEYWORDS):
            impact_col = header
    return content_col, impact_col


def parse_impact(raw: str | None) -> int:
    try:
        value = int(float((raw or "").strip()))
    except (ValueError, OverflowError):
        return 1
    return value or 1


def rows_to_signals(rows: list[dict[str, str]]) -> list[RawSignal]:
    if not rows:
        return []
    content_col, impact_col = detect_columns(list(rows[0].keys()))
    log.debug("Detected columns: content=%r impact=%r", content_col, impact_col)

    signals = []
    for i, row in enumerate(rows):
        if content_col:
            text = row.get(content_col) or ""
        else:
            text = " ".join(v for v in row.values() if v)
        text = " ".join(text.split())
        impact = parse_impact(row.get(impact_col)) if impact_col else 1
        signals.append(RawSignal(
            id=f"row_{i + 1}",
            issue=text,
            pain_intensity=score_pain_intensity(text),
            frequency_count=impact,
            raw_text=text,
            source_meta="CSV",
        ))
    return signals
