"""Live search ingestion: clean search results into RawSignals, with simulated fallback."""

from __future__ import annotations

import logging
import re
import time

from npd_engine import guardrails
from npd_engine.friction import score_frequency, score_pain_intensity
from npd_engine.models import BrandName, RawSignal
from live_pulse.ids import new_signal_id
from live_pulse.search import TavilySearchClient
from live_pulse.simulated import simulated_signals

log = logging.getLogger(__name__)

MIN_CLEAN_SIGNALS = 5
MAX_SIGNALS = 10
MIN_RAW_TEXT_LEN = 30
LIVE_SOURCE_META = "Reddit/Live Web"

BRAND_QUERIES: dict[BrandName, str] = {
    BrandName.MAN_MATTERS: (
        "Reddit India men hair fall hard water beard growth dandruff scalp issues consumer frustration 2026"
    ),
    BrandName.BE_BODYWISE: (
        "Reddit India women PCOS hormonal acne strawberry skin period pain skincare frustration consumer gaps 2026"
    ),
    BrandName.LITTLE_JOYS: (
        "Reddit Indian parents picky eater kids nutrition height growth immunity supplement gaps 2026"
    ),
}

TITLE_BLACKLIST_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"r/",
        r"\bwiki\b",
        r"node_modules",
        r"\.coffee|\.js|\.ts\b",
        r"frequency.list",
        r"app\.aspell",
        r"admin.message",
        r"privacy.polic",
        r"terms.of.service",
        r"cookie.polic",
        r"^https?://",
        r"^\s*[\W\d]+\s*$",
    )
]

SEO_NOISE_WORDS = (
    "best", "top", "vs", "review", "buy now", "discount", "% off",
    "amazon", "flipkart", "myntra", "nykaa", "shop", "price", "offer",
)


def clean_title(title: str) -> str:
    title = re.sub(r"\s*[-|·•]\s*Reddit.*$", "", title, flags=re.IGNORECASE)
    title = re.sub(r"\s*\|\s*r/\w+", "", title, flags=re.IGNORECASE)
    title = re.sub(r"^\s*\[.*?\]\s*", "", title)
    title = re.sub(r"\s{2,}", " ", title)
    return title.strip()


def is_bad_title(title: str) -> bool:
    if not title or len(title.strip()) < 5:
        return True
    if any(p.search(title) for p in TITLE_BLACKLIST_PATTERNS):
        return True
    lower = title.lower()
    if sum(1 for w in SEO_NOISE_WORDS if w in lower) >= 2:
        return True
    special = len(re.findall(r"[^a-zA-Z0-9\s\-']", title))
    return special / len(title) > 0.25


def signals_from_results(brand: BrandName, results: list[dict]) -> list[RawSignal]:
    """Map search results to signals, dropping noisy titles, thin text, and off-brand records."""
    signals = []
    for r in results:
        raw_title = (r.get("title") or "").strip()
        raw_text = (r.get("content") or r.get("title") or "").strip()
        issue = clean_title(raw_title)
        if is_bad_title(issue):
            log.debug("Dropping noisy title: %r", raw_title[:80])
            continue
        if len(raw_text) <= MIN_RAW_TEXT_LEN:
            continue
        if not guardrails.passes(brand, issue, raw_text):
            log.debug("Guardrail rejected %r for %s", issue[:80], brand.value)
            continue
        signals.append(RawSignal(
            id=new_signal_id(),
            issue=issue,
            pain_intensity=score_pain_intensity(raw_text),
            frequency_count=score_frequency(raw_text),
            source_url=r.get("url") or "",
            raw_text=raw_text,
            source_meta=LIVE_SOURCE_META,
        ))
    return signals


def fetch_live_signals(brand: BrandName | str, client: TavilySearchClient | None = None) -> list[RawSignal]:
    """Run the brand's live search. Any failure falls back to the simulated dataset; never raises."""
    try:
        brand = brand if isinstance(brand, BrandName) else BrandName.parse(brand)
    except ValueError as exc:
        log.warning("[LIVE FALLBACK] %s", exc)
        return []

    log.info("[LIVE START] %s", brand.value)
    t0 = time.monotonic()
    try:
        client = client or TavilySearchClient()
        if not client.token:
            log.warning("[LIVE FALLBACK] %s — no search credentials, using simulated signals", brand.value)
            return simulated_signals(brand)
        data = client.search(BRAND_QUERIES[brand])
        signals = signals_from_results(brand, client.extract_results(data))
    except Exception as exc:
        elapsed = time.monotonic() - t0
        log.warning("[LIVE FALLBACK] %s — %s (%.1fs)", brand.value, exc, elapsed)
        return simulated_signals(brand)

    elapsed = time.monotonic() - t0
    log.info("[LIVE DONE] %s — %d clean signals (%.1fs)", brand.value, len(signals), elapsed)
    if len(signals) < MIN_CLEAN_SIGNALS:
        signals = signals + simulated_signals(brand)
    return signals[:MAX_SIGNALS]
