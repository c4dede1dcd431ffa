"""Competition lookup, opportunity scoring, and signal-quality flags."""

from __future__ import annotations

import random
from dataclasses import dataclass

from npd_engine.models import BrandName, CompetitionDensity, Mode
from npd_engine.taxonomy import COMPETITION_PROXIES, DEFAULT_COMPETITION_PROXY

SENTIMENT_WEIGHT = 1.2
SCORE_CAP = 9.9

HIGH_DENSITY_ABOVE = 0.7
MEDIUM_DENSITY_ABOVE = 0.4


@dataclass(frozen=True)
class ModeSettings:
    score_floor: float
    decision_threshold: float
    min_briefs: int
    max_briefs: int
    buzz_ratio: float
    backfill_score: tuple[float, float]
    backfill_buzz: tuple[int, int]


BATCH_SETTINGS = ModeSettings(
    score_floor=0.0,
    decision_threshold=8.0,
    min_briefs=5,
    max_briefs=18,
    buzz_ratio=0.25,
    backfill_score=(1.5, 1.5),
    backfill_buzz=(12, 12),
)

LIVE_SETTINGS = ModeSettings(
    score_floor=3.0,
    decision_threshold=7.5,
    min_briefs=5,
    max_briefs=7,
    buzz_ratio=0.3,
    backfill_score=(4.0, 7.0),
    backfill_buzz=(5, 19),
)

# Batch: fewer total hits than this is low signal
BATCH_LOW_SIGNAL_HITS = 3
# Live: low signal only when both are under their threshold
LIVE_LOW_INTENSITY = 5
LIVE_LOW_FREQUENCY = 10


def settings_for(mode: Mode) -> ModeSettings:
    return LIVE_SETTINGS if mode is Mode.LIVE else BATCH_SETTINGS


@dataclass(frozen=True)
class LiveScoreWeights:
    """Coefficients for the live friction score. Intensity outweighs volume."""

    intensity_weight: float = 1.2
    frequency_weight: float = 0.5
    frequency_per_point: float = 5.0
    max_variance: float = 2.0


DEFAULT_LIVE_WEIGHTS = LiveScoreWeights()


def competition_proxy(brand: BrandName, sub_sector: str) -> float:
    proxies = COMPETITION_PROXIES.get(brand)
    if not proxies:
        return DEFAULT_COMPETITION_PROXY
    return proxies.get(sub_sector, DEFAULT_COMPETITION_PROXY)


def competition_density(proxy: float) -> CompetitionDensity:
    if proxy > HIGH_DENSITY_ABOVE:
        return CompetitionDensity.HIGH
    if proxy > MEDIUM_DENSITY_ABOVE:
        return CompetitionDensity.MEDIUM
    return CompetitionDensity.LOW


def batch_score(hits: float, proxy: float) -> float:
    """(hits * 1.2 / proxy) / 10, capped at 9.9. Zero hits scores exactly zero."""
    if hits <= 0:
        return 0.0
    raw = hits * SENTIMENT_WEIGHT / proxy
    return round(min(raw / 10, SCORE_CAP), 1)


def live_score(
    pain_intensity: float,
    frequency_count: float,
    rng: random.Random | None = None,
    weights: LiveScoreWeights = DEFAULT_LIVE_WEIGHTS,
) -> float:
    rng = rng or random.Random()
    friction = min(max(pain_intensity, 0.0), 10.0)
    volume = min(max(frequency_count, 0.0) / weights.frequency_per_point, 10.0)
    variance = rng.random() * weights.max_variance
    raw = friction * weights.intensity_weight + volume * weights.frequency_weight + variance
    score = max(LIVE_SETTINGS.score_floor, min(raw, SCORE_CAP))
    return round(score, 1)


def is_low_signal(mode: Mode, hits: float, pain_intensity: float = 0.0) -> bool:
    if mode is Mode.LIVE:
        return pain_intensity < LIVE_LOW_INTENSITY and hits < LIVE_LOW_FREQUENCY
    return hits < BATCH_LOW_SIGNAL_HITS


def is_decision_ready(mode: Mode, score: float, low_signal: bool) -> bool:
    if low_signal:
        return False
    return score > settings_for(mode).decision_threshold


def batch_formula(hits: float, proxy: float) -> str:
    return f"({_fmt_count(hits)} mentions / {proxy} competition)"


def live_formula(pain_intensity: float, proxy: float) -> str:
    return f"(Friction × Sentiment {pain_intensity / 10:.1f}) × {SENTIMENT_WEIGHT} / {proxy}"


def aggregate_formula(signal_count: int, hits: float, buzz: int) -> str:
    return f"Aggregated from {signal_count} signal(s): {_fmt_count(hits)} hits, {buzz} mentions"


def _fmt_count(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
