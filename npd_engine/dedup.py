"""Group candidate briefs by pain label and fold their evidence into one brief each."""

from __future__ import annotations

import logging
from dataclasses import replace

from npd_engine.models import CandidateBrief, Mode, ProductBrief
from npd_engine.scoring import (
    aggregate_formula,
    batch_score,
    is_decision_ready,
    is_low_signal,
)

log = logging.getLogger(__name__)


def normalize_key(text: str) -> str:
    return " ".join(text.split()).lower()


def group_candidates(candidates: list[CandidateBrief]) -> dict[str, list[CandidateBrief]]:
    groups: dict[str, list[CandidateBrief]] = {}
    for candidate in candidates:
        groups.setdefault(candidate.dedup_key, []).append(candidate)
    return groups


def merge_group(group: list[CandidateBrief], mode: Mode) -> ProductBrief:
    """Highest-scoring candidate wins; hit and buzz counts are summed over the group.

    Batch scores are a function of total hits, so the winner is rescored from
    the aggregate. Live scores keep the winner's value. In both modes the
    low-signal and decision-ready flags are recomputed from the summed hits.
    """
    best = max(group, key=lambda c: c.opportunity_score)
    total_hits = sum(c.brief.evidence.marketplace_hits for c in group)
    total_buzz = sum(c.brief.evidence.reddit_buzz for c in group)

    evidence = replace(
        best.brief.evidence,
        marketplace_hits=total_hits,
        reddit_buzz=total_buzz,
        formula_string=aggregate_formula(len(group), total_hits, total_buzz),
    )
    merged = replace(best.brief, evidence=evidence, signal_strength=total_hits)

    if mode is Mode.BATCH:
        score = batch_score(total_hits, best.proxy)
    else:
        score = best.opportunity_score
    low = is_low_signal(mode, total_hits, best.pain_intensity)
    return replace(
        merged,
        opportunity_score=score,
        is_low_signal=low,
        is_decision_ready=is_decision_ready(mode, score, low),
    )


def deduplicate(candidates: list[CandidateBrief], mode: Mode) -> list[ProductBrief]:
    groups = group_candidates(candidates)
    briefs = [merge_group(group, mode) for group in groups.values()]
    log.debug("Deduplicated %d candidates into %d briefs", len(candidates), len(briefs))
    return sorted(briefs, key=lambda b: b.opportunity_score, reverse=True)
