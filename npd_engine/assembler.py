"""Signal -> brief pipeline: guardrail, classify, score, resolve format, dedup, backfill."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from functools import partial, reduce

from npd_engine import guardrails
from npd_engine.classifier import classify, matched_keyword
from npd_engine.csv_input import rows_to_signals
from npd_engine.dedup import deduplicate, normalize_key
from npd_engine.formats import (
    align_to_brand_dna,
    dynamic_mrp,
    fallback_formats,
    resolve_smart_format,
)
from npd_engine.models import (
    AnalysisResult,
    BrandName,
    BrandProfile,
    CandidateBrief,
    CompetitionDensity,
    EvidencePanel,
    Mode,
    OpportunityType,
    PainDefinition,
    ProductBrief,
    RawSignal,
    RunStats,
)
from npd_engine.naming import (
    build_dynamic_name,
    extract_snippet,
    generic_justification,
    refined_white_space,
    sanitize_product_name,
    sanitize_snippet,
    swap_name_format,
)
from npd_engine.scoring import (
    DEFAULT_LIVE_WEIGHTS,
    LiveScoreWeights,
    batch_formula,
    batch_score,
    competition_density,
    competition_proxy,
    is_decision_ready,
    is_low_signal,
    live_formula,
    live_score,
    settings_for,
)
from npd_engine.taxonomy import get_profile

log = logging.getLogger(__name__)

UNMATCHED_SUB_SECTOR = "Skin"
UNMATCHED_NAME_WORDS = 6
BACKFILL_FORMULA = "Backfilled from category intelligence"
EXPLORATORY_SUFFIX = " — Exploratory gap based on category trends"


@dataclass
class ScoredSignal:
    signal: RawSignal
    label: str | None
    pain: PainDefinition | None
    proxy: float
    density: CompetitionDensity
    score: float


def score_signal(
    signal: RawSignal,
    profile: BrandProfile,
    mode: Mode,
    rng: random.Random,
    weights: LiveScoreWeights = DEFAULT_LIVE_WEIGHTS,
) -> ScoredSignal:
    label = classify(signal.issue, profile.brand)
    pain = profile.lookup(label)
    if label is None:
        log.debug("No taxonomy match for %r", signal.issue[:80])

    sub_sector = pain.sub_sector if pain else UNMATCHED_SUB_SECTOR
    proxy = competition_proxy(profile.brand, sub_sector)
    if mode is Mode.LIVE:
        score = live_score(signal.pain_intensity, signal.frequency_count, rng, weights)
    else:
        score = batch_score(signal.frequency_count, proxy)
    return ScoredSignal(signal, label, pain, proxy, competition_density(proxy), score)


def _short_issue(issue: str) -> str:
    words = issue.split()
    return " ".join(words[:UNMATCHED_NAME_WORDS]) or "Unlabelled Signal"


def assemble_candidate(
    item: ScoredSignal,
    profile: BrandProfile,
    mode: Mode,
    used_formats: frozenset[str],
) -> CandidateBrief:
    sig, pain, label = item.signal, item.pain, item.label
    settings = settings_for(mode)

    base_format = align_to_brand_dna(pain.format if pain else profile.default_format, profile)
    fmt, was_swapped = resolve_smart_format(base_format, item.density, used_formats, profile)

    if profile.is_established(label) and not was_swapped:
        opportunity_type = OpportunityType.OPTIMIZATION
    else:
        opportunity_type = OpportunityType.BLUE_OCEAN

    pain_label = label or _short_issue(sig.issue)
    if pain:
        raw_name = build_dynamic_name(matched_keyword(sig.issue, pain), fmt)
    else:
        raw_name = build_dynamic_name(_short_issue(sig.issue), fmt)
    dynamic_name = sanitize_product_name(raw_name, pain, fmt)

    rationale = pain.positioning if pain else "Live signal — validate with R&D."
    if was_swapped:
        rationale += f" Format pivoted from {base_format} → {fmt} (High competition in {base_format})."

    clean_snippet = sanitize_snippet(sig.raw_text, pain_label, fmt)
    hits = sig.frequency_count
    low_signal = is_low_signal(mode, hits, sig.pain_intensity)

    if mode is Mode.LIVE:
        white_space = refined_white_space(pain_label)
        formula = live_formula(sig.pain_intensity, item.proxy)
    else:
        white_space = pain_label
        formula = batch_formula(hits, item.proxy)

    brief = ProductBrief(
        concept_name=pain.concept if pain else sig.issue,
        dynamic_name=dynamic_name,
        white_space=white_space,
        signal_strength=hits,
        opportunity_score=item.score,
        novelty_rationale=rationale,
        ingredients=list(pain.actives) if pain else [],
        citation=extract_snippet(clean_snippet),
        persona=pain.persona if pain else "Consumer from live channels.",
        positioning=pain.positioning if pain else "Address friction from social/trends.",
        format=fmt,
        mrp_range=dynamic_mrp(profile, fmt, pain.sub_sector if pain else None),
        is_exploratory=pain is None or profile.is_exploratory(label),
        is_low_signal=low_signal,
        is_decision_ready=is_decision_ready(mode, item.score, low_signal),
        opportunity_type=opportunity_type,
        evidence=EvidencePanel(
            marketplace_hits=hits,
            reddit_buzz=int(max(hits, 0) * settings.buzz_ratio),
            competition_density=item.density,
            formula_string=formula,
            evidence_snippet=clean_snippet,
            source_url=sig.source_url or None,
        ),
    )
    return CandidateBrief(
        brief=brief,
        dedup_key=normalize_key(pain_label),
        label=label,
        proxy=item.proxy,
        pain_intensity=sig.pain_intensity,
    )


def _candidate_step(
    profile: BrandProfile,
    mode: Mode,
    acc: tuple[tuple[CandidateBrief, ...], frozenset[str]],
    item: ScoredSignal,
) -> tuple[tuple[CandidateBrief, ...], frozenset[str]]:
    built, used = acc
    candidate = assemble_candidate(item, profile, mode, used)
    return built + (candidate,), used | {candidate.brief.format}


def build_candidates(scored: list[ScoredSignal], profile: BrandProfile, mode: Mode) -> list[CandidateBrief]:
    """Fold over signals in score order so higher-ranked briefs claim their preferred format first."""
    ordered = sorted(scored, key=lambda s: s.score, reverse=True)
    candidates, _ = reduce(partial(_candidate_step, profile, mode), ordered, ((), frozenset()))
    return list(candidates)


def _diversity_step(
    profile: BrandProfile,
    acc: tuple[tuple[ProductBrief, ...], frozenset[str]],
    brief: ProductBrief,
) -> tuple[tuple[ProductBrief, ...], frozenset[str]]:
    done, assigned = acc
    fmt = align_to_brand_dna(brief.format, profile)
    if fmt in assigned:
        alt = next((f for f in fallback_formats(profile) if f not in assigned), None)
        if alt is not None:
            log.debug("Format collision on %s: %r moves to %s", fmt, brief.white_space, alt)
            brief = replace(
                brief,
                format=alt,
                dynamic_name=swap_name_format(brief.dynamic_name, brief.format, alt),
                mrp_range=dynamic_mrp(profile, alt),
                opportunity_type=OpportunityType.BLUE_OCEAN,
                novelty_rationale=f"{brief.novelty_rationale} Format pivoted from {fmt} → {alt} (format already in this run).",
            )
            fmt = alt
    elif fmt != brief.format:
        brief = replace(brief, format=fmt)
    return done + (brief,), assigned | {fmt}


def diversify_formats(briefs: list[ProductBrief], profile: BrandProfile) -> tuple[list[ProductBrief], frozenset[str]]:
    """Walk briefs in rank order; a repeated format moves to the first unassigned fallback format."""
    done, assigned = reduce(partial(_diversity_step, profile), briefs, ((), frozenset()))
    return list(done), assigned


def _draw(band: tuple[float, float], rng: random.Random) -> float:
    lo, hi = band
    return lo if lo == hi else rng.uniform(lo, hi)


def backfill(
    briefs: list[ProductBrief],
    used_keys: set[str],
    assigned_formats: frozenset[str],
    profile: BrandProfile,
    mode: Mode,
    rng: random.Random,
) -> list[ProductBrief]:
    """Pad a thin result set with exploratory briefs from unused taxonomy entries."""
    settings = settings_for(mode)
    result = list(briefs)
    assigned = set(assigned_formats)

    for pain in profile.all_pains:
        if len(result) >= settings.min_briefs:
            break
        if normalize_key(pain.label) in used_keys:
            continue

        aligned = align_to_brand_dna(pain.format, profile)
        fmt = next((f for f in fallback_formats(profile) if f not in assigned), aligned)
        assigned.add(fmt)
        proxy = competition_proxy(profile.brand, pain.sub_sector)
        lo_buzz, hi_buzz = settings.backfill_buzz

        result.append(ProductBrief(
            concept_name=pain.concept,
            dynamic_name=sanitize_product_name(f"{pain.actives[0]} {fmt}", pain, fmt),
            white_space=pain.label + EXPLORATORY_SUFFIX if mode is Mode.LIVE else pain.label,
            signal_strength=0,
            opportunity_score=round(_draw(settings.backfill_score, rng), 1),
            novelty_rationale=pain.positioning,
            ingredients=list(pain.actives),
            citation=generic_justification(pain.label, fmt),
            persona=pain.persona,
            positioning=pain.positioning,
            format=fmt,
            mrp_range=dynamic_mrp(profile, fmt, pain.sub_sector),
            is_exploratory=True,
            is_low_signal=True,
            is_decision_ready=False,
            opportunity_type=OpportunityType.BLUE_OCEAN,
            evidence=EvidencePanel(
                marketplace_hits=0,
                reddit_buzz=lo_buzz if lo_buzz == hi_buzz else rng.randint(lo_buzz, hi_buzz),
                competition_density=competition_density(proxy),
                formula_string=BACKFILL_FORMULA,
            ),
        ))
    return result


def _stats(signals: list[RawSignal], accepted: list[RawSignal], briefs: list[ProductBrief]) -> RunStats:
    blue = sum(1 for b in briefs if b.opportunity_type is OpportunityType.BLUE_OCEAN)
    return RunStats(
        rows_processed=len(signals),
        signals_accepted=len(accepted),
        high_intensity_gaps=sum(1 for b in briefs if b.signal_strength > 0),
        blue_ocean_count=blue,
        optimization_count=len(briefs) - blue,
    )


def analyze_signals(
    brand: BrandName | str,
    signals: list[RawSignal],
    mode: Mode,
    *,
    rng: random.Random | None = None,
    weights: LiveScoreWeights = DEFAULT_LIVE_WEIGHTS,
) -> AnalysisResult:
    profile = get_profile(brand)
    settings = settings_for(mode)
    rng = rng or random.Random()

    accepted = [s for s in signals if guardrails.check(profile.guardrails, s.issue, s.raw_text)]
    log.info(
        "[%s] %s mode: %d/%d signals passed guardrails",
        profile.brand.value, mode.value, len(accepted), len(signals),
    )

    scored = [score_signal(s, profile, mode, rng, weights) for s in accepted]
    candidates = build_candidates(scored, profile, mode)
    briefs, assigned = diversify_formats(deduplicate(candidates, mode), profile)

    if briefs and len(briefs) < settings.min_briefs:
        used_keys = {c.dedup_key for c in candidates}
        briefs = backfill(briefs, used_keys, assigned, profile, mode, rng)

    briefs = sorted(briefs, key=lambda b: b.opportunity_score, reverse=True)[: settings.max_briefs]
    log.info("[%s] %d briefs produced", profile.brand.value, len(briefs))

    return AnalysisResult(
        brand=profile.brand,
        mode=mode,
        briefs=briefs,
        stats=_stats(signals, accepted, briefs),
        raw_signals=list(signals),
    )


def run_analysis(brand: BrandName | str, rows: list[dict[str, str]]) -> AnalysisResult:
    """Batch mode over parsed CSV rows. Deterministic for the same rows."""
    return analyze_signals(brand, rows_to_signals(rows), Mode.BATCH)


def run_live_pulse_analysis(
    brand: BrandName | str,
    signals: list[RawSignal],
    rng: random.Random | None = None,
    weights: LiveScoreWeights = DEFAULT_LIVE_WEIGHTS,
) -> AnalysisResult:
    return analyze_signals(brand, signals, Mode.LIVE, rng=rng, weights=weights)
