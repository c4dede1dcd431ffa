"""Tests for the signal -> brief pipeline in both batch and live modes."""

from __future__ import annotations

import random
from dataclasses import replace

from npd_engine.assembler import (
    BACKFILL_FORMULA,
    analyze_signals,
    diversify_formats,
    run_analysis,
    run_live_pulse_analysis,
)
from npd_engine.csv_input import parse_csv
from npd_engine.dedup import deduplicate, merge_group
from npd_engine.formats import EDIBLE_FORMATS, TOPICAL_WELLNESS_FORMATS
from npd_engine.models import (
    BrandName,
    CandidateBrief,
    CompetitionDensity,
    EvidencePanel,
    Mode,
    OpportunityType,
    ProductBrief,
    RawSignal,
)
from npd_engine.taxonomy import get_profile
from live_pulse.simulated import simulated_signals


class _StubRandom:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value

    def randint(self, a: int, b: int) -> int:
        return a


# ── Batch mode ───────────────────────────────────────────────────


class TestBatchAnalysis:
    def test_hard_water_example(self):
        rows = parse_csv("content,score\nhard water hair fall,10\n")
        result = run_analysis(BrandName.MAN_MATTERS, rows)

        matches = [b for b in result.briefs if b.white_space == "Hard Water Hairfall"]
        assert len(matches) == 1
        brief = matches[0]
        assert brief.evidence.marketplace_hits == 10
        assert brief.evidence.competition_density is CompetitionDensity.HIGH
        assert brief.opportunity_score == 1.3
        assert brief.format == "Mist"
        assert brief.dynamic_name == "The Hard Water Hairfall Fix — Mist"
        assert brief.opportunity_type is OpportunityType.OPTIMIZATION
        assert brief.evidence.formula_string == "Aggregated from 1 signal(s): 10 hits, 2 mentions"

    def test_thin_run_is_backfilled_to_minimum(self):
        rows = parse_csv("content,score\nhard water hair fall,10\n")
        result = run_analysis(BrandName.MAN_MATTERS, rows)

        assert len(result.briefs) == 5
        backfilled = [b for b in result.briefs if b.evidence.formula_string == BACKFILL_FORMULA]
        assert len(backfilled) == 4
        for b in backfilled:
            assert b.opportunity_score == 1.5
            assert b.is_low_signal and b.is_exploratory
            assert not b.is_decision_ready
            assert b.opportunity_type is OpportunityType.BLUE_OCEAN
            assert b.evidence.reddit_buzz == 12
        assert result.briefs[-1].white_space == "Hard Water Hairfall"

    def test_formats_distinct_after_backfill(self):
        rows = parse_csv("content,score\nhard water hair fall,10\n")
        formats = [b.format for b in run_analysis(BrandName.MAN_MATTERS, rows).briefs]
        assert len(formats) == len(set(formats))

    def test_idempotent(self):
        csv_text = (
            "title,upvotes\n"
            "hard water hair fall,10\n"
            "patchy beard will not fill,4\n"
            "dandruff flakes everywhere,22\n"
            '"stress, anxiety and hair thinning",7\n'
        )
        first = run_analysis(BrandName.MAN_MATTERS, parse_csv(csv_text))
        second = run_analysis(BrandName.MAN_MATTERS, parse_csv(csv_text))
        assert first.to_dict() == second.to_dict()

    def test_duplicates_merge_and_sum_hits(self):
        rows = parse_csv("content,score\nhard water hair woes,1\nhard water hair again,2\nhard water hair forever,3\n")
        result = run_analysis(BrandName.MAN_MATTERS, rows)

        matches = [b for b in result.briefs if b.white_space == "Hard Water Hairfall"]
        assert len(matches) == 1
        assert matches[0].evidence.marketplace_hits == 6
        assert matches[0].signal_strength == 6
        assert matches[0].opportunity_score == 0.8
        assert not matches[0].is_low_signal
        assert matches[0].evidence.formula_string.startswith("Aggregated from 3 signal(s)")

    def test_low_signal_never_decision_ready(self):
        rows = parse_csv("content,score\nhard water hair fall,2\n")
        brief = next(b for b in run_analysis(BrandName.MAN_MATTERS, rows).briefs if b.white_space == "Hard Water Hairfall")
        assert brief.is_low_signal
        assert not brief.is_decision_ready

    def test_capped_at_eighteen(self):
        body = "".join(f"grooming kit idea number {i},5\n" for i in range(25))
        result = run_analysis(BrandName.MAN_MATTERS, parse_csv("content,score\n" + body))
        assert len(result.briefs) == 18
        assert result.stats.rows_processed == 25

    def test_blocked_rows_dropped(self):
        rows = parse_csv("content,score\nhard water hair fall for my kids,10\n")
        result = run_analysis(BrandName.MAN_MATTERS, rows)
        assert result.no_data
        assert result.briefs == []
        assert result.stats.signals_accepted == 0

    def test_empty_input(self):
        result = run_analysis(BrandName.BE_BODYWISE, [])
        assert result.no_data
        assert result.briefs == []
        assert result.to_dict()["noData"] is True

    def test_sorted_descending(self):
        csv_text = "content,score\nhard water hair,40\npatchy beard,4\ndandruff,90\ngym belly fat,12\n"
        scores = [b.opportunity_score for b in run_analysis(BrandName.MAN_MATTERS, parse_csv(csv_text)).briefs]
        assert scores == sorted(scores, reverse=True)


# ── Live mode ────────────────────────────────────────────────────


class TestLiveAnalysis:
    def test_hard_water_example(self):
        signal = _signal("Hard Water Hair Fall", 9, 47, "Nothing works for my hair, hard water everywhere.")
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, [signal], rng=_StubRandom(0.0))

        brief = next(b for b in result.briefs if b.white_space.startswith("Hard Water Hairfall"))
        assert brief.opportunity_score == 9.9
        assert brief.opportunity_type is OpportunityType.OPTIMIZATION
        assert brief.is_decision_ready
        assert not brief.is_low_signal
        assert brief.evidence.source_url == "https://example.com/thread"
        assert brief.evidence.formula_string.startswith("Aggregated from 1 signal(s)")

    def test_scores_bounded(self):
        signals = simulated_signals(BrandName.MAN_MATTERS)
        for seed in range(10):
            result = run_live_pulse_analysis(BrandName.MAN_MATTERS, signals, rng=random.Random(seed))
            for b in result.briefs:
                if b.evidence.formula_string != BACKFILL_FORMULA:
                    assert 3.0 <= b.opportunity_score <= 9.9

    def test_volume_floor_with_thin_input(self):
        signals = simulated_signals(BrandName.MAN_MATTERS)[:2]
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, signals, rng=random.Random(1))
        assert 5 <= len(result.briefs) <= 7

    def test_volume_cap(self):
        for brand in BrandName:
            result = run_live_pulse_analysis(brand, simulated_signals(brand), rng=random.Random(2))
            assert 1 <= len(result.briefs) <= 7

    def test_live_backfill_bands(self):
        signal = _signal("Hard Water Hair Fall", 9, 47, "Nothing works for my hair, hard water everywhere.")
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, [signal], rng=random.Random(5))
        backfilled = [b for b in result.briefs if b.evidence.formula_string == BACKFILL_FORMULA]
        assert backfilled
        for b in backfilled:
            assert 4.0 <= b.opportunity_score <= 7.0
            assert 5 <= b.evidence.reddit_buzz <= 19
            assert b.white_space.endswith("Exploratory gap based on category trends")

    def test_seeded_runs_match(self):
        signals = simulated_signals(BrandName.BE_BODYWISE)
        a = run_live_pulse_analysis(BrandName.BE_BODYWISE, signals, rng=random.Random(11))
        b = run_live_pulse_analysis(BrandName.BE_BODYWISE, signals, rng=random.Random(11))
        assert a.to_dict() == b.to_dict()

    def test_guardrail_blocks_signal(self):
        signal = _signal("Hard Water Hair Fall", 9, 47, "Nothing works for my hair, or for my kids either.")
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, [signal], rng=_StubRandom())
        assert result.no_data

    def test_blocked_terms_never_in_output(self):
        signals = [
            _signal("Hard Water Hair Fall", 9, 47, "Nothing works for my hair, or for my kids either."),
            _signal("Patchy Beard Gaps", 8, 28, "Patchy beard won't fill in, frustrated with oils."),
        ]
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, signals, rng=_StubRandom())
        for b in result.briefs:
            assert "kids" not in (b.evidence.evidence_snippet or "").lower()
            assert "kids" not in b.citation.lower()

    def test_high_competition_pivot_is_blue_ocean(self):
        signal = _signal("Oily skin in humidity", 8, 30, "My skin is so oily in this humidity, nothing works at all.")
        result = run_live_pulse_analysis(BrandName.BE_BODYWISE, [signal], rng=_StubRandom())

        brief = next(b for b in result.briefs if b.white_space.startswith("Humidity Greasiness"))
        assert brief.format == "Balm"
        assert brief.opportunity_type is OpportunityType.BLUE_OCEAN
        assert "Format pivoted from Gel" in brief.novelty_rationale
        assert brief.dynamic_name.endswith("Balm")

    def test_unmatched_signal_is_exploratory(self):
        signal = _signal("Grooming kit organiser needed", 6, 12, "Need a better grooming kit organiser for travel.")
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, [signal], rng=_StubRandom())

        brief = next(b for b in result.briefs if b.evidence.formula_string != BACKFILL_FORMULA)
        assert brief.is_exploratory
        assert brief.opportunity_type is OpportunityType.BLUE_OCEAN
        assert brief.ingredients == []
        assert brief.white_space.startswith("Grooming kit organiser needed")

    def test_duplicate_format_moves_to_fallback(self):
        signals = [
            _signal("Too much sugar in kids vitamins", 9, 40, "Too much sugar in kids vitamins, nothing works."),
            _signal("Kids refuse fishy omega supplements", 6, 10, "Kids refuse fishy omega supplements every day."),
        ]
        result = run_live_pulse_analysis(BrandName.LITTLE_JOYS, signals, rng=_StubRandom())

        sugar = next(b for b in result.briefs if b.white_space.startswith("Sugar Concerns"))
        omega = next(b for b in result.briefs if b.white_space.startswith("Omega-3 DHA Gap"))
        assert sugar.format == "Gummy"
        assert omega.format == "Oral Melt"
        assert omega.dynamic_name.endswith("Oral Melt")
        assert omega.opportunity_type is OpportunityType.BLUE_OCEAN
        formats = [b.format for b in result.briefs]
        assert len(formats) == len(set(formats))

    def test_formats_respect_brand_dna(self):
        for brand in BrandName:
            allowed = EDIBLE_FORMATS if brand is BrandName.LITTLE_JOYS else TOPICAL_WELLNESS_FORMATS
            result = run_live_pulse_analysis(brand, simulated_signals(brand), rng=random.Random(3))
            assert all(b.format in allowed for b in result.briefs)

    def test_stats(self):
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, simulated_signals(BrandName.MAN_MATTERS), rng=random.Random(4))
        stats = result.stats
        assert stats.rows_processed == 10
        assert stats.blue_ocean_count + stats.optimization_count == len(result.briefs)


# ── Dedup ────────────────────────────────────────────────────────


class TestDedup:
    def test_merge_group_keeps_best_and_sums(self):
        group = [_candidate("hard water", 4.0, 10, 3), _candidate("hard water", 8.0, 5, 1)]
        merged = merge_group(group, Mode.LIVE)
        assert merged.opportunity_score == 8.0
        assert merged.evidence.marketplace_hits == 15
        assert merged.evidence.reddit_buzz == 4
        assert merged.signal_strength == 15

    def test_merge_group_rescores_batch(self):
        group = [_candidate("hard water", 0.1, 10, 2), _candidate("hard water", 0.1, 20, 5)]
        merged = merge_group(group, Mode.BATCH)
        assert merged.opportunity_score == 4.0  # 30 * 1.2 / 0.9 / 10

    def test_one_brief_per_key(self):
        candidates = [
            _candidate("hard water", 5.0, 3, 1),
            _candidate("Hard  Water", 6.0, 3, 1),
            _candidate("dandruff", 7.0, 3, 1),
        ]
        briefs = deduplicate(candidates, Mode.LIVE)
        assert len(briefs) == 2
        assert [b.opportunity_score for b in briefs] == [7.0, 6.0]

    def test_merge_group_recomputes_live_flags(self):
        weak = replace(_candidate("hard water", 8.0, 6, 1, intensity=4.0).brief, is_low_signal=True)
        group = [
            CandidateBrief(brief=weak, dedup_key="hard water", proxy=0.9, pain_intensity=4.0),
            _candidate("hard water", 7.0, 6, 1, intensity=4.0),
        ]
        merged = merge_group(group, Mode.LIVE)
        assert merged.evidence.marketplace_hits == 12
        assert not merged.is_low_signal
        assert merged.is_decision_ready

    def test_merge_group_stays_low_when_sum_is_thin(self):
        group = [_candidate("hard water", 8.0, 3, 1, intensity=4.0), _candidate("hard water", 7.0, 4, 1, intensity=4.0)]
        merged = merge_group(group, Mode.LIVE)
        assert merged.is_low_signal
        assert not merged.is_decision_ready

    def test_live_group_of_weak_signals_is_not_low(self):
        signals = [_signal("hard water hair fall", 4, 6, "hard water hair fall again") for _ in range(3)]
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, signals, rng=_StubRandom())

        brief = next(b for b in result.briefs if b.white_space.startswith("Hard Water Hairfall"))
        assert brief.evidence.marketplace_hits == 18
        assert not brief.is_low_signal

    def test_unmatched_signals_merge_on_displayed_words(self):
        signals = [
            _signal("Grooming kit organiser needed for travel with razors", 6, 12,
                    "Need a better grooming kit organiser for travel."),
            _signal("Grooming kit organiser needed for travel with trimmers", 6, 12,
                    "Need a better grooming kit organiser for travel."),
        ]
        result = run_live_pulse_analysis(BrandName.MAN_MATTERS, signals, rng=_StubRandom())

        found = [b for b in result.briefs if b.evidence.formula_string != BACKFILL_FORMULA]
        assert len(found) == 1
        assert found[0].white_space.startswith("Grooming kit organiser needed for travel")
        assert found[0].evidence.marketplace_hits == 24


class TestDiversify:
    def test_collision_reassigned(self):
        profile = get_profile(BrandName.LITTLE_JOYS)
        briefs = [_brief("A", "Gummy"), _brief("B", "Gummy"), _brief("C", "Gummy")]
        out, assigned = diversify_formats(briefs, profile)
        assert [b.format for b in out] == ["Gummy", "Oral Melt", "Drops"]
        assert assigned == {"Gummy", "Oral Melt", "Drops"}
        assert out[0].opportunity_type is OpportunityType.OPTIMIZATION
        assert out[1].opportunity_type is OpportunityType.BLUE_OCEAN


def test_analyze_signals_accepts_brand_string():
    result = analyze_signals("Man Matters", [], Mode.LIVE)
    assert result.brand is BrandName.MAN_MATTERS
    assert result.no_data


def _signal(issue, intensity, frequency, raw_text):
    return RawSignal(
        id="test",
        issue=issue,
        pain_intensity=intensity,
        frequency_count=frequency,
        source_url="https://example.com/thread",
        raw_text=raw_text,
        source_meta="test",
    )


def _brief(white_space, fmt, score=5.0, hits=10, buzz=3):
    return ProductBrief(
        concept_name=white_space,
        dynamic_name=f"The {white_space} Fix — {fmt}",
        white_space=white_space,
        signal_strength=hits,
        opportunity_score=score,
        novelty_rationale="",
        ingredients=[],
        citation="",
        persona="",
        positioning="",
        format=fmt,
        mrp_range="",
        is_exploratory=False,
        is_low_signal=False,
        is_decision_ready=False,
        opportunity_type=OpportunityType.OPTIMIZATION,
        evidence=EvidencePanel(
            marketplace_hits=hits,
            reddit_buzz=buzz,
            competition_density=CompetitionDensity.HIGH,
            formula_string="",
        ),
    )


def _candidate(key, score, hits, buzz, intensity=0.0):
    return CandidateBrief(
        brief=_brief(key, "Mist", score=score, hits=hits, buzz=buzz),
        dedup_key=" ".join(key.split()).lower(),
        proxy=0.9,
        pain_intensity=intensity,
    )
