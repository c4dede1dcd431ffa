"""Markdown rendering of analysis results: full report, executive summary, single-brief draft."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from npd_engine.models import AnalysisResult, Mode, ProductBrief
from npd_engine.scoring import (
    BATCH_SETTINGS,
    DEFAULT_LIVE_WEIGHTS,
    LIVE_SETTINGS,
    SCORE_CAP,
    SENTIMENT_WEIGHT,
)

EVIDENCE_PREVIEW_CHARS = 300


@dataclass
class ExecutiveSummary:
    data_integrity: str
    opportunity_logic: str
    format_compliance: str
    high_priority: list[str]


def _priority_line(brief: ProductBrief) -> str:
    return f"{brief.dynamic_name} (Opportunity: {brief.opportunity_score})"


def _opportunity_logic(mode: Mode) -> str:
    if mode is Mode.LIVE:
        w = DEFAULT_LIVE_WEIGHTS
        return (
            f"Live scores combine Pain Intensity × {w.intensity_weight} with mention volume "
            f"(× {w.frequency_weight} per {w.frequency_per_point:g} mentions, capped) plus a small "
            f"tie-breaking variance, clamped to {LIVE_SETTINGS.score_floor}–{SCORE_CAP}. "
            f"Concepts above {LIVE_SETTINGS.decision_threshold} are Decision Ready."
        )
    return (
        f"Scores are weighted against Sector Competition Proxies using the formula "
        f"(Mentions × {SENTIMENT_WEIGHT}) / Competition Proxy. A score of 9.0 in a Blue Ocean "
        f"sub-sector represents a higher launch priority than a 9.0 in a Red Ocean one. "
        f"Concepts above {BATCH_SETTINGS.decision_threshold} are Decision Ready."
    )


def executive_summary(result: AnalysisResult) -> ExecutiveSummary:
    data_backed = [b for b in result.briefs if not b.is_low_signal]
    low_signal_count = len(result.briefs) - len(data_backed)
    formats = list(dict.fromkeys(b.format for b in result.briefs))
    source = "CSV keyword clusters" if result.mode is Mode.BATCH else "live consumer signals"

    top = sorted(data_backed, key=lambda b: b.opportunity_score, reverse=True)[:3]
    if not top:
        top = result.briefs[:2]

    return ExecutiveSummary(
        data_integrity=(
            f"{len(data_backed)} of {len(result.briefs)} concepts are derived from {source}. "
            f'{low_signal_count} "Low Signal" concepts are flagged to prevent R&D waste.'
        ),
        opportunity_logic=_opportunity_logic(result.mode),
        format_compliance=(
            f"All concepts prioritize modern formats ({', '.join(formats)}) selected to solve for "
            f"Indian User Compliance — Heat, Humidity, and Sugar-aversion."
        ),
        high_priority=[_priority_line(b) for b in top],
    )


def _badge(brief: ProductBrief) -> str:
    if brief.is_decision_ready:
        return "✅ Decision Ready"
    if brief.is_low_signal:
        return "⚠️ Low Signal — R&D Required"
    return ""


def markdown_report(result: AnalysisResult, generated: date | None = None) -> str:
    generated = generated or date.today()
    lines = [
        f"# {result.brand.value} — NPD Decision Pipeline Report",
        f"**Generated:** {generated.strftime('%d %B %Y')}",
        f"**Consumer Touchpoints Analyzed:** {result.stats.rows_processed} | "
        f"**High-Intensity Gaps:** {result.stats.high_intensity_gaps} | "
        f"**Blue Ocean:** {result.stats.blue_ocean_count} | "
        f"**Optimization:** {result.stats.optimization_count}",
        "",
        "---",
        "",
    ]

    if result.no_data:
        lines.append("No signals passed the brand guardrails and classifier.")
        return "\n".join(lines)

    for brief in result.briefs:
        badge = _badge(brief)
        ev = brief.evidence
        lines.append(f"## {badge + ' | ' if badge else ''}{brief.dynamic_name}")
        lines.append(f"_Reference: {brief.concept_name}_")
        lines.append("")
        lines.append("| Field | Detail |")
        lines.append("|-------|--------|")
        lines.append(f"| **White Space** | {brief.white_space} |")
        lines.append(f"| **Opportunity Type** | {brief.opportunity_type.value} |")
        lines.append(f"| **Target Consumer** | {brief.persona} |")
        lines.append(f"| **Format** | {brief.format} |")
        lines.append(f"| **Active Ingredients** | {', '.join(brief.ingredients)} |")
        lines.append(f"| **Suggested MRP** | {brief.mrp_range} |")
        lines.append(f"| **Opportunity Score** | {brief.opportunity_score}/10 |")
        lines.append(f"| **Marketplace Hits** | {ev.marketplace_hits:g} rows |")
        lines.append(f"| **Reddit Buzz** | {ev.reddit_buzz} mentions |")
        lines.append(f"| **Competition Density** | {ev.competition_density.value} |")
        lines.append(f"| **Formula** | {ev.formula_string} |")
        lines.append("")
        lines.append(f"**Competitive Positioning:** {brief.positioning}")
        lines.append("")
        lines.append(f'**Consumer Evidence:** _"{brief.citation}"_')
        lines.append("")
        lines.append("---")
        lines.append("")

    summary = executive_summary(result)
    lines.append("## Strategic Executive Summary (Audit Grade)")
    lines.append("")
    lines.append("### Data Integrity")
    lines.append(summary.data_integrity)
    lines.append("")
    lines.append("### Opportunity Score Logic")
    lines.append(summary.opportunity_logic)
    lines.append("")
    lines.append("### Format Compliance")
    lines.append(summary.format_compliance)
    lines.append("")
    lines.append("### High-Priority Recommendations")
    for item in summary.high_priority:
        lines.append(f"- **{item}**")
    lines.append("")

    return "\n".join(lines)


def brief_draft(brief: ProductBrief) -> str:
    """Technical product brief for a single recommendation."""
    ev = brief.evidence
    if ev.evidence_snippet:
        snippet = ev.evidence_snippet[:EVIDENCE_PREVIEW_CHARS]
        if len(ev.evidence_snippet) > EVIDENCE_PREVIEW_CHARS:
            snippet += "…"
    else:
        snippet = brief.citation

    lines = [
        f"# Product Brief — {brief.dynamic_name}",
        f"**Reference Concept:** {brief.concept_name} | **White Space:** {brief.white_space}",
        "",
        "## 1. Target Ingredient Profile",
    ]
    if brief.ingredients:
        lines.extend(f"- {i}" for i in brief.ingredients)
    else:
        lines.append("- _To be defined based on R&D validation_")
    lines += [
        "",
        "## 2. Competitive Gap Analysis",
        f"- **Competition Density:** {ev.competition_density.value}",
        f"- **Opportunity Type:** {brief.opportunity_type.value}",
        f"- **Positioning:** {brief.positioning}",
        "",
        "## 3. Suggested USP (Unique Selling Proposition)",
        brief.novelty_rationale,
        "",
        "## 4. Target Consumer",
        brief.persona,
        "",
        "## 5. Format & MRP",
        f"- **Format:** {brief.format} | **MRP Range:** {brief.mrp_range}",
        "",
        "## 6. Evidence",
        f'"{snippet}"',
    ]
    if ev.source_url:
        lines.append("")
        lines.append(f"**Source:** {ev.source_url}")
    return "\n".join(lines)
