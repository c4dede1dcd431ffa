"""Data classes for brands, pain definitions, raw signals, and product briefs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BrandName(str, Enum):
    MAN_MATTERS = "Man Matters"
    BE_BODYWISE = "Be Bodywise"
    LITTLE_JOYS = "Little Joys"

    @classmethod
    def parse(cls, value: str) -> BrandName:
        lower = value.strip().lower()
        for brand in cls:
            if brand.value.lower() == lower or brand.name.lower() == lower:
                return brand
        raise ValueError(f"Unknown brand '{value}'. Choose from: {', '.join(b.value for b in cls)}")


class Mode(str, Enum):
    BATCH = "batch"
    LIVE = "live"


class CompetitionDensity(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class OpportunityType(str, Enum):
    OPTIMIZATION = "Optimization"
    BLUE_OCEAN = "Blue Ocean"


@dataclass(frozen=True)
class PainDefinition:
    label: str
    keywords: tuple[str, ...]
    concept: str
    actives: tuple[str, ...]
    persona: str
    positioning: str
    format: str
    sub_sector: str


@dataclass(frozen=True)
class Guardrails:
    blocked_terms: tuple[str, ...]
    allowed_topics: tuple[str, ...] = ()


@dataclass(frozen=True)
class BrandProfile:
    brand: BrandName
    categories: tuple[str, ...]
    mrp_range: str
    default_format: str
    pains: tuple[PainDefinition, ...]
    exploratory_pains: tuple[PainDefinition, ...]
    guardrails: Guardrails

    @property
    def all_pains(self) -> tuple[PainDefinition, ...]:
        """Established pool first, then exploratory; this order is the classifier priority."""
        return self.pains + self.exploratory_pains

    def is_established(self, label: str | None) -> bool:
        return label is not None and any(p.label == label for p in self.pains)

    def is_exploratory(self, label: str | None) -> bool:
        return label is not None and any(p.label == label for p in self.exploratory_pains)

    def lookup(self, label: str | None) -> PainDefinition | None:
        if label is None:
            return None
        for pain in self.pains:
            if pain.label == label:
                return pain
        for pain in self.exploratory_pains:
            if pain.label == label:
                return pain
        return None


@dataclass
class RawSignal:
    id: str
    issue: str
    pain_intensity: float
    frequency_count: float
    source_url: str = ""
    raw_text: str = ""
    source_meta: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "issue": self.issue,
            "pain_intensity": self.pain_intensity,
            "frequency_count": self.frequency_count,
            "source_url": self.source_url,
            "raw_text": self.raw_text,
            "source_meta": self.source_meta,
        }


@dataclass
class EvidencePanel:
    marketplace_hits: float
    reddit_buzz: int
    competition_density: CompetitionDensity
    formula_string: str
    evidence_snippet: str | None = None
    source_url: str | None = None

    def to_dict(self) -> dict:
        data = {
            "marketplaceHits": self.marketplace_hits,
            "redditBuzz": self.reddit_buzz,
            "competitionDensity": self.competition_density.value,
            "formulaString": self.formula_string,
        }
        if self.evidence_snippet is not None:
            data["evidenceSnippet"] = self.evidence_snippet
        if self.source_url is not None:
            data["sourceUrl"] = self.source_url
        return data


@dataclass
class ProductBrief:
    concept_name: str
    dynamic_name: str
    white_space: str
    signal_strength: float
    opportunity_score: float
    novelty_rationale: str
    ingredients: list[str]
    citation: str
    persona: str
    positioning: str
    format: str
    mrp_range: str
    is_exploratory: bool
    is_low_signal: bool
    is_decision_ready: bool
    evidence: EvidencePanel
    opportunity_type: OpportunityType = OpportunityType.BLUE_OCEAN

    def to_dict(self) -> dict:
        return {
            "conceptName": self.concept_name,
            "dynamicName": self.dynamic_name,
            "whiteSpace": self.white_space,
            "signalStrength": self.signal_strength,
            "opportunityScore": self.opportunity_score,
            "noveltyRationale": self.novelty_rationale,
            "ingredients": list(self.ingredients),
            "citation": self.citation,
            "persona": self.persona,
            "positioning": self.positioning,
            "format": self.format,
            "mrpRange": self.mrp_range,
            "isExploratory": self.is_exploratory,
            "isLowSignal": self.is_low_signal,
            "isDecisionReady": self.is_decision_ready,
            "opportunityType": self.opportunity_type.value,
            "evidence": self.evidence.to_dict(),
        }


@dataclass
class CandidateBrief:
    """A brief built from one signal, before grouping by pain label."""

    brief: ProductBrief
    dedup_key: str
    label: str | None = None
    proxy: float = 0.7
    pain_intensity: float = 0.0

    @property
    def opportunity_score(self) -> float:
        return self.brief.opportunity_score


@dataclass
class RunStats:
    rows_processed: int = 0
    signals_accepted: int = 0
    high_intensity_gaps: int = 0
    blue_ocean_count: int = 0
    optimization_count: int = 0
    datasets_analyzed: int = 1

    def to_dict(self) -> dict:
        return {
            "rowsProcessed": self.rows_processed,
            "signalsAccepted": self.signals_accepted,
            "highIntensityGaps": self.high_intensity_gaps,
            "blueOceanCount": self.blue_ocean_count,
            "optimizationCount": self.optimization_count,
            "datasetsAnalyzed": self.datasets_analyzed,
        }


@dataclass
class AnalysisResult:
    brand: BrandName
    mode: Mode
    briefs: list[ProductBrief] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)
    raw_signals: list[RawSignal] = field(default_factory=list)

    @property
    def no_data(self) -> bool:
        return not self.briefs

    def to_dict(self) -> dict:
        return {
            "brand": self.brand.value,
            "mode": self.mode.value,
            "noData": self.no_data,
            "briefs": [b.to_dict() for b in self.briefs],
            "stats": self.stats.to_dict(),
        }
