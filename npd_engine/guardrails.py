"""Brand-safety allow/block filter applied before classification."""

from __future__ import annotations

from npd_engine.models import BrandName, Guardrails
from npd_engine.taxonomy import get_profile


def check(guardrails: Guardrails, issue: str, raw_text: str) -> bool:
    combined = f"{issue} {raw_text}".lower()
    if any(term.lower() in combined for term in guardrails.blocked_terms):
        return False
    if guardrails.allowed_topics:
        return any(topic.lower() in combined for topic in guardrails.allowed_topics)
    return True


def passes(brand: BrandName | str, issue: str, raw_text: str = "") -> bool:
    """Return True if the record is safe to surface under this brand."""
    return check(get_profile(brand).guardrails, issue, raw_text)
