"""Keyword classifier mapping free text onto a brand's pain taxonomy."""

from __future__ import annotations

import re

from npd_engine.models import BrandName, PainDefinition
from npd_engine.taxonomy import get_profile


def _label_matches(label: str, lower_text: str) -> bool:
    label_lower = label.lower()
    if label_lower in lower_text:
        return True
    words = re.split(r"\s+", label_lower)
    return all(w in lower_text for w in words)


def first_keyword(pain: PainDefinition, lower_text: str) -> str | None:
    for keyword in pain.keywords:
        if keyword in lower_text:
            return keyword
    return None


def classify(text: str, brand: BrandName | str) -> str | None:
    """Return the first pain label the text matches, or None.

    Pass one looks for the label itself (verbatim, or every word of it);
    pass two falls back to the keyword lists. Both passes walk labels in
    taxonomy order, established pool before exploratory.
    """
    pains = get_profile(brand).all_pains
    lower = text.lower()
    for pain in pains:
        if _label_matches(pain.label, lower):
            return pain.label
    for pain in pains:
        if first_keyword(pain, lower) is not None:
            return pain.label
    return None


def matched_keyword(text: str, pain: PainDefinition) -> str:
    """The keyword that ties the text to the pain, else the label itself."""
    return first_keyword(pain, text.lower()) or pain.label
