"""Format alignment to brand category DNA, competition-driven format swaps, and MRP."""

from __future__ import annotations

import logging
from typing import Iterable

from npd_engine.models import BrandName, BrandProfile, CompetitionDensity
from npd_engine.taxonomy import get_profile

log = logging.getLogger(__name__)

EDIBLE_FORMATS = frozenset({
    "Powder Mix", "Milk Mix", "Nutri-Mix", "Gummy", "Gummies", "Bites", "Bite-Sized Bar",
    "Chewable", "Oral Melt", "Oral Dissolving Strip", "Shake", "Shake Sachet",
    "Syrup", "Drops", "Squeeze Pouch", "Fortified Jam", "Effervescent Milk-Drops",
    "Sachet", "Nutri-Melt",
})

TOPICAL_WELLNESS_FORMATS = frozenset({
    "Tonic", "Serum", "Mist", "Gel", "Gummy", "Effervescent Tablet",
    "Tablet", "Sublingual Drops", "Foam", "Sachet", "Oral Strip",
    "Serum-Mist", "Balm",
})

EDIBLE_DEFAULT = "Nutri-Mix"

EDIBLE_REMAP = {
    "Mist": "Nutri-Mix",
    "Serum": "Syrup",
    "Spray": "Drops",
    "Tonic": "Milk Mix",
    "Gel": "Gummy",
    "Foam": "Shake",
    "Serum-Mist": "Nutri-Mix",
    "Sublingual Drops": "Drops",
    "Effervescent Tablet": "Effervescent Milk-Drops",
    "Tablet": "Chewable",
    "Oral Strip": "Oral Dissolving Strip",
}

TOPICAL_REMAP = {
    "Spray": "Mist",
    "Lotion": "Serum-Mist",
    "Cream": "Balm",
    "Capsule": "Tablet",
    "Gummies": "Gummy",
    "Bites": "Gummy",
    "Bite-Sized Bar": "Gummy",
    "Chewable": "Gummy",
    "Chewable Bar": "Gummy",
    "Oral Melt": "Oral Strip",
    "Oral Dissolving Strip": "Oral Strip",
    "Nutri-Melt": "Oral Strip",
    "Powder Mix": "Sachet",
    "Milk Mix": "Sachet",
    "Nutri-Mix": "Sachet",
    "Shake": "Sachet",
    "Shake Sachet": "Sachet",
    "Squeeze Pouch": "Sachet",
    "Fortified Jam": "Sachet",
    "Syrup": "Tonic",
    "Drops": "Sublingual Drops",
    "Effervescent Milk-Drops": "Effervescent Tablet",
}

# Disruptive alternatives to a crowded format, in preference order
ALTERNATIVE_FORMATS = {
    "Gummy": ["Squeeze Pouch", "Oral Dissolving Strip", "Fortified Jam", "Effervescent Milk-Drops"],
    "Powder Mix": ["Fortified Jam", "Squeeze Pouch", "Chewable Bar", "Effervescent Milk-Drops"],
    "Tablet": ["Oral Dissolving Strip", "Effervescent Tablet", "Squeeze Pouch"],
    "Syrup": ["Oral Melt", "Squeeze Pouch", "Oral Dissolving Strip"],
    "Chewable": ["Oral Dissolving Strip", "Squeeze Pouch", "Effervescent Milk-Drops"],
    "Serum": ["Serum-Mist", "Foam", "Balm"],
    "Tonic": ["Mist", "Foam", "Serum-Mist"],
    "Gel": ["Balm", "Serum-Mist"],
}

# Used to break format collisions between briefs, in preference order
FALLBACK_FORMATS = (
    "Gummy", "Oral Melt", "Drops", "Squeeze Pouch", "Oral Dissolving Strip", "Chewable",
    "Shake", "Powder Mix", "Nutri-Mix", "Milk Mix", "Bite-Sized Bar", "Syrup", "Sachet",
    "Mist", "Serum", "Tonic", "Effervescent Tablet", "Gel", "Tablet", "Foam", "Balm",
)

PREMIUM_FORMATS = frozenset({"Shake", "Shake Sachet", "Syrup", "Drops", "Serum"})
SNACK_FORMATS = frozenset({"Bite-Sized Bar", "Squeeze Pouch", "Fortified Jam", "Chewable Bar"})


def _profile(brand: BrandName | BrandProfile) -> BrandProfile:
    return brand if isinstance(brand, BrandProfile) else get_profile(brand)


def is_edible_brand(brand: BrandName | BrandProfile) -> bool:
    return _profile(brand).brand is BrandName.LITTLE_JOYS


def allowed_formats(brand: BrandName | BrandProfile) -> frozenset[str]:
    return EDIBLE_FORMATS if is_edible_brand(brand) else TOPICAL_WELLNESS_FORMATS


def align_to_brand_dna(format: str, brand: BrandName | BrandProfile) -> str:
    profile = _profile(brand)
    allowed = allowed_formats(profile)
    if format in allowed:
        return format
    if is_edible_brand(profile):
        return EDIBLE_REMAP.get(format, EDIBLE_DEFAULT)
    return TOPICAL_REMAP.get(format, profile.default_format)


def resolve_smart_format(
    format: str,
    density: CompetitionDensity,
    used_formats: Iterable[str],
    brand: BrandName | BrandProfile,
) -> tuple[str, bool]:
    """Return (format, was_swapped).

    Only High density triggers a swap. The first brand-allowed alternative
    not already used in this run wins; otherwise the first allowed
    alternative; otherwise the aligned format stays.
    """
    profile = _profile(brand)
    aligned = align_to_brand_dna(format, profile)
    if density is not CompetitionDensity.HIGH:
        return aligned, False

    allowed = allowed_formats(profile)
    alternatives = [f for f in ALTERNATIVE_FORMATS.get(aligned, []) if f in allowed]
    if not alternatives:
        return aligned, False

    used = set(used_formats)
    chosen = next((f for f in alternatives if f not in used), alternatives[0])
    log.debug("Format swap for %s: %s -> %s", profile.brand.value, aligned, chosen)
    return chosen, chosen != aligned


def fallback_formats(brand: BrandName | BrandProfile) -> list[str]:
    allowed = allowed_formats(brand)
    return [f for f in FALLBACK_FORMATS if f in allowed]


def dynamic_mrp(brand: BrandName | BrandProfile, format: str, sub_sector: str | None = None) -> str:
    profile = _profile(brand)
    if not is_edible_brand(profile):
        return profile.mrp_range
    if format in PREMIUM_FORMATS or sub_sector in ("Moms Health", "Teen Nutrition"):
        return "₹899 – ₹1,499"
    if format in SNACK_FORMATS or sub_sector == "Travel Snacks":
        return "₹299 – ₹599"
    return "₹499 – ₹999"
