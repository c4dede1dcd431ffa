"""Product naming, name/snippet sanitization, and white-space wording."""

from __future__ import annotations

import re
from typing import Mapping

from npd_engine.models import PainDefinition
from npd_engine.taxonomy import COMPETITOR_HASSLES

NAME_SEPARATOR = " — "
SNIPPET_WORDS = 10

# Keyword -> problem-as-name. Checked exactly first, then by containment in table order.
PROBLEM_NAME_MAP: Mapping[str, str] = {
    "hard water": "The Hard Water Hairfall Fix",
    "hair fall": "The Chronic Hairfall Stopper",
    "thinning": "The Thinning Hair Reversal",
    "receding": "The Receding Hairline Shield",
    "scalp": "The Scalp Damage Repair",
    "chlorine": "The Chlorine Damage Neutralizer",
    "stamina": "The Low Stamina Recovery",
    "energy": "The Daily Energy Crash Fix",
    "workout": "The Post-Workout Fatigue Killer",
    "fatigue": "The Chronic Fatigue Buster",
    "gym": "The Gym Recovery Accelerator",
    "tired": "The Always-Tired Solution",
    "patchy": "The Patchy Beard Filler",
    "beard growth": "The Slow Beard Growth Fix",
    "stubble": "The Stubble-to-Full-Beard Builder",
    "beard": "The Uneven Beard Densifier",
    "stress": "The Stress-Induced Hairloss Fix",
    "anxiety": "The Anxiety Calm Formula",
    "cortisol": "The High Cortisol Blocker",
    "sleep": "The Can't-Sleep Solution",
    "dandruff": "The Persistent Dandruff Eliminator",
    "flaky": "The Flaky Scalp Fix",
    "fungal": "The Fungal Scalp Treatment",
    "acne": "The Stubborn Acne Eraser",
    "pcos": "The PCOS Symptom Manager",
    "pimple": "The Recurring Pimple Stopper",
    "hormonal": "The Hormonal Breakout Fix",
    "breakout": "The Sudden Breakout Shield",
    "cystic": "The Cystic Acne Treatment",
    "oily": "The Oily Skin Controller",
    "greasy": "The Greasy Face Fix",
    "sweat": "The Excess Sweat Manager",
    "humidity": "The Humidity-Proof Skin Shield",
    "bumpy": "The Bumpy Skin Smoother",
    "ingrown": "The Ingrown Hair Remover",
    "strawberry skin": "The Strawberry Skin Eraser",
    "keratosis": "The Keratosis Pilaris Fix",
    "cramp": "The Period Cramp Killer",
    "period pain": "The Period Pain Reliever",
    "menstrual": "The Menstrual Discomfort Fix",
    "pms": "The PMS Symptom Shield",
    "bloating": "The Bloating Buster",
    "hair thin": "The Hair Thinning Reversal",
    "shedding": "The Hair Shedding Stopper",
    "picky": "The Picky Eater Nutrition Fix",
    "growth": "The Growth Chart Booster",
    "height": "The Height Growth Accelerator",
    "appetite": "The Lost Appetite Restorer",
    "weight gain": "The Healthy Weight Gainer",
    "fussy": "The Fussy Eater Solution",
    "mom": "The New Mom Recovery",
    "lactation": "The Low Milk Supply Fix",
    "post-partum": "The Postpartum Energy Restorer",
    "breastfeeding": "The Breastfeeding Fatigue Fix",
    "sugar": "The Hidden Sugar Replacer",
    "cavity": "The Cavity-Causing Sugar Fix",
    "sick": "The Frequent Sickness Shield",
    "cold": "The Recurring Cold Guard",
    "immunity": "The Weak Immunity Booster",
    "calcium": "The Calcium Deficiency Fix",
    "bone": "The Weak Bone Strengthener",
    "tall": "The Height Maximizer",
    "vitamin d": "The Vitamin D Deficiency Fix",
    "iron": "The Iron Deficiency Solution",
    "anemia": "The Anemia Recovery Formula",
    "omega": "The Omega-3 Gap Filler",
    "dha": "The DHA Deficiency Fix",
    "fish oil": "The Fishy Aftertaste-Free Omega",
    "constipation": "The Chronic Constipation Fix",
    "gut": "The Gut Health Restorer",
    "screen": "The Screen Damage Eye Shield",
    "eye": "The Eye Strain Protector",
    "vision": "The Fading Vision Guard",
    "focus": "The Can't-Focus Fix",
    "memory": "The Memory Booster",
    "brain": "The Brain Fog Clearer",
    "teen": "The Teen Nutrition Gap Filler",
    "protein": "The Protein Deficiency Fix",
    "adhd": "The ADHD Focus Support",
    "attention": "The Attention Span Builder",
    "travel": "The Travel Snack Solution",
    "snack": "The Healthy Snack Swap",
    "lunch box": "The Lunch Box Nutrition Fix",
    "sensory": "The Sensory Feeding Solution",
    "texture": "The Texture Aversion Fix",
    "wrinkle": "The Early Wrinkle Fix",
    "aging": "The Premature Aging Stopper",
    "dark circles": "The Dark Circle Eraser",
    "weight": "The Weight Plateau Breaker",
    "belly fat": "The Stubborn Belly Fat Burner",
    "metabolism": "The Slow Metabolism Fix",
    "intimate": "The Intimate Care Solution",
    "bloat": "The Chronic Bloat Fix",
    "digest": "The Poor Digestion Fixer",
}

URL_PATTERN = re.compile(r"https?://\S+|www\.\S+|\w+\.(?:com|in|co|net|org|io)\b", re.IGNORECASE)
COMPETITOR_NAMES = re.compile(
    r"\b(?:trystrawberry|mamaearth|wow|beardo|ustraa|plixlife|oziva|healthkart|nykaa|amazon|flipkart)\b",
    re.IGNORECASE,
)
FILLER_PHRASES = re.compile(
    r"\b(?:any experiences with|reddit fix|has anyone tried|can someone recommend)\b",
    re.IGNORECASE,
)
NOISE_SNIPPET_PATTERNS = re.compile(
    r"Reddit Rules|Privacy Policy|User Agreement|reReddit|Terms of Service|Cookie Notice|Accept All|Sign Up|Log In",
    re.IGNORECASE,
)

_GENERIC_NAME_WORDS = {"the", "a", "an", "fix", "solution"}
_EDGE_PUNCT = re.compile(r"^[\s\-—·]+|[\s\-—·]+$")


def _title_case(text: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in text.split())


def build_dynamic_name(keyword: str, format: str) -> str:
    lower = keyword.lower().strip()
    name = PROBLEM_NAME_MAP.get(lower)
    if name is None:
        name = next((v for k, v in PROBLEM_NAME_MAP.items() if k in lower), None)
    if name is None:
        name = f"The {_title_case(keyword)} Fix"
    return f"{name}{NAME_SEPARATOR}{format}"


def _is_generic(name: str, format: str) -> bool:
    core = name
    if core.lower().endswith(format.lower()):
        core = core[: -len(format)]
    words = [w for w in re.split(r"[\s\-—·]+", core.lower()) if w]
    return all(w in _GENERIC_NAME_WORDS for w in words)


def sanitize_product_name(raw_name: str, pain: PainDefinition | None, format: str) -> str:
    """Strip URLs, competitor names and filler; rebuild the name if nothing useful is left."""
    name = URL_PATTERN.sub("", raw_name)
    name = COMPETITOR_NAMES.sub("", name)
    name = FILLER_PHRASES.sub("", name)
    name = re.sub(r"\s{2,}", " ", name)
    name = _EDGE_PUNCT.sub("", name).strip()

    if len(name) < 4 or _is_generic(name, format):
        if pain is not None and pain.actives:
            return f"{pain.actives[0]} {format}"
        return f"{format} Solution"
    return name


def swap_name_format(name: str, old_format: str, new_format: str) -> str:
    if name.endswith(f"{NAME_SEPARATOR}{old_format}"):
        return name[: -len(old_format)] + new_format
    if name.endswith(old_format):
        return name[: -len(old_format)].rstrip() + " " + new_format
    return f"{name}{NAME_SEPARATOR}{new_format}"


def generic_justification(white_space: str, format: str) -> str:
    return (
        f"High-intent consumer discussions around {white_space} indicate a clear "
        f"preference for {format} over existing market solutions."
    )


def sanitize_snippet(raw_text: str, white_space: str, format: str) -> str:
    if not raw_text or not raw_text.strip() or NOISE_SNIPPET_PATTERNS.search(raw_text):
        return generic_justification(white_space, format)
    return raw_text


def extract_snippet(raw: str, max_words: int = SNIPPET_WORDS) -> str:
    if not raw or raw == "N/A":
        return "N/A"
    words = re.sub(r"\s+", " ", raw).strip().split(" ")
    snippet = " ".join(words[:max_words])
    return snippet + "…" if len(words) > max_words else snippet


def refined_white_space(label: str) -> str:
    hassle = COMPETITOR_HASSLES.get(label)
    if hassle:
        return f"{label} ({hassle})"
    return f"{label} — Gap in current market solutions"
