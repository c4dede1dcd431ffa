"""Static per-brand pain taxonomy, guardrails, and competition proxies.

Everything here is read-only reference data built once at import time. Label
order inside each pool is the classifier's tie-break order: established pains
first, exploratory pains after, each in the order listed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from npd_engine.models import BrandName, BrandProfile, Guardrails, PainDefinition

DEFAULT_COMPETITION_PROXY = 0.7


def _pain(
    label: str,
    keywords: list[str],
    concept: str,
    actives: list[str],
    persona: str,
    positioning: str,
    format: str,
    sub_sector: str,
) -> PainDefinition:
    return PainDefinition(
        label=label,
        keywords=tuple(keywords),
        concept=concept,
        actives=tuple(actives),
        persona=persona,
        positioning=positioning,
        format=format,
        sub_sector=sub_sector,
    )


# 0.1 = uncontested sub-sector, 0.9 = saturated
COMPETITION_PROXIES: Mapping[BrandName, Mapping[str, float]] = MappingProxyType({
    BrandName.MAN_MATTERS: MappingProxyType({"Hair": 0.9, "Performance": 0.6, "Beard": 0.7}),
    BrandName.BE_BODYWISE: MappingProxyType({"Skin": 0.8, "PCOS": 0.4, "Body Care": 0.6}),
    BrandName.LITTLE_JOYS: MappingProxyType({
        "Kids Nutrition": 0.5,
        "Moms Health": 0.3,
        "Kids Gut": 0.4,
        "Kids Eye Health": 0.3,
        "Teen Nutrition": 0.2,
        "Neuro-Focus": 0.25,
        "Travel Snacks": 0.15,
    }),
})


_MAN_MATTERS = BrandProfile(
    brand=BrandName.MAN_MATTERS,
    categories=("Hair", "Performance", "Beard"),
    mrp_range="₹399 – ₹799",
    default_format="Tonic",
    pains=(
        _pain(
            "Hard Water Hairfall",
            ["hard water", "hair fall", "thinning", "receding", "scalp", "chlorine"],
            "Chelating Scalp Mist",
            ["Redensyl", "Procapil", "EDTA"],
            "Urban men in hard-water cities (Bengaluru/NCR) battling daily hair thinning.",
            "First-of-its-kind leave-on chelating mist; cheaper than shower filters.",
            "Mist",
            "Hair",
        ),
        _pain(
            "Performance Fatigue",
            ["stamina", "energy", "workout", "fatigue", "gym", "tired"],
            "Effervescent Shilajit Recovery",
            ["Fulvic Acid", "Ashwagandha", "Electrolytes"],
            "Active men looking for clean energy without gummy sugars.",
            "Zero-sugar effervescent format for faster absorption vs resins.",
            "Effervescent Tablet",
            "Performance",
        ),
        _pain(
            "Patchy Beard",
            ["patchy", "beard growth", "stubble", "itchy", "beard"],
            "Beard Growth Activator Gel",
            ["BeardMax", "Clover Oil", "Biotin"],
            "Young professionals seeking fuller, groomed beard growth.",
            "Targeted gel with clinically-tested BeardMax vs generic oils.",
            "Gel",
            "Beard",
        ),
        _pain(
            "Stress Hair Loss",
            ["stress", "anxiety", "cortisol", "mental", "sleep"],
            "Adaptogen Sleep & Scalp Drops",
            ["Melatonin", "Brahmi", "Jatamansi"],
            "High-stress tech professionals with stress-induced hair thinning.",
            "Dual-action sleep + scalp recovery; addresses root cause vs symptom.",
            "Sublingual Drops",
            "Hair",
        ),
        _pain(
            "Dandruff Persistence",
            ["dandruff", "flaky", "itchy scalp", "seborrheic", "fungal"],
            "Anti-Dandruff Probiotic Scalp Serum",
            ["Zinc Pyrithione", "Tea Tree Oil", "Lactobacillus"],
            "Men frustrated with recurring dandruff despite medicated shampoos.",
            "Microbiome-first approach to dandruff; leave-on serum vs wash-off.",
            "Serum",
            "Hair",
        ),
    ),
    exploratory_pains=(
        _pain(
            "Skin Ageing",
            ["wrinkle", "aging", "dark circles", "eye bags", "fine lines"],
            "Retinol + Peptide Men's Face Serum",
            ["Retinol", "Peptide Complex", "Hyaluronic Acid"],
            "Men 30+ exploring skincare for the first time.",
            "Simplified 1-step routine; no fragrance or unnecessary actives.",
            "Serum",
            "Performance",
        ),
        _pain(
            "Weight Management",
            ["weight", "belly fat", "metabolism", "diet", "obesity"],
            "Green Tea + L-Carnitine Burn Strips",
            ["L-Carnitine", "Green Tea Extract", "Chromium"],
            "Urban men seeking non-stimulant metabolic support.",
            "Oral dissolving strip format for discreet, no-water consumption.",
            "Oral Strip",
            "Performance",
        ),
    ),
    guardrails=Guardrails(
        allowed_topics=(
            "hair", "beard", "performance", "dandruff", "scalp", "minoxidil",
            "grooming", "ed", "testosterone", "stamina", "energy", "gym",
        ),
        blocked_terms=("kids", "baby", "toddler", "infant", "pcos", "pregnancy", "nutrition children"),
    ),
)

_BE_BODYWISE = BrandProfile(
    brand=BrandName.BE_BODYWISE,
    categories=("Skin", "PCOS", "Body Care"),
    mrp_range="₹349 – ₹649",
    default_format="Serum-Mist",
    pains=(
        _pain(
            "Hormonal Acne",
            ["acne", "pcos", "pimple", "hormonal", "breakout", "cystic"],
            "Aczero-Clear Skin Gummies",
            ["Inositol", "Niacinamide", "Zinc"],
            "Women managing PCOS-related skin flare-ups in their 20s–30s.",
            "Internal solution for hormonal acne; avoids skin-stripping topicals.",
            "Gummy",
            "PCOS",
        ),
        _pain(
            "Humidity Greasiness",
            ["oily", "greasy", "sweat", "sticky", "humidity", "shine"],
            "Invisible Weightless Sun-Gel",
            ["Salicylic Acid", "SPF 50", "Niacinamide"],
            "Women in humid Indian cities tired of white-cast, heavy sunscreens.",
            "Weightless gel format optimized for Indian humidity; zero white cast.",
            "Gel",
            "Skin",
        ),
        _pain(
            "Strawberry Skin",
            ["bumpy", "ingrown", "strawberry skin", "rough", "keratosis"],
            "Lactic Acid Exfoliating Body Mist",
            ["Urea", "Lactic Acid", "Ceramides"],
            "Women seeking smooth skin without sticky body lotions.",
            "Weightless mist format; replaces thick creams for daily compliance.",
            "Mist",
            "Body Care",
        ),
        _pain(
            "Period Pain",
            ["cramp", "period pain", "menstrual", "pms", "bloating"],
            "Magnesium + Chasteberry PMS Relief Tabs",
            ["Magnesium Bisglycinate", "Chasteberry", "Vitamin B6"],
            "Working women who can't afford PMS disrupting their schedules.",
            "Clinically-dosed magnesium form with 3x better absorption than oxide.",
            "Tablet",
            "PCOS",
        ),
        _pain(
            "Hair Thinning",
            ["hair thin", "hair loss", "shedding", "bald spot", "volume"],
            "Biotin + Saw Palmetto Hair Density Serum",
            ["Biotin", "Saw Palmetto", "Caffeine"],
            "Women 25–40 noticing post-stress or post-pregnancy hair thinning.",
            "Topical serum with DHT-blockers; avoids oral supplements' GI side effects.",
            "Serum",
            "Body Care",
        ),
    ),
    exploratory_pains=(
        _pain(
            "Intimate Hygiene",
            ["intimate", "vaginal", "odor", "itch", "discharge"],
            "pH-Balanced Intimate Foam Wash",
            ["Lactic Acid", "Tea Tree Oil", "Aloe Vera"],
            "Health-conscious women seeking gentle, OB-GYN-approved intimate care.",
            "Foam format with pH 3.5; replaces soap-based washes that disrupt flora.",
            "Foam",
            "Body Care",
        ),
        _pain(
            "Gut Health",
            ["bloat", "constipation", "gut", "digest", "ibs"],
            "Prebiotic + Probiotic Fizzy Sachets",
            ["Lactobacillus", "FOS Prebiotic", "Ginger Extract"],
            "Women with PCOS-linked gut issues seeking daily gut support.",
            "Fizzy sachet for taste compliance; synbiotic formula vs probiotic-only.",
            "Sachet",
            "PCOS",
        ),
    ),
    guardrails=Guardrails(
        allowed_topics=(
            "skin", "pcos", "body", "acne", "hormonal", "period", "women", "face",
            "brightening", "kp", "strawberry", "serum", "moisturiser",
        ),
        blocked_terms=("beard", "minoxidil", "kids", "baby", "toddler", "infant", "height growth"),
    ),
)

_LITTLE_JOYS = BrandProfile(
    brand=BrandName.LITTLE_JOYS,
    categories=("Kids Nutrition", "Moms Health", "Teen Nutrition", "Neuro-Focus", "Travel Snacks"),
    mrp_range="₹499 – ₹999",
    default_format="Nutri-Melt",
    pains=(
        _pain(
            "Picky Eating",
            ["picky", "growth", "height", "appetite", "weight gain", "fussy"],
            "Jaggery-Based Growth Nutrimix",
            ["Ragi", "Bajra", "DigeZyme"],
            "Parents of children (2–7 yrs) avoiding refined sugar supplements.",
            "100% natural sweetness with millets; 40% higher protein than market leaders.",
            "Powder Mix",
            "Kids Nutrition",
        ),
        _pain(
            "Post-partum Fatigue",
            ["mom", "lactation", "post-partum", "delivery", "new mother", "breastfeeding"],
            "Shatavari & Iron Recovery Shake",
            ["Shatavari", "Folic Acid", "Iron Bisglycinate"],
            "New mothers (0–12 months postpartum) dealing with energy crashes and low milk supply.",
            "Ayurvedic galactagogue + bioavailable iron; avoids constipation from ferrous sulfate.",
            "Shake",
            "Moms Health",
        ),
        _pain(
            "Sugar Concerns",
            ["sugar", "sweet", "unhealthy", "cavity", "chocolate", "junk"],
            "Jaggery-Based Vitamin Gummies",
            ["DHA", "Vitamin D3", "Calcium"],
            "Health-aware parents seeking guilt-free daily vitamin supplements for kids.",
            "Sweetened with jaggery extract; zero refined sugar or artificial colors.",
            "Gummy",
            "Kids Nutrition",
        ),
        _pain(
            "Immunity Gaps",
            ["sick", "cold", "cough", "immunity", "fever", "infection"],
            "Chyawanprash Immunity Melts",
            ["Amla", "Giloy", "Vitamin C"],
            "Parents of school-going kids (3–10 yrs) who fall sick frequently.",
            "Oral melt format kids love; modern Chyawanprash without the sticky mess.",
            "Oral Melt",
            "Kids Nutrition",
        ),
        _pain(
            "Bone & Height Growth",
            ["calcium", "bone", "height", "tall", "growth spurt", "vitamin d"],
            "Nanite Calcium + D3 Chewable Stars",
            ["Nano Calcium", "Vitamin D3", "Vitamin K2"],
            "Parents concerned about child's height and bone density.",
            "Nano-sized calcium for 2x absorption; fun star-shaped chewable format.",
            "Chewable",
            "Kids Nutrition",
        ),
        _pain(
            "Iron Deficiency",
            ["iron", "anemia", "pale", "fatigue", "hemoglobin", "low iron"],
            "Iron Bisglycinate Choco Melts",
            ["Iron Bisglycinate", "Vitamin C", "Folate"],
            "Parents of toddlers (1–5 yrs) flagged for low iron/hemoglobin.",
            "Non-constipating iron form in chocolate melt; 3x better absorption than ferrous sulfate.",
            "Oral Melt",
            "Kids Nutrition",
        ),
        _pain(
            "Omega-3 DHA Gap",
            ["omega", "dha", "fish oil", "brain", "fishy", "epa"],
            "Algae DHA Strawberry Gummies",
            ["Algal DHA", "EPA", "Vitamin E"],
            "Parents seeking plant-based omega-3 without fishy aftertaste for kids 2–8.",
            "Algae-sourced DHA; no fish burps, vegetarian-friendly, kid-approved strawberry flavor.",
            "Gummy",
            "Kids Nutrition",
        ),
        _pain(
            "Gut Health Kids",
            ["constipation", "tummy", "stomach", "digestion", "probiotic", "gut"],
            "Prebiotic Fiber + Probiotic Drops",
            ["Lactobacillus Rhamnosus", "FOS Prebiotic", "Zinc"],
            "Parents of children with recurring constipation or weak digestion.",
            "Tasteless drops format for easy mixing; clinically studied strain for pediatric gut health.",
            "Drops",
            "Kids Nutrition",
        ),
    ),
    exploratory_pains=(
        _pain(
            "Screen Time Eye Strain",
            ["screen", "eye", "vision", "blue light", "tablet"],
            "Lutein + Bilberry Eye Health Gummies",
            ["Lutein", "Bilberry Extract", "Zeaxanthin"],
            "Parents worried about digital device impact on their child's vision.",
            "First kids-specific eye health gummy in India; addresses screen-time epidemic.",
            "Gummy",
            "Kids Eye Health",
        ),
        _pain(
            "Cognitive Focus",
            ["focus", "concentrate", "study", "memory", "brain"],
            "Brahmi + DHA Brain Boost Syrup",
            ["Brahmi", "DHA", "Phosphatidylserine"],
            "Parents of school-age children seeking academic performance support.",
            "Ayurvedic-meets-modern nootropic; avoids stimulants found in adult formulas.",
            "Syrup",
            "Neuro-Focus",
        ),
        _pain(
            "Sleep Issues Kids",
            ["sleep", "insomnia", "restless", "night waking", "melatonin"],
            "Chamomile + Magnesium Sleep Melts",
            ["Chamomile Extract", "Magnesium Glycinate", "L-Theanine"],
            "Parents of kids 4–10 struggling with bedtime routines and restless sleep.",
            "Gentle, non-melatonin herbal melt; safe for daily pediatric use.",
            "Oral Melt",
            "Kids Nutrition",
        ),
        _pain(
            "Skin Rash Toddlers",
            ["rash", "eczema", "dry skin", "diaper rash", "sensitive skin"],
            "Calendula + Colloidal Oat Baby Balm",
            ["Calendula", "Colloidal Oatmeal", "Ceramides"],
            "Parents of infants/toddlers with eczema-prone or sensitive skin.",
            "Steroid-free, pediatric-dermatologist-formulated; fragrance-free barrier repair.",
            "Balm",
            "Kids Nutrition",
        ),
        _pain(
            "Vitamin D Deficiency",
            ["vitamin d", "sunlight", "indoor", "rickets", "bone weak"],
            "Vitamin D3 + K2 Sunshine Drops",
            ["Cholecalciferol", "Vitamin K2-MK7", "MCT Oil"],
            "Parents of indoor-heavy kids in metros with limited sun exposure.",
            "Precise dropper dosing; oil-based for superior fat-soluble vitamin absorption.",
            "Drops",
            "Kids Nutrition",
        ),
        _pain(
            "Teen Protein Gap",
            ["teen", "teenager", "adolescent", "puberty", "protein", "sports"],
            "Clean Protein + Calcium Teen Shake",
            ["Pea Protein", "Calcium Citrate", "Vitamin D3", "Iron Bisglycinate"],
            "Parents of teens 12–15 in growth spurts who refuse adult protein powders.",
            "First India-specific teen shake; clean label, no artificial sweeteners, school-bag portable.",
            "Shake Sachet",
            "Teen Nutrition",
        ),
        _pain(
            "ADHD & Attention Support",
            ["adhd", "attention", "hyperactive", "can't sit still", "concentration", "distracted"],
            "Omega-3 + Magnesium Neuro-Focus Strips",
            ["Algal DHA", "Magnesium L-Threonate", "L-Theanine", "Zinc"],
            "Parents seeking non-pharmaceutical support for kids with attention challenges.",
            "Oral dissolving strip format for kids who won't swallow pills; evidence-backed neuro-nutrients.",
            "Oral Dissolving Strip",
            "Neuro-Focus",
        ),
        _pain(
            "Travel-Friendly Healthy Snacks",
            ["travel", "snack", "road trip", "flight", "on the go", "lunch box", "tiffin"],
            "Fortified Millet Bites — Travel Pack",
            ["Ragi", "Amaranth", "Flaxseed", "Vitamin B Complex"],
            "Parents needing mess-free, nutritious snacks for travel, school, and outings.",
            "Shelf-stable fortified snack in single-serve packs; replaces junk food on-the-go.",
            "Bite-Sized Bar",
            "Travel Snacks",
        ),
        _pain(
            "Texture Aversion & Sensory Feeding",
            ["sensory", "texture", "won't eat", "refuses food", "aversion", "spits out"],
            "Smooth Nutrient Squeeze Pouch",
            ["Multi-Vitamin", "Iron Bisglycinate", "Prebiotic Fiber"],
            "Parents of kids 2–6 with sensory processing challenges around food textures.",
            "Ultra-smooth squeeze pouch format; bypasses texture triggers while delivering full nutrition.",
            "Squeeze Pouch",
            "Kids Nutrition",
        ),
        _pain(
            "Hidden Sugar Anxiety",
            ["hidden sugar", "sugar free", "sugar crash", "hyperactive after", "artificial sweetener"],
            "Monk Fruit Sweetened Multi-Vitamin Melts",
            ["Monk Fruit Extract", "Multi-Vitamin Complex", "Zinc"],
            "Sugar-conscious parents who've lost trust in 'healthy' kids products with hidden sugars.",
            "Transparent zero-sugar label; monk fruit sweetened for taste without glycemic spike.",
            "Oral Dissolving Strip",
            "Kids Nutrition",
        ),
    ),
    guardrails=Guardrails(
        allowed_topics=(
            "kids", "children", "baby", "toddler", "infant", "nutrition", "growth",
            "mom", "mother", "parent", "supplement", "height", "picky", "iron",
            "vitamin", "omega", "gut", "sleep", "eye", "sugar", "school", "snack",
            "immunity",
        ),
        blocked_terms=(
            "hair fall", "hair loss", "beard", "dandruff", "erectile", "pcos",
            "minoxidil", "scalp", "acne",
        ),
    ),
)

BRAND_PROFILES: Mapping[BrandName, BrandProfile] = MappingProxyType({
    profile.brand: profile for profile in (_MAN_MATTERS, _BE_BODYWISE, _LITTLE_JOYS)
})

# Pain label -> what consumers dislike about today's solutions
COMPETITOR_HASSLES: Mapping[str, str] = MappingProxyType({
    "Hard Water Hairfall": "Shower filters are too expensive & high-friction for renters",
    "Performance Fatigue": "Gummy supplements are loaded with sugar",
    "Patchy Beard": "Generic oils don't target specific patchy zones",
    "Hormonal Acne": "Topicals strip skin barrier without addressing root cause",
    "Strawberry Skin": "Thick body lotions feel sticky in Indian humidity",
    "Picky Eating": "Existing powders taste chalky and kids refuse them",
    "Post-partum Fatigue": "Iron tablets cause constipation; no all-in-one recovery format",
    "Sugar Concerns": "Every kids supplement hides sugar under 'natural flavoring'",
    "Period Pain": "OTC painkillers lose efficacy over time",
    "PCOS Weight Plateau": "Generic diet supplements ignore insulin resistance",
    "Immunity Gaps": "Chyawanprash is messy and kids hate the taste",
    "Iron Deficiency": "Iron supplements cause constipation and taste metallic",
    "Omega-3 DHA Gap": "Fish oil capsules cause fishy burps; kids refuse them",
    "Gut Health Kids": "Adult probiotics aren't dosed for pediatric use",
    "Bone & Height Growth": "Calcium tablets are chalky and hard for kids to swallow",
    "Screen Time Eye Strain": "No kids-specific eye supplement exists in India",
    "Sleep Issues Kids": "Melatonin is controversial for children",
    "Cognitive Focus": "Adult nootropics contain stimulants unsafe for kids",
    "Stress Hair Loss": "No product addresses the cortisol-hair loss link",
    "Dandruff Persistence": "Medicated shampoos dry out scalp further",
    "Hair Thinning": "Oral supplements cause GI side effects",
})


def get_profile(brand: BrandName | str) -> BrandProfile:
    if not isinstance(brand, BrandName):
        brand = BrandName.parse(brand)
    return BRAND_PROFILES[brand]


def established_labels(brand: BrandName) -> frozenset[str]:
    """Labels where the brand already has a product in market."""
    return frozenset(p.label for p in BRAND_PROFILES[brand].pains)
