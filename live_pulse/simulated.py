"""Static sample signals per brand, served when the live search is unavailable."""

from __future__ import annotations

from npd_engine import guardrails
from npd_engine.models import BrandName, RawSignal
from live_pulse.ids import new_signal_id

# (issue, pain_intensity, frequency_count, source_url, source_meta, raw_text)
_SAMPLES: dict[BrandName, list[tuple[str, int, int, str, str, str]]] = {
    BrandName.MAN_MATTERS: [
        ("Hard Water Hair Fall", 9, 47,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_hard_water_hair", "r/IndianSkincareAddicts",
         "Nothing works for my hair in Bangalore water. I've tried every shampoo and serum. Hard water is "
         "destroying my scalp and I'm losing so much hair. Desperate for something that actually works. "
         "Alternative to [Brand X]?"),
        ("Patchy Beard Gaps", 8, 28,
         "https://reddit.com/r/mensgrooming/comments/sim_patchy_beard", "r/mensgrooming",
         "Patchy beard won't fill in. Used minoxidil for 6 months, barely any change. Don't want to give up "
         "but frustrated. Need something that actually targets the gaps."),
        ("Dandruff Persistence Despite Treatment", 9, 38,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_dandruff", "Competitor review gap (Amazon/Flipkart)",
         "Ketoconazole didn't work. Zinc pyrithione made it worse. I'm crying at this point. Need a leave-on "
         "that actually gets rid of flakes. Nothing works."),
        ("Performance Anxiety — No Discreet Supplement", 8, 22,
         "https://reddit.com/r/menshealth/comments/sim_performance", "r/menshealth",
         "Tried ashwagandha but inconsistent results. No discreet, clinically backed men's performance "
         "supplement available in India. Embarrassing to buy offline. Desperate."),
        ("Scalp Microbiome Imbalance", 7, 19,
         "https://trends.google.com/trends/explore?q=scalp+microbiome+India", "India",
         "Rising searches: 'scalp probiotic India', 'microbiome shampoo men', 'scalp health serum'. Up 160% YoY."),
        ("Stress-Induced Hair Loss at 25", 8, 33,
         "https://reddit.com/r/IndianMaleHealth/comments/sim_stress_hair", "r/IndianMaleHealth",
         "Work stress is destroying my hairline. Temples receding at 26. Cortisol through the roof. Nothing "
         "topical works — need something that addresses root cause internally."),
        ("Beard Itch — No Lightweight Solution", 7, 24,
         "https://reddit.com/r/mensgrooming/comments/sim_beard_itch", "r/mensgrooming",
         "Growing a beard but the itch is unbearable in the first 3 weeks. Tried beard oils but they're too "
         "greasy and smell artificial. Stopped using them. Need lightweight, non-greasy under-beard skin care."),
        ("Crown Thinning — No Targeted Product", 9, 41,
         "https://reddit.com/r/IndianMaleHealth/comments/sim_crown_thinning", "Competitor review gap (Amazon/Flipkart)",
         "Crown thinning is accelerating and no product specifically targets that area. Most serums are "
         "generic scalp products. Amazon competitor reviews show huge gaps — users say 'didn't work for crown'."),
        ("Men's Anti-Aging — No Simple Routine", 7, 21,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_men_antiaging", "r/IndianSkincareAddicts",
         "Fine lines at 29 — gym sweat and Delhi pollution wrecking my skin. Men's skincare in India is just "
         "aftershave. Need a simple anti-aging routine for Indian men that takes under 2 minutes."),
        ("Post-Gym Recovery Supplement Gap", 7, 29,
         "https://trends.google.com/trends/explore?q=recovery+supplement+men+india", "India",
         "Search surge: 'post workout recovery India', 'muscle soreness supplement men', 'natural recovery "
         "drink India'. Rising 150% YoY. High demand, low clinical credibility in existing products."),
    ],
    BrandName.BE_BODYWISE: [
        ("Hormonal Acne Post-Workout", 8, 32,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_hormonal_acne", "r/IndianSkincareAddicts",
         "Hormonal acne flares up every time after gym. Tried everything—niacinamide, salicylic, adapalene. "
         "Still have breakouts. Too expensive to keep buying actives that don't work. Any recommendations?"),
        ("PCOS Weight Plateau Despite Low-GI Diet", 9, 41,
         "https://reddit.com/r/PCOS/comments/sim_pcos_weight", "r/PCOS",
         "Following a low-GI diet for PCOS for 4 months — no change. Desperate. Doctor says metformin but I "
         "want a supplement approach first. Frustrated and giving up on finding something affordable."),
        ("Strawberry Skin / KP Body Lotion Gap", 7, 41,
         "https://trends.google.com/trends/explore?q=strawberry%20skin%20india", "India",
         "Searches: 'strawberry skin treatment', 'keratosis pilaris body lotion India', 'bumpy skin remedy'. "
         "Rising 180% YoY in India."),
        ("Period Pain — OTC Solutions Not Working", 8, 28,
         "https://reddit.com/r/TwoXIndia/comments/sim_period_pain", "r/TwoXIndia",
         "Dysmenorrhea is ruining my life. OTC painkillers stopped working. Tried women's health supplements "
         "— nothing works. Please help. Any women who've found something that actually helps?"),
        ("Brightening Serum for South Asian Skin Tones", 7, 22,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_brightening", "Competitor review gap (Amazon/Flipkart)",
         "Most brightening serums formulated for light Caucasian skin. Nothing for deeper Indian skin tones "
         "without bleaching effect. Competitor gap on Amazon India."),
        ("Skin Barrier Damage from Over-Exfoliation", 7, 24,
         "https://reddit.com/r/IndianSkincareAddicts/comments/sim_barrier", "r/IndianSkincareAddicts",
         "Destroyed my skin barrier trying too many actives. Everything stings now. Tried ceramide creams but "
         "nothing restoring it fast enough. Desperate for a barrier repair solution that actually works."),
        ("Humidity-Proof Sunscreen Gap for Women", 7, 30,
         "https://trends.google.com/trends/explore?q=sunscreen+humid+india+women", "India",
         "Searches: 'sunscreen for humid weather India', 'no white cast sunscreen women', 'sweat proof SPF "
         "India'. Rising 165% YoY. Women want SPF that doesn't pill under makeup in humidity."),
        ("PCOS Hair Thinning — Hormonal Root Cause Unaddressed", 8, 26,
         "https://reddit.com/r/PCOS/comments/sim_pcos_hair", "r/PCOS",
         "PCOS is causing massive hair thinning. Minoxidil made it worse. Biotin didn't work. Need something "
         "that addresses hormonal root cause of hair loss in women, not just topicals."),
        ("Intimate Hygiene — No Affordable pH-Balanced Option", 6, 19,
         "https://reddit.com/r/TwoXIndia/comments/sim_intimate", "Competitor review gap (Amazon/Flipkart)",
         "No good pH-balanced intimate wash in India that isn't overpriced or full of fragrance. Competitor "
         "reviews show massive dissatisfaction. Market gap for affordable, gentle, fragrance-free option."),
        ("Gut-Skin Link — PCOS Synbiotic Gap", 7, 21,
         "https://reddit.com/r/PCOS/comments/sim_gut_pcos", "r/PCOS",
         "Doctor says my gut microbiome is affecting PCOS symptoms and skin. Can't find a synbiotic "
         "specifically for women with PCOS. Everything out there is generic gut health with no hormonal focus."),
    ],
    BrandName.LITTLE_JOYS: [
        ("Kids Height Growth Stagnation", 9, 44,
         "https://reddit.com/r/IndianParenting/comments/sim_height_growth", "r/IndianParenting",
         "My 6-year-old isn't growing as expected. Pediatrician says nutrition is key but I can't get him to "
         "eat vegetables. Tried everything — gummies, powders, nothing works. Any recommendations from other moms?"),
        ("Toddler Iron Deficiency Anxiety", 8, 31,
         "https://reddit.com/r/Mommit/comments/sim_iron", "r/Mommit",
         "Pediatrician flagged low iron in my toddler. The supplements taste horrible and she refuses. Crying "
         "every dose time. Desperate for a kids-friendly iron supplement that doesn't taste like metal."),
        ("Post-Monsoon Immunity Sick Cycles", 8, 29,
         "https://reddit.com/r/IndianParenting/comments/sim_immunity", "r/IndianParenting",
         "Every monsoon my kids get sick back-to-back. Started them on Vitamin C + Zinc but it didn't work. Too "
         "expensive to keep buying supplements that don't hold. Need budget-friendly immunity booster for children."),
        ("Fussy Eater Nutrition Gap", 7, 38,
         "https://trends.google.com/trends/explore?q=nutrition+supplement+kids+india", "India",
         "Search spike: 'nutrition powder for kids India', 'healthy snacks for picky eaters', 'hidden vegetable "
         "recipes toddlers'. Rising 210% YoY."),
        ("Kids Omega-3 Fishy Aftertaste Problem", 7, 25,
         "https://reddit.com/r/BabyBumps/comments/sim_omega3", "Competitor review gap (Amazon/Flipkart)",
         "No good kids omega-3 on Amazon India without fishy aftertaste. Parents frustrated — stopped giving "
         "after children refused. Need a palatable DHA for kids 2–8."),
        ("Kids Chronic Constipation — No Safe Probiotic", 8, 33,
         "https://reddit.com/r/IndianParenting/comments/sim_gut_kids", "r/IndianParenting",
         "My 4-year-old has chronic constipation. Tried Isabgol, prune juice, nothing works long-term. Need a "
         "daily probiotic safe for kids — all available ones are adult formulations."),
        ("Screen Time Eye Strain in Children", 6, 22,
         "https://trends.google.com/trends/explore?q=kids+eye+health+screen+time+india", "India",
         "Searches: 'kids eye vitamin India', 'lutein gummies children', 'screen time eye drops kids'. Rising "
         "190% YoY. Parents increasingly concerned about tablet/phone screen impact on children's vision."),
        ("Sugar-Free Kids Vitamins Unavailable", 7, 27,
         "https://reddit.com/r/IndianParenting/comments/sim_sugar_free", "r/IndianParenting",
         "Every kids supplement on Amazon is loaded with sugar or artificial sweeteners. My dentist says "
         "gummies are causing cavities. Why can't someone make a zero-sugar vitamin for kids that actually tastes good?"),
        ("Post-Partum Recovery — Iron Causes Constipation", 8, 20,
         "https://reddit.com/r/Mommit/comments/sim_postpartum", "r/Mommit",
         "6 weeks post-delivery and I'm exhausted. Breastfeeding is draining me. Iron tablets cause horrible "
         "constipation. Need a lactation + recovery supplement that doesn't wreck my stomach."),
        ("Kids Bedtime Sleep — Safe Supplement Needed", 6, 18,
         "https://reddit.com/r/IndianParenting/comments/sim_sleep_kids", "r/IndianParenting",
         "My 5-year-old takes 2 hours to fall asleep every night. We've tried warm milk, no screens, stories "
         "— nothing works. Need a safe, gentle supplement for kids sleep without melatonin."),
    ],
}


def simulated_signals(brand: BrandName) -> list[RawSignal]:
    """Sample signals for the brand, already passed through its guardrails."""
    signals = [
        RawSignal(
            id=new_signal_id(),
            issue=issue,
            pain_intensity=intensity,
            frequency_count=frequency,
            source_url=url,
            raw_text=text,
            source_meta=meta,
        )
        for issue, intensity, frequency, url, meta, text in _SAMPLES[brand]
    ]
    return [s for s in signals if guardrails.passes(brand, s.issue, s.raw_text)]
