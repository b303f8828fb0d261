"""Rule-based policy recommendation: risk score, coverages and premium.

Everything here is a pure function of a :class:`UserProfile`.  Numeric
fields only take part when they are truthy, so an explicit ``0`` behaves
like a missing answer.

Age and experience are scored from ordered rule tables where the first
matching predicate wins; a 24-year-old scores +3, never +3 and +1.
"""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence, Tuple

from policy_backend.advisor.models import (
    PremiumEstimate,
    Recommendation,
    RiskAssessment,
    UserProfile,
)

Rule = Tuple[Callable[[float], bool], int]

AGE_RULES: Sequence[Rule] = (
    (lambda age: age < 25, 3),
    (lambda age: age < 35, 1),
    (lambda age: age > 70, 2),
)

EXPERIENCE_RULES: Sequence[Rule] = (
    (lambda years: years < 2, 2),
    (lambda years: years < 5, 1),
)

RISK_MILEAGE_THRESHOLD = 30000
BREAKDOWN_MILEAGE_THRESHOLD = 20000
HIGH_VALUE_THRESHOLD = 20000
HIGH_RISK_THRESHOLD = 4
HIGHWAY_HABIT = "highway"

BASE_PREMIUM = 80
PREMIUM_PER_RISK_POINT = 15
HIGH_MILEAGE_SURCHARGE = 20
BUDGET_CAPS = {
    "€50-100": 100,
    "€100-150": 150,
}

MANDATORY_COVERAGE = "Third-Party Liability (Mandatory)"
POLICY_NAME = "RGF Car Insurance - Personalized"
POLICY_DESCRIPTION = (
    "Based on your profile, we recommend the following RGF car insurance coverage"
)
NEXT_STEPS = (
    "Review the recommended coverages above",
    "Contact our team for a detailed quote",
    "Compare with other options if desired",
    "Complete your online application",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _first_match(value: Optional[float], rules: Sequence[Rule]) -> int:
    if not value:
        return 0
    for predicate, increment in rules:
        if predicate(value):
            return increment
    return 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _risk_level(score: int) -> str:
    if score <= 2:
        return "Low"
    if score <= 4:
        return "Medium"
    return "High"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def assess_risk(profile: UserProfile) -> RiskAssessment:
    """Sum the age, experience, accident and mileage terms into a risk score."""
    score = _first_match(profile.age, AGE_RULES)
    score += _first_match(profile.driving_experience, EXPERIENCE_RULES)

    if profile.has_accidents:
        # A count of 0 falls back to 1, same as a missing count.
        score += 2 * (profile.accident_count or 1)

    if profile.annual_mileage and profile.annual_mileage > RISK_MILEAGE_THRESHOLD:
        score += 1

    # JSON numbers such as 2.0 arrive as floats; whole scores are reported as int.
    if isinstance(score, float) and score.is_integer():
        score = int(score)

    return RiskAssessment(risk_score=score, risk_level=_risk_level(score))


def select_coverages(profile: UserProfile, risk_score: int) -> List[str]:
    """Return recommended coverages, the mandatory liability cover first."""
    coverages = [MANDATORY_COVERAGE]

    if risk_score >= HIGH_RISK_THRESHOLD:
        coverages += ["Comprehensive Coverage", "Collision Protection"]

    if profile.vehicle_value and profile.vehicle_value > HIGH_VALUE_THRESHOLD:
        coverages += ["Full Coverage Package", "Roadside Assistance"]

    if profile.annual_mileage and profile.annual_mileage > BREAKDOWN_MILEAGE_THRESHOLD:
        coverages.append("Breakdown Assistance")

    # Exact match: questionnaire labels such as "Highway (long distances)" do not qualify.
    if profile.driving_habits == HIGHWAY_HABIT:
        coverages += ["Extended Coverage", "Legal Assistance"]

    return coverages


def estimate_premium(profile: UserProfile, risk_score: int) -> PremiumEstimate:
    """Price the policy and apply the budget cap before rounding."""
    base = BASE_PREMIUM + risk_score * PREMIUM_PER_RISK_POINT

    if profile.vehicle_value:
        base += profile.vehicle_value / 1000

    if profile.annual_mileage and profile.annual_mileage > RISK_MILEAGE_THRESHOLD:
        base += HIGH_MILEAGE_SURCHARGE

    cap = BUDGET_CAPS.get(profile.budget_range) if profile.budget_range else None
    if cap is not None:
        base = min(base, cap)

    return PremiumEstimate(
        monthly=_round_half_up(base),
        annual=_round_half_up(base * 12),
    )


def recommend_policy(profile: UserProfile) -> Recommendation:
    risk = assess_risk(profile)
    return Recommendation(
        profile=profile,
        risk=risk,
        policy_name=POLICY_NAME,
        description=POLICY_DESCRIPTION,
        recommended_coverages=select_coverages(profile, risk.risk_score),
        estimated_premium=estimate_premium(profile, risk.risk_score),
        highlights=[
            f"Tailored for {profile.vehicle_type or 'your vehicle'} owners",
            f"Suitable for {profile.driving_habits or 'your'} driving habits",
            "Comprehensive protection for your needs",
            "24/7 customer support and assistance",
        ],
        next_steps=list(NEXT_STEPS),
    )
