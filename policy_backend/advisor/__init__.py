"""Advisor package — questionnaire catalog and recommendation engine."""

from policy_backend.advisor.models import (
    PremiumEstimate,
    Recommendation,
    RiskAssessment,
    UserProfile,
)
from policy_backend.advisor.questionnaire import get_questionnaire
from policy_backend.advisor.recommender import (
    assess_risk,
    estimate_premium,
    recommend_policy,
    select_coverages,
)

__all__ = [
    "UserProfile",
    "RiskAssessment",
    "PremiumEstimate",
    "Recommendation",
    "get_questionnaire",
    "assess_risk",
    "select_coverages",
    "estimate_premium",
    "recommend_policy",
]
