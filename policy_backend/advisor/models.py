"""Data models for the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class UserProfile:
    """Answers to the policy questionnaire.

    Every field is optional and unvalidated; ``None`` means the caller did
    not supply a value.
    """

    age: Optional[float] = None
    driving_experience: Optional[float] = None
    vehicle_type: Optional[str] = None
    annual_mileage: Optional[float] = None
    driving_habits: Optional[str] = None
    has_accidents: Optional[bool] = None
    accident_count: Optional[float] = None
    vehicle_value: Optional[float] = None
    budget_range: Optional[str] = None


@dataclass
class RiskAssessment:
    risk_score: int
    risk_level: str


@dataclass
class PremiumEstimate:
    """Monthly and annual premium in whole euros."""

    monthly: int
    annual: int

    def __str__(self) -> str:
        return f"€{self.monthly}/month (approximately €{self.annual}/year)"


@dataclass
class Recommendation:
    profile: UserProfile
    risk: RiskAssessment
    policy_name: str
    description: str
    recommended_coverages: List[str]
    estimated_premium: PremiumEstimate
    highlights: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape; profile fields that were not supplied are omitted."""
        summary: dict[str, Any] = {}
        for key, value in (
            ("age", self.profile.age),
            ("experience", self.profile.driving_experience),
            ("vehicleType", self.profile.vehicle_type),
        ):
            if value is not None:
                summary[key] = value
        summary["riskLevel"] = self.risk.risk_level
        summary["riskScore"] = self.risk.risk_score

        return {
            "profileSummary": summary,
            "recommendation": {
                "policyName": self.policy_name,
                "description": self.description,
                "recommendedCoverages": list(self.recommended_coverages),
                "estimatedPremium": str(self.estimated_premium),
                "highlights": list(self.highlights),
            },
            "nextSteps": list(self.next_steps),
        }
