"""Data models for the page-extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single fetch of the policy page."""

    url: str
    html: str
    status_code: int


@dataclass
class PageMetadata:
    """Title, description, Open Graph fields, links and headings of a page."""

    url: str
    title: str
    description: str
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    links: List[str] = field(default_factory=list)
    headings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape; Open Graph keys are omitted when the tag is missing."""
        data: dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "description": self.description,
        }
        if self.og_title is not None:
            data["og_title"] = self.og_title
        if self.og_description is not None:
            data["og_description"] = self.og_description
        data["links"] = list(self.links)
        data["headings"] = list(self.headings)
        return data


@dataclass
class PolicyInfo:
    """Policy sections scraped from the RGF product page."""

    policy_name: str
    url: str
    coverage_types: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    # Nothing on the page maps to benefits; the key is kept for API compatibility.
    benefits: List[str] = field(default_factory=list)
    full_details: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "policyName": self.policy_name,
            "url": self.url,
            "coverageTypes": list(self.coverage_types),
            "features": list(self.features),
            "benefits": list(self.benefits),
            "fullDetails": self.full_details,
        }
