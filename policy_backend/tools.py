"""Tool registry: the six operations exposed to callers.

Each tool takes a plain argument mapping and returns a string, either raw
extracted text or indented JSON.  :func:`invoke` wraps :func:`run_tool` in
the ``{"success": ..., "data" | "error": ...}`` envelope shared by every
transport.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from policy_backend.advisor import UserProfile, get_questionnaire, recommend_policy
from policy_backend.errors import UnknownToolError
from policy_backend.scraper import (
    extract_full_text,
    extract_metadata,
    extract_policy_info,
    extract_segmented_text,
    fetch_page,
)

logger = logging.getLogger(__name__)

TOOLS: list[dict[str, Any]] = [
    {
        "name": "browse_page",
        "description": "Fetches and extracts content from the RGF insurance policy page",
        "inputSchema": {
            "type": "object",
            "properties": {
                "include_html": {
                    "type": "boolean",
                    "description": "Whether to include raw HTML content (default: false)",
                    "default": False,
                },
            },
            "required": [],
        },
    },
    {
        "name": "extract_text",
        "description": "Extracts plain text content from the insurance policy page",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "get_page_metadata",
        "description": (
            "Retrieves metadata information like title, description, and links from the page"
        ),
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "get_rgf_policy_info",
        "description": (
            "Retrieves detailed information about RGF car insurance policy features and benefits"
        ),
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "get_policy_questionnaire",
        "description": (
            "Returns a structured questionnaire to gather user information for policy recommendations"
        ),
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "recommend_policy",
        "description": (
            "Provides RGF car insurance policy recommendation based on user profile and needs"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "age": {"type": "number", "description": "Driver's age in years"},
                "driving_experience": {
                    "type": "number",
                    "description": "Years of driving experience",
                },
                "vehicle_type": {
                    "type": "string",
                    "description": 'Type of vehicle (e.g., "sedan", "suv", "van")',
                },
                "annual_mileage": {
                    "type": "number",
                    "description": "Estimated annual mileage in kilometers",
                },
                "driving_habits": {
                    "type": "string",
                    "description": 'Driving habits (e.g., "urban", "highway", "mixed")',
                },
                "has_accidents": {
                    "type": "boolean",
                    "description": "Whether driver has had accidents in the past 5 years",
                },
                "accident_count": {
                    "type": "number",
                    "description": "Number of accidents in the past 5 years",
                },
                "vehicle_value": {
                    "type": "number",
                    "description": "Approximate vehicle value in euros",
                },
                "budget_range": {
                    "type": "string",
                    "description": (
                        'Budget range for insurance (e.g., "€50-100", "€100-150", "€150+")'
                    ),
                },
            },
            "required": [],
        },
    },
]

TOOL_NAMES = tuple(tool["name"] for tool in TOOLS)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def profile_from_args(args: Mapping[str, Any]) -> UserProfile:
    """Map snake_case tool arguments onto a :class:`UserProfile` as-is."""
    return UserProfile(
        age=args.get("age"),
        driving_experience=args.get("driving_experience"),
        vehicle_type=args.get("vehicle_type"),
        annual_mileage=args.get("annual_mileage"),
        driving_habits=args.get("driving_habits"),
        has_accidents=args.get("has_accidents"),
        accident_count=args.get("accident_count"),
        vehicle_value=args.get("vehicle_value"),
        budget_range=args.get("budget_range"),
    )


# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------

def browse_page(args: Mapping[str, Any]) -> str:
    result = extract_full_text(fetch_page(), include_html=bool(args.get("include_html")))
    if isinstance(result, dict):
        return _to_json(result)
    return result


def extract_text(args: Mapping[str, Any]) -> str:
    return extract_segmented_text(fetch_page())


def get_page_metadata(args: Mapping[str, Any]) -> str:
    return _to_json(extract_metadata(fetch_page()).to_dict())


def get_rgf_policy_info(args: Mapping[str, Any]) -> str:
    return _to_json(extract_policy_info(fetch_page()).to_dict())


def get_policy_questionnaire(args: Mapping[str, Any]) -> str:
    return _to_json(get_questionnaire())


def recommend(args: Mapping[str, Any]) -> str:
    return _to_json(recommend_policy(profile_from_args(args)).to_dict())


_HANDLERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "browse_page": browse_page,
    "extract_text": extract_text,
    "get_page_metadata": get_page_metadata,
    "get_rgf_policy_info": get_rgf_policy_info,
    "get_policy_questionnaire": get_policy_questionnaire,
    "recommend_policy": recommend,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def run_tool(name: str, args: Optional[Mapping[str, Any]] = None) -> str:
    """Run tool *name* with *args* and return its serialized result.

    Raises:
        UnknownToolError: If *name* is not a registered tool.
        NetworkError: If an extraction tool cannot fetch the page.
    """
    handler = _HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)
    logger.debug("Running tool %s", name)
    return handler(args or {})


def invoke(name: str, args: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Run a tool and wrap the outcome in a success/error envelope.

    Never raises: every failure becomes ``{"success": False, "error": msg}``.
    """
    try:
        return {"success": True, "data": run_tool(name, args)}
    except Exception as exc:
        logger.error("Tool %s failed: %s", name, exc)
        return {"success": False, "error": str(exc)}
