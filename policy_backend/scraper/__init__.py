"""Scraper package — policy page fetch & content extraction."""

from policy_backend.scraper.extractor import (
    extract_full_text,
    extract_metadata,
    extract_policy_info,
    extract_segmented_text,
)
from policy_backend.scraper.fetcher import fetch_page
from policy_backend.scraper.models import PageMetadata, PolicyInfo, RawPage

__all__ = [
    "fetch_page",
    "extract_full_text",
    "extract_segmented_text",
    "extract_metadata",
    "extract_policy_info",
    "RawPage",
    "PageMetadata",
    "PolicyInfo",
]
