"""Content extraction: turns a :class:`RawPage` into the four extraction views.

All views share one BeautifulSoup parse per call, built with html5lib so the
tree matches what a browser builds (implied <body>, optional end tags).
Text caps are hard character cuts applied after trimming.
"""

from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString, Script, Stylesheet

from policy_backend.scraper.models import PageMetadata, PolicyInfo, RawPage

FULL_TEXT_LIMIT = 10000
TEXT_PREVIEW_LIMIT = 5000
HTML_PREVIEW_LIMIT = 3000
FULL_DETAILS_LIMIT = 8000

POLICY_NAME = "RGF Car Insurance"

_SEGMENT_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "span", "div"]
_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_POLICY_CONTAINERS = "section, article, .content, .policy-details"
_POLICY_CANDIDATES = ["h2", "h3", "li", "p"]
_MIN_POLICY_TEXT = 20

# Script and style contents count as text; comments do not.
_TEXT_TYPES = (NavigableString, CData, Script, Stylesheet)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html5lib")


def _text(element: Tag) -> str:
    return element.get_text(types=_TEXT_TYPES)


def _body_text(soup: BeautifulSoup) -> str:
    # html5lib always synthesizes <body>, except for <frameset> documents.
    if soup.body is None:
        return ""
    return _text(soup.body).strip()


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Union[str, None]:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    return tag.get("content")


def _in_policy_container(element: Tag, containers: set[int]) -> bool:
    return any(id(parent) in containers for parent in element.parents)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_full_text(raw: RawPage, include_html: bool = False) -> Union[str, dict[str, str]]:
    """Return the page body text, or a text/HTML preview envelope.

    Without *include_html* the trimmed body text is cut at
    ``FULL_TEXT_LIMIT`` characters.  With it, a dict holding the first
    ``TEXT_PREVIEW_LIMIT`` characters of text and the first
    ``HTML_PREVIEW_LIMIT`` characters of raw markup is returned instead.
    """
    text = _body_text(_parse(raw.html))
    if include_html:
        return {
            "text_content": text[:TEXT_PREVIEW_LIMIT],
            "html_preview": raw.html[:HTML_PREVIEW_LIMIT],
        }
    return text[:FULL_TEXT_LIMIT]


def extract_segments(raw: RawPage) -> List[str]:
    """Return the trimmed text of every block-ish element in document order.

    Nested matches each contribute their own text, so a ``<div>`` wrapping
    a ``<p>`` yields the paragraph text twice.
    """
    soup = _parse(raw.html)
    segments: List[str] = []
    for element in soup.find_all(_SEGMENT_TAGS):
        text = _text(element).strip()
        if text:
            segments.append(text)
    return segments


def extract_segmented_text(raw: RawPage) -> str:
    """Join :func:`extract_segments` with blank lines."""
    return "\n\n".join(extract_segments(raw))


def extract_metadata(raw: RawPage) -> PageMetadata:
    soup = _parse(raw.html)

    title = "".join(_text(tag) for tag in soup.find_all("title"))
    description = _meta_content(soup, name="description")

    links = [a["href"] for a in soup.find_all("a", href=True) if a["href"]]
    headings: List[str] = []
    for heading in soup.find_all(_HEADING_TAGS):
        text = _text(heading).strip()
        if text:
            headings.append(text)

    return PageMetadata(
        url=raw.url,
        title=title or "No title found",
        description=description or "No description",
        og_title=_meta_content(soup, property="og:title"),
        og_description=_meta_content(soup, property="og:description"),
        links=links,
        headings=headings,
    )


def extract_policy_info(raw: RawPage) -> PolicyInfo:
    """Scan content containers for coverage headings and feature bullets.

    Headings (h2/h3) become coverage types and list items become features
    when their trimmed text is longer than 20 characters.  Paragraphs are
    matched by the same scan but not collected.  ``full_details`` is the
    whole body text, independent of the container scan.
    """
    soup = _parse(raw.html)
    info = PolicyInfo(policy_name=POLICY_NAME, url=raw.url)

    containers = {id(tag) for tag in soup.select(_POLICY_CONTAINERS)}
    if containers:
        for element in soup.find_all(_POLICY_CANDIDATES):
            if not _in_policy_container(element, containers):
                continue
            text = _text(element).strip()
            if len(text) <= _MIN_POLICY_TEXT:
                continue
            if element.name in ("h2", "h3"):
                info.coverage_types.append(text)
            elif element.name == "li":
                info.features.append(text)

    info.full_details = _body_text(soup)[:FULL_DETAILS_LIMIT]
    return info
