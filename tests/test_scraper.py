"""Tests for the policy page scraper (fetch + content extraction).

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_page`` tests.
- Extractor tests build :class:`RawPage` objects directly from inline HTML.
"""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from policy_backend.config import settings
from policy_backend.errors import NetworkError
from policy_backend.scraper.extractor import (
    FULL_DETAILS_LIMIT,
    FULL_TEXT_LIMIT,
    HTML_PREVIEW_LIMIT,
    TEXT_PREVIEW_LIMIT,
    extract_full_text,
    extract_metadata,
    extract_policy_info,
    extract_segmented_text,
    extract_segments,
)
from policy_backend.scraper.fetcher import fetch_page
from policy_backend.scraper.models import PageMetadata, PolicyInfo, RawPage


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_URL = "https://example.com/rgf"

_POLICY_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>RGF Car Insurance</title>
  <meta name="description" content="Insure your car with RGF">
  <meta property="og:title" content="RGF | Car">
</head>
<body>
  <h1>Car insurance</h1>
  <section>
    <h2>Comprehensive coverage for your car</h2>
    <h3>Short</h3>
    <ul>
      <li>Free replacement vehicle after accident</li>
      <li>Tiny</li>
    </ul>
    <p>This paragraph is long enough to pass the filter.</p>
  </section>
  <h2>Heading outside any container block</h2>
  <div class="content">
    <ul><li>Feature inside the content div block</li></ul>
  </div>
  <a href="/contact">Contact</a>
  <a href="https://example.com/quote">Quote</a>
  <a href="/contact">Contact again</a>
  <a href="">Empty</a>
  <a>No href</a>
</body>
</html>
"""


def _page(html: str, url: str = _URL) -> RawPage:
    return RawPage(url=url, html=html, status_code=200)


# ---------------------------------------------------------------------------
# fetch_page tests
# ---------------------------------------------------------------------------

class TestFetchPage:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get(settings.target_url).mock(
                return_value=httpx.Response(200, text=_POLICY_HTML)
            )
            raw = fetch_page()

        assert isinstance(raw, RawPage)
        assert raw.url == settings.target_url
        assert raw.status_code == 200
        assert "<title>RGF Car Insurance</title>" in raw.html

    def test_sends_desktop_user_agent(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text="ok"))
            fetch_page(_URL)

        assert route.calls.last.request.headers["User-Agent"] == settings.user_agent

    def test_http_error_raises_network_error(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(503, text="Unavailable"))
            with pytest.raises(NetworkError, match="503"):
                fetch_page(_URL)

    def test_timeout_raises_network_error(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ReadTimeout("timed out"))
            with pytest.raises(NetworkError, match="timed out"):
                fetch_page(_URL)

    def test_connect_error_raises_network_error(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(NetworkError):
                fetch_page(_URL)

    def test_every_call_refetches(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text="ok"))
            fetch_page(_URL)
            fetch_page(_URL)

        assert route.call_count == 2


# ---------------------------------------------------------------------------
# Full text
# ---------------------------------------------------------------------------

class TestExtractFullText:
    def test_returns_trimmed_body_text(self) -> None:
        text = extract_full_text(_page("<html><body>  Hello world  </body></html>"))
        assert text == "Hello world"

    def test_head_text_excluded(self) -> None:
        text = extract_full_text(_page(_POLICY_HTML))
        assert "Insure your car" not in text
        assert text.startswith("Car insurance")

    def test_truncated_to_limit(self) -> None:
        html = "<html><body>" + "a" * (FULL_TEXT_LIMIT + 500) + "</body></html>"
        assert len(extract_full_text(_page(html))) == FULL_TEXT_LIMIT

    def test_include_html_envelope(self) -> None:
        html = "<html><body>" + "b" * 6000 + "</body></html>"
        result = extract_full_text(_page(html), include_html=True)

        assert list(result) == ["text_content", "html_preview"]
        assert len(result["text_content"]) == TEXT_PREVIEW_LIMIT
        assert result["html_preview"] == html[:HTML_PREVIEW_LIMIT]

    def test_malformed_html_does_not_raise(self) -> None:
        text = extract_full_text(_page("<html><body><div><p>Unclosed <b>tags"))
        assert "Unclosed" in text


# ---------------------------------------------------------------------------
# Segmented text
# ---------------------------------------------------------------------------

class TestExtractSegments:
    def test_nested_matches_are_not_deduplicated(self) -> None:
        segments = extract_segments(_page("<html><body><div><p>X</p></div></body></html>"))
        assert segments == ["X", "X"]

    def test_document_order_and_empty_skipped(self) -> None:
        html = "<body><h1>Title</h1><p>   </p><ul><li>One</li></ul><span>Two</span></body>"
        assert extract_segments(_page(html)) == ["Title", "One", "Two"]

    def test_unlisted_tags_ignored(self) -> None:
        html = "<body><section>Loose</section><em>Emph</em><p>Kept</p></body>"
        assert extract_segments(_page(html)) == ["Kept"]

    def test_joined_with_blank_lines(self) -> None:
        html = "<body><h2>A</h2><p>B</p></body>"
        assert extract_segmented_text(_page(html)) == "A\n\nB"

    def test_empty_page_returns_empty_string(self) -> None:
        assert extract_segmented_text(_page("<html></html>")) == ""


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestExtractMetadata:
    def test_title_and_description(self) -> None:
        meta = extract_metadata(_page(_POLICY_HTML))
        assert isinstance(meta, PageMetadata)
        assert meta.url == _URL
        assert meta.title == "RGF Car Insurance"
        assert meta.description == "Insure your car with RGF"

    def test_fallbacks_when_missing(self) -> None:
        meta = extract_metadata(_page("<html><body></body></html>"))
        assert meta.title == "No title found"
        assert meta.description == "No description"

    def test_open_graph_absent_keys_omitted(self) -> None:
        data = extract_metadata(_page(_POLICY_HTML)).to_dict()
        assert data["og_title"] == "RGF | Car"
        assert "og_description" not in data
        assert list(data) == ["url", "title", "description", "og_title", "links", "headings"]

    def test_links_keep_order_and_duplicates(self) -> None:
        meta = extract_metadata(_page(_POLICY_HTML))
        assert meta.links == ["/contact", "https://example.com/quote", "/contact"]

    def test_headings_in_document_order(self) -> None:
        meta = extract_metadata(_page(_POLICY_HTML))
        assert meta.headings == [
            "Car insurance",
            "Comprehensive coverage for your car",
            "Short",
            "Heading outside any container block",
        ]

    def test_empty_headings_skipped(self) -> None:
        meta = extract_metadata(_page("<body><h1> </h1><h4>Kept</h4></body>"))
        assert meta.headings == ["Kept"]


# ---------------------------------------------------------------------------
# Policy info
# ---------------------------------------------------------------------------

class TestExtractPolicyInfo:
    def test_coverage_types_from_container_headings(self) -> None:
        info = extract_policy_info(_page(_POLICY_HTML))
        assert isinstance(info, PolicyInfo)
        assert info.coverage_types == ["Comprehensive coverage for your car"]

    def test_features_from_container_list_items(self) -> None:
        info = extract_policy_info(_page(_POLICY_HTML))
        assert info.features == [
            "Free replacement vehicle after accident",
            "Feature inside the content div block",
        ]

    def test_paragraphs_are_not_collected(self) -> None:
        data = extract_policy_info(_page(_POLICY_HTML)).to_dict()
        flattened = json.dumps(data["coverageTypes"] + data["features"])
        assert "long enough to pass" not in flattened

    def test_benefits_always_empty(self) -> None:
        html = "<body><section><h2>Benefits of our policy are many</h2>" \
               "<li>Benefit: free assistance anywhere in Europe</li></section></body>"
        assert extract_policy_info(_page(html)).benefits == []

    def test_nested_containers_count_once(self) -> None:
        html = "<body><article><section><li>A feature within nested containers</li>" \
               "</section></article></body>"
        assert extract_policy_info(_page(html)).features == [
            "A feature within nested containers"
        ]

    def test_exactly_twenty_chars_rejected(self) -> None:
        html = "<body><section><li>" + "x" * 20 + "</li><li>" + "y" * 21 + "</li></section></body>"
        assert extract_policy_info(_page(html)).features == ["y" * 21]

    def test_full_details_ignores_container_scan(self) -> None:
        html = "<html><body><p>Outside text</p>" + "z" * 9000 + "</body></html>"
        info = extract_policy_info(_page(html))
        assert info.full_details.startswith("Outside text")
        assert len(info.full_details) == FULL_DETAILS_LIMIT

    def test_wire_shape(self) -> None:
        data = extract_policy_info(_page(_POLICY_HTML)).to_dict()
        assert list(data) == [
            "policyName", "url", "coverageTypes", "features", "benefits", "fullDetails",
        ]
        assert data["policyName"] == "RGF Car Insurance"


# ---------------------------------------------------------------------------
# Tree construction and text nodes
# ---------------------------------------------------------------------------

class TestTreeConstruction:
    def test_unclosed_list_items_are_siblings(self) -> None:
        html = "<section><ul><li>First feature text long enough" \
               "<li>Second feature text long enough</ul></section>"
        assert extract_policy_info(_page(html)).features == [
            "First feature text long enough",
            "Second feature text long enough",
        ]

    def test_div_closes_open_paragraph(self) -> None:
        assert extract_segments(_page("<body><p>a<div>b</div></body>")) == ["a", "b"]

    def test_missing_body_tag_is_implied(self) -> None:
        raw = _page("<html><head><title>T</title></head><p>hi</p></html>")
        assert extract_full_text(raw) == "hi"
        assert extract_policy_info(raw).full_details == "hi"
        assert extract_metadata(raw).title == "T"

    def test_frameset_document_has_no_body_text(self) -> None:
        raw = _page("<html><frameset><frame src='a.html'></frameset></html>")
        assert extract_full_text(raw) == ""


class TestScriptAndStyleText:
    _HTML = "<body><div>Hello<script>var x = 1;</script></div><style>.a{}</style></body>"

    def test_full_text_keeps_script_and_style(self) -> None:
        assert extract_full_text(_page(self._HTML)) == "Hellovar x = 1;.a{}"

    def test_segments_keep_script_text(self) -> None:
        assert extract_segments(_page(self._HTML)) == ["Hellovar x = 1;"]

    def test_full_details_keep_style(self) -> None:
        assert ".a{}" in extract_policy_info(_page(self._HTML)).full_details

    def test_comments_are_not_text(self) -> None:
        assert extract_segments(_page("<body><p>a<!-- hidden -->b</p></body>")) == ["ab"]
