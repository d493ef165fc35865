"""
Tests for document extraction

Test coverage:
- Feed entry parsing with missing fields
- Search/index link extraction with scoped selectors and filters
- Date-sectioned block extraction and markup-preserving snippets
- Article hydration parsing
"""

from bs4 import BeautifulSoup

from rumor_agent.extractors import (
    extract_dated_blocks,
    extract_links,
    normalize_url,
    parse_article,
    snippet_html,
)
from rumor_agent.fetchers import parse_feed_items

from tests.conftest import make_article, make_feed, make_listing, make_tag_page


# =============================================================================
# FEED ITEMS
# =============================================================================

class TestFeedItems:

    def test_fields(self):
        body = make_feed(
            [
                {
                    "title": "Knicks talk extension",
                    "link": "https://hoopshype.com/rumors/knicks-extension/",
                    "pub_date": "Wed, 15 Oct 2025 14:00:00 +0000",
                    "description": "<p>Jalen Brunson is eligible</p>",
                }
            ]
        )
        [item] = parse_feed_items(body)
        assert item.title == "Knicks talk extension"
        assert item.link == "https://hoopshype.com/rumors/knicks-extension/"
        assert item.published == "2025-10-15"
        assert "Jalen Brunson" in item.description

    def test_missing_fields_are_empty(self):
        [item] = parse_feed_items(make_feed([{"title": "Only a title"}]))
        assert item.link == ""
        assert item.published == ""
        assert item.description == ""

    def test_garbage_yields_no_items(self):
        assert parse_feed_items("this is not xml") == []


# =============================================================================
# LINKS
# =============================================================================

class TestExtractLinks:

    def test_scoped_links_filtered(self):
        html = make_listing(
            [
                "/rumors/brunson-extension-talks/",
                "https://hoopshype.com/rumors/",
                "https://hoopshype.com/lists/top-salaries/",
                "https://hoopshype.com/rumors/brunson-extension-talks",
            ]
        )
        links = extract_links(
            html,
            "https://hoopshype.com/?s=Jalen+Brunson",
            exclude_url="https://hoopshype.com/rumors/",
        )
        assert links == ["https://hoopshype.com/rumors/brunson-extension-talks/"]

    def test_landing_page_excluded_across_scheme(self):
        html = make_listing(["http://HoopsHype.com/rumors/", "/rumors/one/"])
        links = extract_links(html, "https://hoopshype.com/rumors/", exclude_url="https://hoopshype.com/rumors/")
        assert links == ["https://hoopshype.com/rumors/one/"]

    def test_falls_back_to_all_anchors(self):
        html = (
            '<html><body><a href="/rumors/x/">X</a>'
            '<a href="/rumors/page/2/">Older</a>'
            '<a href="/rumors/tag/jalen_brunson/">Tag</a></body></html>'
        )
        assert extract_links(html, "https://hoopshype.com/") == ["https://hoopshype.com/rumors/x/"]

    def test_normalize_url(self):
        assert normalize_url("HTTPS://HoopsHype.com/rumors/") == normalize_url("http://hoopshype.com/rumors")


# =============================================================================
# DATED BLOCKS
# =============================================================================

TAG_PAGE = """
<html><body>
<header><a href="/">Home</a></header>
<main>
  <h2>October 16, 2025</h2>
  <p>The Knicks are expected to discuss an extension with Jalen Brunson this week, per
     <a href="https://www.espn.com/nba/story/1" class="x" target="_blank" rel="noopener">ESPN</a></p>
  <p>Short note</p>
  <h2>October 15, 2025</h2>
  <ul><li>Brunson has <strong>no interest</strong> in renegotiating before the deadline.
      <a href="https://nypost.com/2" style="color:red">New York Post</a></li></ul>
  <p>Brunson remains the clear leader in the locker room, via SNY.</p>
</main>
</body></html>
"""


class TestDatedBlocks:

    def test_blocks_and_dates(self):
        blocks = extract_dated_blocks(TAG_PAGE)
        assert [b.date for b in blocks] == ["2025-10-16", "2025-10-15", "2025-10-15"]

    def test_last_anchor_is_source_and_url(self):
        first, second, _ = extract_dated_blocks(TAG_PAGE)
        assert (first.source, first.url) == ("ESPN", "https://www.espn.com/nba/story/1")
        assert (second.source, second.url) == ("New York Post", "https://nypost.com/2")

    def test_block_without_anchor_uses_heuristic(self):
        *_, last = extract_dated_blocks(TAG_PAGE)
        assert last.url == ""
        assert last.source == "SNY"

    def test_short_blocks_skipped(self):
        assert all("Short note" not in b.text for b in extract_dated_blocks(TAG_PAGE))

    def test_no_blocks_before_first_date(self):
        html = make_tag_page([])
        html = html.replace("<main>", "<main><p>A long paragraph that precedes any date heading.</p>")
        assert extract_dated_blocks(html) == []

    def test_relative_urls_resolved(self):
        html = make_tag_page([("October 1, 2025", ['Suns keep listening on trade calls <a href="/rumors/suns/">HoopsHype</a>'])])
        [block] = extract_dated_blocks(html, base_url="http://preview.hoopshype.com/rumors/tag/suns/")
        assert block.url == "http://preview.hoopshype.com/rumors/suns/"

    def test_cap_per_page(self):
        html = make_tag_page([("October 1, 2025", [f"Rumor paragraph number {i} with enough text" for i in range(10)])])
        assert len(extract_dated_blocks(html, max_blocks=3)) == 3

    def test_snippet_keeps_only_anchor_href(self):
        _, second, _ = extract_dated_blocks(TAG_PAGE)
        assert "<strong>" not in second.html
        assert "no interest" in second.html
        assert '<a href="https://nypost.com/2">New York Post</a>' in second.html
        assert "style=" not in second.html


class TestSnippetHtml:

    def test_unwraps_nested_formatting_but_keeps_links(self):
        soup = BeautifulSoup(
            '<p class="lead">Per <em><a href="https://x.com/a" rel="nofollow" data-id="1">Shams</a></em>,'
            ' the <span style="x">deal</span> is &amp; done</p>',
            "html.parser",
        )
        html = snippet_html(soup.p)
        assert html == 'Per <a href="https://x.com/a">Shams</a>, the deal is &amp; done'

    def test_original_untouched(self):
        soup = BeautifulSoup('<p><b>Bold</b> <a href="/x" class="c">x</a></p>', "html.parser")
        snippet_html(soup.p)
        assert soup.p.b is not None
        assert soup.p.a["class"] == ["c"]


# =============================================================================
# ARTICLES
# =============================================================================

class TestParseArticle:

    def test_fields(self):
        html = make_article(
            "Knicks, Brunson open talks",
            ["Jalen Brunson and the Knicks have opened talks, via ESPN.", "Second paragraph."],
        )
        article = parse_article(html, "https://hoopshype.com/rumors/a/")
        assert article.title == "Knicks, Brunson open talks"
        assert article.date == "2025-10-15"
        assert article.snippet.startswith("Jalen Brunson and the Knicks")
        assert article.source == "ESPN"
        assert "Second paragraph." in article.body_text

    def test_visible_date_text_is_not_trusted(self):
        html = make_article("Undated", ["October 15, 2025 - something happened today."], published=None)
        assert parse_article(html, "https://hoopshype.com/rumors/b/").date == ""

    def test_meta_published_time(self):
        html = (
            '<html><head><meta property="article:published_time" content="2025-09-30T08:00:00Z"></head>'
            "<body><main><h1>Meta dated</h1><p>Body text here.</p></main></body></html>"
        )
        assert parse_article(html, "u").date == "2025-09-30"

    def test_snippet_falls_back_to_title(self):
        html = "<html><body><main><h1>Title only</h1></main></body></html>"
        article = parse_article(html, "u")
        assert article.snippet == "Title only"
        assert article.source == "HoopsHype"

    def test_placeholder_title(self):
        article = parse_article("<html><body><p>Just words</p></body></html>", "u")
        assert article.title == "Untitled rumor"

    def test_to_item(self):
        item = parse_article(make_article("T", ["Body"]), "https://hoopshype.com/rumors/t/").to_item()
        assert item.url == "https://hoopshype.com/rumors/t/"
        assert item.date == "2025-10-15"
