"""Unit tests for content_formatter.toc module."""

from src.content_formatter.toc import TocEntry, extract_headings, render_toc_html
from tests.fixtures.api_responses import SAMPLE_BODY_HTML


class TestExtractHeadings:
    """Test cases for extract_headings."""

    def test_headings_in_document_order(self):
        entries = extract_headings(SAMPLE_BODY_HTML)
        assert [(e.level, e.text) for e in entries] == [
            (1, "Guide"),
            (2, "Install & Setup"),
            (3, "On Linux"),
            (2, "Install & Setup"),
        ]

    def test_existing_ids_kept_and_slugs_generated(self):
        entries = extract_headings(SAMPLE_BODY_HTML)
        assert [e.id for e in entries] == ["guide", "install-setup", "on-linux", "install-setup-1"]

    def test_exclude_levels(self):
        entries = extract_headings(SAMPLE_BODY_HTML, exclude_levels=[1, 3])
        assert [e.level for e in entries] == [2, 2]

    def test_empty_body(self):
        assert extract_headings("") == []
        assert extract_headings("<p>No headings</p>") == []

    def test_heading_without_text(self):
        entries = extract_headings("<h2></h2>")
        assert entries == [TocEntry(id="section", text="", level=2)]


class TestRenderTocHtml:
    """Test cases for render_toc_html."""

    def test_renders_link(self):
        html = render_toc_html([TocEntry(id="intro", text="Intro", level=2)])
        assert html == (
            '<a href="#intro" class="toc-link" data-level="2" data-target-id="intro" '
            'role="link" style="padding-left: 20px;">Intro</a>'
        )

    def test_padding_by_level(self):
        html = render_toc_html([
            TocEntry(id="a", text="A", level=1),
            TocEntry(id="b", text="B", level=3),
        ])
        assert 'padding-left: 8px;' in html
        assert 'padding-left: 32px;' in html

    def test_escapes_values(self):
        html = render_toc_html(
            [TocEntry(id='x" onclick="y', text="<script>alert(1)</script>", level=1)],
            link_class='a"b',
        )
        assert '<script>' not in html
        assert '&lt;script&gt;' in html
        assert 'href="#x&quot; onclick=&quot;y"' in html
        assert 'class="a&quot;b"' in html

    def test_blank_text_is_untitled(self):
        html = render_toc_html([TocEntry(id="s", text="   ", level=1)])
        assert '>Untitled</a>' in html

    def test_custom_link_class(self):
        html = render_toc_html([TocEntry(id="s", text="S", level=1)], link_class="nav")
        assert 'class="nav"' in html

    def test_numbers(self):
        entries = [
            TocEntry(id="a", text="A", level=2),
            TocEntry(id="b", text="B", level=3),
            TocEntry(id="c", text="C", level=3),
            TocEntry(id="d", text="D", level=2),
        ]
        html = render_toc_html(entries, add_numbers=True)
        for label in ("1. A", "1.1. B", "1.2. C", "2. D"):
            assert f">{label}</a>" in html

    def test_empty(self):
        assert render_toc_html([]) == ""
        assert render_toc_html([], add_numbers=True) == ""

    def test_round_trip_from_body(self):
        html = render_toc_html(extract_headings(SAMPLE_BODY_HTML))
        assert html.count('<a ') == 4
        assert 'Install &amp; Setup' in html
