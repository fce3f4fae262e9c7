#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover:
- Rendering every event kind
- List open/close tags for every list type
- Deferred item close tags in nested lists
- Inline conversion in paragraphs, headings and labels
- Error reporting for bad list events

"""

import time

import pytest
from bs4 import BeautifulSoup

from rdoc2html.ast import (
    BlankLine,
    Document,
    Heading,
    ListEnd,
    ListItemEnd,
    ListItemStart,
    ListStart,
    ListType,
    Paragraph,
    Raw,
    Rule,
    SourceLocation,
    Verbatim,
)
from rdoc2html.exceptions import InvalidListTypeError, InvalidOptionsError, RenderingError
from rdoc2html.options import HtmlRendererOptions
from rdoc2html.renderers.html import HtmlRenderer


def render(*nodes, **options):
    return HtmlRenderer(HtmlRendererOptions(**options)).render_to_string(list(nodes))


@pytest.mark.unit
class TestBasicRendering:
    """Tests for block events."""

    def test_render_empty_document(self):
        """Test rendering an empty document."""
        assert HtmlRenderer().render_to_string(Document()) == ""

    def test_render_paragraph(self):
        """Test rendering a paragraph."""
        assert render(Paragraph(text="Hello world")) == "\n<p>Hello world</p>\n"

    def test_render_multiple_paragraphs(self):
        """Test rendering multiple paragraphs in order."""
        result = render(Paragraph(text="First"), Paragraph(text="Second"))
        assert result == "\n<p>First</p>\n\n<p>Second</p>\n"

    def test_paragraph_is_wrapped(self):
        """Test long paragraph text is wrapped at spaces."""
        text = " ".join(["word"] * 30)
        result = render(Paragraph(text=text))
        body = result[len("\n<p>") : -len("</p>\n")]
        assert "\n" in body
        assert body.split() == text.split()
        assert all(len(line) <= 76 for line in body.split("\n"))

    def test_paragraph_wrapping_can_be_disabled(self):
        """Test wrap_paragraphs=False keeps paragraph text on one line."""
        text = " ".join(["word"] * 30)
        assert render(Paragraph(text=text), wrap_paragraphs=False) == f"\n<p>{text}</p>\n"

    def test_paragraph_line_width(self):
        """Test the line width option is honoured."""
        result = render(Paragraph(text="aaa bbb ccc"), line_width=8)
        assert result == "\n<p>aaa bbb\nccc</p>\n"

    def test_render_verbatim(self):
        """Test verbatim text is escaped, right-trimmed and left unconverted."""
        result = render(Verbatim(text="a < b && 'c' -- d...\n\n"))
        assert result == "\n<pre>a &lt; b &amp;&amp; 'c' -- d...</pre>\n"

    def test_render_verbatim_keeps_leading_whitespace(self):
        """Test only trailing whitespace is removed from verbatim text."""
        result = render(Verbatim(text="  def f():\n      pass\n"))
        assert result == "\n<pre>  def f():\n      pass</pre>\n"

    def test_render_rule(self):
        """Test rule weight below the cap passes through."""
        assert render(Rule(weight=3)) == '<hr style="height: 3px">\n'

    def test_rule_weight_is_capped(self):
        """Test rule weight is capped at 10 pixels."""
        assert render(Rule(weight=25)) == '<hr style="height: 10px">\n'
        assert render(Rule(weight=10)) == '<hr style="height: 10px">\n'

    def test_rule_cap_is_configurable(self):
        """Test max_rule_weight option."""
        assert render(Rule(weight=25), max_rule_weight=4) == '<hr style="height: 4px">\n'

    def test_render_heading(self):
        """Test heading with inline conversion."""
        result = render(Heading(level=2, text="It's *new*"))
        assert result == "\n<h2>It&#8217;s <b>new</b></h2>\n"

    def test_heading_level_is_not_clamped(self):
        """Test out-of-range heading levels pass through."""
        assert render(Heading(level=7, text="x")) == "\n<h7>x</h7>\n"
        assert render(Heading(level=0, text="x")) == "\n<h0>x</h0>\n"

    def test_heading_is_not_wrapped(self):
        """Test headings are never wrapped."""
        text = " ".join(["word"] * 30)
        assert render(Heading(level=1, text=text)) == f"\n<h1>{text}</h1>\n"

    def test_blank_line_produces_no_output(self):
        """Test blank lines are inert."""
        assert render(BlankLine()) == ""
        assert render(Paragraph(text="a"), BlankLine(), Paragraph(text="b")) == "\n<p>a</p>\n\n<p>b</p>\n"

    def test_render_raw(self):
        """Test raw parts are joined with newlines and not escaped."""
        result = render(Raw(parts=["<div>", "x & y -- 'z'", "</div>"]))
        assert result == "<div>\nx & y -- 'z'\n</div>"


@pytest.mark.unit
class TestListRendering:
    """Tests for list events."""

    @pytest.mark.parametrize(
        "list_type,expected",
        [
            (ListType.BULLET, "<ul><li></li></ul>\n"),
            (ListType.NUMBER, "<ol><li></li></ol>\n"),
            (ListType.LALPHA, '<ol style="display: lower-alpha"><li></li></ol>\n'),
            (ListType.UALPHA, '<ol style="display: upper-alpha"><li></li></ol>\n'),
            (ListType.LABEL, "<dl><dt></dt>\n<dd></dd></dl>\n"),
            (
                ListType.NOTE,
                '<table class="rdoc-list"><tr><td class="rdoc-term"><p></p></td>\n<td></td></tr></table>\n',
            ),
        ],
    )
    def test_single_item_list(self, list_type, expected):
        """Test every list type opens and closes exactly once."""
        result = render(ListStart(list_type), ListItemStart(), ListItemEnd(), ListEnd(list_type))
        assert result == expected

    def test_label_list_renders_label(self):
        """Test LABEL item labels go through inline conversion."""
        result = render(
            ListStart(ListType.LABEL),
            ListItemStart(label="*term*"),
            Paragraph(text="definition"),
            ListItemEnd(),
            ListEnd(ListType.LABEL),
        )
        assert result == "<dl><dt><b>term</b></dt>\n<dd>\n<p>definition</p>\n</dd></dl>\n"

    def test_note_list_renders_label(self):
        """Test NOTE item labels go through inline conversion."""
        result = render(
            ListStart(ListType.NOTE),
            ListItemStart(label="Mary's"),
            ListItemEnd(),
            ListEnd(ListType.NOTE),
        )
        assert result == (
            '<table class="rdoc-list"><tr><td class="rdoc-term"><p>Mary&#8217;s</p></td>\n'
            "<td></td></tr></table>\n"
        )

    def test_sibling_items_close_before_next_item(self):
        """Test the previous item's close tag is written before the next item."""
        result = render(
            ListStart(ListType.BULLET),
            ListItemStart(),
            ListItemEnd(),
            ListItemStart(),
            ListItemEnd(),
            ListEnd(ListType.BULLET),
        )
        assert result == "<ul><li></li><li></li></ul>\n"

    def test_nested_lists(self, nested_bullet_events):
        """Test nested list items interleave their close tags correctly."""
        result = render(*nested_bullet_events)
        assert result == (
            "<ul><li>\n<p>one</p>\n</li><li>\n<p>two</p>\n"
            "<ol><li>\n<p>inner</p>\n</li></ol>\n"
            "</li></ul>\n"
        )

    def test_nested_lists_are_well_formed(self, nested_bullet_events):
        """Test every opened item is closed exactly once and nests correctly."""
        result = render(*nested_bullet_events)
        assert result.count("<li>") == result.count("</li>") == 3

        soup = BeautifulSoup(result, "html.parser")
        outer_items = soup.ul.find_all("li", recursive=False)
        assert len(outer_items) == 2
        assert outer_items[0].find("ol") is None
        inner = outer_items[1].find("ol")
        assert inner is not None
        assert [li.get_text(strip=True) for li in inner.find_all("li")] == ["inner"]

    def test_item_close_is_never_written_twice(self):
        """Test a pending close tag is consumed when written."""
        result = render(
            ListStart(ListType.BULLET),
            ListItemStart(),
            ListItemEnd(),
            ListItemStart(),
            ListEnd(ListType.BULLET),
        )
        assert result == "<ul><li></li><li></ul>\n"
        assert result.count("</li>") == 1

    def test_mixed_nested_types(self):
        """Test a LABEL list nested in a NOTE list uses each list's own tags."""
        result = render(
            ListStart(ListType.NOTE),
            ListItemStart(label="outer"),
            ListStart(ListType.LABEL),
            ListItemStart(label="inner"),
            ListItemEnd(),
            ListEnd(ListType.LABEL),
            ListItemEnd(),
            ListEnd(ListType.NOTE),
        )
        assert result == (
            '<table class="rdoc-list"><tr><td class="rdoc-term"><p>outer</p></td>\n<td>'
            "<dl><dt>inner</dt>\n<dd></dd></dl>\n"
            "</td></tr></table>\n"
        )

    def test_list_accepts_plain_string_types(self):
        """Test list type values given as their string names."""
        assert render(ListStart("BULLET"), ListItemStart(), ListItemEnd(), ListEnd("BULLET")) == (
            "<ul><li></li></ul>\n"
        )


@pytest.mark.unit
class TestInlineConversion:
    """Tests for inline conversion through the renderer."""

    def test_teletype_span_is_not_double_escaped(self):
        """Test teletype content is escaped once and not converted."""
        assert render(Paragraph(text="<tt>a & b</tt>")) == "\n<p><tt>a &amp; b</tt></p>\n"

    def test_teletype_span_skips_typography(self):
        """Test dashes and quotes inside teletype spans are kept."""
        assert render(Paragraph(text="+a--b+ and 'c'")) == "\n<p><tt>a--b</tt> and &#8216;c&#8217;</p>\n"

    def test_quotes_and_possessives(self):
        """Test quote directionality."""
        result = render(Paragraph(text="'hello' and Mary's dog"))
        assert result == "\n<p>&#8216;hello&#8217; and Mary&#8217;s dog</p>\n"

    def test_double_quotes(self):
        """Test straight double quotes become directional quotes."""
        assert render(Paragraph(text='say "hi" now')) == "\n<p>say &#8220;hi&#8221; now</p>\n"

    def test_html_is_escaped(self):
        """Test unrecognized markup is escaped."""
        assert render(Paragraph(text="a <script> b")) == "\n<p>a &lt;script&gt; b</p>\n"

    def test_labeled_link(self):
        """Test labeled links and typography around them."""
        result = render(Paragraph(text="Visit {the site}[http://example.com]... it's -- great"), wrap_paragraphs=False)
        assert result == (
            '\n<p>Visit <a href="http://example.com">the site</a>&#8230; it&#8217;s &#8212; great</p>\n'
        )

    def test_local_link_uses_from_path(self):
        """Test link: URLs are resolved against from_path."""
        result = render(Paragraph(text="see link:a/x/d.html"), from_path="a/b/c.html")
        assert result == '\n<p>see <a href="../x/d.html">a/x/d.html</a></p>\n'

    def test_image_link(self):
        """Test image targets become img tags."""
        assert render(Paragraph(text="link:foo.png")) == '\n<p><img src="foo.png" /></p>\n'

    def test_escaped_hyperlink_stays_text(self):
        """Test a backslash suppresses hyperlink recognition."""
        assert render(Paragraph(text="\\http://example.com")) == "\n<p>http://example.com</p>\n"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("<em>see http://x.com now</em>", '<em>see <a href="http://x.com">x.com</a> now</em>'),
            ("<b>www.x.org</b>", '<b><a href="http://www.x.org">www.x.org</a></b>'),
            ("*http://x.com*", '<b><a href="http://x.com">x.com</a></b>'),
            ("<code>http://x.com</code>", "<tt>http://x.com</tt>"),
        ],
    )
    def test_links_inside_styles(self, text, expected):
        """Test style markup around a link is kept and teletype stays literal."""
        assert render(Paragraph(text=text)) == f"\n<p>{expected}</p>\n"

    def test_custom_inline_formatter(self):
        """Test an alternative inline formatter is used for node text."""

        class UpperFormatter:
            def format(self, text):
                return text.upper()

        renderer = HtmlRenderer(inline_formatter=UpperFormatter())
        assert renderer.render_to_string([Heading(level=1, text="abc")]) == "\n<h1>ABC</h1>\n"


@pytest.mark.unit
class TestRenderInvocation:
    """Tests for render call behaviour."""

    def test_document_and_iterable_render_the_same(self, nested_bullet_events):
        """Test Document, list and generator input give identical output."""
        renderer = HtmlRenderer()
        from_document = renderer.render_to_string(Document(children=nested_bullet_events))
        from_list = renderer.render_to_string(nested_bullet_events)
        from_generator = renderer.render_to_string(node for node in nested_bullet_events)
        assert from_document == from_list == from_generator

    def test_renderer_state_is_reset_between_calls(self):
        """Test a renderer can be reused after an unfinished document."""
        renderer = HtmlRenderer()
        renderer.render_to_string([ListStart(ListType.BULLET), ListItemStart(), ListItemEnd()])
        assert renderer.render_to_string([Paragraph(text="x")]) == "\n<p>x</p>\n"

    def test_invalid_options_type(self):
        """Test passing the wrong options object."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlRenderer(options=object())
        assert exc_info.value.renderer_name == "html"


@pytest.mark.unit
class TestListErrors:
    """Tests for list contract violations."""

    def test_unknown_list_type_is_fatal(self):
        """Test an unknown list type aborts rendering."""
        with pytest.raises(InvalidListTypeError) as exc_info:
            render(ListStart("BOGUS"))
        assert exc_info.value.list_type == "BOGUS"
        assert exc_info.value.rendering_stage == "list"

    def test_unknown_list_type_on_end_is_fatal(self):
        """Test an unknown list type on a list end aborts rendering."""
        with pytest.raises(InvalidListTypeError):
            render(ListStart(ListType.BULLET), ListEnd("BOGUS"))

    @pytest.mark.parametrize("event", [ListEnd(ListType.BULLET), ListItemStart(), ListItemEnd()])
    def test_list_event_without_open_list(self, event):
        """Test unbalanced list events raise RenderingError, not InvalidListTypeError."""
        with pytest.raises(RenderingError) as exc_info:
            render(event)
        assert not isinstance(exc_info.value, InvalidListTypeError)
        assert exc_info.value.rendering_stage == "list"

    def test_error_mentions_source_location(self):
        """Test source locations are included in the error message."""
        with pytest.raises(RenderingError, match="line 3"):
            render(ListItemEnd(source_location=SourceLocation(line=3)))


@pytest.mark.unit
class TestMalformedInlineInput:
    """Tests for inline input with many unterminated constructs."""

    @pytest.mark.parametrize(
        "text",
        [
            "<b>" * 20000,
            "<em>" * 20000 + "</em>",
            "<tt>" * 20000,
            "{" * 20000,
            "[a.a" * 20000,
            "a.a." * 20000,
            "*_+" * 20000,
            "http:" * 20000,
        ],
    )
    def test_renders_promptly(self, text):
        """Test rendering time grows linearly with unterminated markup."""
        start = time.perf_counter()
        result = render(Paragraph(text=text))
        elapsed = time.perf_counter() - start
        assert result.startswith("\n<p>")
        assert elapsed < 2.0

    def test_unterminated_tags_are_escaped(self):
        """Test open tags without a close are kept as text."""
        assert render(Paragraph(text="<b><b>x")) == "\n<p>&lt;b&gt;&lt;b&gt;x</p>\n"

    def test_first_close_tag_ends_the_style(self):
        """Test a style body runs to the first matching close tag."""
        assert render(Paragraph(text="<b><b>x</b>")) == "\n<p><b>&lt;b&gt;x</b></p>\n"
