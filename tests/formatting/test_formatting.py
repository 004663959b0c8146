"""Tests for the markup and stylesheet formatters."""

import pytest

from pagecraft.errors import FormattingError
from pagecraft.formatting import (
    DefaultFormattingRules,
    Formatter,
    FormattingOptions,
    IndentStyle,
    MarkupFormatter,
    StylesheetFormatter,
    format_code,
    format_text,
)

STYLESHEETS = [
    "a{color:red}",
    "/* Reset */\n* { margin: 0; padding: 0 }\n\nbody{font-family:'Segoe UI', sans-serif;}",
    "@media (min-width: 640px) { #a { color: red; } .b{margin:0} }",
    "@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }",
    'a::before { content: "{;}"; background: url(data:image/png;base64,AAA=) }',
    "#x .y:hover { box-shadow: 0 10px 20px rgba(0,0,0,0.1) }\n/* trailing */",
    "h1,h2,h3{margin:0}",
    ".navigation-link, .navigation-link:hover, .navigation-link:focus-visible, .navigation-link.active { color: red }",
    "",
]

MARKUPS = [
    '<p class="c-a1" id="a1">Hi</p>',
    '<div class="c-c" id="c">\n<p>One</p>\n<p>Two</p>\n</div>',
    "<section><h1>Title</h1>   <img src=x.png alt='An image'><br></section>",
    "<!DOCTYPE html><html><head><style>a{color:red}</style></head><body><p>x</p></body></html>",
    "<div><script>\n    if (a) {\n        b();\n    }\n</script></div>",
    "<form><label><input type=\"checkbox\" required /><span>Agree</span></label></form>",
    "<div><!--  note  --><pre>  keep\n   this</pre><textarea>\n raw </textarea></div>",
    "<p>a < b and <strong>bold</strong> text</p>",
    '<p class="c-a" id="a">Hello <strong>world</strong>!</p>',
    '<div><a href="#">One</a><a href="#">Two</a></div>',
    "<script>\nconst s = `a\n    b`;\n</script>",
    '<div class="c-wrapper" id="wrapper" data-scroll-animation="true" data-click-animation="true" data-animation-duration="500"><p>x</p></div>',
    "",
]


class TestStylesheetFormatter:
    """Test stylesheet canonicalization."""

    def test_declarations_one_per_line(self):
        assert StylesheetFormatter().format("a{color:red;margin:0}") == "a {\n  color: red;\n  margin: 0;\n}\n"

    def test_blank_line_between_rules(self):
        formatted = StylesheetFormatter().format("a{color:red}b{color:blue}")
        assert formatted == "a {\n  color: red;\n}\n\nb {\n  color: blue;\n}\n"

    def test_comment_stays_attached(self):
        formatted = StylesheetFormatter().format("/* Custom CSS for #x */\n#x a { color: red; }")
        assert formatted == "/* Custom CSS for #x */\n#x a {\n  color: red;\n}\n"

    def test_nested_blocks_indented(self):
        formatted = StylesheetFormatter().format("@media (min-width: 640px) { #a { color: red; } }")
        assert formatted == "@media (min-width: 640px) {\n  #a {\n    color: red;\n  }\n}\n"

    def test_strings_are_preserved(self):
        formatted = StylesheetFormatter().format('a::before { content: "  {;}  "; }')
        assert 'content: "  {;}  ";' in formatted

    def test_unbalanced_braces_raise(self):
        with pytest.raises(FormattingError):
            StylesheetFormatter().format("a { color: red;")
        with pytest.raises(FormattingError):
            StylesheetFormatter().format("a { color: red; } }")

    def test_long_selector_list_one_per_line(self):
        source = ".hero-title, .hero-subtitle, .hero-cta { margin: 0; }"
        narrow = StylesheetFormatter(FormattingOptions(print_width=30))
        wide = StylesheetFormatter(FormattingOptions(print_width=200))
        assert narrow.format(source) == ".hero-title,\n.hero-subtitle,\n.hero-cta {\n  margin: 0;\n}\n"
        assert wide.format(source) == ".hero-title, .hero-subtitle, .hero-cta {\n  margin: 0;\n}\n"
        assert narrow.format(narrow.format(source)) == narrow.format(source)

    def test_selector_split_respects_brackets_and_strings(self):
        formatter = StylesheetFormatter(FormattingOptions(print_width=10))
        formatted = formatter.format('a:is(.x, .y), b[title="p,q"] { color: red; }')
        assert formatted == 'a:is(.x, .y),\nb[title="p,q"] {\n  color: red;\n}\n'

    def test_at_rule_preludes_not_split(self):
        formatter = StylesheetFormatter(FormattingOptions(print_width=5))
        formatted = formatter.format("@media screen, print { a { color: red; } }")
        assert formatted == "@media screen, print {\n  a {\n    color: red;\n  }\n}\n"

    def test_selector_list_spacing_normalized(self):
        assert StylesheetFormatter().format("h1,h2{margin:0}") == "h1, h2 {\n  margin: 0;\n}\n"

    @pytest.mark.parametrize("source", STYLESHEETS)
    def test_idempotent(self, source):
        formatter = StylesheetFormatter()
        once = formatter.format(source)
        assert formatter.format(once) == once


class TestMarkupFormatter:
    """Test markup canonicalization."""

    def test_single_text_child_stays_inline(self):
        assert MarkupFormatter().format('<p class="c-a1" id="a1">Hi</p>') == '<p class="c-a1" id="a1">Hi</p>\n'

    def test_children_indented(self):
        formatted = MarkupFormatter().format("<div><p>One</p><p>Two</p></div>")
        assert formatted == "<div>\n  <p>One</p>\n  <p>Two</p>\n</div>\n"

    def test_void_elements_and_attributes(self):
        formatted = MarkupFormatter().format("<div><img src=x.png alt='An image'>\n<input required></div>")
        assert formatted == '<div>\n  <img src="x.png" alt="An image" />\n  <input required />\n</div>\n'

    def test_style_body_formatted(self):
        formatted = MarkupFormatter().format("<head><style>a{color:red}</style></head>")
        assert formatted == "<head>\n  <style>\n    a {\n      color: red;\n    }\n  </style>\n</head>\n"

    def test_script_body_reindented(self):
        formatted = MarkupFormatter().format("<body><script>\n        if (a) {\n            b();\n        }\n</script></body>")
        assert formatted == (
            "<body>\n"
            "  <script>\n"
            "    if (a) {\n"
            "        b();\n"
            "    }\n"
            "  </script>\n"
            "</body>\n"
        )

    def test_pre_kept_verbatim(self):
        formatted = MarkupFormatter().format("<div><pre>  a\n    b</pre></div>")
        assert "<pre>  a\n    b</pre>" in formatted

    def test_mismatched_tags_raise(self):
        with pytest.raises(FormattingError):
            MarkupFormatter().format("<div><p>text</div>")
        with pytest.raises(FormattingError):
            MarkupFormatter().format("<div>")

    def test_lone_angle_bracket_is_escaped_text(self):
        assert MarkupFormatter().format("<p>1 < 2</p>") == "<p>1 &lt; 2</p>\n"

    def test_tabs(self):
        formatter = MarkupFormatter(FormattingOptions(indent_style=IndentStyle.TABS))
        assert formatter.format("<ul><li>a</li></ul>") == "<ul>\n\t<li>a</li>\n</ul>\n"

    def test_rich_text_stays_inline(self):
        source = '<p class="c-a" id="a">Hello <strong>world</strong>!</p>'
        assert MarkupFormatter().format(source) == source + "\n"

    def test_rich_text_whitespace_collapsed_not_added(self):
        formatted = MarkupFormatter().format("<div>\n  Hello\n  <em>there</em>,\n  friend\n</div>")
        assert formatted == "<div>Hello <em>there</em>, friend</div>\n"

    def test_adjacent_inline_elements_not_separated(self):
        formatted = MarkupFormatter().format('<div><a href="#">One</a><a href="#">Two</a></div>')
        assert formatted == '<div><a href="#">One</a><a href="#">Two</a></div>\n'

    def test_whitespace_separated_inline_elements_break(self):
        formatted = MarkupFormatter().format('<nav><a href="#">One</a>\n<a href="#">Two</a></nav>')
        assert formatted == '<nav>\n  <a href="#">One</a>\n  <a href="#">Two</a>\n</nav>\n'

    def test_entities_survive(self):
        formatted = MarkupFormatter().format("<p>Tom &amp; Jerry&nbsp;&lt;3</p>")
        assert formatted == "<p>Tom &amp; Jerry\xa0&lt;3</p>\n"

    def test_script_template_literal_kept(self):
        formatted = MarkupFormatter().format("<body><script>\nconst s = `a\n    b`;\n</script></body>")
        assert formatted == "<body>\n  <script>\nconst s = `a\n    b`;\n  </script>\n</body>\n"

    def test_textarea_kept_verbatim(self):
        formatted = MarkupFormatter().format('<form><textarea name="m">line one\nline two</textarea></form>')
        assert formatted == '<form>\n  <textarea name="m">line one\nline two</textarea>\n</form>\n'

    def test_print_width_wraps_attributes(self):
        source = '<div class="c-wrapper" id="wrapper" data-scroll-animation="true"><p>x</p></div>'
        narrow = MarkupFormatter(FormattingOptions(print_width=40))
        wide = MarkupFormatter(FormattingOptions(print_width=200))
        expected = (
            "<div\n"
            '  class="c-wrapper"\n'
            '  id="wrapper"\n'
            '  data-scroll-animation="true"\n'
            ">\n"
            "  <p>x</p>\n"
            "</div>\n"
        )
        assert narrow.format(source) == expected
        assert narrow.format(expected) == expected
        assert wide.format(source) == (
            '<div class="c-wrapper" id="wrapper" data-scroll-animation="true">\n  <p>x</p>\n</div>\n'
        )

    def test_print_width_keeps_inline_content_attached(self):
        formatter = MarkupFormatter(FormattingOptions(print_width=20))
        formatted = formatter.format('<p class="c-lead" id="lead">Hello <em>you</em></p>')
        assert formatted == '<p\n  class="c-lead"\n  id="lead"\n>Hello <em>you</em></p>\n'
        assert formatter.format(formatted) == formatted

    def test_print_width_void_element(self):
        formatted = MarkupFormatter(FormattingOptions(print_width=10)).format('<img src="hero.png" alt="Hero">')
        assert formatted == '<img\n  src="hero.png"\n  alt="Hero"\n/>\n'

    @pytest.mark.parametrize("source", MARKUPS)
    def test_idempotent(self, source):
        formatter = MarkupFormatter()
        once = formatter.format(source)
        assert formatter.format(once) == once


class TestFormatterFallback:
    """Test that formatting failures never propagate."""

    def test_result_records_failure(self):
        result = Formatter().format_document("a { color: red;", "stylesheet")
        assert not result.success()
        assert result.formatted_text == "a { color: red;"
        assert not result.is_changed

    def test_unknown_kind(self):
        result = Formatter().format_document("x", "yaml")
        assert not result.success()
        assert result.formatted_text == "x"

    def test_format_text_returns_original(self):
        assert format_text("<div><span></div>", "markup") == "<div><span></div>"

    def test_format_text_success(self):
        assert format_text("a{color:red}", "stylesheet") == "a {\n  color: red;\n}\n"

    @pytest.mark.asyncio
    async def test_format_code_matches_format_text(self):
        source = "<ul><li>a</li><li>b</li></ul>"
        assert await format_code(source, "markup") == format_text(source, "markup")

    @pytest.mark.asyncio
    async def test_format_code_fallback(self):
        assert await format_code("}", "stylesheet") == "}"


class TestDefaultFormattingRules:
    """Test the preset option sets."""

    def test_standard(self):
        options = DefaultFormattingRules.standard()
        assert options.indent_unit() == "  "
        assert options.print_width == 100

    def test_tabs(self):
        assert DefaultFormattingRules.tabs().indent_unit() == "\t"
