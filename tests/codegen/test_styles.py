"""Tests for the stylesheet compiler."""

import re

from pagecraft.codegen import GenerationOptions, compile_stylesheet
from pagecraft.codegen.styles import (
    CSS_RESET,
    compile_component_styles,
    compile_custom_css,
    generate_theme_css,
    scope_custom_css,
)
from pagecraft.codegen.values import format_number, keyframe_property_name, style_property_name
from pagecraft.tree import GlobalCustomCode, load_tree, walk


def base_rule_count(css: str, node_id: str) -> int:
    return len(re.findall(rf"^#{re.escape(node_id)} \{{", css, flags=re.MULTILINE))


class TestComponentStyles:
    """Test per-node rule aggregation."""

    def test_minimal_rule(self, minimal_tree):
        assert compile_component_styles(minimal_tree) == "#a1 {\n  color: red;\n}"

    def test_camel_case_properties(self):
        tree = load_tree([{"id": "x", "type": "container", "styles": {"base": {"backgroundColor": "#fff", "zIndex": 2}}}])
        assert compile_component_styles(tree) == "#x {\n  background-color: #fff;\n  z-index: 2;\n}"

    def test_one_rule_per_styled_node(self, page_tree):
        css = compile_component_styles(page_tree)
        styled = [node for node in walk(page_tree) if node.styles.base]
        unstyled = [node for node in walk(page_tree) if not node.styles.base]
        assert len(re.findall(r"^#[\w-]+ \{", css, flags=re.MULTILINE)) == len(styled)
        for node in styled:
            assert base_rule_count(css, node.id) == 1
        for node in unstyled:
            assert base_rule_count(css, node.id) == 0

    def test_pre_order(self, page_tree):
        css = compile_component_styles(page_tree)
        ids = re.findall(r"^#([\w-]+) \{", css, flags=re.MULTILINE)
        assert ids == ["nav", "main", "title", "grid", "g1", "cta-button", "foot"]

    def test_responsive_variant(self, page_tree):
        css = compile_component_styles(page_tree)
        assert "@media (min-width: 768px) {\n  #main {\n    padding: 40px;\n  }\n}" in css

    def test_unknown_variant_ignored(self):
        tree = load_tree([{"id": "x", "type": "text", "styles": {"base": {}, "hover": {"color": "red"}}}])
        assert compile_component_styles(tree) == ""

    def test_unknown_type_contributes_no_rule(self):
        tree = load_tree([
            {"id": "a", "type": "text", "styles": {"base": {"color": "red"}}},
            {
                "id": "w",
                "type": "unregistered-widget",
                "styles": {"base": {"color": "blue"}},
                "children": [{"id": "inner", "type": "text", "styles": {"base": {"margin": "0"}}}],
            },
            {"id": "b", "type": "text", "styles": {"base": {"color": "green"}}},
        ])
        css = compile_component_styles(tree)
        assert "#w" not in css
        assert css.index("#a {") < css.index("#inner {") < css.index("#b {")

    def test_decoration_rules_scoped(self):
        tree = load_tree([{"id": "btn", "type": "button"}])
        css = compile_component_styles(tree)
        assert css == "#btn:hover {\n  opacity: 0.9;\n  transform: translateY(-1px);\n}"


class TestCustomCss:
    """Test naive selector scoping of per-node CSS."""

    def test_scope_prefixes_rule_lines_only(self):
        css = "/* heading { */\n.title {\n  color: red;\n}\n\n* { margin: 0; }\n a:hover { color: blue; }"
        assert scope_custom_css("n1", css) == (
            "/* heading { */\n"
            "#n1 .title {\n"
            "  color: red;\n"
            "}\n"
            "\n"
            "* { margin: 0; }\n"
            "#n1  a:hover { color: blue; }"
        )

    def test_custom_section(self, page_tree):
        assert compile_custom_css(page_tree) == (
            "/* Custom Component Styles */\n"
            "/* Custom CSS for #cta-button */\n"
            "#cta-button .icon {\n"
            "  color: gold;\n"
            "}"
        )

    def test_nested_custom_css_is_collected(self):
        tree = load_tree([
            {
                "id": "outer",
                "type": "container",
                "children": [{"id": "deep", "type": "text", "props": {"customCode": {"css": "p { color: red; }"}}}],
            }
        ])
        assert "#deep p { color: red; }" in compile_custom_css(tree)


class TestStylesheet:
    """Test section ordering of the full stylesheet."""

    def test_starts_with_reset(self, minimal_tree):
        assert compile_stylesheet(minimal_tree).startswith(CSS_RESET)

    def test_minimal_has_no_animation_rules(self, minimal_tree):
        css = compile_stylesheet(minimal_tree)
        assert "#a1 {\n  color: red;\n}" in css
        assert "/* Animations */" not in css
        assert "animation:" not in css

    def test_theme_block_only_when_requested(self, minimal_tree):
        variables = {"--color-primary": "#3b82f6"}
        without = compile_stylesheet(minimal_tree, GenerationOptions(theme_variables=variables))
        with_theme = compile_stylesheet(
            minimal_tree, GenerationOptions(include_theme=True, theme_variables=variables)
        )
        assert ":root" not in without
        assert ":root {\n  --color-primary: #3b82f6;\n}" in with_theme

    def test_section_order(self):
        tree = load_tree([
            {
                "id": "n",
                "type": "text",
                "props": {
                    "animations": [{"id": "k", "trigger": "onHover"}],
                    "customCode": {"css": ".x { color: red; }"},
                },
                "styles": {"base": {"color": "black"}},
            }
        ])
        options = GenerationOptions(
            include_theme=True,
            theme_variables={"--spacing-sm": "1rem"},
            global_custom_code=GlobalCustomCode(css="body { margin: 0; }"),
        )
        css = compile_stylesheet(tree, options)
        markers = [
            "/* CSS Reset */",
            ":root {",
            "/* Animations */",
            "#n:hover {",
            "#n {\n  color: black;",
            "/* Custom Component Styles */",
            "/* Global Custom CSS */\nbody { margin: 0; }",
        ]
        positions = [css.index(marker) for marker in markers]
        assert positions == sorted(positions)
        assert css.endswith("/* Global Custom CSS */\nbody { margin: 0; }")

    def test_theme_css(self):
        assert generate_theme_css({"--a": "1", "--b": "2"}) == ":root {\n  --a: 1;\n  --b: 2;\n}"


class TestValues:
    """Test property name and number printing."""

    def test_style_property_name(self):
        assert style_property_name("backgroundColor") == "background-color"
        assert style_property_name("color") == "color"

    def test_keyframe_property_name(self):
        assert keyframe_property_name("backgroundColor") == "background-color"
        assert keyframe_property_name("WebkitTransform") == "-webkit-transform"

    def test_format_number(self):
        assert format_number(1.0) == "1"
        assert format_number(0.5) == "0.5"
        assert format_number(500) == "500"
