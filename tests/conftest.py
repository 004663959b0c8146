"""Shared pytest fixtures for Pagecraft tests."""

import json
import re

import pytest

from pagecraft.tree import load_tree


def squash(text: str) -> str:
    """Collapse all whitespace runs to single spaces."""
    return re.sub(r"\s+", " ", text).strip()


@pytest.fixture
def squash_ws():
    return squash


@pytest.fixture
def minimal_tree():
    """One styled text node."""
    return load_tree([
        {"id": "a1", "type": "text", "props": {"content": "Hi"}, "styles": {"base": {"color": "red"}}}
    ])


@pytest.fixture
def animated_tree():
    """One heading with an onLoad Fade In animation."""
    return load_tree([
        {
            "id": "n1",
            "type": "heading",
            "props": {
                "content": "Hello",
                "animations": [
                    {
                        "id": "k1",
                        "name": "Fade In",
                        "trigger": "onLoad",
                        "timeline": [],
                        "options": {"duration": 500, "delay": 0, "easing": "ease", "loop": False},
                    }
                ],
            },
        }
    ])


@pytest.fixture
def scroll_tree():
    """A section with a scroll-triggered slide animation."""
    return load_tree([
        {
            "id": "s1",
            "type": "section",
            "props": {
                "animations": [
                    {"id": "k2", "name": "Slide In Left", "trigger": "onScroll", "options": {"duration": 800}}
                ]
            },
            "children": [{"id": "t1", "type": "text", "props": {"content": "Scrolled"}}],
        }
    ])


@pytest.fixture
def page_data():
    """A nested landing page in the editor's JSON shape."""
    return [
        {
            "id": "nav",
            "type": "navigation",
            "displayName": "Navigation Bar",
            "styles": {"base": {"padding": "20px", "backgroundColor": "white"}},
        },
        {
            "id": "main",
            "type": "container",
            "styles": {"base": {"maxWidth": "1200px"}, "md": {"padding": "40px"}},
            "children": [
                {
                    "id": "title",
                    "type": "heading",
                    "props": {"content": "Welcome", "attributes": {"level": "h1"}},
                    "styles": {"base": {"fontSize": "48px"}},
                },
                {
                    "id": "grid",
                    "type": "grid",
                    "styles": {"base": {"display": "grid", "gap": "16px"}},
                    "children": [
                        {"id": "g1", "type": "text", "props": {"content": "One"}, "styles": {"base": {"color": "blue"}}},
                        {"id": "g2", "type": "text", "props": {"content": "Two"}},
                    ],
                },
                {
                    "id": "cta-button",
                    "type": "button",
                    "props": {
                        "content": "Sign up",
                        "customCode": {
                            "onClick": "console.log('clicked');",
                            "css": ".icon {\n  color: gold;\n}",
                        },
                    },
                    "styles": {"base": {"padding": "12px 24px"}},
                },
            ],
        },
        {"id": "foot", "type": "footer", "styles": {"base": {"padding": "40px"}}},
    ]


@pytest.fixture
def page_tree(page_data):
    return load_tree(page_data)


@pytest.fixture
def tree_file(tmp_path, page_data):
    """The landing page written to a JSON file."""
    path = tmp_path / "landing.json"
    path.write_text(json.dumps(page_data), encoding="utf-8")
    return path
