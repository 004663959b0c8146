"""Pre-built page blocks whose content is a structured mapping."""

from __future__ import annotations

import html
from typing import List

from pagecraft.tree import Component

from .base import ComponentDefinition, MarkupContext, open_tag, selector, wrapper

_DEFAULT_FEATURES = [
    {"icon": "🚀", "title": "Fast", "description": "Lightning quick performance"},
    {"icon": "🎨", "title": "Beautiful", "description": "Stunning designs out of the box"},
    {"icon": "🔧", "title": "Flexible", "description": "Customize everything"},
]

_DEFAULT_NAV_LINKS = [
    {"text": "Home", "href": "#"},
    {"text": "About", "href": "#about"},
    {"text": "Services", "href": "#services"},
    {"text": "Contact", "href": "#contact"},
]


class HeroDefinition(ComponentDefinition):
    type = "hero"
    display_name = "Hero Section"
    category = "blocks"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        content = node.props.content_field
        hero = (
            '<div class="hero-content">\n'
            f"<h1>{content('heading', 'Welcome to Your Site')}</h1>\n"
            f"<p>{content('subheading', 'Build something amazing')}</p>\n"
            f"<button class=\"hero-btn\">{content('buttonText', 'Get Started')}</button>\n"
            "</div>"
        )
        return wrapper(node, "section", ctx, classes=("hero",), prefix=hero)

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} h1 {{\n  font-size: 48px;\n  margin-bottom: 16px;\n  color: #1F2937;\n}}",
            f"{scope} p {{\n  font-size: 20px;\n  margin-bottom: 32px;\n  color: #6B7280;\n}}",
            f"{scope} .hero-btn {{\n"
            "  padding: 14px 32px;\n  background: #3B82F6;\n  color: white;\n  border: none;\n"
            "  border-radius: 8px;\n  font-size: 18px;\n  cursor: pointer;\n  transition: all 0.2s;\n}",
            f"{scope} .hero-btn:hover {{\n  background: #2563EB;\n  transform: translateY(-2px);\n}}",
        ]


class FeaturesDefinition(ComponentDefinition):
    type = "features"
    display_name = "Features Grid"
    category = "blocks"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        features = node.props.content_field("features", _DEFAULT_FEATURES) or []
        items = "\n".join(
            '<div class="feature-item">\n'
            f"<div class=\"feature-icon\">{feature.get('icon', '')}</div>\n"
            f"<h3>{feature.get('title', '')}</h3>\n"
            f"<p>{feature.get('description', '')}</p>\n"
            "</div>"
            for feature in features
            if isinstance(feature, dict)
        )
        return f'{open_tag(node, "section", classes=("features",))}\n<div class="features-grid">\n{items}\n</div>\n</section>'

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} .features-grid {{\n"
            "  display: grid;\n  grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));\n"
            "  gap: 40px;\n  max-width: 1200px;\n  margin: 0 auto;\n}",
            f"{scope} .feature-item {{\n  text-align: center;\n}}",
            f"{scope} .feature-icon {{\n  font-size: 48px;\n  margin-bottom: 16px;\n}}",
            f"{scope} .feature-item h3 {{\n  font-size: 24px;\n  margin-bottom: 8px;\n  color: #1F2937;\n}}",
            f"{scope} .feature-item p {{\n  color: #6B7280;\n  line-height: 1.6;\n}}",
        ]


class CtaDefinition(ComponentDefinition):
    type = "cta"
    display_name = "Call to Action"
    category = "blocks"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        content = node.props.content_field
        return (
            f"{open_tag(node, 'section', classes=('cta',))}\n"
            '<div class="cta-content">\n'
            f"<h2>{content('heading', 'Ready to get started?')}</h2>\n"
            f"<p>{content('description', 'Join thousands of satisfied customers today.')}</p>\n"
            f"<button class=\"cta-btn\">{content('buttonText', 'Start Free Trial')}</button>\n"
            "</div>\n"
            "</section>"
        )

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} .cta-content {{\n  max-width: 600px;\n  margin: 0 auto;\n}}",
            f"{scope} h2 {{\n  font-size: 36px;\n  margin-bottom: 16px;\n}}",
            f"{scope} p {{\n  font-size: 18px;\n  margin-bottom: 32px;\n  opacity: 0.95;\n}}",
            f"{scope} .cta-btn {{\n"
            "  padding: 14px 32px;\n  background: white;\n  color: #3B82F6;\n  border: none;\n"
            "  border-radius: 8px;\n  font-size: 18px;\n  font-weight: 600;\n  cursor: pointer;\n"
            "  transition: all 0.2s;\n}",
            f"{scope} .cta-btn:hover {{\n  transform: translateY(-2px);\n  box-shadow: 0 10px 20px rgba(0,0,0,0.1);\n}}",
        ]


class FooterDefinition(ComponentDefinition):
    type = "footer"
    display_name = "Footer"
    category = "blocks"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        content = node.props.content_field
        links = content("links", ["Privacy", "Terms", "Contact"]) or []
        links_html = " · ".join(f'<a href="#" class="footer-link">{label}</a>' for label in links)
        copyright_text = content("copyright", "© Your Company. All rights reserved.")
        return (
            f"{open_tag(node, 'footer')}\n"
            f'<div class="footer-links">{links_html}</div>\n'
            f'<p class="footer-copyright">{copyright_text}</p>\n'
            "</footer>"
        )

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} .footer-links {{\n  margin-bottom: 16px;\n}}",
            f"{scope} .footer-link {{\n"
            "  color: #9CA3AF;\n  text-decoration: none;\n  margin: 0 8px;\n  transition: color 0.2s;\n}",
            f"{scope} .footer-link:hover {{\n  color: white;\n}}",
            f"{scope} .footer-copyright {{\n  color: #6B7280;\n  font-size: 14px;\n}}",
        ]


class NavigationDefinition(ComponentDefinition):
    type = "navigation"
    display_name = "Navigation Bar"
    category = "blocks"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        content = node.props.content_field
        links = content("links", _DEFAULT_NAV_LINKS) or []
        nav_links = "\n".join(
            f"<a href=\"{html.escape(str(link.get('href', '#')), quote=True)}\" class=\"nav-link\">{link.get('text', '')}</a>"
            for link in links
            if isinstance(link, dict)
        )
        return (
            f"{open_tag(node, 'nav')}\n"
            '<div class="nav-container">\n'
            f"<div class=\"nav-logo\">{content('logo', 'Your Logo')}</div>\n"
            f'<div class="nav-links">\n{nav_links}\n</div>\n'
            "</div>\n"
            "</nav>"
        )

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} .nav-container {{\n"
            "  max-width: 1200px;\n  margin: 0 auto;\n  display: flex;\n"
            "  justify-content: space-between;\n  align-items: center;\n}",
            f"{scope} .nav-logo {{\n  font-size: 24px;\n  font-weight: bold;\n  color: #1F2937;\n}}",
            f"{scope} .nav-links {{\n  display: flex;\n  gap: 32px;\n}}",
            f"{scope} .nav-link {{\n  color: #4B5563;\n  text-decoration: none;\n  transition: color 0.2s;\n}}",
            f"{scope} .nav-link:hover {{\n  color: #3B82F6;\n}}",
        ]


DEFINITIONS = (
    HeroDefinition(),
    FeaturesDefinition(),
    CtaDefinition(),
    FooterDefinition(),
    NavigationDefinition(),
)
