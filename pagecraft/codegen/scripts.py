"""
Custom-code synthesis.

Emits one self-invoking block per component that carries behaviour
snippets, plus the shared runtime helpers the animation rules rely on:
an intersection observer that adds ``in-view`` to scroll-animated
elements and a click handler that re-triggers the ``clicked`` class.
"""

from __future__ import annotations

import textwrap
from typing import List, Optional, Sequence

from pagecraft.tree import AnimationTrigger, Component, CustomCode, has_trigger, walk

SCROLL_OBSERVER_JS = """// Scroll animations
const scrollObserver = new IntersectionObserver((entries) => {
  entries.forEach((entry) => {
    if (entry.isIntersecting) {
      entry.target.classList.add('in-view');
    }
  });
}, {
  threshold: 0.5,
  rootMargin: '0px'
});

// Observe all elements with scroll animations
document.querySelectorAll('[data-scroll-animation]').forEach((element) => {
  scrollObserver.observe(element);
});"""

CLICK_RESET_JS = """// Click animations
document.querySelectorAll('[data-click-animation]').forEach((element) => {
  element.addEventListener('click', function() {
    this.classList.remove('clicked');
    // Force reflow
    void this.offsetWidth;
    this.classList.add('clicked');

    // Remove class after animation completes
    const animationDuration = parseInt(this.getAttribute('data-animation-duration') || '1000');
    setTimeout(() => {
      this.classList.remove('clicked');
    }, animationDuration);
  });
});"""

BLOCK_SEPARATOR = "\n\n"


def _snippet(code: str, depth: int) -> str:
    return textwrap.indent(code.strip("\n"), "  " * depth)


def _present(code: Optional[str]) -> bool:
    return bool(code and code.strip())


def generate_runtime_helpers(tree: Sequence[Component]) -> str:
    helpers = []
    if has_trigger(tree, AnimationTrigger.ON_SCROLL.value):
        helpers.append(SCROLL_OBSERVER_JS)
    if has_trigger(tree, AnimationTrigger.ON_CLICK.value):
        helpers.append(CLICK_RESET_JS)
    return BLOCK_SEPARATOR.join(helpers)


def generate_component_script(component_id: str, custom: CustomCode) -> str:
    """Scoped block for one component, or ``""`` when there is nothing to run."""
    if not custom.has_script():
        return ""
    lines: List[str] = [
        f"// Custom code for #{component_id}",
        "(function() {",
        f"  const element = document.getElementById('{component_id}');",
        "  if (!element) return;",
        "",
    ]
    if _present(custom.before_mount):
        lines += ["  // Before Mount", _snippet(custom.before_mount, 1), ""]
    if _present(custom.on_mount):
        lines += ["  // On Mount", _snippet(custom.on_mount, 1), ""]
    if _present(custom.on_click):
        lines += [
            "  // Click handler",
            "  element.addEventListener('click', function(event) {",
            _snippet(custom.on_click, 2),
            "  });",
            "",
        ]
    if _present(custom.on_hover):
        lines += [
            "  // Hover handler",
            "  element.addEventListener('mouseenter', function(event) {",
            _snippet(custom.on_hover, 2),
            "  });",
            "",
        ]
    if _present(custom.on_scroll):
        lines += [
            "  // Scroll handler",
            "  const scrollHandler = function() {",
            "    const rect = element.getBoundingClientRect();",
            "    const inView = rect.top < window.innerHeight && rect.bottom > 0;",
            "    if (inView) {",
            _snippet(custom.on_scroll, 3),
            "    }",
            "  };",
            "  window.addEventListener('scroll', scrollHandler);",
            "  scrollHandler(); // Check initial state",
            "",
        ]
    if _present(custom.javascript):
        lines += ["  // Custom JavaScript", _snippet(custom.javascript, 1)]
    elif lines[-1] == "":
        lines.pop()
    lines.append("})();")
    return "\n".join(lines)


def generate_component_scripts(tree: Sequence[Component]) -> str:
    blocks = []
    for node in walk(tree):
        if node.custom_code is None:
            continue
        block = generate_component_script(node.id, node.custom_code)
        if block:
            blocks.append(block)
    return BLOCK_SEPARATOR.join(blocks)


def generate_script(tree: Sequence[Component], global_javascript: Optional[str] = None) -> str:
    """Runtime helpers, then per-component blocks, then the global script."""
    parts = [generate_runtime_helpers(tree), generate_component_scripts(tree)]
    if _present(global_javascript):
        parts.append(f"/* Global Custom JavaScript */\n{global_javascript}")
    return BLOCK_SEPARATOR.join(part for part in parts if part)
