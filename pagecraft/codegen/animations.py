"""
Animation compiler.

Turns the animations attached to components into ``@keyframes`` blocks and
trigger-specific rules binding each keyframe block to its component:

* ``onLoad`` and ``continuous`` bind to ``#id``
* ``onHover`` binds to ``#id:hover``
* ``onScroll`` binds to ``#id.in-view`` (class added by the scroll observer)
* ``onClick`` binds to ``#id.clicked`` (class toggled by the click helper)

Animations without a custom timeline use the preset named by
``animation.name``, falling back to ``Fade In``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from pagecraft.tree import Animation, AnimationTrigger, Component, walk

from .values import format_number, format_value, keyframe_property_name

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "Fade In"

PRESET_KEYFRAMES: Dict[str, str] = {
    "Fade In": (
        "  from { opacity: 0; }\n"
        "  to { opacity: 1; }"
    ),
    "Slide In Left": (
        "  from { transform: translateX(-100%); opacity: 0; }\n"
        "  to { transform: translateX(0); opacity: 1; }"
    ),
    "Slide In Right": (
        "  from { transform: translateX(100%); opacity: 0; }\n"
        "  to { transform: translateX(0); opacity: 1; }"
    ),
    "Slide In Top": (
        "  from { transform: translateY(-100%); opacity: 0; }\n"
        "  to { transform: translateY(0); opacity: 1; }"
    ),
    "Slide In Bottom": (
        "  from { transform: translateY(100%); opacity: 0; }\n"
        "  to { transform: translateY(0); opacity: 1; }"
    ),
    "Scale In": (
        "  from { transform: scale(0); opacity: 0; }\n"
        "  to { transform: scale(1); opacity: 1; }"
    ),
    "Bounce In": (
        "  0% { transform: scale(0); opacity: 0; }\n"
        "  60% { transform: scale(1.2); opacity: 1; }\n"
        "  100% { transform: scale(1); }"
    ),
    "Pulse": (
        "  0% { transform: scale(1); }\n"
        "  50% { transform: scale(1.05); }\n"
        "  100% { transform: scale(1); }"
    ),
    "Shake": (
        "  0%, 100% { transform: translateX(0); }\n"
        "  10%, 30%, 50%, 70%, 90% { transform: translateX(-10px); }\n"
        "  20%, 40%, 60%, 80% { transform: translateX(10px); }"
    ),
    "Float": (
        "  0%, 100% { transform: translateY(0); }\n"
        "  50% { transform: translateY(-20px); }"
    ),
    "Spin": (
        "  from { transform: rotate(0deg); }\n"
        "  to { transform: rotate(360deg); }"
    ),
}

TRIGGER_SELECTORS: Dict[str, str] = {
    AnimationTrigger.ON_LOAD.value: "#{id}",
    AnimationTrigger.CONTINUOUS.value: "#{id}",
    AnimationTrigger.ON_HOVER.value: "#{id}:hover",
    AnimationTrigger.ON_SCROLL.value: "#{id}.in-view",
    AnimationTrigger.ON_CLICK.value: "#{id}.clicked",
}


def keyframes_name(animation: Animation) -> str:
    return f"animation-{animation.id}"


def generate_keyframes(animation: Animation) -> str:
    """Return the ``@keyframes`` block for one animation."""
    if animation.timeline:
        stops = []
        for keyframe in animation.timeline:
            properties = "; ".join(
                f"{keyframe_property_name(name)}: {format_value(value)}"
                for name, value in keyframe.properties.items()
            )
            stops.append(f"  {format_number(keyframe.time * 100)}% {{ {properties} }}")
        body = "\n".join(stops)
    else:
        body = PRESET_KEYFRAMES.get(animation.name, PRESET_KEYFRAMES[DEFAULT_PRESET])
    return f"@keyframes {keyframes_name(animation)} {{\n{body}\n}}"


def animation_shorthand(animation: Animation) -> str:
    options = animation.options
    iterations = "infinite" if options.loop else "1"
    direction = options.direction or "normal"
    return (
        f"{keyframes_name(animation)} {format_number(options.duration)}ms {options.easing} "
        f"{format_number(options.delay)}ms {iterations} {direction} both"
    )


def generate_trigger_rule(node: Component, animation: Animation) -> Optional[str]:
    pattern = TRIGGER_SELECTORS.get(animation.trigger)
    if pattern is None:
        logger.debug(
            "Animation %s on %s has unknown trigger %r; no rule emitted",
            animation.id,
            node.id,
            animation.trigger,
        )
        return None
    return f"{pattern.format(id=node.id)} {{\n  animation: {animation_shorthand(animation)};\n}}"


def generate_trigger_rules(node: Component) -> str:
    rules = [generate_trigger_rule(node, animation) for animation in node.animations]
    return "\n\n".join(rule for rule in rules if rule)


def collect_animations(tree: Sequence[Component]) -> List[Animation]:
    """Every animation in the tree, in traversal order, duplicates kept."""
    return [animation for node in walk(tree) for animation in node.animations]


def compile_animations(tree: Sequence[Component]) -> str:
    """Keyframe blocks for all animations followed by the per-node trigger rules."""
    animations = collect_animations(tree)
    if not animations:
        return ""
    keyframes = "\n\n".join(generate_keyframes(animation) for animation in animations)
    rules = [generate_trigger_rules(node) for node in walk(tree) if node.animations]
    sections = [f"/* Animations */\n{keyframes}", *(rule for rule in rules if rule)]
    return "\n\n".join(sections)
