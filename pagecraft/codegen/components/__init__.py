"""Per-type markup and style generators."""

from __future__ import annotations

from typing import Optional

from .base import ComponentDefinition, ComponentRegistry, MarkupContext
from . import blocks, content, forms, layout

__all__ = [
    "ComponentDefinition",
    "ComponentRegistry",
    "MarkupContext",
    "get_registry",
    "get_definition",
]

_registry: Optional[ComponentRegistry] = None


def get_registry() -> ComponentRegistry:
    """Get the global component registry."""
    global _registry
    if _registry is None:
        _registry = ComponentRegistry()
        for module in (layout, content, blocks, forms):
            for definition in module.DEFINITIONS:
                _registry.register(definition)
    return _registry


def get_definition(component_type: str) -> Optional[ComponentDefinition]:
    return get_registry().get(component_type)
