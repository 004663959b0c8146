"""Component tree model shared by every generation stage."""

from .loading import dump_tree, load_tree, load_tree_file
from .models import (
    Animation,
    AnimationOptions,
    AnimationTrigger,
    Component,
    ComponentProps,
    ComponentType,
    CustomCode,
    GlobalCustomCode,
    Keyframe,
    PropertyMap,
    ResponsiveStyles,
)
from .walk import count_nodes, has_trigger, walk

__all__ = [
    "Animation",
    "AnimationOptions",
    "AnimationTrigger",
    "Component",
    "ComponentProps",
    "ComponentType",
    "CustomCode",
    "GlobalCustomCode",
    "Keyframe",
    "PropertyMap",
    "ResponsiveStyles",
    "count_nodes",
    "dump_tree",
    "has_trigger",
    "load_tree",
    "load_tree_file",
    "walk",
]
