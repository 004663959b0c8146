"""
Pydantic models for the component tree.

The tree is handed to the generator as an immutable snapshot: every model
here is frozen, so no generation stage can mutate a node it is reading.
Wire names follow the editor's camelCase JSON (``displayName``,
``customCode``, ``beforeMount`` ...) while Python attributes are snake_case.

``type`` and ``trigger`` are kept as plain strings rather than enums so a
tree containing an unregistered widget or an unknown trigger still loads;
the generation stages skip what they do not recognise.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PropertyValue = Union[str, int, float]
PropertyMap = Dict[str, PropertyValue]


class ComponentType(str, Enum):
    """Component types that have markup and style generators."""

    CONTAINER = "container"
    SECTION = "section"
    GRID = "grid"
    FLEX = "flex"
    SPACER = "spacer"
    HEADING = "heading"
    TEXT = "text"
    BUTTON = "button"
    LINK = "link"
    IMAGE = "image"
    HERO = "hero"
    FEATURES = "features"
    CTA = "cta"
    FOOTER = "footer"
    NAVIGATION = "navigation"
    FORM = "form"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    LABEL = "label"
    FORM_GROUP = "formGroup"
    SUBMIT_BUTTON = "submitButton"


class AnimationTrigger(str, Enum):
    """Runtime conditions that start an animation."""

    ON_LOAD = "onLoad"
    ON_HOVER = "onHover"
    ON_SCROLL = "onScroll"
    ON_CLICK = "onClick"
    CONTINUOUS = "continuous"


class TreeModel(BaseModel):
    """Base class for all tree models: frozen, alias-aware."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class Keyframe(TreeModel):
    """One stop of a user-authored animation timeline."""

    time: float = Field(..., description="Offset of the stop, 0..1")
    properties: PropertyMap = Field(default_factory=dict)


class AnimationOptions(TreeModel):
    duration: Union[int, float] = Field(1000, description="Duration in milliseconds")
    delay: Union[int, float] = Field(0, description="Delay in milliseconds")
    easing: str = "ease"
    loop: bool = False
    direction: Optional[str] = None


class Animation(TreeModel):
    """An animation attached to a component.

    An empty ``timeline`` means the keyframes come from the preset named
    by ``name``.
    """

    id: str
    name: str = "Fade In"
    trigger: str = AnimationTrigger.ON_LOAD.value
    timeline: List[Keyframe] = Field(default_factory=list)
    options: AnimationOptions = Field(default_factory=AnimationOptions)


class CustomCode(TreeModel):
    """Author-supplied snippets scoped to a single component."""

    css: Optional[str] = None
    javascript: Optional[str] = None
    before_mount: Optional[str] = Field(None, alias="beforeMount")
    on_mount: Optional[str] = Field(None, alias="onMount")
    on_click: Optional[str] = Field(None, alias="onClick")
    on_hover: Optional[str] = Field(None, alias="onHover")
    on_scroll: Optional[str] = Field(None, alias="onScroll")

    def has_script(self) -> bool:
        """Return True when at least one behaviour snippet is non-blank."""
        snippets = (
            self.before_mount,
            self.on_mount,
            self.on_click,
            self.on_hover,
            self.on_scroll,
            self.javascript,
        )
        return any(snippet and snippet.strip() for snippet in snippets)

    def is_empty(self) -> bool:
        return not self.has_script() and not (self.css and self.css.strip())


class GlobalCustomCode(TreeModel):
    """Project-wide custom code held by the editor state."""

    css: Optional[str] = None
    javascript: Optional[str] = None
    head_html: Optional[str] = Field(None, alias="headHTML")


class ComponentProps(TreeModel):
    """Component properties.

    Besides the documented fields, props carry arbitrary type-specific keys
    (``name``, ``placeholder``, ``options`` for form fields and so on);
    read them with :meth:`get`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    content: Optional[Union[str, Dict[str, Any]]] = None
    attributes: Dict[str, PropertyValue] = Field(default_factory=dict)
    animations: List[Animation] = Field(default_factory=list)
    custom_code: Optional[CustomCode] = Field(None, alias="customCode")

    def get(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)

    def content_field(self, key: str, default: Any = None) -> Any:
        """Read a key of structured (block) content."""
        if isinstance(self.content, dict):
            return self.content.get(key, default)
        return default


class ResponsiveStyles(TreeModel):
    """Base style map plus any number of named variants (``sm``, ``md`` ...)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    base: PropertyMap = Field(default_factory=dict)

    def variant(self, name: str) -> PropertyMap:
        value = (self.model_extra or {}).get(name)
        return value if isinstance(value, dict) else {}


class Component(TreeModel):
    """A node of the declarative UI tree."""

    id: str
    type: str
    display_name: str = Field("", alias="displayName")
    props: ComponentProps = Field(default_factory=ComponentProps)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)
    children: List["Component"] = Field(default_factory=list)

    @property
    def animations(self) -> List[Animation]:
        return self.props.animations

    @property
    def custom_code(self) -> Optional[CustomCode]:
        return self.props.custom_code


Component.model_rebuild()


__all__ = [
    "PropertyValue",
    "PropertyMap",
    "ComponentType",
    "AnimationTrigger",
    "Keyframe",
    "AnimationOptions",
    "Animation",
    "CustomCode",
    "GlobalCustomCode",
    "ComponentProps",
    "ResponsiveStyles",
    "Component",
]
