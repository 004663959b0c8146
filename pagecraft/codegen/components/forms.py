"""Form components. Field settings are read from extra props keys."""

from __future__ import annotations

import html
from typing import Any, List, Optional

from pagecraft.tree import Component

from .base import (
    Attribute,
    ComponentDefinition,
    MarkupContext,
    element,
    open_tag,
    render_attributes,
    selector,
    wrapper,
)

_FOCUS_RULE = "{scope}:focus {{\n  outline: none;\n  border-color: #5b21b6;\n  box-shadow: 0 0 0 3px rgba(91, 33, 182, 0.1);\n}}"


def _flag(name: str, enabled: Any) -> List[Attribute]:
    return [(name, None)] if enabled else []


def _options(node: Component) -> List[dict]:
    options = []
    for option in node.props.get("options") or []:
        if isinstance(option, dict):
            value = str(option.get("value", ""))
            options.append({"value": value, "label": str(option.get("label", value))})
        else:
            options.append({"value": str(option), "label": str(option)})
    return options


class FormDefinition(ComponentDefinition):
    type = "form"
    display_name = "Form"
    category = "form"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        return wrapper(
            node,
            "form",
            ctx,
            [("method", props.get("method", "POST")), ("action", props.get("action", "#"))],
        )


class InputDefinition(ComponentDefinition):
    type = "input"
    display_name = "Input"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        attributes: List[Attribute] = [
            ("type", props.get("type", "text")),
            ("name", props.get("name", "input")),
            ("placeholder", props.get("placeholder", "")),
            ("value", props.get("value", "")),
        ]
        attributes.extend(_flag("required", props.get("required")))
        return open_tag(node, "input", attributes, void=True)

    def decoration_rules(self, node: Component) -> List[str]:
        return [_FOCUS_RULE.format(scope=selector(node))]


class TextareaDefinition(ComponentDefinition):
    type = "textarea"
    display_name = "Text Area"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        attributes: List[Attribute] = [
            ("name", props.get("name", "textarea")),
            ("placeholder", props.get("placeholder", "")),
            ("rows", str(props.get("rows", 4))),
        ]
        attributes.extend(_flag("required", props.get("required")))
        return element(node, "textarea", html.escape(str(props.get("value", ""))), attributes)

    def decoration_rules(self, node: Component) -> List[str]:
        return [_FOCUS_RULE.format(scope=selector(node))]


class SelectDefinition(ComponentDefinition):
    type = "select"
    display_name = "Select"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        attributes: List[Attribute] = [("name", props.get("name", "select"))]
        attributes.extend(_flag("required", props.get("required")))
        options = "\n".join(
            f"<option {render_attributes([('value', option['value'])])}>{option['label']}</option>"
            for option in _options(node)
        )
        return f"{open_tag(node, 'select', attributes)}\n{options}\n</select>"

    def decoration_rules(self, node: Component) -> List[str]:
        return [_FOCUS_RULE.format(scope=selector(node))]


class CheckboxDefinition(ComponentDefinition):
    type = "checkbox"
    display_name = "Checkbox"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        attributes: List[Attribute] = [("type", "checkbox"), ("name", props.get("name", "checkbox"))]
        attributes.extend(_flag("required", props.get("required")))
        attributes.extend(_flag("checked", props.get("checked")))
        return (
            f"{open_tag(node, 'label')}\n"
            f"<input {render_attributes(attributes)} />\n"
            f"<span>{props.get('label', 'Checkbox')}</span>\n"
            "</label>"
        )

    def decoration_rules(self, node: Component) -> List[str]:
        return [
            f'{selector(node)} input[type="checkbox"] {{\n  width: 18px;\n  height: 18px;\n  cursor: pointer;\n}}'
        ]


class RadioDefinition(ComponentDefinition):
    type = "radio"
    display_name = "Radio Group"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        name = props.get("name", "radio-group")
        items = []
        for index, option in enumerate(_options(node)):
            attributes: List[Attribute] = [("type", "radio"), ("name", name), ("value", option["value"])]
            if index == 0:
                attributes.extend(_flag("required", props.get("required")))
            items.append(
                '<label class="radio-option">\n'
                f"<input {render_attributes(attributes)} />\n"
                f"<span>{option['label']}</span>\n"
                "</label>"
            )
        body = "\n".join(items)
        return f"{open_tag(node, 'div')}\n{body}\n</div>" if body else f"{open_tag(node, 'div')}</div>"

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope} .radio-option {{\n  display: flex;\n  align-items: center;\n  gap: 8px;\n  cursor: pointer;\n}}",
            f'{scope} input[type="radio"] {{\n  width: 18px;\n  height: 18px;\n  cursor: pointer;\n}}',
        ]


class LabelDefinition(ComponentDefinition):
    type = "label"
    display_name = "Label"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        target: Optional[str] = props.get("for")
        attributes: List[Attribute] = [("for", target)] if target else []
        marker = '<span class="required-marker">*</span>' if props.get("required") else ""
        return element(node, "label", f"{props.get('text', 'Label')}{marker}", attributes)

    def decoration_rules(self, node: Component) -> List[str]:
        return [f"{selector(node)} .required-marker {{\n  color: #ef4444;\n}}"]


class FormGroupDefinition(ComponentDefinition):
    type = "formGroup"
    display_name = "Form Group"
    category = "form"
    accepts_children = True

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        return wrapper(node, "div", ctx, classes=("form-group",))


class SubmitButtonDefinition(ComponentDefinition):
    type = "submitButton"
    display_name = "Submit Button"
    category = "form"

    def render_markup(self, node: Component, ctx: MarkupContext) -> str:
        props = node.props
        attributes: List[Attribute] = [("type", "submit")]
        attributes.extend(_flag("disabled", props.get("disabled")))
        return element(node, "button", props.get("text", "Submit"), attributes)

    def decoration_rules(self, node: Component) -> List[str]:
        scope = selector(node)
        return [
            f"{scope}:hover:not(:disabled) {{\n  background-color: #4c1d95;\n  transform: translateY(-1px);\n}}",
            f"{scope}:disabled {{\n  opacity: 0.5;\n  cursor: not-allowed;\n}}",
        ]


DEFINITIONS = (
    FormDefinition(),
    InputDefinition(),
    TextareaDefinition(),
    SelectDefinition(),
    CheckboxDefinition(),
    RadioDefinition(),
    LabelDefinition(),
    FormGroupDefinition(),
    SubmitButtonDefinition(),
)
