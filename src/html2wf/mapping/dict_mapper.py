"""Reference element mapper that builds a plain-dict element tree."""

from __future__ import annotations

import re
from typing import Any

from html2wf.model.element import ParsedElement
from html2wf.model.result import ConversionResult, ResolvedStyle

_DASH_LETTER_RE = re.compile(r"-([a-zA-Z])")
_CAMEL_HUMP_RE = re.compile(r"([a-z0-9])([A-Z])")


def style_property_name(css_property: str) -> str:
    """Convert a CSS property to its camelCase style name.

    ``background-color`` becomes ``backgroundColor``; custom properties
    (``--brand``) are returned unchanged.
    """
    if css_property.startswith("--"):
        return css_property
    return _DASH_LETTER_RE.sub(lambda m: m.group(1).upper(), css_property)


def preset_id(element_type: str) -> str:
    """``listItem`` -> ``preset-list-item``."""
    return "preset-" + _CAMEL_HUMP_RE.sub(r"\1-\2", element_type).lower()


def _camel_style(style: ResolvedStyle) -> dict[str, str]:
    return {style_property_name(prop): value for prop, value in style.items()}


class DictElementMapper:
    """Build one dict per element, nested the same way as the markup.

    Each node carries the generated class names, the cascade result (with
    the element's inline styles laid over it when ``include_inline_styles``
    is set) and, under ``variants``, the style resolved for each media
    condition the element matched.
    """

    def __init__(self, include_inline_styles: bool = True) -> None:
        self.include_inline_styles = include_inline_styles

    def build(self, result: ConversionResult) -> dict[str, Any]:
        return self._build_element(result.document.root, result)

    def _build_element(self, element: ParsedElement, result: ConversionResult) -> dict[str, Any]:
        style = dict(result.style_for(element.id))
        if self.include_inline_styles:
            style.update(element.styles)

        variants = {
            condition: _camel_style(per_element[element.id])
            for condition, per_element in result.conditional_styles.items()
            if element.id in per_element
        }

        node: dict[str, Any] = {
            "id": f"wf-{element.id}",
            "type": element.type,
            "preset": preset_id(element.type),
            "tag": element.tag,
            "attributes": dict(element.attributes),
            "classes": result.generated_classes(element.id),
            "styles": _camel_style(style),
            "variants": variants,
            "children": [],
        }
        if element.content:
            node["content"] = element.content

        for child in element.children:
            node["children"].append(self._build_element(child, result))
        return node
