"""Conversion output: per-element resolved styles and the class name table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from html2wf.model.element import ParsedDocument
from html2wf.model.rules import ParsedStylesheet

# Final property -> value pairs for one element, in cascade order.
ResolvedStyle = dict[str, str]


@dataclass
class ConversionResult:
    """Everything a conversion run produces.

    Attributes:
        document: The parsed element tree (original class names).
        styles: Element id -> resolved style from the unconditional rules.
        conditional_styles: Media condition -> element id -> resolved style.
            Only elements that matched at least one rule in the group appear.
        class_map: Original class name -> generated name, in registration order.
        stylesheet: The stylesheet with every selector rewritten.
        elements: Whatever the element mapper built from the above.
    """

    document: ParsedDocument
    styles: dict[str, ResolvedStyle] = field(default_factory=dict)
    conditional_styles: dict[str, dict[str, ResolvedStyle]] = field(default_factory=dict)
    class_map: dict[str, str] = field(default_factory=dict)
    stylesheet: ParsedStylesheet = field(default_factory=ParsedStylesheet)
    elements: Any = None

    def style_for(self, element_id: str) -> ResolvedStyle:
        return self.styles.get(element_id, {})

    def generated_classes(self, element_id: str) -> list[str]:
        """Return the generated class names of an element, in markup order."""
        element = self.document.get(element_id)
        if element is None:
            return []
        return [self.class_map[c] for c in element.classes if c in self.class_map]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of the result."""
        return {
            "classMap": dict(self.class_map),
            "styles": {eid: dict(style) for eid, style in self.styles.items()},
            "conditionalStyles": {
                condition: {eid: dict(style) for eid, style in per_element.items()}
                for condition, per_element in self.conditional_styles.items()
            },
            "elements": self.elements,
        }
