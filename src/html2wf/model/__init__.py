"""html2wf model layer -- public type re-exports."""

from html2wf.model.element import ParsedDocument, ParsedElement
from html2wf.model.result import ConversionResult, ResolvedStyle
from html2wf.model.rules import ConditionalRuleGroup, ParsedStylesheet, StyleRule

__all__ = [
    # rules
    "StyleRule",
    "ConditionalRuleGroup",
    "ParsedStylesheet",
    # element
    "ParsedElement",
    "ParsedDocument",
    # result
    "ResolvedStyle",
    "ConversionResult",
]
