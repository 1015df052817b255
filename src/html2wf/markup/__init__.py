from html2wf.markup.element_types import ELEMENT_TYPES, element_type
from html2wf.markup.parser import parse_inline_styles, parse_markup

__all__ = ["ELEMENT_TYPES", "element_type", "parse_inline_styles", "parse_markup"]
