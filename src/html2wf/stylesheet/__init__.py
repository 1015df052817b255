from html2wf.specificity import calculate_specificity
from html2wf.stylesheet.errors import StylesheetParseError
from html2wf.stylesheet.parser import parse_stylesheet

__all__ = ["parse_stylesheet", "calculate_specificity", "StylesheetParseError"]
