"""html2wf: HTML/CSS to design-tool element conversion with collision-free class names."""

from html2wf.config import ConversionConfig
from html2wf.converter import ConversionError, Converter
from html2wf.model import ConversionResult
from html2wf.naming import ClassRegistry
from html2wf.stylesheet import StylesheetParseError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClassRegistry",
    "ConversionConfig",
    "ConversionError",
    "ConversionResult",
    "Converter",
    "StylesheetParseError",
]
