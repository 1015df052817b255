"""HTML tag -> design-tool element type table."""

from __future__ import annotations

DEFAULT_TYPE = "div"

ELEMENT_TYPES: dict[str, str] = {
    "div": "div",
    "span": "text",
    "p": "paragraph",
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
    "a": "link",
    "img": "image",
    "ul": "list",
    "ol": "list",
    "li": "listItem",
    "button": "button",
    "form": "form",
    "input": "input",
    "textarea": "textarea",
    "select": "select",
    "option": "option",
    "video": "video",
    "audio": "audio",
    "iframe": "embed",
    "section": "section",
    "article": "div",
    "aside": "div",
    "footer": "footer",
    "header": "header",
    "nav": "nav",
    "main": "div",
    "figure": "div",
    "figcaption": "div",
    "blockquote": "blockquote",
    "hr": "divider",
    "br": "lineBreak",
    "table": "table",
    "tr": "tableRow",
    "td": "tableCell",
    "th": "tableCell",
    "thead": "tableHead",
    "tbody": "tableBody",
    "tfoot": "tableFoot",
}


def element_type(tag: str | None) -> str:
    """Return the element type for *tag*; unknown or missing tags become ``div``."""
    if not tag:
        return DEFAULT_TYPE
    return ELEMENT_TYPES.get(tag.lower(), DEFAULT_TYPE)
