"""Markup tree builder: turns HTML text into a ParsedDocument."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from html2wf.markup.element_types import element_type
from html2wf.model.element import ParsedDocument, ParsedElement

__all__ = ["parse_markup", "parse_inline_styles"]

log = logging.getLogger("html2wf.markup")

# Tags whose own text nodes become the element content.
_TEXT_TAGS = frozenset({"p", "span", "h1", "h2", "h3", "h4", "h5", "h6", "button", "a"})

_TEXT_INPUT_TYPES = frozenset({"text", "email", "password", "number"})
_CHECKABLE_INPUT_TYPES = frozenset({"checkbox", "radio"})

# Attributes kept out of ParsedElement.attributes (they have their own fields).
_SPECIAL_ATTRIBUTES = frozenset({"class", "style"})


def parse_inline_styles(style_attr: str) -> dict[str, str]:
    """Parse a ``style`` attribute into an ordered property map.

    Property names are lower-cased; a repeated property keeps the last value.
    Entries without a property or a value are dropped.
    """
    styles: dict[str, str] = {}
    for declaration in style_attr.split(";"):
        prop, _, value = declaration.partition(":")
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            styles[prop] = value
    return styles


def _direct_text(tag: Tag) -> str:
    parts = [
        str(child)
        for child in tag.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]
    return "".join(parts).strip()


def _content(tag: Tag) -> str:
    """Return the text content the element carries itself (not its children's)."""
    name = tag.name.lower()
    if name in _TEXT_TAGS:
        return _direct_text(tag)
    if name == "input":
        input_type = str(tag.get("type", "")).lower()
        if input_type in _TEXT_INPUT_TYPES:
            return str(tag.get("value", ""))
        if input_type in _CHECKABLE_INPUT_TYPES:
            return "checked" if tag.has_attr("checked") else ""
    if name == "textarea":
        return tag.get_text()
    return ""


class _TreeBuilder:
    """Depth-first builder assigning ``el-N`` ids in document (pre-)order."""

    def __init__(self) -> None:
        self._counter = 0
        self.index: dict[str, ParsedElement] = {}

    def _next_id(self) -> str:
        element_id = f"el-{self._counter}"
        self._counter += 1
        return element_id

    def build(self, tag: Tag) -> ParsedElement:
        attributes = {
            key: str(value)
            for key, value in tag.attrs.items()
            if key not in _SPECIAL_ATTRIBUTES
        }
        element = ParsedElement(
            id=self._next_id(),
            tag=tag.name.lower(),
            type=element_type(tag.name),
            attributes=attributes,
            classes=str(tag.get("class", "")).split(),
            styles=parse_inline_styles(str(tag.get("style", ""))),
            content=_content(tag),
        )
        self.index[element.id] = element
        self._build_children(tag, element)
        return element

    def build_body(self, soup: BeautifulSoup) -> ParsedElement:
        """Wrap the top-level tags of a body-less fragment in a ``body`` root."""
        root = ParsedElement(id=self._next_id(), tag="body", type=element_type("body"))
        self.index[root.id] = root
        self._build_children(soup, root)
        return root

    def _build_children(self, tag: Tag, element: ParsedElement) -> None:
        for child in tag.children:
            if isinstance(child, Tag):
                element.children.append(self.build(child))


def parse_markup(source: str) -> ParsedDocument:
    """Parse HTML source into a ParsedDocument rooted at ``<body>``.

    When the markup has no ``<body>`` (a bare fragment), a synthetic ``body``
    element becomes the root and adopts the fragment's top-level tags.
    """
    soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)
    builder = _TreeBuilder()
    body = soup.find("body")
    if isinstance(body, Tag):
        root = builder.build(body)
    else:
        root = builder.build_body(soup)
    log.debug("Parsed markup into %d element(s)", len(builder.index))
    return ParsedDocument(root=root, index=builder.index)
