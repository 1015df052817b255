"""Structural element model: ParsedElement and ParsedDocument."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ParsedElement:
    """A single node of the markup tree.

    ``classes`` holds the class names exactly as written in the markup
    (order kept, duplicates dropped); the generated names live in the
    naming registry.  Children are owned by their parent and carry no
    reference back to it.
    """

    id: str
    tag: str
    type: str = "div"
    attributes: dict[str, str] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    styles: dict[str, str] = field(default_factory=dict)
    content: str = ""
    children: list[ParsedElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ParsedElement id must be a non-empty string")
        self.classes = list(dict.fromkeys(self.classes))

    def walk(self) -> Iterator[ParsedElement]:
        """Yield this element and its descendants depth-first, in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))


@dataclass
class ParsedDocument:
    """A parsed element tree plus an id lookup table built alongside it."""

    root: ParsedElement
    index: dict[str, ParsedElement] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.index:
            self.index = {el.id: el for el in self.root.walk()}

    def __len__(self) -> int:
        return len(self.index)

    def get(self, element_id: str) -> ParsedElement | None:
        return self.index.get(element_id)

    def walk(self) -> Iterator[ParsedElement]:
        return self.root.walk()

    def find_by_class(self, class_name: str) -> list[ParsedElement]:
        return [el for el in self.walk() if class_name in el.classes]

    def find_by_tag(self, tag: str) -> list[ParsedElement]:
        tag = tag.lower()
        return [el for el in self.walk() if el.tag == tag]
