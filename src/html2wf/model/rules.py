"""Stylesheet rule model: StyleRule, ConditionalRuleGroup, ParsedStylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from html2wf.specificity import calculate_specificity


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its ordered property declarations.

    ``specificity`` is derived from the current ``selector`` and is never
    passed in; :meth:`with_selector` therefore always yields a rule whose
    weight matches its text.  ``original_selector`` keeps the text as it
    appeared in the source stylesheet.
    """

    selector: str
    properties: dict[str, str]
    source_order: int
    original_selector: str = ""
    specificity: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "specificity", calculate_specificity(self.selector))
        if not self.original_selector:
            object.__setattr__(self, "original_selector", self.selector)

    @property
    def selectors(self) -> list[str]:
        """The comma-separated components of the selector, stripped."""
        return [part.strip() for part in self.selector.split(",") if part.strip()]

    def with_selector(self, selector: str) -> StyleRule:
        """Return a copy of this rule carrying *selector*."""
        return replace(self, selector=selector)


@dataclass(frozen=True)
class ConditionalRuleGroup:
    """Rules scoped to one ``@media`` condition."""

    condition: str
    rules: list[StyleRule] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedStylesheet:
    """Top-level rules and media groups parsed from one stylesheet."""

    rules: list[StyleRule] = field(default_factory=list)
    conditional_groups: list[ConditionalRuleGroup] = field(default_factory=list)
    skipped_at_rules: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rules) + sum(len(g.rules) for g in self.conditional_groups)

    def all_rules(self) -> Iterator[StyleRule]:
        """Yield every rule, top-level first, then each media group in order."""
        yield from self.rules
        for group in self.conditional_groups:
            yield from group.rules
