"""Cascade resolution: match rules to elements and merge their declarations."""

from __future__ import annotations

import logging
from typing import Iterable

from html2wf.model.element import ParsedDocument, ParsedElement
from html2wf.model.result import ResolvedStyle
from html2wf.model.rules import ParsedStylesheet, StyleRule
from html2wf.naming.registry import ClassRegistry

log = logging.getLogger("html2wf.cascade")


def _matches(rule: StyleRule, tag: str, class_tokens: set[str]) -> bool:
    """True when any selector component is one of the class tokens or the tag."""
    for part in rule.selectors:
        if part in class_tokens or part.lower() == tag:
            return True
    return False


class CascadeEngine:
    """Resolve the final style of elements against a rewritten rule set.

    Matching is by single-token equality only: a comma-separated selector
    component matches when it is exactly ``.<generated class>`` for one of
    the element's classes, or exactly the element's tag name (ignoring
    case).  Compound, descendant and universal selectors never match.

    Matching rules are applied in ascending ``(specificity, source_order)``
    order, so a later write of the same property always wins.
    """

    def __init__(self, registry: ClassRegistry) -> None:
        self.registry = registry

    def _class_tokens(self, element: ParsedElement) -> set[str]:
        tokens: set[str] = set()
        for original in element.classes:
            generated = self.registry.lookup_generated(original)
            if generated is not None:
                tokens.add(f".{generated}")
        return tokens

    def matches(self, rule: StyleRule, element: ParsedElement) -> bool:
        return _matches(rule, element.tag.lower(), self._class_tokens(element))

    def matching_rules(
        self, element: ParsedElement, rules: Iterable[StyleRule]
    ) -> list[StyleRule]:
        """Return the rules that apply to *element*, lowest priority first."""
        tag = element.tag.lower()
        class_tokens = self._class_tokens(element)
        candidates = [rule for rule in rules if _matches(rule, tag, class_tokens)]
        return sorted(candidates, key=lambda r: (r.specificity, r.source_order))

    def resolve(self, element: ParsedElement, rules: Iterable[StyleRule]) -> ResolvedStyle:
        """Merge every matching rule into one property map (empty when none match)."""
        resolved: ResolvedStyle = {}
        for rule in self.matching_rules(element, rules):
            resolved.update(rule.properties)
        return resolved

    def resolve_document(
        self, document: ParsedDocument, rules: list[StyleRule]
    ) -> dict[str, ResolvedStyle]:
        """Resolve every element of *document*, keyed by element id."""
        styles: dict[str, ResolvedStyle] = {}
        for element in document.walk():
            styles[element.id] = self.resolve(element, rules)
            log.debug(
                "Resolved %s <%s>: %d propert%s",
                element.id,
                element.tag,
                len(styles[element.id]),
                "y" if len(styles[element.id]) == 1 else "ies",
            )
        return styles

    def resolve_conditional(
        self, document: ParsedDocument, stylesheet: ParsedStylesheet
    ) -> dict[str, dict[str, ResolvedStyle]]:
        """Resolve each media condition on its own rule set.

        Groups sharing the same condition text are resolved together; rules
        from other conditions and from the top level never take part.
        Elements that match nothing under a condition are left out.
        """
        by_condition: dict[str, list[StyleRule]] = {}
        for group in stylesheet.conditional_groups:
            by_condition.setdefault(group.condition, []).extend(group.rules)

        result: dict[str, dict[str, ResolvedStyle]] = {}
        for condition, rules in by_condition.items():
            per_element = {
                eid: style
                for eid, style in self.resolve_document(document, rules).items()
                if style
            }
            result[condition] = per_element
        return result
