"""Selector rewriting: applies a ClassRegistry to every rule of a stylesheet."""

from __future__ import annotations

from html2wf.model.rules import ConditionalRuleGroup, ParsedStylesheet, StyleRule
from html2wf.naming.registry import ClassRegistry


class SelectorRewriter:
    """Rewrite rule selectors to use generated class names.

    Rules are always rewritten from their ``original_selector``, never from a
    previously rewritten selector, so running the rewriter twice over the
    same stylesheet yields the same result.
    """

    def __init__(self, registry: ClassRegistry) -> None:
        self.registry = registry

    def rewrite_rule(self, rule: StyleRule) -> StyleRule:
        return rule.with_selector(self.registry.rewrite_selector(rule.original_selector))

    def rewrite_group(self, group: ConditionalRuleGroup) -> ConditionalRuleGroup:
        return ConditionalRuleGroup(
            condition=group.condition,
            rules=[self.rewrite_rule(rule) for rule in group.rules],
        )

    def rewrite(self, stylesheet: ParsedStylesheet) -> ParsedStylesheet:
        """Return a copy of *stylesheet* with every selector rewritten."""
        return ParsedStylesheet(
            rules=[self.rewrite_rule(rule) for rule in stylesheet.rules],
            conditional_groups=[
                self.rewrite_group(group) for group in stylesheet.conditional_groups
            ],
            skipped_at_rules=list(stylesheet.skipped_at_rules),
        )
