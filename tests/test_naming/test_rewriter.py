"""Tests for stylesheet-wide selector rewriting."""

from html2wf.naming import ClassRegistry, SelectorRewriter
from html2wf.stylesheet import parse_stylesheet

SOURCE = """
.card { padding: 1rem; }
h1, .title { font-size: 2rem; }
@media (max-width: 600px) { .card { padding: 0; } .only-mobile { display: block; } }
@import url("x.css");
"""


class TestSelectorRewriter:
    def test_rewrites_top_level_and_media_rules(self):
        registry = ClassRegistry("wf-")
        rewritten = SelectorRewriter(registry).rewrite(parse_stylesheet(SOURCE))
        assert [r.selector for r in rewritten.rules] == [".wf-card", "h1, .wf-title"]
        group = rewritten.conditional_groups[0]
        assert group.condition == "(max-width: 600px)"
        assert [r.selector for r in group.rules] == [".wf-card", ".wf-only-mobile"]

    def test_keeps_order_properties_and_skipped(self):
        registry = ClassRegistry("wf-")
        parsed = parse_stylesheet(SOURCE)
        rewritten = SelectorRewriter(registry).rewrite(parsed)
        assert [r.source_order for r in rewritten.all_rules()] == [0, 1, 2, 3]
        assert rewritten.rules[0].properties == {"padding": "1rem"}
        assert rewritten.skipped_at_rules == parsed.skipped_at_rules

    def test_original_stylesheet_untouched(self):
        parsed = parse_stylesheet(SOURCE)
        SelectorRewriter(ClassRegistry("wf-")).rewrite(parsed)
        assert parsed.rules[0].selector == ".card"

    def test_original_selector_is_carried(self):
        rewritten = SelectorRewriter(ClassRegistry("wf-")).rewrite(parse_stylesheet(SOURCE))
        assert rewritten.rules[1].original_selector == "h1, .title"

    def test_specificity_follows_rewritten_selector(self):
        rewritten = SelectorRewriter(ClassRegistry("wf-")).rewrite(parse_stylesheet(".a.b { x: y; }"))
        assert rewritten.rules[0].specificity == 20

    def test_rewriting_twice_is_stable(self):
        registry = ClassRegistry("wf-")
        rewriter = SelectorRewriter(registry)
        once = rewriter.rewrite(parse_stylesheet(SOURCE))
        twice = rewriter.rewrite(once)
        assert [r.selector for r in twice.all_rules()] == [r.selector for r in once.all_rules()]
        assert len(registry) == 3

    def test_uses_names_registered_beforehand(self):
        registry = ClassRegistry("wf-")
        registry.generate("9col")
        rewritten = SelectorRewriter(registry).rewrite(parse_stylesheet(".card { a: b; }"))
        assert registry.mappings() == {"9col": "wf-class-0", "card": "wf-card"}
        assert rewritten.rules[0].selector == ".wf-card"
