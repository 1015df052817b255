"""Tests for the dict element mapper."""

import pytest

from html2wf.mapping import DictElementMapper, preset_id, style_property_name
from html2wf.markup import parse_markup
from html2wf.model.result import ConversionResult


def _result(markup: str, **kwargs) -> ConversionResult:
    return ConversionResult(document=parse_markup(markup), **kwargs)


class TestNaming:
    @pytest.mark.parametrize(
        "prop,expected",
        [
            ("color", "color"),
            ("background-color", "backgroundColor"),
            ("border-top-left-radius", "borderTopLeftRadius"),
            ("--brand-color", "--brand-color"),
        ],
    )
    def test_style_property_name(self, prop, expected):
        assert style_property_name(prop) == expected

    @pytest.mark.parametrize(
        "element_type,expected",
        [("div", "preset-div"), ("listItem", "preset-list-item"), ("tableCell", "preset-table-cell")],
    )
    def test_preset_id(self, element_type, expected):
        assert preset_id(element_type) == expected


class TestDictElementMapper:
    def test_node_shape(self):
        result = _result(
            '<body><a class="link" href="/x">Go</a></body>',
            styles={"el-1": {"text-decoration": "none"}},
            class_map={"link": "wf-link"},
        )
        tree = DictElementMapper().build(result)
        assert tree["id"] == "wf-el-0"
        assert tree["tag"] == "body"
        assert "content" not in tree
        link = tree["children"][0]
        assert link == {
            "id": "wf-el-1",
            "type": "link",
            "preset": "preset-link",
            "tag": "a",
            "attributes": {"href": "/x"},
            "classes": ["wf-link"],
            "styles": {"textDecoration": "none"},
            "variants": {},
            "children": [],
            "content": "Go",
        }

    def test_inline_styles_override_cascade(self):
        result = _result(
            '<body><p style="color: green; margin-top: 4px">x</p></body>',
            styles={"el-1": {"color": "red", "padding": "0"}},
        )
        p = DictElementMapper().build(result)["children"][0]
        assert p["styles"] == {"color": "green", "padding": "0", "marginTop": "4px"}

    def test_inline_styles_can_be_left_out(self):
        result = _result(
            '<body><p style="color: green">x</p></body>',
            styles={"el-1": {"color": "red"}},
        )
        p = DictElementMapper(include_inline_styles=False).build(result)["children"][0]
        assert p["styles"] == {"color": "red"}

    def test_variants_from_conditional_styles(self):
        result = _result(
            '<body><div class="f"></div><div></div></body>',
            conditional_styles={"(max-width: 768px)": {"el-1": {"flex-basis": "100%"}}},
        )
        first, second = DictElementMapper().build(result)["children"]
        assert first["variants"] == {"(max-width: 768px)": {"flexBasis": "100%"}}
        assert second["variants"] == {}

    def test_unmapped_classes_are_omitted(self):
        result = _result('<body><div class="a b"></div></body>', class_map={"b": "wf-b"})
        assert DictElementMapper().build(result)["children"][0]["classes"] == ["wf-b"]

    def test_does_not_mutate_result_styles(self):
        styles = {"el-1": {"color": "red"}}
        result = _result('<body><p style="color: blue">x</p></body>', styles=styles)
        DictElementMapper().build(result)
        assert styles == {"el-1": {"color": "red"}}
