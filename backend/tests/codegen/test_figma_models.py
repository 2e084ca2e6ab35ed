"""Tests for figma_codegen.integrations.figma_models."""

import pytest
from pydantic import ValidationError

from figma_codegen.integrations.figma_models import (
    DesignNode,
    DropShadowEffect,
    OtherEffect,
    OtherPaint,
    SolidPaint,
)


class TestDesignNode:
    def test_camel_case_aliases(self, node):
        n = node(layoutMode="VERTICAL", paddingTop=8, itemSpacing=4, cornerRadius=6)
        assert n.layout_mode == "VERTICAL"
        assert n.padding_top == 8
        assert n.item_spacing == 4
        assert n.corner_radius == 6

    def test_unknown_fields_ignored(self, node):
        n = node(blendMode="NORMAL", exportSettings=[])
        assert n.type == "FRAME"

    def test_unrecognized_type_accepted(self, node):
        assert node(type="BOOLEAN_OPERATION").type == "BOOLEAN_OPERATION"

    def test_visibility_defaults_to_visible(self, node):
        assert node().visible is None
        assert node().is_visible
        assert not node(visible=False).is_visible

    def test_children_parsed_recursively(self, node):
        n = node(children=[{"type": "GROUP", "children": [{"type": "TEXT", "characters": "hi"}]}])
        assert n.children[0].children[0].characters == "hi"

    def test_frozen(self, node):
        n = node()
        with pytest.raises(ValidationError):
            n.name = "Other"

    def test_text_style(self, node):
        n = node(type="TEXT", style={"fontWeight": 600, "fontSize": 14, "textAlignHorizontal": "CENTER"})
        assert n.style.font_weight == 600
        assert n.style.font_size == 14
        assert n.style.text_align_horizontal == "CENTER"


class TestPaintVariants:
    def test_solid_fill(self, node):
        n = node(fills=[{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}])
        fill = n.fills[0]
        assert isinstance(fill, SolidPaint)
        assert fill.color.a == 1.0

    def test_gradient_and_image_fall_to_other(self, node):
        n = node(fills=[
            {"type": "GRADIENT_LINEAR", "gradientStops": []},
            {"type": "IMAGE", "imageRef": "abc"},
        ])
        assert all(isinstance(f, OtherPaint) for f in n.fills)
        assert n.fills[0].type == "GRADIENT_LINEAR"

    def test_order_preserved(self, node):
        n = node(fills=[{"type": "IMAGE"}, {"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0}}])
        assert isinstance(n.fills[0], OtherPaint)
        assert isinstance(n.fills[1], SolidPaint)


class TestEffectVariants:
    def test_drop_shadow(self, node):
        n = node(effects=[{"type": "DROP_SHADOW", "radius": 4, "offset": {"x": 0, "y": 2}}])
        assert isinstance(n.effects[0], DropShadowEffect)
        assert n.effects[0].offset.y == 2

    def test_other_effects(self, node):
        n = node(effects=[{"type": "INNER_SHADOW"}, {"type": "LAYER_BLUR", "radius": 3}])
        assert all(isinstance(e, OtherEffect) for e in n.effects)


def test_malformed_facet_rejected():
    with pytest.raises(ValidationError):
        DesignNode.model_validate({"type": "FRAME", "children": "not-a-list"})
