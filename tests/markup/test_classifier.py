"""Tests for NodeConverter: classification and child ordering."""

import asyncio

import pytest

from nativewind_codegen.integrations.figma_nodes import MIXED, VisualNode
from nativewind_codegen.markup.classifier import (
    ComponentRole,
    NodeConverter,
    classify_component_name,
    to_icon_identifier,
)
from nativewind_codegen.markup.errors import ChildConversionFailure, UnsupportedNodeKind
from nativewind_codegen.markup.model import Expression, MarkupKind
from nativewind_codegen.markup.theme import Theme

from tests.conftest import DelayedLookup, FailingLookup, StaticLookup, frame, instance, node, solid, text


# ── Name rules ──


class TestComponentRules:
    @pytest.mark.parametrize("name, role", [
        ("Button/Rounded/Small", ComponentRole.INTERACTIVE),
        ("primary-btn", ComponentRole.INTERACTIVE),
        ("CTA banner", ComponentRole.INTERACTIVE),
        ("icn_walk", ComponentRole.ICON),
        ("Icon/Arrow", ComponentRole.ICON),
        ("SVG logo", ComponentRole.ICON),
        ("Button with icon", ComponentRole.INTERACTIVE),
        ("Card", ComponentRole.CONTAINER),
        ("", ComponentRole.CONTAINER),
    ])
    def test_first_match_wins(self, name, role):
        assert classify_component_name(name) is role

    def test_custom_rules(self):
        rules = ((frozenset({"card"}), ComponentRole.ICON),)
        assert classify_component_name("Card", rules) is ComponentRole.ICON
        assert classify_component_name("Button", rules) is ComponentRole.CONTAINER

    @pytest.mark.parametrize("name, expected", [
        ("  My Icon  ", "my_icon"),
        ("icn walk\t fast", "icn_walk_fast"),
        ("Logo", "logo"),
    ])
    def test_icon_identifier(self, name, expected):
        assert to_icon_identifier(name) == expected


# ── Text ──


class TestTextConversion:
    @pytest.mark.asyncio
    async def test_text_node(self, converter, sink):
        result = await converter.convert_node(node(text("t1", "Hello", fontSize=18, fontWeight=600,
                                                         textAlignHorizontal="CENTER")))
        assert result.kind is MarkupKind.TEXT
        assert result.text == "Hello"
        assert result.class_name == "text-lg font-semibold text-center"
        assert sink.warnings == []

    @pytest.mark.asyncio
    async def test_text_not_escaped(self, converter):
        result = await converter.convert_node(node(text("t1", "a < b & {c}", fontSize=14, fontWeight=400,
                                                         textAlignHorizontal="LEFT")))
        assert result.text == "a < b & {c}"

    @pytest.mark.asyncio
    async def test_mixed_and_string_values_are_normalized(self, converter, sink):
        data = text("t1", "Mixed", fontSize=MIXED, fontWeight="Bold", textAlignHorizontal=MIXED)
        result = await converter.convert_node(node(data))
        assert result.class_name == "text-base font-bold text-left"
        assert sink.fields() == ["fontSize", "textAlignHorizontal"]

    @pytest.mark.asyncio
    async def test_rest_style_and_fill_color(self, converter):
        data = text("t1", "Blue", style={"fontSize": 24, "fontWeight": 700, "textAlignHorizontal": "RIGHT"},
                    fills=[solid(0, 122 / 255, 1)])
        result = await converter.convert_node(node(data))
        assert result.class_name == "text-3xl font-bold text-right text-blue"

    @pytest.mark.asyncio
    async def test_theme_base_size_is_default(self, lookup, sink):
        converter = NodeConverter(lookup, Theme(base_font_size=20), sink=sink)
        result = await converter.convert_node(node(text("t1", "x")))
        assert result.class_name.startswith("text-xl ")


# ── Instances and components ──


class TestComponentConversion:
    @pytest.mark.asyncio
    async def test_button_instance(self, sink):
        lookup = StaticLookup({"b1": "Button/Rounded/Small"})
        converter = NodeConverter(lookup, sink=sink)
        data = instance("b1", [frame("f", [text("t", "Go")])])

        result = await converter.convert_node(node(data))

        assert result.kind is MarkupKind.PREFORMATTED
        assert result.literal_markup == '<RoundedButton size="small">Go</RoundedButton>'
        assert result.children == ()
        assert lookup.calls == ["b1"]

    @pytest.mark.asyncio
    async def test_button_instance_default_template(self, sink):
        converter = NodeConverter(StaticLookup({"b1": "Button/Rounded"}), sink=sink)
        result = await converter.convert_node(node(instance("b1", [text("t", "Go")])))
        assert result.kind is MarkupKind.INTERACTIVE
        assert "<Text className=\"text-white text-base font-medium\">Go</Text>" in result.literal_markup

    @pytest.mark.asyncio
    async def test_icon_instance(self, sink):
        converter = NodeConverter(StaticLookup({"i1": "  My Icon  "}), sink=sink, icon_asset_dir="@/icons/")
        result = await converter.convert_node(node(instance("i1")))
        assert result.kind is MarkupKind.IMAGE
        assert result.attributes == {"source": Expression("my_icon")}
        assert result.class_name == "w-[24px] h-[24px]"
        assert result.auxiliary_statement == "import my_icon from '@/icons/my_icon.svg';"

    @pytest.mark.asyncio
    async def test_plain_instance_becomes_view(self, converter):
        data = instance("v1", [text("t", "Hi", fontSize=14, fontWeight=400, textAlignHorizontal="LEFT")],
                        width=120.5, height=39.5, fills=[solid(0.98, 0.98, 0.973)], cornerRadius=8)
        result = await converter.convert_node(node(data))
        assert result.kind is MarkupKind.CONTAINER
        assert result.class_name == "w-[121px] h-[40px] bg-white rounded-lg"
        assert [c.text for c in result.children] == ["Hi"]

    @pytest.mark.asyncio
    async def test_unresolved_instance_becomes_view(self, converter):
        result = await converter.convert_node(node(instance("missing")))
        assert result.kind is MarkupKind.CONTAINER
        assert result.class_name == "w-[100px] h-[40px]"

    @pytest.mark.asyncio
    async def test_component_definition_uses_own_name(self, lookup, sink):
        converter = NodeConverter(lookup, sink=sink)
        data = {"id": "c1", "type": "COMPONENT", "name": "Button/Primary/Large",
                "children": [text("t", "Buy")]}
        result = await converter.convert_node(node(data))
        assert result.literal_markup == '<PrimaryButton size="large">Buy</PrimaryButton>'
        assert lookup.calls == []

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates(self, sink):
        converter = NodeConverter(FailingLookup(RuntimeError("plugin API gone")), sink=sink)
        with pytest.raises(RuntimeError, match="plugin API gone"):
            await converter.convert_node(node(instance("x")))


# ── Containers and fallback ──


class TestContainerConversion:
    @pytest.mark.asyncio
    async def test_auto_layout_frame(self, converter):
        data = frame(
            "f1", [text("a", "A"), text("b", "B")],
            width=343, height=56, layoutMode="HORIZONTAL",
            counterAxisAlignItems="CENTER", primaryAxisAlignItems="MIN",
            itemSpacing=12, paddingTop=16, paddingRight=16, paddingBottom=16, paddingLeft=16,
            fills=[solid(0.1176, 0.1176, 0.1176)], rectangleCornerRadii=[12, 12, 12, 12],
        )
        result = await converter.convert_node(node(data))
        assert result.class_name == (
            "w-[343px] h-[56px] bg-dark rounded-xl flex-row items-center justify-start gap-3 p-4"
        )
        assert [c.text for c in result.children] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_rest_bounding_box(self, converter):
        data = {"id": "g", "type": "GROUP", "name": "g",
                "absoluteBoundingBox": {"x": 5, "y": 5, "width": 48.2, "height": 20.5}}
        result = await converter.convert_node(node(data))
        assert result.class_name == "w-[48px] h-[21px]"
        assert result.children == ()

    @pytest.mark.asyncio
    async def test_unsupported_kind_raises(self, converter):
        with pytest.raises(UnsupportedNodeKind) as exc_info:
            await converter.convert_node(node({"id": "r", "type": "RECTANGLE", "name": "Bg"}))
        assert exc_info.value.node_type == "RECTANGLE"
        assert "RECTANGLE" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_lenient_fallback(self, lookup, sink):
        converter = NodeConverter(lookup, sink=sink, lenient=True)
        data = {"id": "r", "type": "VECTOR", "name": "Line", "width": 10.5, "height": MIXED,
                "children": [text("t", "ignored")]}
        result = await converter.convert_node(node(data))
        assert result.kind is MarkupKind.CONTAINER
        assert result.class_name == "w-[11px] h-[0px]"
        assert result.children == ()
        assert sink.fields() == ["height"]


class TestContainerCoercion:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("fields, expected, warned", [
        ({"cornerRadius": float("nan")}, "w-[40px] h-[40px]", ["cornerRadius"]),
        ({"cornerRadius": float("inf")}, "w-[40px] h-[40px]", ["cornerRadius"]),
        ({"cornerRadius": "8"}, "w-[40px] h-[40px] rounded-lg", []),
        ({"cornerRadius": MIXED}, "w-[40px] h-[40px]", ["cornerRadius"]),
        ({"cornerRadius": MIXED, "rectangleCornerRadii": ["4", 4, 4, 4]}, "w-[40px] h-[40px] rounded", []),
        ({"rectangleCornerRadii": [4, 4, 8, 8]}, "w-[40px] h-[40px]", []),
        ({"rectangleCornerRadii": [4, float("nan"), 4, 4]}, "w-[40px] h-[40px]", ["rectangleCornerRadii"]),
        ({"cornerRadius": 6, "rectangleCornerRadii": [1, 2, 3, 4]}, "w-[40px] h-[40px] rounded-md", []),
        ({}, "w-[40px] h-[40px]", []),
    ])
    async def test_corner_radius(self, converter, sink, fields, expected, warned):
        result = await converter.convert_node(node(frame("f", width=40, height=40, **fields)))
        assert result.class_name == expected
        assert sink.fields() == warned

    @pytest.mark.asyncio
    async def test_unusable_alignment_values(self, converter, sink):
        data = frame("f", width=40, height=40, layoutMode="HORIZONTAL",
                     counterAxisAlignItems=["CENTER"], primaryAxisAlignItems={"value": "MIN"})
        result = await converter.convert_node(node(data))
        assert result.class_name == "w-[40px] h-[40px] flex-row"
        assert sink.fields() == ["counterAxisAlignItems", "primaryAxisAlignItems"]

    @pytest.mark.asyncio
    async def test_absent_auto_layout_fields_do_not_warn(self, converter, sink):
        result = await converter.convert_node(node(frame("f", width=40, height=40, layoutMode="VERTICAL")))
        assert result.class_name == "w-[40px] h-[40px] flex-col"
        assert sink.warnings == []


# ── Children ──


class TestChildren:
    @pytest.mark.asyncio
    async def test_empty_children(self, converter):
        assert await converter.convert_children([]) == []
        assert await converter.convert_children(None) == []

    @pytest.mark.asyncio
    async def test_order_preserved_despite_completion_order(self, sink):
        ids = [f"i{n}" for n in range(5)]
        names = {node_id: f"Card {node_id}" for node_id in ids}
        # Earlier siblings finish later
        delays = {node_id: 0.05 - n * 0.01 for n, node_id in enumerate(ids)}
        lookup = DelayedLookup(names, delays)
        converter = NodeConverter(lookup, sink=sink)

        children = [
            node(instance(node_id, [text(f"t{node_id}", node_id)], width=10 + n))
            for n, node_id in enumerate(ids)
        ]
        result = await converter.convert_children(children)

        assert lookup.completed == list(reversed(ids))
        assert [c.children[0].text for c in result] == ids
        assert [c.class_name.split()[0] for c in result] == [f"w-[{10 + n}px]" for n in range(5)]

    @pytest.mark.asyncio
    async def test_child_failure_fails_parent_with_path(self, converter):
        data = frame("root", [
            text("ok", "fine"),
            frame("row", [text("ok2", "fine"), {"id": "s", "type": "STAR", "name": "Star"}], name="Row"),
        ], name="Screen")

        with pytest.raises(ChildConversionFailure) as exc_info:
            await converter.convert_node(node(data))

        failure = exc_info.value
        assert failure.path == ("Row", "Star")
        assert isinstance(failure.cause, UnsupportedNodeKind)
        assert "Row > Star" in str(failure)

    @pytest.mark.asyncio
    async def test_child_failure_cancels_running_siblings(self, sink):
        class OneFailsLookup:
            def __init__(self):
                self.cancelled = []

            async def get_main_component(self, node):
                if node.id == "bad":
                    raise RuntimeError("lookup failed")
                try:
                    await asyncio.sleep(10)
                except asyncio.CancelledError:
                    self.cancelled.append(node.id)
                    raise

        lookup = OneFailsLookup()
        converter = NodeConverter(lookup, sink=sink)
        children = [node(instance(node_id)) for node_id in ("slow1", "bad", "slow2")]

        with pytest.raises(ChildConversionFailure) as exc_info:
            await asyncio.wait_for(converter.convert_children(children), timeout=5)

        assert exc_info.value.path == ("instance bad",)
        assert sorted(lookup.cancelled) == ["slow1", "slow2"]

    @pytest.mark.asyncio
    async def test_children_not_shared(self, converter):
        shared = text("t", "same")
        data = frame("f", [frame("a", [shared]), frame("b", [shared])])
        result = await converter.convert_node(node(data))
        first, second = result.children
        assert first.children[0] == second.children[0]
        assert first.children[0] is not second.children[0]


def test_visual_node_children_default():
    assert VisualNode.from_figma({"type": "FRAME", "children": None}).children == []
