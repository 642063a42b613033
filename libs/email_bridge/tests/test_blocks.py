"""Tests blocs — valeurs par défaut, alias camelCase, union discriminée."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import TypeAdapter, ValidationError

from email_bridge.blocks import (
    BlockUnion, BLOCK_REGISTRY, children_of,
    EmailLayoutBlock, EmailLayoutData,
    ContainerBlock, ContainerData, ContainerProps,
    ColumnsContainerBlock, ColumnsContainerData, ColumnsContainerProps, Column,
    TextBlock, ImageBlock, ImageData, ImageProps, BlockStyle, Padding,
)

_adapter = TypeAdapter(BlockUnion)


# ── Valeurs par défaut ────────────────────────────────────────────────────────

def test_email_layout_defaults():
    b = EmailLayoutBlock()
    assert b.type == "EmailLayout"
    assert b.data.backdrop_color == "#F5F5F5"
    assert b.data.canvas_color == "#FFFFFF"
    assert b.data.text_color == "#262626"
    assert b.data.font_family == "MODERN_SANS"
    assert b.data.children_ids == []


def test_style_unset_is_none_not_zero():
    s = BlockStyle()
    assert s.padding is None
    assert s.font_size is None


# ── Alias camelCase ───────────────────────────────────────────────────────────

def test_image_dumps_camel_case():
    b = ImageBlock(data=ImageData(props=ImageProps(url="a.png", alt="A", link_href="https://x.com")))
    wire = b.model_dump(by_alias=True, exclude_none=True)
    assert wire["type"] == "Image"
    assert wire["data"]["props"]["linkHref"] == "https://x.com"


def test_snake_and_camel_accepted_on_input():
    a = _adapter.validate_python({"type": "Container", "data": {"props": {"childrenIds": ["x"]}}})
    b = _adapter.validate_python({"type": "Container", "data": {"props": {"children_ids": ["x"]}}})
    assert a == b


def test_style_keeps_unknown_keys():
    b = _adapter.validate_python({
        "type": "Text",
        "data": {"style": {"color": "red", "letterSpacing": "1px"}, "props": {"text": "x"}},
    })
    wire = b.model_dump(by_alias=True, exclude_none=True)
    assert wire["data"]["style"] == {"color": "red", "letterSpacing": "1px"}


# ── Union discriminée ─────────────────────────────────────────────────────────

def test_union_dispatch_on_type():
    b = _adapter.validate_python({"type": "Text", "data": {"props": {"text": "Olá"}}})
    assert isinstance(b, TextBlock)
    assert b.data.props.text == "Olá"


def test_union_rejects_unknown_type():
    with pytest.raises(ValidationError):
        _adapter.validate_python({"type": "Carousel", "data": {}})


def test_heading_level_is_constrained():
    with pytest.raises(ValidationError):
        _adapter.validate_python({"type": "Heading", "data": {"props": {"text": "x", "level": "h4"}}})


def test_registry_covers_union():
    assert set(BLOCK_REGISTRY) == {
        "EmailLayout", "Container", "ColumnsContainer", "Text", "Heading",
        "Image", "Avatar", "Button", "Divider", "Spacer", "Html",
    }


# ── children_of ───────────────────────────────────────────────────────────────

def test_children_of_preserves_order():
    layout = EmailLayoutBlock(data=EmailLayoutData(children_ids=["c", "a", "b"]))
    box = ContainerBlock(data=ContainerData(props=ContainerProps(children_ids=["z", "y"])))
    cols = ColumnsContainerBlock(data=ColumnsContainerData(props=ColumnsContainerProps(
        columns=[Column(children_ids=["l1", "l2"]), Column(children_ids=["r1"])],
    )))
    assert children_of(layout) == ["c", "a", "b"]
    assert children_of(box) == ["z", "y"]
    assert children_of(cols) == ["l1", "l2", "r1"]
    assert children_of(TextBlock()) == []


def test_padding_record():
    p = Padding(top=1, bottom=2, left=3, right=4)
    assert p.model_dump() == {"top": 1, "bottom": 2, "left": 3, "right": 4}
