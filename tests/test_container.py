from dataclasses import replace

import pytest

from ticketshape.model.container import (
    Color,
    ContentLayer,
    FillLayer,
    LineCap,
    StrokeLayer,
    StrokeStyle,
    TicketContainer,
    compose,
)
from ticketshape.model.geometry_primitives import Rect
from ticketshape.model.shapes import TicketDashedLine, TicketShape

RECT = Rect(0, 0, 200, 300)


def test_container_defaults():
    c = TicketContainer()
    assert c.fill_color == Color.WHITE
    assert c.dashed_line_color == Color.GRAY.with_opacity(0.3)
    assert c.cutout_y_position == 0.75
    assert c.cutout_radius == 8
    assert c.corner_radius == 16
    assert c.dashed_line_offset == 10
    assert c.dashed_line_stroke.line_width == 0.5
    assert c.dashed_line_stroke.dash == (4, 4)
    assert c.show_dashed_line
    assert c.content is None


def test_container_custom_values():
    c = TicketContainer(
        fill_color=Color.BLUE,
        dashed_line_color=Color.RED,
        cutout_y_position=0.6,
        cutout_radius=12,
        corner_radius=20,
        dashed_line_offset=15,
        show_dashed_line=False,
    )
    assert c.fill_color == Color.BLUE
    assert c.dashed_line_color == Color.RED
    assert c.outline_shape == TicketShape(cutout_y_position=0.6, cutout_radius=12, corner_radius=20)
    assert c.dashed_line == TicketDashedLine(y_position=0.6, offset=15)
    assert not c.show_dashed_line


def test_fill_update_keeps_other_fields():
    original = TicketContainer(show_dashed_line=False)
    updated = original.with_fill_color(Color.BLUE)

    assert updated.fill_color == Color.BLUE
    assert not updated.show_dashed_line
    assert updated == replace(original, fill_color=Color.BLUE)
    # The original is untouched
    assert original.fill_color == Color.WHITE


@pytest.mark.parametrize("method, value, field_name", [
    ("with_dashed_line_color", Color.RED, "dashed_line_color"),
    ("with_dashed_line_style", StrokeStyle(line_width=2, dash=(10, 5)), "dashed_line_stroke"),
    ("with_dashed_line", False, "show_dashed_line"),
    ("with_cutout_y_position", 0.5, "cutout_y_position"),
    ("with_cutout_radius", 4.0, "cutout_radius"),
    ("with_corner_radius", 0.0, "corner_radius"),
    ("with_dashed_line_offset", -3.0, "dashed_line_offset"),
    ("with_content", "boarding pass", "content"),
])
def test_each_update_changes_one_field(method, value, field_name):
    original = TicketContainer()
    updated = getattr(original, method)(value)
    assert getattr(updated, field_name) == value
    assert updated == replace(original, **{field_name: value})
    assert original == TicketContainer()


def test_disjoint_updates_compose_in_any_order():
    base = TicketContainer()
    a = base.with_fill_color(Color.ORANGE).with_corner_radius(4)
    b = base.with_corner_radius(4).with_fill_color(Color.ORANGE)
    assert a == b


def test_compose_default_layers():
    layers = compose(TicketContainer(), RECT)
    assert [type(layer) for layer in layers] == [FillLayer, StrokeLayer]

    fill, stroke = layers
    assert fill.color == Color.WHITE
    assert fill.path == TicketShape().path(RECT)
    assert stroke.path == TicketDashedLine().path(RECT)
    assert stroke.path.elements[0].to.y == pytest.approx(215)
    assert stroke.stroke.dash == (4, 4)


def test_compose_without_dashed_line():
    layers = TicketContainer().with_dashed_line(False).layers(RECT)
    assert [type(layer) for layer in layers] == [FillLayer]


def test_compose_content_on_top():
    layers = TicketContainer(content="Concert").layers(RECT)
    assert isinstance(layers[-1], ContentLayer)
    assert layers[-1].content == "Concert"
    assert layers[-1].rect == RECT


def test_line_follows_cutout_position():
    layers = TicketContainer(cutout_y_position=0.5, dashed_line_offset=0).layers(RECT)
    assert layers[1].path.elements[0].to.y == pytest.approx(150)


def test_color_from_hex():
    assert Color.from_hex("#ff0000") == Color.RED
    assert Color.from_hex("00ff00").to_hex() == "#00ff00"
    translucent = Color.from_hex("#0000ff80")
    assert translucent.alpha == pytest.approx(128 / 255)
    assert translucent.to_hex(include_alpha=True) == "#0000ff80"


@pytest.mark.parametrize("value", ["", "#fff", "#12345", "#gggggg", "red", "#-f0000", "#+f0000", "#f_0000", "#ff 000"])
def test_color_from_hex_rejects_malformed(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_color_conversions():
    assert Color.GRAY.to_rgba255() == (128, 128, 128, 255)
    assert Color.from_rgb255(255, 128, 0) == Color(1.0, 128 / 255, 0.0)
    assert Color.WHITE.with_opacity(0.5).alpha == 0.5
    assert Color.WHITE.alpha == 1.0


def test_stroke_style():
    assert not StrokeStyle().is_dashed
    style = StrokeStyle(line_width=1, dash=(6, 3))
    assert style.is_dashed
    assert style.line_cap == LineCap.BUTT


def test_stroke_style_with_list_dash_is_hashable():
    style = StrokeStyle(line_width=1, dash=[4, 4])
    assert style.dash == (4, 4)
    assert hash(style) == hash(StrokeStyle(line_width=1, dash=(4, 4)))
    assert hash(TicketContainer(dashed_line_stroke=style)) == hash(TicketContainer(dashed_line_stroke=style))


def test_layers_compare_by_value_but_are_not_hashable():
    first = compose(TicketContainer(), RECT)
    second = compose(TicketContainer(), RECT)
    assert first == second
    for layer in first:
        with pytest.raises(TypeError):
            hash(layer)
