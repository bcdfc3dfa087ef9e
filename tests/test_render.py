import pytest

from vroomrender.colour import Colour
from vroomrender.render import (
    BrushStyle,
    Render,
    RenderRaster,
    RenderType,
    RenderVector,
)
from vroomrender.serialize import Serializer


def test_render_types():
    assert Render().render_type == RenderType.UNKNOWN
    assert RenderVector().render_type == RenderType.VECTOR
    assert RenderRaster().render_type == RenderType.RASTER


def test_render_type_values():
    assert RenderVector().render_type.value == 0
    assert RenderRaster().render_type.value == 3
    assert Render().render_type.value == 5


@pytest.mark.parametrize(
    "transparency, expected",
    [(0, 255), (100, 0), (50, 128), (10, 230)],
)
def test_transparency_char(transparency, expected):
    render = Render()
    render.set_transparency(transparency)
    assert render.transparency == transparency
    assert render.transparency_char() == expected


@pytest.mark.parametrize("value", [-1, 101])
def test_transparency_out_of_range(value):
    render = Render()
    with pytest.raises(ValueError):
        render.set_transparency(value)
    assert render.transparency == 0


def test_selection_colour_default_is_red_with_alpha():
    render = Render()
    render.set_transparency(100)
    assert render.selection_colour() == Colour(255, 0, 0).with_alpha(0)


def test_set_selection_colour():
    render = Render()
    render.set_selection_colour(Colour(0, 0, 255))
    assert render.selection_colour() == Colour(0, 0, 255).with_alpha(255)


def test_default_selection_colour_applies_to_new_renders():
    original = Render().selection_colour()
    try:
        Render.set_default_selection_colour(Colour(0, 255, 0))
        assert RenderVector().selection_colour() == Colour(0, 255, 0).with_alpha(255)
    finally:
        Render.set_default_selection_colour(Colour(255, 0, 0))
    assert Render().selection_colour() == original


def test_vector_defaults():
    render = RenderVector()
    assert render.size == 1
    assert render.brush_style == BrushStyle.SOLID
    assert render.use_fast_and_ugly_dc is False
    assert render.pen_colour() == Colour(0, 0, 0).with_alpha(255)
    assert render.brush_colour() == Colour(0, 0, 0).with_alpha(255)


def test_vector_colours_take_transparency():
    render = RenderVector()
    render.set_pen_colour(Colour(10, 20, 30))
    render.set_brush_colour(Colour(40, 50, 60))
    render.set_transparency(100)
    assert render.pen_colour() == Colour(10, 20, 30).with_alpha(0)
    assert render.brush_colour() == Colour(40, 50, 60).with_alpha(0)


def test_base_serialize_round_trip():
    render = Render()
    render.set_transparency(40)
    out = Serializer()
    assert render.serialize(out) is True
    assert out.getvalue().startswith("40")

    loaded = Render()
    loaded.serialize(Serializer(out.getvalue()))
    assert loaded.transparency == 40


def test_vector_serialize_round_trip():
    render = RenderVector()
    render.set_pen_colour(Colour(10, 20, 30))
    render.set_brush_colour(Colour(200, 100, 50))
    render.size = 3
    render.brush_style = BrushStyle.TRANSPARENT
    out = Serializer()
    render.serialize(out)

    loaded = RenderVector()
    loaded.serialize(Serializer(out.getvalue()))
    assert loaded.size == 3
    assert loaded.brush_style == BrushStyle.TRANSPARENT
    assert loaded.transparency == 0
    assert loaded.pen_colour() == render.pen_colour()
    assert loaded.brush_colour() == render.brush_colour()