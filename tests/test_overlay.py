import pytest

from vroomrender.colour import BLACK, RED, Colour
from vroomrender.overlay import (
    Font,
    ViewerOverlay,
    ViewerOverlayText,
    find_overlay_by_name,
)


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def set_text_foreground(self, colour):
        self.calls.append(("foreground", colour))

    def set_font(self, font):
        self.calls.append(("font", font))

    def draw_text(self, text, position):
        self.calls.append(("text", text, position))


def test_base_overlay_is_abstract():
    with pytest.raises(TypeError):
        ViewerOverlay("base")


def test_text_overlay_defaults():
    overlay = ViewerOverlayText("label", "Hello")
    assert overlay.name == "label"
    assert overlay.text == "Hello"
    assert overlay.visible is True
    assert overlay.position == (10, 10)
    assert overlay.text_colour == BLACK


def test_text_overlay_font_is_larger_than_normal():
    overlay = ViewerOverlayText("label", "Hello")
    assert overlay.font.point_size > Font().point_size


def test_draw_overlay_uses_settings_in_order():
    overlay = ViewerOverlayText("label", "Sion")
    overlay.text_colour = RED
    overlay.position = (3, 4)
    big = Font(face="Sans", point_size=20, bold=True)
    overlay.font = big
    canvas = RecordingCanvas()
    assert overlay.draw_overlay(canvas) is True
    assert canvas.calls == [
        ("foreground", RED),
        ("font", big),
        ("text", "Sion", (3, 4)),
    ]


def test_visibility_can_be_switched():
    overlay = ViewerOverlayText("label", "x")
    overlay.visible = False
    assert overlay.visible is False


def test_find_overlay_by_name_returns_first_match():
    first = ViewerOverlayText("a", "one")
    second = ViewerOverlayText("b", "two")
    duplicate = ViewerOverlayText("b", "three")
    found = find_overlay_by_name([first, second, duplicate], "b")
    assert found is second


def test_find_overlay_by_name_skips_empty_slots():
    target = ViewerOverlayText("target", "t")
    assert find_overlay_by_name([None, target, None], "target") is target


def test_find_overlay_by_name_missing():
    overlays = [ViewerOverlayText("a", "one"), None]
    assert find_overlay_by_name(overlays, "zzz") is None
    assert find_overlay_by_name([], "a") is None


def test_text_colour_can_be_any_colour():
    overlay = ViewerOverlayText("label", "x")
    colour = Colour(1, 2, 3, 128)
    overlay.text_colour = colour
    canvas = RecordingCanvas()
    overlay.draw_overlay(canvas)
    assert canvas.calls[0] == ("foreground", colour)