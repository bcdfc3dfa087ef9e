"""Overlays drawn on top of the rendered map, such as fixed text labels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .colour import BLACK, Colour

_NORMAL_POINT_SIZE = 10
_OVERLAY_SIZE_INCREASE = 5


@dataclass(frozen=True)
class Font:
    """A font description: face name, point size and weight."""

    face: str = ""
    point_size: int = _NORMAL_POINT_SIZE
    bold: bool = False


class Canvas(Protocol):
    """The drawing surface an overlay paints on."""

    def set_text_foreground(self, colour: Colour) -> None: ...

    def set_font(self, font: Font) -> None: ...

    def draw_text(self, text: str, position: tuple[int, int]) -> None: ...


class ViewerOverlay(ABC):
    """Something drawn over the map; it has a name and can be hidden."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.visible = True

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def draw_overlay(self, canvas: Canvas) -> bool:
        """Draw onto the canvas; return True when something was drawn."""


class ViewerOverlayText(ViewerOverlay):
    """A text label drawn at a fixed pixel position."""

    def __init__(self, name: str, text: str) -> None:
        super().__init__(name)
        self.text = text
        self.position: tuple[int, int] = (10, 10)
        self.font = Font(point_size=_NORMAL_POINT_SIZE + _OVERLAY_SIZE_INCREASE)
        self.text_colour: Colour = BLACK

    def draw_overlay(self, canvas: Canvas) -> bool:
        canvas.set_text_foreground(self.text_colour)
        canvas.set_font(self.font)
        canvas.draw_text(self.text, self.position)
        return True


def find_overlay_by_name(
    overlays: Iterable[ViewerOverlay | None], name: str
) -> ViewerOverlay | None:
    """Return the first overlay with this name, skipping empty slots; None if absent."""
    return next(
        (overlay for overlay in overlays if overlay is not None and overlay.name == name),
        None,
    )