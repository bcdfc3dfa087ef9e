"""Render settings shared by vector and raster layers."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, TypeVar

from vroomrender.colour import Colour

if TYPE_CHECKING:
    from vroomrender.serialize import Serializer

_T = TypeVar("_T")


class RenderType(IntEnum):
    """Kind of render a layer can use."""

    VECTOR = 0
    VECTOR_C2P_DIPS = 1
    VECTOR_C2P_POLY = 2
    RASTER = 3
    RASTER_C2D = 4
    UNKNOWN = 5


class BrushStyle(IntEnum):
    """Fill styles for polygon brushes."""

    INVALID = -1
    SOLID = 100
    TRANSPARENT = 106
    STIPPLE_MASK_OPAQUE = 107
    STIPPLE_MASK = 108
    STIPPLE = 110
    BDIAGONAL_HATCH = 111
    CROSSDIAG_HATCH = 112
    FDIAGONAL_HATCH = 113
    CROSS_HATCH = 114
    HORIZONTAL_HATCH = 115
    VERTICAL_HATCH = 116


def _keep(value: _T | None, current: _T) -> _T:
    """Return ``value`` unless nothing could be read."""
    return current if value is None else value


class Render:
    """Base render: transparency and selection colour."""

    _default_selection_colour: Colour = Colour(255, 0, 0)

    def __init__(self) -> None:
        self.render_type = RenderType.UNKNOWN
        self._transparency = 0
        self._selection_colour = type(self)._default_selection_colour

    @property
    def transparency(self) -> int:
        """Transparency in percent, 0 is opaque and 100 fully transparent."""
        return self._transparency

    @transparency.setter
    def transparency(self, value: int) -> None:
        if not 0 <= value <= 100:
            raise ValueError(f"transparency must be between 0 and 100, got {value}")
        self._transparency = value

    def set_transparency(self, value: int) -> None:
        """Set the transparency percentage (0..100)."""
        self.transparency = value

    def transparency_char(self) -> int:
        """Alpha channel value matching the transparency."""
        return 255 - self._transparency * 255 // 100

    def selection_colour(self) -> Colour:
        """Selection colour with the render's alpha applied."""
        return self._selection_colour.with_alpha(self.transparency_char())

    def set_selection_colour(self, colour: Colour) -> None:
        self._selection_colour = colour

    @classmethod
    def set_default_selection_colour(cls, colour: Colour) -> None:
        """Change the selection colour given to renders created afterwards."""
        Render._default_selection_colour = colour

    def serialize(self, serializer: Serializer) -> bool:
        """Store into or load from ``serializer`` depending on its direction."""
        if serializer.is_storing():
            serializer.write(self._transparency)
        else:
            self._transparency = _keep(serializer.read_int(), self._transparency)
        return True


class RenderVector(Render):
    """Render for vector layers: pen, brush, size."""

    def __init__(self) -> None:
        super().__init__()
        self.render_type = RenderType.VECTOR
        self.size = 1
        self._pen_colour = Colour(0, 0, 0)
        self._brush_colour = Colour(0, 0, 0)
        self.brush_style = BrushStyle.SOLID
        self.use_fast_and_ugly_dc = False

    def pen_colour(self) -> Colour:
        """Pen colour with the render's alpha applied."""
        self._pen_colour = self._pen_colour.with_alpha(self.transparency_char())
        return self._pen_colour

    def set_pen_colour(self, colour: Colour) -> None:
        self._pen_colour = colour

    def brush_colour(self) -> Colour:
        """Brush colour with the render's alpha applied."""
        self._brush_colour = self._brush_colour.with_alpha(self.transparency_char())
        return self._brush_colour

    def set_brush_colour(self, colour: Colour) -> None:
        self._brush_colour = colour

    def serialize(self, serializer: Serializer) -> bool:
        super().serialize(serializer)
        if serializer.is_storing():
            serializer.write(self.pen_colour())
            serializer.write(self.brush_colour())
            serializer.write(int(self.size))
            serializer.write(int(self.brush_style))
        else:
            self._pen_colour = _keep(serializer.read_colour(), self._pen_colour)
            self._brush_colour = _keep(serializer.read_colour(), self._brush_colour)
            self.size = _keep(serializer.read_int(), self.size)
            style = serializer.read_int()
            if style is not None:
                self.brush_style = BrushStyle(style)
        return True


class RenderRaster(Render):
    """Render for raster layers."""

    def __init__(self) -> None:
        super().__init__()
        self.render_type = RenderType.RASTER