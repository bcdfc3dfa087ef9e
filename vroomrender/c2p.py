"""Renders for dip and polygon layers, coloured by family."""

from __future__ import annotations

from dataclasses import dataclass

from .colour import BLACK, WHITE, Colour
from .render import BrushStyle, Render, RenderType, RenderVector
from .serialize import Serializer

_OUTLINE_LIMIT = 70


class FamilyError(LookupError):
    """Raised when a family id is added twice or is unknown."""


@dataclass
class DipColour:
    """Colour and visibility attached to one family id."""

    colour: Colour
    family_id: int
    visible: bool = True


def _find(colours: list[DipColour], family_id: int) -> DipColour | None:
    return next((item for item in colours if item.family_id == family_id), None)


class RenderVectorC2PDips(RenderVector):
    """Render for dip symbols, one colour per family; family 0 is the default."""

    def __init__(self, default_colour: Colour = BLACK, size: int = 1, dip_width: int = 10) -> None:
        super().__init__()
        self.render_type = RenderType.VECTOR_C2P_DIPS
        self.dip_width = dip_width
        self.size = size
        self.use_default_colour = True
        self.outline = True
        self._dip_colours: list[DipColour] = []
        self._memory_family_id: int | None = None
        self._memory_colour: Colour | None = None
        self.add_dip_colour(default_colour, 0, True)

    def outline_colour(self, dip_colour: Colour) -> Colour:
        """White outline for dark colours, black for everything else."""
        if (
            dip_colour.green < _OUTLINE_LIMIT
            and dip_colour.red < _OUTLINE_LIMIT
            and dip_colour.blue < _OUTLINE_LIMIT
        ):
            return WHITE
        return BLACK

    def clear_dip_colours(self) -> None:
        self._dip_colours.clear()
        self._memory_family_id = None
        self._memory_colour = None

    def add_dip_colour(self, colour: Colour, family_id: int, visible: bool) -> None:
        """Register a colour for a new family id."""
        if _find(self._dip_colours, family_id) is not None:
            raise FamilyError(
                f"adding colour {colour.to_css()} with id {family_id} isn't allowed: id already used"
            )
        self._dip_colours.append(DipColour(colour, family_id, visible))

    def set_dip_colour(self, colour: Colour, family_id: int, visible: bool) -> None:
        """Change the colour and visibility of an existing family."""
        entry = _find(self._dip_colours, family_id)
        if entry is None:
            raise FamilyError(
                f"setting colour {colour.to_css()} with id {family_id} isn't allowed: id doesn't exist"
            )
        entry.colour = colour
        entry.visible = visible

    def dip_colour(self, family_id: int) -> Colour:
        """Colour of a family with the render's transparency; the default colour if unknown."""
        if family_id < 0:
            raise ValueError(f"family id must not be negative: {family_id}")
        if not self._dip_colours:
            raise FamilyError("no dip colour defined")
        if family_id == self._memory_family_id and self._memory_colour is not None:
            return self._memory_colour
        self._memory_family_id = None
        self._memory_colour = None
        entry = _find(self._dip_colours, family_id)
        if entry is None:
            return self._dip_colours[0].colour
        self._memory_family_id = family_id
        self._memory_colour = entry.colour.with_alpha(self.transparency_char())
        return self._memory_colour

    def is_family_visible(self, family_id: int) -> bool:
        """Visibility of a family; unknown families are visible."""
        if family_id < 0:
            raise ValueError(f"family id must not be negative: {family_id}")
        entry = _find(self._dip_colours, family_id)
        return True if entry is None else entry.visible

    def colour_count(self) -> int:
        return len(self._dip_colours)

    def serialize(self, serializer: Serializer) -> bool:
        Render.serialize(self, serializer)
        if serializer.is_storing():
            serializer.write(int(self.size))
            serializer.write(int(self.dip_width))
            serializer.write(bool(self.use_default_colour))
            serializer.write(self._dip_colours[0].colour)
            serializer.write(bool(self.outline))
        else:
            self.size = serializer.read_int()
            self.dip_width = serializer.read_int()
            self.use_default_colour = serializer.read_bool()
            colour = serializer.read_colour()
            if colour is not None:
                self._dip_colours[0].colour = colour
            self.outline = serializer.read_bool()
        return True


class RenderVectorC2PPoly(RenderVector):
    """Render for polygons, one brush colour per family; family 0 is the default."""

    def __init__(self, default_colour: Colour = BLACK) -> None:
        super().__init__()
        self.render_type = RenderType.VECTOR_C2P_POLY
        self.use_default_brush = True
        self.set_brush_colour(default_colour)
        self._poly_colours: list[DipColour] = []
        self._memory_family_id: int | None = None
        self._memory_colour: Colour | None = None
        self.add_poly_colour(default_colour, 0)

    def clear_poly_colours(self) -> None:
        self._poly_colours.clear()

    def add_poly_colour(self, colour: Colour, family_id: int) -> None:
        """Register a colour for a new family id."""
        if _find(self._poly_colours, family_id) is not None:
            raise FamilyError(
                f"adding colour {colour.to_css()} with id {family_id} isn't allowed: id already used"
            )
        self._poly_colours.append(DipColour(colour, family_id, True))

    def set_poly_colour(self, colour: Colour, family_id: int) -> bool:
        """Change the colour of a family; False when the family is unknown."""
        entry = _find(self._poly_colours, family_id)
        if entry is None:
            return False
        entry.colour = colour
        return True

    def poly_colour(self, family_id: int) -> Colour:
        """Colour of a family with the render's transparency; the default colour if unknown."""
        if family_id < 0:
            raise ValueError(f"family id must not be negative: {family_id}")
        if not self._poly_colours:
            raise FamilyError("no polygon colour defined")
        if family_id == self._memory_family_id and self._memory_colour is not None:
            return self._memory_colour
        self._memory_family_id = None
        self._memory_colour = None
        entry = _find(self._poly_colours, family_id)
        if entry is None:
            return self._poly_colours[0].colour
        self._memory_family_id = family_id
        self._memory_colour = entry.colour.with_alpha(self.transparency_char())
        return self._memory_colour

    def serialize(self, serializer: Serializer) -> bool:
        Render.serialize(self, serializer)
        if serializer.is_storing():
            serializer.write(int(self.brush_style))
            serializer.write(self.brush_colour())
            serializer.write(self.pen_colour())
            serializer.write(bool(self.use_default_brush))
            serializer.write(int(self.transparency))
        else:
            brush_style = BrushStyle(serializer.read_int())
            brush_colour = serializer.read_colour()
            pen_colour = serializer.read_colour()
            self.use_default_brush = serializer.read_bool()
            self.transparency = serializer.read_int()
            self.brush_style = brush_style
            if brush_colour is not None:
                self.set_brush_colour(brush_colour)
            if pen_colour is not None:
                self.set_pen_colour(pen_colour)
        return True