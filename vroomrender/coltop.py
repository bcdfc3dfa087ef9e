"""Coltop colouring of orientations for raster layers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from vroomrender.render import RenderRaster, RenderType

if TYPE_CHECKING:
    from vroomrender.serialize import Serializer

RGB = tuple[int, int, int]

_WHITE: RGB = (255, 255, 255)


def _hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """Convert HSV in [0, 1] to 8-bit RGB, truncating each channel."""
    if saturation == 0.0:
        red = green = blue = value
    else:
        scaled = hue * 6.0
        sector = math.floor(scaled)
        frac = scaled - sector
        p = value * (1.0 - saturation)
        if sector == 0:
            red, green, blue = value, value * (1.0 - saturation * (1.0 - frac)), p
        elif sector == 1:
            red, green, blue = value * (1.0 - saturation * frac), value, p
        elif sector == 2:
            red, green, blue = p, value, value * (1.0 - saturation * (1.0 - frac))
        elif sector == 3:
            red, green, blue = p, value * (1.0 - saturation * frac), value
        elif sector == 4:
            red, green, blue = value * (1.0 - saturation * (1.0 - frac)), p, value
        else:
            red, green, blue = value, p, value * (1.0 - saturation * frac)
    return int(red * 255.0), int(green * 255.0), int(blue * 255.0)


def _wrap_degrees(angle: float) -> float:
    while angle > 360.0:
        angle -= 360.0
    while angle < 0:
        angle += 360.0
    if math.isclose(angle, 360.0):
        angle = 0.0
    return angle


class RenderRasterColtop(RenderRaster):
    """Render mapping dip / dip direction to colours."""

    def __init__(self) -> None:
        super().__init__()
        self.render_type = RenderType.RASTER_C2D
        self.north_angle = 0
        self.color_inverted = False
        self.lower_hemisphere = True
        self.colour_stretch_min = 0
        self.colour_stretch_max = 90

    def colour_from_dip_dir(self, dip: float, dipdir: float) -> RGB:
        """Colour for a plane given its dip and dip direction in degrees."""
        direction = dipdir
        if not self.lower_hemisphere:
            direction += 180.0
        direction = _wrap_degrees(direction + self.north_angle)

        norm_dip = 0.0
        if self.colour_stretch_min <= dip <= self.colour_stretch_max:
            span = self.colour_stretch_max - self.colour_stretch_min
            norm_dip = (dip - self.colour_stretch_min) * 90.0 / span / 90.0

        norm_dir = direction / 360.0
        if self.color_inverted:
            norm_dir = 1.0 - norm_dir
        return _hsv_to_rgb(norm_dir, norm_dip, 1.0)

    def colour_from_circle_coord(self, x: int, y: int, radius: int) -> RGB:
        """Colour of the legend circle at pixel offset (x, y) from its centre."""
        if radius <= 0:
            raise ValueError(f"radius must be positive, got {radius}")
        x, y = int(x), int(y)
        squared = x * x + y * y
        stretch_radius = float(radius)

        pixel_by_degree = radius / 90.0
        min_stretch_radius = pixel_by_degree * self.colour_stretch_min
        if self.colour_stretch_min > 0 and squared < min_stretch_radius**2:
            return _WHITE

        if self.colour_stretch_max < 90:
            max_stretch_radius = pixel_by_degree * self.colour_stretch_max
            if squared >= max_stretch_radius**2:
                return _WHITE
            stretch_radius = max_stretch_radius

        angle = math.atan2(float(x), float(y)) / math.pi
        if not self.color_inverted:
            hue = 180.0 * (1.0 + angle) + self.north_angle
        else:
            hue = 180.0 * (1.0 - angle) - self.north_angle
        hue = _wrap_degrees(hue)

        distance = int(math.sqrt(float(squared)))
        if distance > stretch_radius:
            distance = int(stretch_radius)
        if distance > min_stretch_radius:
            distance = int(
                (distance - min_stretch_radius)
                * stretch_radius
                / (stretch_radius - min_stretch_radius)
            )
        else:
            distance = 0

        saturation = (
            2.0 * math.asin(math.sqrt(2.0) * 0.5 * distance / stretch_radius) / math.pi * 2.0
        )
        return _hsv_to_rgb(hue / 360.0, saturation, 1.0)

    def set_north_angle(self, value: int) -> None:
        """Set the direction of north in degrees."""
        self.north_angle = 360 - value

    def serialize(self, serializer: Serializer) -> bool:
        """Coltop renders are not serializable."""
        return False