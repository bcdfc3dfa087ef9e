"""RGBA colours with CSS-style text conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_NAMED_COLOURS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "yellow": (255, 255, 0),
    "grey": (128, 128, 128),
    "light grey": (192, 192, 192),
}

_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")
_RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)
_RGBA_RE = re.compile(
    r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*([0-9]*\.?[0-9]+)\s*\)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Colour:
    """An 8-bit per channel colour with an alpha channel (255 is opaque)."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component {value} outside 0..255")

    @classmethod
    def from_string(cls, text: str) -> Colour:
        """Parse a colour name, '#RRGGBB', 'rgb(r, g, b)' or 'rgba(r, g, b, a)'."""
        stripped = text.strip()
        if match := _HEX_RE.fullmatch(stripped):
            return cls(*(int(part, 16) for part in match.groups()))
        if match := _RGB_RE.fullmatch(stripped):
            return cls(*(int(part) for part in match.groups()))
        if match := _RGBA_RE.fullmatch(stripped):
            red, green, blue, alpha = match.groups()
            alpha_value = float(alpha)
            if not 0.0 <= alpha_value <= 1.0:
                raise ValueError(f"alpha {alpha} outside 0..1 in {text!r}")
            return cls(int(red), int(green), int(blue), round(alpha_value * 255))
        named = _NAMED_COLOURS.get(stripped.lower())
        if named is not None:
            return cls(*named)
        raise ValueError(f"not a colour: {text!r}")

    def to_css(self) -> str:
        """Return the CSS notation; 'rgba' is used only when not fully opaque."""
        if self.alpha == 255:
            return f"rgb({self.red}, {self.green}, {self.blue})"
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha / 255:.3f})"

    def with_alpha(self, alpha: int) -> Colour:
        """Return the same colour with another alpha value."""
        return replace(self, alpha=alpha)


BLACK = Colour(0, 0, 0)
WHITE = Colour(255, 255, 255)
RED = Colour(255, 0, 0)
LIGHT_GREY = Colour(192, 192, 192)