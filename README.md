# vroomrender

Building blocks for describing how GIS layers are drawn in a map viewer:
colours, real-world extents, rubber-band selection, render styles, a small
text serializer that saves and restores those styles, and text overlays.
The package is pure Python. It has no dependencies.

## Installation

```
pip install .
```

## Modules

### `vroomrender.colour`

`Colour(red, green, blue, alpha=255)` is a frozen RGBA colour with 8-bit
channels. It raises `ValueError` when a channel is outside 0..255.

- `Colour.from_string(text)` accepts any of these forms:
  - `#RRGGBB`
  - `rgb(r, g, b)`
  - `rgba(r, g, b, a)`, where `a` is between 0 and 1
  - the names `black`, `white`, `red`, `green`, `blue`, `cyan`, `magenta`,
    `yellow`, `grey` and `light grey`

  Any other text raises `ValueError`.
- `to_css()` gives `rgb(...)` for an opaque colour. Otherwise it gives
  `rgba(...)` with the alpha written to three decimals.
- `with_alpha(alpha)` returns a copy with another alpha.
- The module defines the constants `BLACK`, `WHITE`, `RED` and `LIGHT_GREY`.

### `vroomrender.realrect`

`RealRect(x, y, width, height)` is a rectangle in map coordinates. Width and
height may be negative. Map extents usually have a negative height, so that
`top` is the larger y value.

- `from_corners(left, top, right, bottom)` builds a rectangle from its corners.
- `left`, `right`, `top` and `bottom` are properties.
- `intersect(other)` and `union(other)` return an empty `RealRect()` when the
  result is not a valid rectangle. They raise `ValueError` when `self` has a
  negative height and `other` does not.
- `contains(x, y)` includes the edges and works whatever the sign of the height.
- `is_ok()` is true when the width is not zero.

### `vroomrender.rubberband`

`RubberBand` records the first and last points of a mouse drag, as
`(x, y)` integer pairs.

- `set_point_first(point)` and `set_point_last(point)` record the two points.
- `get_rect()` returns a `Rect`. A `Rect` is an integer rectangle whose right
  and bottom edges are inclusive. `get_rect()` flips the rectangle so that its
  width and height are not negative.
- `is_positive()` tells whether the drag went right and down.

`get_rect()` and `is_positive()` raise `RubberBandError` when a point is
missing. `is_valid()` does not raise. It returns `False` when a point is
missing, and also when the two points share an x or a y value.

### `vroomrender.serialize`

`Serializer` is a text stream of fields, each one followed by `|`.

`Serializer()` writes. `write(value)` accepts a `bool`, an `int`, a `str` or a
`Colour`, and returns the serializer so that calls can be chained. A `bool` is
written as `1` or `0`, and a `Colour` as its CSS form. `getvalue()` returns the
text.

`Serializer(text)` reads the fields back in order:

- `read_str()` returns the field as text.
- `read_int()` returns the field as an integer.
- `read_bool()` is true when the integer is greater than zero.
- `read_colour()` returns `None` when the field is not a colour.

`SerializationError` is raised in these cases:

- writing to a reader
- reading from a writer
- reading an empty stream
- reading past the last field
- reading an integer field that does not parse

`is_storing()` tells which direction the serializer works in.

### `vroomrender.render`

- `RenderType` and `BrushStyle` are integer enums.
- `Render` holds:
  - a transparency percentage. `set_transparency` and the `transparency`
    property reject values outside 0..100.
  - a selection colour. `selection_colour()` returns it with the alpha from
    `transparency_char()`, which is `255 - transparency * 255 // 100`.
  - `Render.set_default_selection_colour(colour)`, which sets the colour given
    to renders created afterwards. The initial default is red.
- `RenderVector` adds a pen colour, a brush colour, `size`, `brush_style` and
  `use_fast_and_ugly_dc`. `pen_colour()` and `brush_colour()` return the
  colour with the render's alpha applied.
- `RenderRaster` is the raster counterpart.
- `serialize(serializer)` stores into a `Serializer` or loads from it,
  depending on the direction of the serializer.

### `vroomrender.coltop`

`RenderRasterColtop` is a raster render that maps orientations to colours and
returns them as `(r, g, b)` tuples.

- `colour_from_dip_dir(dip, dipdir)` colours a plane from its dip and dip
  direction.
- `colour_from_circle_coord(x, y, radius)` gives the colour of the legend
  circle at a pixel offset from its centre. It raises `ValueError` when the
  radius is not positive.
- It honours these attributes:
  - `north_angle`, which is set with `set_north_angle`
  - `color_inverted`
  - `lower_hemisphere`
  - `colour_stretch_min` and `colour_stretch_max`
- Its `serialize` does nothing and returns `False`.

### `vroomrender.c2p`

Both renders in this module keep one `DipColour` per family id. Family 0 is
the default colour, and it is set by the constructor.

`RenderVectorC2PDips` is the render for dip symbols.

- `add_dip_colour(colour, family_id, visible)` raises `FamilyError` when the id
  already exists.
- `set_dip_colour(colour, family_id, visible)` raises `FamilyError` when the id
  does not exist.
- `dip_colour(family_id)` returns the family's colour with the render's alpha
  applied. For an unknown id it returns the default colour.
- `is_family_visible(family_id)` returns `True` for an unknown id.
- `outline_colour(colour)` returns white for dark colours and black otherwise.
- `colour_count()` and `clear_dip_colours()` are also available.

`RenderVectorC2PPoly` is the render for polygons.

- `add_poly_colour(colour, family_id)` raises `FamilyError` when the id already
  exists.
- `set_poly_colour(colour, family_id)` returns `False` for an unknown id.
- `poly_colour(family_id)` behaves like `dip_colour`.
- `clear_poly_colours()` is also available.

### `vroomrender.overlay`

- `ViewerOverlay` is an abstract named overlay with a `visible` flag.
- `ViewerOverlayText` draws `text` at `position`, which defaults to
  `(10, 10)`, using `font` and `text_colour`. It draws onto any object that has
  the methods of the `Canvas` protocol: `set_text_foreground`, `set_font` and
  `draw_text`.
- `Font` describes a face name, a point size and a bold flag.
- `find_overlay_by_name(overlays, name)` returns the first overlay with that
  name, skipping `None` entries. It returns `None` when no overlay matches.

## Example

```python
from vroomrender.colour import Colour
from vroomrender.render import RenderVector
from vroomrender.serialize import Serializer

style = RenderVector()
style.set_transparency(50)
style.set_pen_colour(Colour.from_string("rgb(255, 0, 0)"))

out = Serializer()
style.serialize(out)
text = out.getvalue()

restored = RenderVector()
restored.serialize(Serializer(text))
assert restored.pen_colour().red == 255
```

## What it does not do

The package describes styles and geometry. It does not do any of these
things itself:

- rasterise or draw layers
- read GIS files
- manage a list of layers
- provide a viewer window or a table of contents

To put the styles on screen, pass them to your own drawing code. For text
overlays, that drawing code must supply a `Canvas`.

## Running the tests

```
pip install .[test]
pytest
```