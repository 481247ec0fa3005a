# glyph

These are building blocks for GPU text rendering. They do not depend on any
particular graphics API. All drawing goes through a `glyph.backend.DrawBackend`,
which you subclass for your engine. The package has no third-party
dependencies.

## What is in the package

- `glyph.affine`
  - `AffineTransform` is a frozen 2D affine matrix.
  - Its `apply(x, y)` method maps a point through the matrix.
  - `a.multiply(b)` applies `b` first and then `a`.
  - Constructors: `affine_identity()`, `affine_rotation(angle)`,
    `affine_translation(dx, dy)` and `affine_skew(skew_x, skew_y)`.
- `glyph.color`
  - `Color` is a frozen RGBA colour. Each channel must be in 0..255, otherwise
    it raises `ValueError`.
  - `lerp_color(a, b, t)` interpolates between two colours. It clamps `t` to
    [0, 1].
- `glyph.enums` holds the `IntEnum`s `Alignment`, `WrapMode`,
  `TextOrientation`, `GradientDirection`, `Typeface`, `CompositionPhase`,
  `ClauseStyle` and `OperationType`.
- `glyph.backend`
  - `Rect` is a frozen rectangle.
  - `DrawBackend` is an abstract class with these methods: `new_texture`,
    `update_texture`, `delete_texture`, `draw_textured_quad`,
    `draw_filled_rect`, `draw_textured_quad_transformed` and `dpi_scale`.
- `glyph.cache`
  - `MetricsCache` is an LRU cache of `FontMetricsEntry` values keyed by
    integer. Its default capacity is 256.
  - `get` returns `None` on a miss.
  - `put` evicts the least recently used entry when the cache is full.
- `glyph.config` holds the configuration dataclasses: `TextConfig`,
  `TextStyle`, `BlockStyle`, `FontFeature`, `FontAxis`, `FontFeatures`,
  `InlineObject`, `StyleRun`, `RichText` and `TextMetrics`.
  - `default_block_style()` returns a left-aligned, word-wrapped block with
    width `-1`.
  - `RichText.text` joins the text of all runs.
- `glyph.batch`
  - `Batch` collects `Vertex` values and `DrawCommand`s for one frame.
  - `append_quad` stores a quad as two triangles (six vertices) and adds one
    command for its texture.
  - `reset` clears the batch.
- `glyph.bitmap`
  - `Bitmap` holds RGBA glyph pixels.
  - `check_allocation_size(width, height, channels)` returns the byte size.
    It raises `AllocationError` if the size is not positive, overflows 32 bits
    or exceeds 1 GB.
  - `cubic_hermite` evaluates a Catmull-Rom spline.
  - `get_pixel_rgba_premul` reads a pixel with premultiplied alpha. Coordinates
    outside the bitmap are clamped to its edges.
  - `scale_bitmap_bicubic` scales an RGBA buffer with Catmull-Rom
    interpolation. It returns `None` when either size is empty.
- `glyph.atlas`
  - `GlyphAtlas(backend, width, height)` packs bitmaps into `AtlasPage`
    shelves. It uses the shelf with the best height fit, and opens a new shelf
    when the best fit would waste more than half the glyph's height.
  - When the current page is full, the atlas first doubles the page height, up
    to `max_glyph_dimension` (default 4096). Failing that, it adds a page of
    height 1024, up to `max_pages` (default 4). Failing that, it resets the
    oldest page.
  - `insert_bitmap` returns an `InsertResult`. It holds the `CachedGlyph` and
    tells you whether a page was reset, and which one.
  - `swap_and_upload` swaps the staging buffers of changed pages and uploads
    them to the backend.
  - When a page grows, its old texture is kept until `cleanup(frame)` deletes
    it.
  - `free` releases every texture.
  - Oversized glyphs raise `AtlasError`.
- `glyph.composition`
  - `CompositionState` tracks IME preedit text, the cursor and clauses. All
    positions are UTF-8 byte offsets.
  - `composition_bounds` and `get_clause_rects` query any layout object that
    has a `get_selection_rects(start, end)` method.
  - `DeadKeyState` combines a pending dead key with a base character.
  - The helper functions are `is_dead_key` and `combine_dead_key`.
- `glyph.draw_composition`
  - `draw_composition(backend, layout, x, y, state, cursor_color)` draws clause
    underlines: 2 px thick for the selected clause and 1 px for the others.
  - It also draws a 2 px preedit cursor.
  - Both are drawn at about 70% opacity. The layout must also have a
    `get_cursor_pos(index)` method.
- `glyph.accessibility`
  - `types` holds `Role`, `Notification`, `LineBoundary`, `DocBoundary`,
    `Rect`, `Range`, `Node` and `TextFieldNode`.
  - `emoji_names.get_emoji_name` gives short spoken names for common emoji.
  - `backends` has the abstract `Backend` and `AnnouncerBackend` classes, and
    the in-memory `NullBackend` and `NullAnnouncerBackend`. These are what
    `default_backend()` and `default_announcer_backend()` return.
  - `announcer.Announcer` builds screen-reader messages and suppresses repeats
    within `debounce_ms`, which defaults to 150. Each method returns the
    message it posted, or `""` when the message was suppressed. You can inject
    the clock.
  - `manager.Manager` builds a node tree under a "Content" container root.
    `commit()` passes the tree to its backend and then starts a new tree.

## Install

```
pip install .
pip install ".[test]"   # with pytest
pytest
```

## Example

```python
from glyph.atlas import GlyphAtlas
from glyph.bitmap import Bitmap

atlas = GlyphAtlas(backend, 256, 256)   # backend: your DrawBackend subclass
bmp = Bitmap(width=2, height=2, channels=4, data=bytes([255, 0, 0, 255]) * 4)
result = atlas.insert_bitmap(bmp, left=0, top=2)
print(result.glyph.x, result.glyph.y, result.reset_occurred)
atlas.swap_and_upload()
```

```python
from glyph.composition import DeadKeyState

keys = DeadKeyState()
keys.start_dead_key("`", 0)
print(keys.try_combine("e"))   # ('è', True)
```

## What it does not do

This package does not load fonts, shape or lay out text, or rasterize glyphs.
You provide the glyph bitmaps, and the layout objects that report selection
rectangles and cursor positions. It has no renderer that draws whole layouts,
and it has no concrete drawing backend for any window system or GPU API. The
accessibility backends included here only keep state in memory. They do not
talk to a platform screen reader.