"""Multi-page shelf-packed texture atlas for glyph bitmaps."""

from __future__ import annotations

from dataclasses import dataclass, field

from glyph.backend import DrawBackend, TextureID
from glyph.bitmap import Bitmap, check_allocation_size

_GROWN_PAGE_HEIGHT = 1024


class AtlasError(ValueError):
    """Raised when a bitmap cannot be placed in the atlas."""


@dataclass
class Shelf:
    """A horizontal strip of fixed height within an atlas page."""

    y: int
    height: int
    cursor_x: int = 0
    width: int = 0


@dataclass
class AtlasPage:
    """A single texture page of the atlas with double-buffered staging data."""

    texture_id: TextureID
    width: int
    height: int
    staging_front: bytearray
    staging_back: bytearray
    shelves: list[Shelf] = field(default_factory=list)
    dirty: bool = False
    age: int = 0
    used_pixels: int = 0

    def find_best_shelf(self, glyph_width: int, glyph_height: int) -> int | None:
        """Return the index of the tightest shelf that fits, or None.

        None is also returned when the best fit would waste more than half
        the glyph's height, so that a new shelf gets created instead.
        """
        best_idx: int | None = None
        best_waste = 0
        for i, shelf in enumerate(self.shelves):
            if glyph_height > shelf.height:
                continue
            if shelf.cursor_x + glyph_width > shelf.width:
                continue
            waste = shelf.height - glyph_height
            if best_idx is None or waste < best_waste:
                best_waste = waste
                best_idx = i
        if best_idx is not None and best_waste > glyph_height // 2:
            return None
        return best_idx

    def next_shelf_y(self) -> int:
        """Return the y position where the next shelf would start."""
        if not self.shelves:
            return 0
        last = self.shelves[-1]
        return last.y + last.height

    def shelf_used_pixels(self) -> int:
        """Return the pixel area occupied on all shelves."""
        return sum(s.cursor_x * s.height for s in self.shelves)


@dataclass(frozen=True)
class CachedGlyph:
    """Atlas coordinates and bearings of a rasterized glyph."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    left: int = 0
    top: int = 0
    page: int = 0


@dataclass(frozen=True)
class InsertResult:
    """Outcome of an insertion: the glyph and any page reset it caused."""

    glyph: CachedGlyph
    reset_occurred: bool = False
    reset_page: int = 0


def _new_page(backend: DrawBackend, width: int, height: int) -> AtlasPage:
    if width <= 0 or height <= 0:
        raise AtlasError(
            f"atlas page dimensions must be positive: {width}x{height}"
        )
    size = check_allocation_size(width, height, 4)
    texture_id = backend.new_texture(width, height)
    return AtlasPage(
        texture_id=texture_id,
        width=width,
        height=height,
        staging_front=bytearray(size),
        staging_back=bytearray(size),
    )


def _copy_bitmap_to_page(page: AtlasPage, bitmap: Bitmap, x: int, y: int) -> None:
    if (
        x < 0
        or y < 0
        or x + bitmap.width > page.width
        or y + bitmap.height > page.height
    ):
        raise AtlasError(
            f"bitmap copy out of bounds: pos({x},{y}) "
            f"size({bitmap.width}x{bitmap.height}) page({page.width}x{page.height})"
        )
    if bitmap.width <= 0 or bitmap.height <= 0 or not bitmap.data:
        return
    row_bytes = bitmap.width * 4
    for row in range(bitmap.height):
        src_off = row * row_bytes
        dst_off = ((y + row) * page.width + x) * 4
        page.staging_back[dst_off : dst_off + row_bytes] = bitmap.data[
            src_off : src_off + row_bytes
        ]


class GlyphAtlas:
    """Packs glyph bitmaps into texture pages, growing, adding or recycling pages."""

    def __init__(self, backend: DrawBackend, width: int, height: int) -> None:
        self.backend = backend
        self.pages: list[AtlasPage] = [_new_page(backend, width, height)]
        self.max_pages = 4
        self.current_page = 0
        self.frame_counter = 0
        self.max_glyph_dimension = 4096
        self.garbage: list[TextureID] = []
        self.last_frame = 0

    def free(self) -> None:
        """Release every texture the atlas holds."""
        for page in self.pages:
            self.backend.delete_texture(page.texture_id)
        for texture_id in self.garbage:
            self.backend.delete_texture(texture_id)
        self.pages = []
        self.garbage = []

    def cleanup(self, frame: int) -> None:
        """Delete textures retired in earlier frames."""
        if frame > self.last_frame:
            for texture_id in self.garbage:
                self.backend.delete_texture(texture_id)
            self.garbage.clear()
            self.last_frame = frame

    def insert_bitmap(self, bitmap: Bitmap, left: int, top: int) -> InsertResult:
        """Place ``bitmap`` using best-height-fit shelves across pages."""
        glyph_w = bitmap.width
        glyph_h = bitmap.height

        if glyph_w > self.max_glyph_dimension or glyph_h > self.max_glyph_dimension:
            raise AtlasError(
                f"glyph dimensions ({glyph_w}x{glyph_h}) exceed max atlas size "
                f"({self.max_glyph_dimension})"
            )
        if glyph_w <= 0 or glyph_h <= 0:
            return InsertResult(CachedGlyph())

        page = self.pages[self.current_page]
        reset_occurred = False
        reset_page = 0

        shelf_idx = page.find_best_shelf(glyph_w, glyph_h)
        if shelf_idx is None:
            if page.next_shelf_y() + glyph_h > page.height:
                if page.height < self.max_glyph_dimension:
                    new_height = page.height * 2 or _GROWN_PAGE_HEIGHT
                    self._grow_page(
                        self.current_page, min(new_height, self.max_glyph_dimension)
                    )
                elif len(self.pages) < self.max_pages:
                    self.pages.append(
                        _new_page(self.backend, page.width, _GROWN_PAGE_HEIGHT)
                    )
                    self.current_page = len(self.pages) - 1
                else:
                    oldest = self._find_oldest_page()
                    self._reset_page(oldest)
                    self.current_page = oldest
                    reset_occurred = True
                    reset_page = oldest
                page = self.pages[self.current_page]
                shelf_idx = page.find_best_shelf(glyph_w, glyph_h)

            if shelf_idx is None:
                new_y = page.next_shelf_y()
                if new_y + glyph_h > page.height:
                    raise AtlasError("glyph too large for atlas page")
                page.shelves.append(Shelf(y=new_y, height=glyph_h, width=page.width))
                shelf_idx = len(page.shelves) - 1

        shelf = page.shelves[shelf_idx]
        x, y = shelf.cursor_x, shelf.y
        shelf.cursor_x += glyph_w

        _copy_bitmap_to_page(page, bitmap, x, y)
        page.dirty = True
        page.used_pixels = page.shelf_used_pixels()

        cached = CachedGlyph(
            x=x,
            y=y,
            width=glyph_w,
            height=glyph_h,
            left=left,
            top=top,
            page=self.current_page,
        )
        return InsertResult(cached, reset_occurred, reset_page)

    def swap_and_upload(self) -> None:
        """Swap staging buffers of dirty pages and upload them to the backend."""
        for page in self.pages:
            if not page.dirty:
                continue
            page.staging_front, page.staging_back = (
                page.staging_back,
                page.staging_front,
            )
            page.staging_back[:] = page.staging_front
            self.backend.update_texture(page.texture_id, page.staging_front)
            page.dirty = False
            page.age = self.frame_counter

    def _find_oldest_page(self) -> int:
        oldest_idx = 0
        oldest_age = self.pages[0].age
        for i, page in enumerate(self.pages):
            if page.age < oldest_age:
                oldest_age = page.age
                oldest_idx = i
        return oldest_idx

    def _reset_page(self, page_idx: int) -> None:
        page = self.pages[page_idx]
        page.shelves.clear()
        page.used_pixels = 0
        page.age = self.frame_counter
        page.staging_front[:] = bytes(len(page.staging_front))
        page.staging_back[:] = bytes(len(page.staging_back))
        page.dirty = True

    def _grow_page(self, page_idx: int, new_height: int) -> None:
        page = self.pages[page_idx]
        if new_height <= page.height:
            return
        new_size = check_allocation_size(page.width, new_height, 4)
        old_size = page.width * page.height * 4

        new_back = bytearray(new_size)
        new_back[:old_size] = page.staging_back[:old_size]
        page.staging_front = bytearray(new_size)
        page.staging_back = new_back
        page.height = new_height

        self.garbage.append(page.texture_id)
        page.texture_id = self.backend.new_texture(page.width, new_height)
        page.dirty = True