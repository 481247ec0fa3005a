from dataclasses import dataclass

from glyph.backend import DrawBackend, Rect
from glyph.color import Color
from glyph.composition import CompositionState
from glyph.draw_composition import draw_composition


class RecordingBackend(DrawBackend):
    def __init__(self):
        self.filled_rects = []
        self.quads = []
        self._next = 0

    def new_texture(self, width, height):
        self._next += 1
        return self._next

    def update_texture(self, texture_id, data):
        pass

    def delete_texture(self, texture_id):
        pass

    def draw_textured_quad(self, texture_id, src, dst, color):
        self.quads.append((texture_id, src, dst, color))

    def draw_filled_rect(self, dst, color):
        self.filled_rects.append((dst, color))

    def draw_textured_quad_transformed(self, texture_id, src, dst, color, transform):
        self.quads.append((texture_id, src, dst, color))

    def dpi_scale(self):
        return 1.0


@dataclass
class Cursor:
    x: float
    y: float
    height: float


class LineLayout:
    """Single-line layout: each byte is 10 wide and 20 high."""

    def __init__(self, text):
        self.length = len(text.encode("utf-8"))

    def get_selection_rects(self, start, end):
        end = min(end, self.length)
        if start >= end:
            return []
        return [Rect(start * 10.0, 0.0, (end - start) * 10.0, 20.0)]

    def get_cursor_pos(self, index):
        if index < 0 or index > self.length:
            return None
        return Cursor(index * 10.0, 0.0, 20.0)


BLACK = Color(0, 0, 0, 255)


def test_not_composing_draws_nothing():
    backend = RecordingBackend()
    draw_composition(backend, LineLayout("Hello"), 0, 0, CompositionState(), BLACK)
    assert backend.filled_rects == []


def test_draws_underline_and_cursor():
    backend = RecordingBackend()
    cs = CompositionState()
    cs.start(0)
    cs.set_marked_text("He", 2)
    draw_composition(backend, LineLayout("Hello"), 5, 7, cs, Color(10, 20, 30, 255))

    dimmed = Color(10, 20, 30, 178)
    assert backend.filled_rects == [
        (Rect(5.0, 26.0, 20.0, 1.0), dimmed),
        (Rect(25.0, 7.0, 2.0, 20.0), dimmed),
    ]


def test_selected_clause_is_thicker():
    backend = RecordingBackend()
    cs = CompositionState()
    cs.start(0)
    cs.set_marked_text("abc", 1)
    cs.handle_clause(0, 1, 0)
    cs.handle_clause(1, 2, 2)
    draw_composition(backend, LineLayout("abc"), 0, 0, cs, BLACK)

    rects = [r for r, _ in backend.filled_rects]
    assert rects[0] == Rect(0.0, 19.0, 10.0, 1.0)
    assert rects[1] == Rect(10.0, 18.0, 20.0, 2.0)
    assert rects[2] == Rect(10.0, 0.0, 2.0, 20.0)


def test_cursor_outside_layout_is_not_drawn():
    backend = RecordingBackend()
    cs = CompositionState()
    cs.start(50)
    cs.set_marked_text("x", 1)
    draw_composition(backend, LineLayout("abc"), 0, 0, cs, BLACK)
    assert backend.filled_rects == []