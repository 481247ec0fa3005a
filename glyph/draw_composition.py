"""Drawing of IME preedit feedback: clause underlines and the preedit cursor."""

from __future__ import annotations

from typing import Protocol

from glyph.backend import DrawBackend, Rect
from glyph.color import Color
from glyph.composition import CompositionState, SelectionLayout
from glyph.enums import ClauseStyle

_FEEDBACK_ALPHA = 178  # about 70% opacity
_CURSOR_WIDTH = 2.0


class CursorPosition(Protocol):
    """Where a cursor sits in a layout."""

    x: float
    y: float
    height: float


class CompositionLayout(SelectionLayout, Protocol):
    """A layout that reports both selection rectangles and cursor positions."""

    def get_cursor_pos(self, index: int) -> CursorPosition | None:
        """Return the cursor position at byte ``index``, or None."""
        ...


def draw_composition(
    backend: DrawBackend,
    layout: CompositionLayout,
    x: float,
    y: float,
    state: CompositionState,
    cursor_color: Color,
) -> None:
    """Draw clause underlines and the preedit cursor for an active composition.

    Call after the layout itself has been drawn at (x, y).
    """
    if not state.is_composing():
        return

    feedback = Color(cursor_color.r, cursor_color.g, cursor_color.b, _FEEDBACK_ALPHA)

    for clause in state.get_clause_rects(layout):
        thickness = 2.0 if clause.style == ClauseStyle.SELECTED else 1.0
        for rect in clause.rects:
            underline_y = rect.y + rect.height - thickness
            backend.draw_filled_rect(
                Rect(x=rect.x + x, y=underline_y + y, width=rect.width, height=thickness),
                feedback,
            )

    cursor = layout.get_cursor_pos(state.document_cursor_pos())
    if cursor is not None:
        backend.draw_filled_rect(
            Rect(x=cursor.x + x, y=cursor.y + y, width=_CURSOR_WIDTH, height=cursor.height),
            feedback,
        )