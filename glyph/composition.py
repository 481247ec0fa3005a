"""IME preedit tracking and dead-key accent composition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from glyph.backend import Rect
from glyph.enums import ClauseStyle, CompositionPhase


class SelectionLayout(Protocol):
    """A layout that can report selection rectangles for a byte range."""

    def get_selection_rects(self, start: int, end: int) -> Sequence[Rect]:
        """Return the rectangles covering bytes ``start``..``end``."""
        ...


def _is_valid_text(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class Clause:
    """A segment of a multi-clause preedit; offsets are bytes into the preedit."""

    start: int
    length: int
    style: ClauseStyle = ClauseStyle.RAW


@dataclass
class ClauseRects:
    """The rectangles and style of one clause, ready for drawing."""

    clause_index: int
    rects: list[Rect]
    style: ClauseStyle


@dataclass
class CompositionState:
    """Tracks an IME composition so its preedit text can be displayed.

    Positions are byte offsets into the document's UTF-8 text.
    """

    phase: CompositionPhase = CompositionPhase.NONE
    preedit_text: str = ""
    preedit_start: int = 0
    cursor_offset: int = 0
    clauses: list[Clause] = field(default_factory=list)
    selected_clause: int = -1

    def is_composing(self) -> bool:
        """Return True while a composition is active."""
        return self.phase in (CompositionPhase.STARTED, CompositionPhase.UPDATING)

    def start(self, cursor_pos: int) -> None:
        """Begin composing at the document cursor position."""
        self.phase = CompositionPhase.STARTED
        self.preedit_start = cursor_pos
        self.preedit_text = ""
        self.cursor_offset = 0
        self.clauses.clear()
        self.selected_clause = -1

    def set_marked_text(self, text: str, cursor_in_preedit: int) -> None:
        """Replace the preedit text and the cursor offset within it."""
        self.preedit_text = text
        self.cursor_offset = cursor_in_preedit
        self.phase = CompositionPhase.UPDATING

    def set_clauses(self, clauses: Sequence[Clause], selected: int) -> None:
        """Replace the clause segmentation reported by the IME."""
        self.clauses = list(clauses)
        self.selected_clause = selected

    def commit(self) -> str:
        """Finish composing and return the text to insert."""
        result = self.preedit_text
        self.reset()
        return result

    def reset(self) -> None:
        """Discard the composition without inserting anything."""
        self.phase = CompositionPhase.NONE
        self.preedit_text = ""
        self.preedit_start = 0
        self.cursor_offset = 0
        self.clauses.clear()
        self.selected_clause = -1

    def document_cursor_pos(self) -> int:
        """Return the absolute cursor position in the document."""
        return self.preedit_start + self.cursor_offset

    def preedit_end(self) -> int:
        """Return the byte offset where the preedit ends in the document."""
        return self.preedit_start + _byte_length(self.preedit_text)

    def composition_bounds(self, layout: SelectionLayout) -> Rect | None:
        """Return the rectangle enclosing the whole preedit, or None."""
        if not self.is_composing() or not self.preedit_text:
            return None
        rects = layout.get_selection_rects(self.preedit_start, self.preedit_end())
        if not rects:
            return None
        min_x = min(r.x for r in rects)
        min_y = min(r.y for r in rects)
        max_x = max(r.x + r.width for r in rects)
        max_y = max(r.y + r.height for r in rects)
        return Rect(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    def get_clause_rects(self, layout: SelectionLayout) -> list[ClauseRects]:
        """Return the selection rectangles of every clause that has any."""
        if not self.is_composing():
            return []
        if not self.clauses and self.preedit_text:
            rects = list(
                layout.get_selection_rects(self.preedit_start, self.preedit_end())
            )
            if rects:
                return [ClauseRects(0, rects, ClauseStyle.RAW)]
            return []
        result = []
        for i, clause in enumerate(self.clauses):
            clause_start = self.preedit_start + clause.start
            rects = list(
                layout.get_selection_rects(clause_start, clause_start + clause.length)
            )
            if rects:
                result.append(ClauseRects(i, rects, clause.style))
        return result

    def handle_marked_text(
        self, text: str, cursor_in_preedit: int, document_cursor: int
    ) -> None:
        """Apply marked text from the IME, starting a composition if needed."""
        if not _is_valid_text(text):
            return
        if not self.is_composing():
            self.start(document_cursor)
        self.set_marked_text(text, cursor_in_preedit)

    def handle_insert_text(self, text: str) -> str:
        """End any composition and return the text the IME wants inserted."""
        if not _is_valid_text(text):
            return ""
        if self.is_composing():
            self.reset()
        return text

    def handle_unmark_text(self) -> None:
        """Cancel the composition without committing it."""
        self.reset()

    def handle_clause(self, start: int, length: int, style: int) -> None:
        """Append a clause; ``style`` is 1 for converted, 2 for selected."""
        if start < 0 or length < 0:
            return
        if style == 2:
            clause_style = ClauseStyle.SELECTED
        elif style == 1:
            clause_style = ClauseStyle.CONVERTED
        else:
            clause_style = ClauseStyle.RAW
        self.clauses.append(Clause(start, length, clause_style))

    def clear_clauses(self) -> None:
        """Forget all clauses before a fresh enumeration."""
        self.clauses.clear()
        self.selected_clause = -1


_GRAVE = dict(zip("aeiouAEIOU", "\u00e0\u00e8\u00ec\u00f2\u00f9\u00c0\u00c8\u00cc\u00d2\u00d9"))
_ACUTE = dict(zip("aeiouAEIOU", "\u00e1\u00e9\u00ed\u00f3\u00fa\u00c1\u00c9\u00cd\u00d3\u00da"))
_CIRCUMFLEX = dict(
    zip("aeiouAEIOU", "\u00e2\u00ea\u00ee\u00f4\u00fb\u00c2\u00ca\u00ce\u00d4\u00db")
)
_TILDE = dict(zip("anoANO", "\u00e3\u00f1\u00f5\u00c3\u00d1\u00d5"))
_DIAERESIS = dict(
    zip("aeiouyAEIOU", "\u00e4\u00eb\u00ef\u00f6\u00fc\u00ff\u00c4\u00cb\u00cf\u00d6\u00dc")
)
_CEDILLA = {"c": "\u00e7", "C": "\u00c7"}

_DEAD_KEY_TABLE: dict[str, dict[str, str]] = {
    "`": _GRAVE,
    "'": _ACUTE,
    "^": _CIRCUMFLEX,
    "~": _TILDE,
    '"': _DIAERESIS,
    ":": _DIAERESIS,
    ",": _CEDILLA,
}


def is_dead_key(ch: str) -> bool:
    """Return True if ``ch`` starts an accent composition."""
    return ch in _DEAD_KEY_TABLE


def combine_dead_key(dead: str, base: str) -> str | None:
    """Return the accented character for ``dead`` + ``base``, or None."""
    return _DEAD_KEY_TABLE.get(dead, {}).get(base)


@dataclass
class DeadKeyState:
    """A pending dead key waiting for its base character."""

    pending: str = ""
    has_pending: bool = False
    pending_pos: int = 0

    def try_combine(self, base: str) -> tuple[str, bool]:
        """Combine the pending dead key with ``base``.

        Returns the composed character and True, or both characters and False
        when they do not combine, or ``("", False)`` if nothing is pending.
        """
        if not self.has_pending:
            return "", False
        dead = self.pending
        self.reset()
        combined = combine_dead_key(dead, base)
        if combined is not None:
            return combined, True
        return dead + base, False

    def start_dead_key(self, dead: str, pos: int) -> None:
        """Record a dead key press at document position ``pos``."""
        self.pending = dead
        self.has_pending = True
        self.pending_pos = pos

    def clear(self) -> None:
        """Cancel the pending dead key."""
        self.reset()

    def reset(self) -> None:
        """Return to the empty state."""
        self.pending = ""
        self.has_pending = False
        self.pending_pos = 0