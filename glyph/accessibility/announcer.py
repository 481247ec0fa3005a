"""Debounced screen-reader announcements for cursor and editing events."""

from __future__ import annotations

import time
from typing import Callable

from glyph.accessibility.backends import AnnouncerBackend, default_announcer_backend
from glyph.accessibility.emoji_names import get_emoji_name
from glyph.accessibility.types import DocBoundary, LineBoundary

_CHARACTER_NAMES = {
    " ": "space",
    "\t": "tab",
    "\n": "newline",
    ".": "period",
    ",": "comma",
    ";": "semicolon",
    ":": "colon",
    "!": "exclamation",
    "?": "question",
    "'": "apostrophe",
    '"': "quote",
    "(": "open paren",
    ")": "close paren",
    "[": "open bracket",
    "]": "close bracket",
    "{": "open brace",
    "}": "close brace",
}

_DEAD_KEY_NAMES = {
    "`": "grave accent",
    "'": "acute accent",
    "^": "circumflex",
    "~": "tilde",
    '"': "diaeresis",
    ":": "diaeresis",
    ",": "cedilla",
}

_SHORT_SELECTION = 20


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class Announcer:
    """Builds and posts screen-reader announcements, suppressing rapid repeats.

    Each ``announce_*`` method returns the message it posted, or "" when the
    announcement was suppressed by the debounce interval.
    """

    def __init__(
        self,
        backend: AnnouncerBackend | None = None,
        debounce_ms: float = 150,
        clock: Callable[[], float] = _now_ms,
    ) -> None:
        self.backend = backend if backend is not None else default_announcer_backend()
        self.debounce_ms = debounce_ms
        self._clock = clock
        self._last_announcement: float | None = None
        self._last_line = -1

    def announce_character(self, ch: str) -> str:
        """Announce a character; punctuation and emoji get spoken names."""
        if not self._should_announce():
            return ""
        message = _CHARACTER_NAMES.get(ch) or get_emoji_name(ch) or ch
        self._post(message)
        return message

    def announce_word_jump(self, word: str) -> str:
        """Announce a jump to ``word``."""
        if not self._should_announce():
            return ""
        return self._post(f"moved to: {word}")

    def announce_line_boundary(self, boundary: LineBoundary) -> str:
        """Announce reaching the beginning or end of a line."""
        if not self._should_announce():
            return ""
        if boundary == LineBoundary.END:
            return self._post("end of line")
        return self._post("beginning of line")

    def announce_line_number(self, line: int) -> str:
        """Announce ``line`` if it differs from the last line announced."""
        if line == self._last_line:
            return ""
        self._last_line = line
        if not self._should_announce():
            return ""
        return self._post(f"line {line}")

    def announce_document_boundary(self, boundary: DocBoundary) -> str:
        """Announce reaching the beginning or end of the document."""
        if not self._should_announce():
            return ""
        if boundary == DocBoundary.END:
            return self._post("end of document")
        return self._post("beginning of document")

    def announce_selection(self, selected_text: str) -> str:
        """Read a short selection aloud, or count the characters of a long one."""
        if not self._should_announce():
            return ""
        count = len(selected_text)
        if count <= _SHORT_SELECTION:
            return self._post(selected_text)
        return self._post(f"{count} characters selected")

    def announce_selection_extended(self, added_text: str) -> str:
        """Announce text added to the selection."""
        if not self._should_announce():
            return ""
        return self._post(f"added: {added_text}")

    def announce_selection_cleared(self) -> str:
        """Announce that the selection was removed."""
        if not self._should_announce():
            return ""
        return self._post("deselected")

    def announce_dead_key(self, dead_key: str) -> str:
        """Announce the name of a pressed dead key."""
        if not self._should_announce():
            return ""
        return self._post(_DEAD_KEY_NAMES.get(dead_key, "dead key"))

    def announce_dead_key_result(self, ch: str) -> str:
        """Announce the composed character; this is never debounced."""
        return self._post(ch)

    def announce_composition_cancelled(self) -> str:
        """Announce that an IME composition was cancelled."""
        if not self._should_announce():
            return ""
        return self._post("composition cancelled")

    def _should_announce(self) -> bool:
        now = self._clock()
        if (
            self._last_announcement is not None
            and now - self._last_announcement < self.debounce_ms
        ):
            return False
        self._last_announcement = now
        return True

    def _post(self, message: str) -> str:
        if self.backend is not None:
            self.backend.announce(message)
        return message