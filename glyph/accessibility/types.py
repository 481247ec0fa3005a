"""Records and enumerations that describe the accessibility tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Role(IntEnum):
    """Semantic role of an accessibility node."""

    TEXT = 0
    STATIC_TEXT = 1
    CONTAINER = 2
    GROUP = 3
    WINDOW = 4
    PROSE = 5
    LIST = 6
    LIST_ITEM = 7
    TEXT_FIELD = 8


class Notification(IntEnum):
    """An accessibility state change."""

    VALUE_CHANGED = 0
    SELECTED_TEXT_CHANGED = 1


class LineBoundary(IntEnum):
    """Cursor at the start or end of a line."""

    BEGINNING = 0
    END = 1


class DocBoundary(IntEnum):
    """Cursor at the start or end of the document."""

    BEGINNING = 0
    END = 1


@dataclass(frozen=True)
class Rect:
    """A bounding rectangle in window coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Range:
    """A text range given as a location and a length."""

    location: int = 0
    length: int = 0


@dataclass
class Node:
    """One node of the accessibility tree."""

    id: int
    role: Role = Role.TEXT
    rect: Rect = field(default_factory=Rect)
    text: str = ""
    children: list[int] = field(default_factory=list)
    parent: int = 0
    is_focused: bool = False
    is_selected: bool = False


@dataclass
class TextFieldNode:
    """A node for an editable text field together with its editing state."""

    node: Node
    value: str = ""
    selected_range: Range = field(default_factory=Range)
    cursor_line: int = 0
    num_characters: int = 0