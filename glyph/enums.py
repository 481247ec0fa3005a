"""Enumerations shared across layout, rendering and input handling."""

from enum import IntEnum


class Alignment(IntEnum):
    """Horizontal alignment of text within the layout box."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class WrapMode(IntEnum):
    """How text wraps when it exceeds the layout width."""

    NONE = -1
    WORD = 0
    CHAR = 1
    WORD_CHAR = 2


class TextOrientation(IntEnum):
    """Flow direction of text."""

    HORIZONTAL = 0
    VERTICAL = 1


class GradientDirection(IntEnum):
    """Axis along which a gradient interpolates."""

    HORIZONTAL = 0
    VERTICAL = 1


class Typeface(IntEnum):
    """Programmatic bold/italic override."""

    REGULAR = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


class CompositionPhase(IntEnum):
    """State of an IME preedit."""

    NONE = 0
    STARTED = 1
    UPDATING = 2
    COMMITTED = 3


class ClauseStyle(IntEnum):
    """Visual style of an IME clause."""

    RAW = 0
    CONVERTED = 1
    SELECTED = 2


class OperationType(IntEnum):
    """Kind of an undoable edit."""

    INSERT = 0
    DELETE = 1
    REPLACE = 2