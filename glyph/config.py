"""Configuration records for text layout and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from glyph.color import Color
from glyph.enums import Alignment, TextOrientation, Typeface, WrapMode


@dataclass
class FontFeature:
    """An OpenType feature tag and its value."""

    tag: str
    value: int


@dataclass
class FontAxis:
    """A variable-font axis tag and its value."""

    tag: str
    value: float


@dataclass
class FontFeatures:
    """OpenType features and variable-font axes."""

    open_type_features: list[FontFeature] = field(default_factory=list)
    variation_axes: list[FontAxis] = field(default_factory=list)


@dataclass
class InlineObject:
    """A non-text element embedded in a layout; sizes are in points."""

    id: str
    width: float = 0.0
    height: float = 0.0
    offset: float = 0.0


@dataclass
class TextStyle:
    """Visual style of a run of text."""

    font_name: str = ""
    typeface: Typeface = Typeface.REGULAR
    size: float = 0.0
    color: Color = field(default_factory=Color)
    bg_color: Color = field(default_factory=Color)
    underline: bool = False
    strikethrough: bool = False
    letter_spacing: float = 0.0
    stroke_width: float = 0.0
    stroke_color: Color = field(default_factory=Color)
    features: FontFeatures | None = None
    object: InlineObject | None = None


@dataclass
class BlockStyle:
    """Paragraph-level layout properties."""

    align: Alignment = Alignment.LEFT
    wrap: WrapMode = WrapMode.WORD
    width: float = 0.0
    indent: float = 0.0
    line_spacing: float = 0.0
    tabs: list[int] = field(default_factory=list)


def default_block_style() -> BlockStyle:
    """Return a left-aligned, word-wrapped block with no wrapping width."""
    return BlockStyle(align=Alignment.LEFT, wrap=WrapMode.WORD, width=-1.0)


@dataclass
class TextConfig:
    """Configuration for laying out and rendering a piece of text."""

    style: TextStyle = field(default_factory=TextStyle)
    block: BlockStyle = field(default_factory=BlockStyle)
    use_markup: bool = False
    no_hit_testing: bool = False
    orientation: TextOrientation = TextOrientation.HORIZONTAL
    gradient: Any = None


@dataclass
class StyleRun:
    """A segment of text with its own style."""

    text: str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class RichText:
    """A sequence of styled runs."""

    runs: list[StyleRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The plain text of all runs joined together."""
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True)
class TextMetrics:
    """Font metrics in pixels."""

    ascender: float = 0.0
    descender: float = 0.0
    height: float = 0.0
    line_gap: float = 0.0