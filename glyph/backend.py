"""The drawing interface that renderers target."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from glyph.affine import AffineTransform
from glyph.color import Color

TextureID = int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class DrawBackend(ABC):
    """Texture management and drawing primitives supplied by a GPU backend."""

    @abstractmethod
    def new_texture(self, width: int, height: int) -> TextureID:
        """Allocate an RGBA texture and return its handle."""

    @abstractmethod
    def update_texture(self, texture_id: TextureID, data: bytes | bytearray) -> None:
        """Upload width*height*4 bytes of RGBA data to a texture."""

    @abstractmethod
    def delete_texture(self, texture_id: TextureID) -> None:
        """Release a texture."""

    @abstractmethod
    def draw_textured_quad(
        self, texture_id: TextureID, src: Rect, dst: Rect, color: Color
    ) -> None:
        """Draw a tinted textured rectangle."""

    @abstractmethod
    def draw_filled_rect(self, dst: Rect, color: Color) -> None:
        """Draw an untextured filled rectangle."""

    @abstractmethod
    def draw_textured_quad_transformed(
        self,
        texture_id: TextureID,
        src: Rect,
        dst: Rect,
        color: Color,
        transform: AffineTransform,
    ) -> None:
        """Draw a tinted textured rectangle through an affine transform."""

    @abstractmethod
    def dpi_scale(self) -> float:
        """Return the display DPI scale factor."""