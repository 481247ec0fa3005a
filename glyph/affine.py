"""Two-dimensional affine transforms used when drawing glyph quads."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AffineTransform:
    """A 2D affine matrix.

    The matrix is laid out as::

        [ xx  xy  x0 ]
        [ yx  yy  y0 ]
        [  0   0   1 ]
    """

    xx: float = 0.0
    xy: float = 0.0
    yx: float = 0.0
    yy: float = 0.0
    x0: float = 0.0
    y0: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map the point (x, y) through the transform."""
        return (
            self.xx * x + self.xy * y + self.x0,
            self.yx * x + self.yy * y + self.y0,
        )

    def multiply(self, other: AffineTransform) -> AffineTransform:
        """Compose two transforms: ``other`` first, then ``self``.

        ``a.multiply(b).apply(x, y) == a.apply(*b.apply(x, y))``.
        """
        a, b = self, other
        return AffineTransform(
            xx=a.xx * b.xx + a.xy * b.yx,
            xy=a.xx * b.xy + a.xy * b.yy,
            yx=a.yx * b.xx + a.yy * b.yx,
            yy=a.yx * b.xy + a.yy * b.yy,
            x0=a.xx * b.x0 + a.xy * b.y0 + a.x0,
            y0=a.yx * b.x0 + a.yy * b.y0 + a.y0,
        )


def affine_identity() -> AffineTransform:
    """Return the identity transform."""
    return AffineTransform(xx=1.0, yy=1.0)


def affine_rotation(angle: float) -> AffineTransform:
    """Return a rotation about the origin by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return AffineTransform(xx=c, xy=-s, yx=s, yy=c)


def affine_translation(dx: float, dy: float) -> AffineTransform:
    """Return a translation by (dx, dy)."""
    return AffineTransform(xx=1.0, yy=1.0, x0=dx, y0=dy)


def affine_skew(skew_x: float, skew_y: float) -> AffineTransform:
    """Return a shear transform with the given skew factors."""
    return AffineTransform(xx=1.0, yy=1.0, xy=skew_x, yx=skew_y)