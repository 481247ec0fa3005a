"""RGBA glyph bitmaps, allocation limits and bicubic scaling."""

from __future__ import annotations

from dataclasses import dataclass

MAX_GLYPH_SIZE = 256
"""Largest bitmap dimension accepted for a single colour glyph."""

MAX_ALLOCATION_SIZE = 1024 * 1024 * 1024
"""Upper bound, in bytes, for any single pixel buffer."""

_MAX_INT32 = 2**31 - 1


class AllocationError(ValueError):
    """Raised when a requested pixel buffer is empty, overflows or is too large."""


@dataclass
class Bitmap:
    """RGBA pixel data for a rasterized glyph."""

    width: int = 0
    height: int = 0
    channels: int = 4
    data: bytes | bytearray = b""


def check_allocation_size(width: int, height: int, channels: int) -> int:
    """Return ``width * height * channels`` after checking it is a sane buffer size."""
    size = width * height * channels
    if width <= 0 or height <= 0 or channels <= 0 or size <= 0:
        raise AllocationError(
            f"invalid allocation size: {width}x{height}x{channels}"
        )
    if size > _MAX_INT32:
        raise AllocationError(f"allocation overflow: {size} bytes")
    if size > MAX_ALLOCATION_SIZE:
        raise AllocationError(f"allocation exceeds 1GB limit: {size} bytes")
    return size


def cubic_hermite(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """Evaluate a Catmull-Rom spline through p0..p3 at parameter ``t``."""
    a = -0.5 * p0 + 1.5 * p1 - 1.5 * p2 + 0.5 * p3
    b = p0 - 2.5 * p1 + 2.0 * p2 - 0.5 * p3
    c = -0.5 * p0 + 0.5 * p2
    d = p1
    return a * t * t * t + b * t * t + c * t + d


def get_pixel_rgba_premul(
    src: bytes | bytearray | None, width: int, height: int, x: int, y: int
) -> tuple[float, float, float, float]:
    """Return the pixel at (x, y), clamped to the edges, with premultiplied alpha."""
    if width <= 0 or height <= 0 or not src:
        return (0.0, 0.0, 0.0, 0.0)
    cx = max(0, min(x, width - 1))
    cy = max(0, min(y, height - 1))
    idx = (cy * width + cx) * 4
    if idx < 0 or idx + 3 >= len(src):
        return (0.0, 0.0, 0.0, 0.0)
    r, g, b, a = src[idx : idx + 4]
    f = a / 255.0
    return (r * f, g * f, b * f, float(a))


def _clamp_byte(value: float) -> int:
    return int(max(0.0, min(value, 255.0)))


def scale_bitmap_bicubic(
    src: bytes | bytearray | None,
    src_width: int,
    src_height: int,
    dst_width: int,
    dst_height: int,
) -> bytes | None:
    """Scale an RGBA bitmap with Catmull-Rom interpolation on premultiplied alpha.

    Returns None when either size is empty or the result would be too large.
    """
    if dst_width <= 0 or dst_height <= 0 or src_width <= 0 or src_height <= 0:
        return None
    dst_size = dst_width * dst_height * 4
    if dst_size > _MAX_INT32:
        return None

    dst = bytearray(dst_size)
    x_scale = src_width / dst_width
    y_scale = src_height / dst_height

    for y in range(dst_height):
        src_y = y * y_scale
        y0 = int(src_y)
        y_diff = src_y - y0

        for x in range(dst_width):
            src_x = x * x_scale
            x0 = int(src_x)
            x_diff = src_x - x0

            columns = []
            for row_y in range(y0 - 1, y0 + 3):
                samples = [
                    get_pixel_rgba_premul(src, src_width, src_height, sx, row_y)
                    for sx in range(x0 - 1, x0 + 3)
                ]
                columns.append(
                    tuple(
                        cubic_hermite(*(s[ch] for s in samples), x_diff)
                        for ch in range(4)
                    )
                )

            final_r, final_g, final_b, final_a = (
                cubic_hermite(*(col[ch] for col in columns), y_diff)
                for ch in range(4)
            )
            final_a = max(0.0, min(final_a, 255.0))
            if final_a > 0:
                f = 255.0 / final_a
                final_r *= f
                final_g *= f
                final_b *= f

            idx = (y * dst_width + x) * 4
            dst[idx] = _clamp_byte(final_r)
            dst[idx + 1] = _clamp_byte(final_g)
            dst[idx + 2] = _clamp_byte(final_b)
            dst[idx + 3] = int(final_a)
    return bytes(dst)