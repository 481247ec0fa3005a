"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Color:
    """An RGBA colour; each channel is an integer in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {f.name}={value} is outside 0..255")


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Linearly interpolate from ``a`` to ``b``; ``t`` is clamped to [0, 1]."""
    tc = min(max(t, 0.0), 1.0)
    inv = 1.0 - tc
    return Color(
        r=int(a.r * inv + b.r * tc),
        g=int(a.g * inv + b.g * tc),
        b=int(a.b * inv + b.b * tc),
        a=int(a.a * inv + b.a * tc),
    )