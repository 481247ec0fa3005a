"""Backend-agnostic glyph atlas, bitmap scaling, transforms, IME composition and batching."""

__version__ = "0.1.0"