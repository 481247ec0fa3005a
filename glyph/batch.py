"""Per-frame accumulation of quad vertices and draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vertex:
    """A position, a packed RGBA tint and texture coordinates."""

    pos_x: float
    pos_y: float
    r: int
    g: int
    b: int
    a: int
    tex_u: float
    tex_v: float


@dataclass(frozen=True)
class DrawCommand:
    """A draw call covering a contiguous range of vertices."""

    texture_id: int
    first_vertex: int
    vertex_count: int


@dataclass
class Batch:
    """Vertices and draw commands gathered over one frame."""

    vertices: list[Vertex] = field(default_factory=list)
    commands: list[DrawCommand] = field(default_factory=list)

    def reset(self) -> None:
        """Discard everything gathered so far."""
        self.vertices.clear()
        self.commands.clear()

    def append_quad(
        self, texture_id: int, v0: Vertex, v1: Vertex, v2: Vertex, v3: Vertex
    ) -> None:
        """Add a quad as two triangles and a draw command for its texture."""
        first = len(self.vertices)
        self.vertices.extend((v0, v1, v2, v0, v2, v3))
        self.commands.append(
            DrawCommand(texture_id=texture_id, first_vertex=first, vertex_count=6)
        )