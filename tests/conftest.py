from __future__ import annotations

import struct
from pathlib import Path

import pytest

from md2player import TOTAL_FRAME_COUNT, MD2_IDENT, MD2_VERSION


# ---------------------------------------------------------------------------
# Synthetic MD2 creation helpers
# ---------------------------------------------------------------------------

# Default triangle model: 3 vertices, 3 texcoords, one triangle
DEFAULT_TEXCOORDS = [(0, 0), (32, 0), (0, 64)]
DEFAULT_TRIANGLES = [((0, 1, 2), (0, 1, 2))]
DEFAULT_VERTICES = [((10, 20, 30), 5), ((40, 50, 60), 32), ((70, 80, 90), 52)]


def frame_vertices(index: int) -> list[tuple[tuple[int, int, int], int]]:
    """Vertices of frame ``index``: the default triangle shifted by the index."""
    return [
        (tuple((c + index) % 256 for c in position), normal)
        for position, normal in DEFAULT_VERTICES
    ]


def make_md2_bytes(
    ident: int = MD2_IDENT,
    version: int = MD2_VERSION,
    skin_size: tuple[int, int] = (64, 128),
    skins: list[str] | None = None,
    texcoords: list[tuple[int, int]] | None = None,
    triangles: list[tuple[tuple, tuple]] | None = None,
    frames: list[tuple] | None = None,
    frame_count: int | None = None,
    vertex_count: int | None = None,
    triangle_count: int | None = None,
) -> bytes:
    """Build an MD2 binary for testing.

    frames: list of (name, scale, translation, [((x, y, z), normal), ...]).
    Defaults to TOTAL_FRAME_COUNT frames with unit scale and zero
    translation whose vertices come from ``frame_vertices``.
    The count overrides only change the header, not the written sections.
    """
    skins = skins or []
    texcoords = DEFAULT_TEXCOORDS if texcoords is None else texcoords
    triangles = DEFAULT_TRIANGLES if triangles is None else triangles
    if frames is None:
        frames = [
            (f"frame{i:03d}", (1.0, 1.0, 1.0), (0.0, 0.0, 0.0), frame_vertices(i))
            for i in range(TOTAL_FRAME_COUNT)
        ]

    num_vertices = len(frames[0][3]) if frames else 0
    frame_size = 40 + 4 * num_vertices

    skin_data = b"".join(name.encode("latin-1")[:64].ljust(64, b"\x00") for name in skins)
    texcoord_data = b"".join(struct.pack("<2h", s, t) for s, t in texcoords)
    triangle_data = b"".join(struct.pack("<3H3H", *vertex, *st) for vertex, st in triangles)
    frame_data = bytearray()
    for name, scale, translation, vertices in frames:
        frame_data.extend(struct.pack("<3f3f", *scale, *translation))
        frame_data.extend(name.encode("latin-1")[:16].ljust(16, b"\x00"))
        for position, normal in vertices:
            frame_data.extend(struct.pack("<4B", *position, normal))

    skin_offset = 68
    texcoord_offset = skin_offset + len(skin_data)
    triangle_offset = texcoord_offset + len(texcoord_data)
    frame_offset = triangle_offset + len(triangle_data)
    end_offset = frame_offset + len(frame_data)

    header = struct.pack(
        "<17i",
        ident,
        version,
        skin_size[0],
        skin_size[1],
        frame_size,
        len(skins),
        num_vertices if vertex_count is None else vertex_count,
        len(texcoords),
        len(triangles) if triangle_count is None else triangle_count,
        0,
        len(frames) if frame_count is None else frame_count,
        skin_offset,
        texcoord_offset,
        triangle_offset,
        frame_offset,
        end_offset,
        end_offset,
    )
    return header + skin_data + texcoord_data + triangle_data + bytes(frame_data)


@pytest.fixture
def md2_bytes() -> bytes:
    return make_md2_bytes()


@pytest.fixture
def md2_path(tmp_path, md2_bytes) -> Path:
    path = tmp_path / "triangle.md2"
    path.write_bytes(md2_bytes)
    return path


@pytest.fixture
def make_md2():
    """Factory fixture exposing ``make_md2_bytes`` to tests."""
    return make_md2_bytes
