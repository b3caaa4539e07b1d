"""
Model

In-memory MD2 model: skins, texture coordinates, triangles and the
compressed keyframes.
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np
from pyrr import aabb, vector

from ..animation.normals import NORMALS


# Record layouts as stored on disk
TEXCOORD_DTYPE = np.dtype([('s', '<i2'), ('t', '<i2')])
TRIANGLE_DTYPE = np.dtype([('vertex', '<u2', (3,)), ('st', '<u2', (3,))])
FRAME_VERTEX_DTYPE = np.dtype([('position', 'u1', (3,)), ('normal', 'u1')])


@dataclass(frozen=True)
class Skin:
    """Name of an external texture. Pixel data is loaded elsewhere."""

    name: str


@dataclass
class Frame:
    """
    One keyframe.

    Vertex positions are quantized to bytes; ``scale * position + translation``
    recovers the model-space position.
    """

    name: str
    scale: np.ndarray        # (3,) float32
    translation: np.ndarray  # (3,) float32
    vertices: np.ndarray     # (vertex_count,) FRAME_VERTEX_DTYPE

    def decompress(self) -> np.ndarray:
        """
        Expand the quantized vertices to model space.

        Returns:
            Array of shape (vertex_count, 3) with dtype float32
        """
        return self.scale * self.vertices['position'] + self.translation

    def normals(self) -> np.ndarray:
        """Table normals of every vertex, shape (vertex_count, 3)."""
        return NORMALS[self.vertices['normal']]

    def __repr__(self):
        return f"Frame(name='{self.name}', vertices={len(self.vertices)})"


@dataclass
class Model:
    """
    A loaded MD2 model.

    Produced by :func:`~md2player.loaders.md2_loader.load_md2` and not
    modified afterwards; all arrays are read-only.
    """

    skin_width: int
    skin_height: int
    skins: List[Skin] = field(default_factory=list)
    texcoords: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=TEXCOORD_DTYPE))
    triangles: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=TRIANGLE_DTYPE))
    frames: List[Frame] = field(default_factory=list)
    name: str = "Model"

    @property
    def skin_count(self) -> int:
        return len(self.skins)

    @property
    def texcoord_count(self) -> int:
        return len(self.texcoords)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def vertex_count(self) -> int:
        return len(self.frames[0].vertices) if self.frames else 0

    def frame_bounds(self, frame_index: int) -> np.ndarray:
        """
        Axis-aligned bounding box of one frame.

        Args:
            frame_index: Index into ``frames``

        Returns:
            pyrr AABB, a (2, 3) array of [min, max]
        """
        return aabb.create_from_points(self.frames[frame_index].decompress())

    @property
    def bounding_radius(self) -> float:
        """Largest distance of any vertex from the origin, across all frames."""
        max_radius = 0.0
        for frame in self.frames:
            positions = frame.decompress()
            if len(positions):
                max_radius = max(max_radius, float(vector.length(positions).max()))
        return max_radius if max_radius > 0 else 1.0

    def __repr__(self):
        return (f"Model(name='{self.name}', triangles={self.triangle_count}, "
                f"vertices={self.vertex_count}, frames={self.frame_count})")
