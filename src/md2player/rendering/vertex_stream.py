"""
Vertex Stream

Builds the interleaved triangle-list vertex stream of an MD2 model at the
current playback position, ready to be written into a vertex buffer.
"""

import math
from typing import Optional, Union

import numpy as np

from ..animation.playback import PlaybackState
from ..loaders.model import Model

# position (3f), normal (3f), texcoord (2f): 32 bytes per vertex
VERTEX_DTYPE = np.dtype([
    ('position', '<f4', (3,)),
    ('normal', '<f4', (3,)),
    ('texcoord', '<f4', (2,)),
])

# Attribute layout string for renderers that take one (e.g. "3f 3f 2f")
VERTEX_FORMAT = "3f 3f 2f"

BufferLike = Union[np.ndarray, bytearray, memoryview]


def stream_vertex_count(model: Model) -> int:
    """Number of vertices generated per call: three per triangle."""
    return model.triangle_count * 3


def allocate_vertex_buffer(model: Model) -> np.ndarray:
    """Allocate a zeroed vertex array large enough for one stream."""
    return np.zeros(stream_vertex_count(model), dtype=VERTEX_DTYPE)


def _as_vertex_array(out: BufferLike) -> np.ndarray:
    if isinstance(out, np.ndarray) and out.dtype == VERTEX_DTYPE:
        return out
    return np.frombuffer(out, dtype=VERTEX_DTYPE)


def generate_vertices(model: Model, state: PlaybackState,
                      out: Optional[BufferLike] = None) -> np.ndarray:
    """
    Interpolate the model at the playback cursor.

    Each triangle corner is emitted separately (no shared vertices), in
    triangle order. Positions and normals are blended linearly between the
    current keyframe and the next one of the active animation; blended
    normals are not renormalized.

    Args:
        model: Loaded MD2 model
        state: Playback state supplying the animation and frame cursor
        out: Destination, either a VERTEX_DTYPE array or a writable buffer
             of at least ``triangle_count * 3 * 32`` bytes. Allocated when
             omitted.

    Returns:
        The ``triangle_count * 3`` written vertices (a view into ``out``)

    Raises:
        ValueError: If ``out`` is too small or not writable
    """
    count = stream_vertex_count(model)
    if out is None:
        out = allocate_vertex_buffer(model)
    vertices = _as_vertex_array(out)
    if len(vertices) < count:
        raise ValueError(
            f"Vertex buffer holds {len(vertices)} vertices, {count} required"
        )
    vertices = vertices[:count]

    animation = state.animation
    fraction, whole = math.modf(state.frame)
    frame_a_index = int(whole)
    frame_b_index = animation.start if frame_a_index == animation.end else frame_a_index + 1
    frame_a = model.frames[frame_a_index]
    frame_b = model.frames[frame_b_index]

    lerp = np.float32(fraction)
    one_minus_lerp = np.float32(1.0) - lerp

    corners = model.triangles['vertex'].reshape(-1)
    positions_a = frame_a.decompress()[corners]
    positions_b = frame_b.decompress()[corners]
    normals_a = frame_a.normals()[corners]
    normals_b = frame_b.normals()[corners]

    texcoords = model.texcoords[model.triangles['st'].reshape(-1)]
    s = texcoords['s'].astype('f4')
    t = texcoords['t'].astype('f4')

    vertices['position'] = one_minus_lerp * positions_a + lerp * positions_b
    vertices['normal'] = one_minus_lerp * normals_a + lerp * normals_b
    with np.errstate(divide='ignore', invalid='ignore'):
        vertices['texcoord'][:, 0] = s / np.float32(model.skin_width)
        # Flip V: texture origin is bottom-left in the renderer
        vertices['texcoord'][:, 1] = np.float32(1.0) - t / np.float32(model.skin_height)

    return vertices
