"""Renderer-facing vertex stream generation."""

from .vertex_stream import (
    VERTEX_DTYPE, VERTEX_FORMAT, allocate_vertex_buffer, generate_vertices, stream_vertex_count
)

__all__ = [
    'VERTEX_DTYPE',
    'VERTEX_FORMAT',
    'allocate_vertex_buffer',
    'generate_vertices',
    'stream_vertex_count',
]
