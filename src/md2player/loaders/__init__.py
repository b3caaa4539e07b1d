"""Loader utilities for MD2 models."""

from .model import Model, Frame, Skin, TEXCOORD_DTYPE, TRIANGLE_DTYPE, FRAME_VERTEX_DTYPE
from .md2_loader import Md2Header, load_md2

__all__ = [
    'Model', 'Frame', 'Skin', 'Md2Header', 'load_md2',
    'TEXCOORD_DTYPE', 'TRIANGLE_DTYPE', 'FRAME_VERTEX_DTYPE',
]
