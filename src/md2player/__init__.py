"""
md2player - MD2 keyframe model loader and animation player

Loads Quake II MD2 models, plays their fixed animation sequences and
produces interpolated, renderer-agnostic vertex streams.
"""

# Configuration
from .config.settings import *

# Errors
from .errors import Md2Error, Md2ErrorKind

# Animation
from .animation import (
    AnimationName,
    AnimationDescriptor,
    ANIMATIONS,
    TOTAL_FRAME_COUNT,
    NORMALS,
    PlaybackState,
)

# Loaders
from .loaders import Model, Frame, Skin, Md2Header, load_md2

# Rendering
from .rendering import VERTEX_DTYPE, VERTEX_FORMAT, allocate_vertex_buffer, generate_vertices

# Facade
from .md2 import Md2

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Errors
    "Md2Error",
    "Md2ErrorKind",
    # Animation
    "AnimationName",
    "AnimationDescriptor",
    "ANIMATIONS",
    "TOTAL_FRAME_COUNT",
    "NORMALS",
    "PlaybackState",
    # Loaders
    "Model",
    "Frame",
    "Skin",
    "Md2Header",
    "load_md2",
    # Rendering
    "VERTEX_DTYPE",
    "VERTEX_FORMAT",
    "allocate_vertex_buffer",
    "generate_vertices",
    # Facade
    "Md2",
]
