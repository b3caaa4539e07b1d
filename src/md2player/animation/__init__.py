"""
Animation System

Fixed MD2 animation sequences, the normal table and the playback state
machine.
"""

from .animation_table import (
    AnimationName, AnimationDescriptor, ANIMATIONS, TOTAL_FRAME_COUNT, get_animation
)
from .normals import NORMALS
from .playback import PlaybackState

__all__ = [
    'AnimationName',
    'AnimationDescriptor',
    'ANIMATIONS',
    'TOTAL_FRAME_COUNT',
    'get_animation',
    'NORMALS',
    'PlaybackState',
]
