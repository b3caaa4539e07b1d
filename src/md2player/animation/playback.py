"""
Playback State

Animation state machine for MD2 models: active sequence, fractional frame
cursor, speed and play/pause flag.
"""

import math
from typing import Union

from ..config.settings import DEFAULT_PLAYBACK_SPEED, DEFAULT_PLAYING
from .animation_table import ANIMATIONS, AnimationDescriptor, AnimationName


class PlaybackState:
    """
    Drives the frame cursor of an MD2 model.

    The cursor is a real frame index. Its integer part selects the current
    keyframe and its fractional part is the blend weight towards the next
    one. Once the cursor reaches the last frame of the sequence it wraps
    back to the first, keeping the fraction.
    """

    def __init__(
        self,
        animation: Union[AnimationName, int, str] = AnimationName.STAND,
        speed: float = DEFAULT_PLAYBACK_SPEED,
        playing: bool = DEFAULT_PLAYING
    ):
        """
        Initialize playback state.

        Args:
            animation: Starting animation (name, index or AnimationName)
            speed: Playback speed multiplier
            playing: Whether playback starts unpaused
        """
        self.active_animation = AnimationName.coerce(animation)
        self.frame: float = float(ANIMATIONS[self.active_animation].start)
        self.speed = speed
        self.is_playing = playing

    @property
    def animation(self) -> AnimationDescriptor:
        """Descriptor of the active animation."""
        return ANIMATIONS[self.active_animation]

    @property
    def current_frame(self) -> int:
        """Keyframe the cursor is on."""
        return int(self.frame)

    @property
    def interpolation(self) -> float:
        """Blend weight towards the next keyframe."""
        return math.modf(self.frame)[0]

    def play(self):
        """Resume playback."""
        self.is_playing = True

    def pause(self):
        """Pause playback. The cursor stays where it is."""
        self.is_playing = False

    def set_animation(self, animation: Union[AnimationName, int, str]):
        """
        Switch to another animation and rewind to its first frame.

        Args:
            animation: Animation name, index or AnimationName
        """
        self.active_animation = AnimationName.coerce(animation)
        self.frame = float(self.animation.start)

    def next_animation(self):
        """Switch to the next animation, wrapping after the last one."""
        self.set_animation((self.active_animation + 1) % len(ANIMATIONS))

    def previous_animation(self):
        """Switch to the previous animation, wrapping before the first one."""
        self.set_animation((self.active_animation - 1) % len(ANIMATIONS))

    def update(self, delta_time: float):
        """
        Advance the cursor.

        Args:
            delta_time: Time elapsed since the last update (seconds)
        """
        if not self.is_playing:
            return

        animation = self.animation
        self.frame += self.speed * delta_time * animation.fps

        # Wrap into the sequence; fmod covers steps longer than one loop
        if self.frame >= animation.end:
            fraction, whole = math.modf(self.frame)
            self.frame = (fraction
                          + math.fmod(whole - animation.start, animation.frame_count)
                          + animation.start)
        elif self.frame < animation.start:
            # Reverse playback: the first frame wraps back to the last one
            offset = (self.frame - animation.start) % animation.frame_count
            if offset >= animation.frame_count:
                offset = 0.0
            self.frame = animation.start + offset

    def __repr__(self):
        return (f"PlaybackState(animation={self.active_animation.name}, "
                f"frame={self.frame:.3f}, speed={self.speed}, playing={self.is_playing})")
