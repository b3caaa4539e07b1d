"""
Animation Table

The fixed set of MD2 animation sequences. Every MD2 model shares the same
frame layout, so the table is not read from the file.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union


class AnimationName(IntEnum):
    """MD2 animation sequences, in table order."""
    STAND = 0
    RUN = 1
    ATTACK = 2
    PAIN_A = 3
    PAIN_B = 4
    PAIN_C = 5
    JUMP = 6
    FLIP = 7
    SALUTE = 8
    FALLBACK = 9
    WAVE = 10
    POINT = 11
    CROUCH_STAND = 12
    CROUCH_WALK = 13
    CROUCH_ATTACK = 14
    CROUCH_PAIN = 15
    CROUCH_DEATH = 16
    DEATH_FALLBACK = 17
    DEATH_FALLFORWARD = 18
    DEATH_FALLBACKSLOW = 19
    BOOM = 20

    @classmethod
    def from_name(cls, name: str) -> 'AnimationName':
        """
        Look up an animation by name, ignoring case.

        Raises:
            ValueError: If no animation has this name
        """
        key = name.strip().upper().replace('-', '_')
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown MD2 animation: {name!r}") from None

    @classmethod
    def coerce(cls, animation: Union['AnimationName', int, str]) -> 'AnimationName':
        """Convert a name, index or member to an AnimationName."""
        if isinstance(animation, str):
            return cls.from_name(animation)
        return cls(animation)


@dataclass(frozen=True)
class AnimationDescriptor:
    """One animation sequence: an inclusive frame range played at a fixed rate."""

    start: int
    end: int
    fps: float

    @property
    def frame_count(self) -> int:
        return self.end - self.start + 1


ANIMATIONS: Tuple[AnimationDescriptor, ...] = (
    # start, end, fps
    AnimationDescriptor(0, 39, 9.0),      # STAND
    AnimationDescriptor(40, 45, 10.0),    # RUN
    AnimationDescriptor(46, 53, 10.0),    # ATTACK
    AnimationDescriptor(54, 57, 7.0),     # PAIN_A
    AnimationDescriptor(58, 61, 7.0),     # PAIN_B
    AnimationDescriptor(62, 65, 7.0),     # PAIN_C
    AnimationDescriptor(66, 71, 7.0),     # JUMP
    AnimationDescriptor(72, 83, 7.0),     # FLIP
    AnimationDescriptor(84, 94, 7.0),     # SALUTE
    AnimationDescriptor(95, 111, 10.0),   # FALLBACK
    AnimationDescriptor(112, 122, 7.0),   # WAVE
    AnimationDescriptor(123, 134, 6.0),   # POINT
    AnimationDescriptor(135, 153, 10.0),  # CROUCH_STAND
    AnimationDescriptor(154, 159, 7.0),   # CROUCH_WALK
    AnimationDescriptor(160, 168, 10.0),  # CROUCH_ATTACK
    AnimationDescriptor(169, 172, 7.0),   # CROUCH_PAIN
    AnimationDescriptor(173, 177, 5.0),   # CROUCH_DEATH
    AnimationDescriptor(178, 183, 7.0),   # DEATH_FALLBACK
    AnimationDescriptor(184, 189, 7.0),   # DEATH_FALLFORWARD
    AnimationDescriptor(190, 197, 7.0),   # DEATH_FALLBACKSLOW
    AnimationDescriptor(198, 198, 5.0),   # BOOM
)

# Frames a model must have to cover every sequence (indices 0-198)
TOTAL_FRAME_COUNT = max(animation.end for animation in ANIMATIONS) + 1


def get_animation(animation: Union[AnimationName, int, str]) -> AnimationDescriptor:
    """Return the descriptor for an animation name, index or member."""
    return ANIMATIONS[AnimationName.coerce(animation)]
