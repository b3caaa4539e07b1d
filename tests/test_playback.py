"""Tests for the animation table and playback state machine"""

import math
import random

import numpy as np
import pytest

from md2player import ANIMATIONS, NORMALS, TOTAL_FRAME_COUNT, AnimationName, PlaybackState
from md2player.animation import get_animation


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def test_animation_table_spans_all_frames():
    """The table covers frames 0-198 without gaps"""
    assert len(ANIMATIONS) == len(AnimationName) == 21
    assert ANIMATIONS[0].start == 0
    for previous, current in zip(ANIMATIONS, ANIMATIONS[1:]):
        assert current.start == previous.end + 1
    assert TOTAL_FRAME_COUNT == 199


def test_animation_descriptor_values():
    """Spot-check descriptors and frame counts"""
    run = ANIMATIONS[AnimationName.RUN]
    assert (run.start, run.end, run.fps) == (40, 45, 10.0)
    assert run.frame_count == 6
    assert ANIMATIONS[AnimationName.BOOM].frame_count == 1


def test_animation_lookup_by_name():
    """Names are case-insensitive"""
    assert AnimationName.from_name("crouch_walk") is AnimationName.CROUCH_WALK
    assert AnimationName.from_name("Death-FallForward") is AnimationName.DEATH_FALLFORWARD
    assert get_animation("salute") == ANIMATIONS[8]
    with pytest.raises(ValueError, match="Unknown MD2 animation"):
        AnimationName.from_name("dance")


def test_normal_table():
    """162 read-only unit vectors"""
    assert NORMALS.shape == (162, 3)
    assert np.allclose(np.linalg.norm(NORMALS, axis=1), 1.0, atol=1e-5)
    with pytest.raises(ValueError):
        NORMALS[0, 0] = 0.0


# ---------------------------------------------------------------------------
# PlaybackState
# ---------------------------------------------------------------------------

def test_playback_defaults():
    """Sequence 0, cursor 0, speed 1, playing"""
    state = PlaybackState()

    assert state.active_animation is AnimationName.STAND
    assert state.frame == 0.0
    assert state.speed == 1.0
    assert state.is_playing


def test_play_pause():
    """Play/pause only toggle the flag"""
    state = PlaybackState()
    state.update(0.5)
    frame = state.frame

    state.pause()
    assert not state.is_playing
    state.update(1.0)
    assert state.frame == frame
    assert state.active_animation is AnimationName.STAND

    state.play()
    assert state.is_playing
    assert state.frame == frame


def test_update_advances_by_fps():
    """Cursor moves speed * dt * fps frames"""
    state = PlaybackState()
    state.update(0.5)
    assert state.frame == pytest.approx(4.5)

    state.speed = 2.0
    state.update(0.5)
    assert state.frame == pytest.approx(13.5)
    assert state.current_frame == 13
    assert state.interpolation == pytest.approx(0.5)


def test_update_zero_is_idempotent():
    """update(0) never moves the cursor"""
    state = PlaybackState()
    state.update(1.234)
    frame = state.frame
    for _ in range(10):
        state.update(0.0)
    assert state.frame == frame


def test_update_zero_at_last_frame():
    """A cursor inside the last frame stays put on update(0)"""
    state = PlaybackState()
    state.frame = 39.25
    state.update(0.0)
    assert state.frame == 39.25


def test_update_wraps_keeping_fraction():
    """Crossing the end frame wraps back into the sequence"""
    state = PlaybackState(AnimationName.RUN)
    # 40 + 0.65 * 10 = 46.5, one frame past the end of RUN (40-45)
    state.update(0.65)
    assert state.frame == pytest.approx(40.5)


def test_update_wraps_multiple_laps():
    """A long step lands inside the sequence"""
    state = PlaybackState()
    # 1000.25 frames: 1000 mod 40 = 0
    state.update(1000.25 / 9.0)
    assert state.frame == pytest.approx(0.25, abs=1e-6)


def test_single_frame_animation():
    """BOOM holds its only frame"""
    state = PlaybackState(AnimationName.BOOM)
    state.update(0.1)
    assert state.current_frame == 198
    assert state.interpolation == pytest.approx(0.5)
    state.update(3.0)
    assert state.current_frame == 198


@pytest.mark.parametrize("animation", list(AnimationName))
def test_cursor_stays_in_sequence(animation):
    """After any run of non-negative steps the cursor is inside the sequence"""
    rng = random.Random(animation.value)
    state = PlaybackState(animation)
    descriptor = ANIMATIONS[animation]
    for _ in range(200):
        state.update(rng.choice([0.0, 0.001, 0.016, 0.1, 0.9, 7.3]))
        assert descriptor.start <= math.floor(state.frame) <= descriptor.end
        assert state.frame < descriptor.end + 1


def test_reverse_playback_wraps_to_last_frame():
    """Stepping back past the first frame lands in the last one"""
    state = PlaybackState(AnimationName.RUN, speed=-1.0)
    # 40 - 0.05 * 10 = 39.5, half a frame before RUN starts
    state.update(0.05)
    assert state.frame == pytest.approx(45.5)

    state = PlaybackState(AnimationName.RUN)
    state.update(-0.2)
    assert state.frame == pytest.approx(44.0)


@pytest.mark.parametrize("animation", list(AnimationName))
def test_cursor_stays_in_sequence_in_reverse(animation):
    """Negative steps keep the cursor inside the sequence"""
    rng = random.Random(animation.value)
    state = PlaybackState(animation, speed=-1.0)
    descriptor = ANIMATIONS[animation]
    for _ in range(200):
        state.update(rng.choice([0.0, 0.001, 0.016, 0.1, 0.9, 7.3]))
        assert descriptor.start <= state.frame < descriptor.end + 1


def test_next_animation_resets_cursor():
    """next_animation moves to the next sequence start"""
    state = PlaybackState()
    state.update(0.3)
    state.next_animation()
    assert state.active_animation is AnimationName.RUN
    assert state.frame == 40.0


def test_next_animation_wraps():
    """Stepping past the last sequence returns to the first"""
    state = PlaybackState(AnimationName.BOOM)
    state.next_animation()
    assert state.active_animation is AnimationName.STAND
    assert state.frame == 0.0


def test_previous_animation_wraps():
    """Stepping before the first sequence goes to the last"""
    state = PlaybackState()
    state.previous_animation()
    assert state.active_animation is AnimationName.BOOM
    assert state.frame == 198.0


@pytest.mark.parametrize("animation", list(AnimationName))
def test_next_then_previous_round_trip(animation):
    """next/previous cancel out and reset the cursor"""
    state = PlaybackState(animation)
    state.update(0.37)

    state.next_animation()
    state.previous_animation()
    assert state.active_animation is animation
    assert state.frame == float(ANIMATIONS[animation].start)

    state.update(0.37)
    state.previous_animation()
    state.next_animation()
    assert state.active_animation is animation
    assert state.frame == float(ANIMATIONS[animation].start)


def test_full_cycle_of_next():
    """21 steps visit every animation and come back"""
    state = PlaybackState()
    seen = []
    for _ in range(len(ANIMATIONS)):
        state.next_animation()
        seen.append(state.active_animation)
    assert seen[-1] is AnimationName.STAND
    assert set(seen) == set(AnimationName)


def test_set_animation():
    """set_animation accepts names, indices and members"""
    state = PlaybackState()
    state.set_animation("wave")
    assert state.active_animation is AnimationName.WAVE
    assert state.frame == 112.0

    state.set_animation(2)
    assert state.active_animation is AnimationName.ATTACK
    assert state.frame == 46.0

    with pytest.raises(ValueError):
        state.set_animation(21)
