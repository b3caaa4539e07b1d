"""
MD2

Loader/player facade: one object holding a loaded model and its playback
state, with the operations a renderer calls every frame.
"""

from typing import List, Optional, Union

import numpy as np

from .animation.animation_table import AnimationName
from .animation.playback import PlaybackState
from .loaders.md2_loader import Source, load_md2
from .loaders.model import Model
from .rendering.vertex_stream import BufferLike, allocate_vertex_buffer, generate_vertices


class Md2:
    """
    An MD2 model together with its animation player.

    Typical use::

        md2 = Md2("droid.md2")
        vertices = md2.allocate_vertex_buffer()
        while running:
            md2.update(delta_time)
            md2.generate_vertices(vertices)
            vbo.write(vertices.tobytes())
    """

    def __init__(self, source: Optional[Source] = None):
        """
        Initialize the player, loading a model if a source is given.

        Args:
            source: Path to a .md2 file, or a readable binary stream

        Raises:
            Md2Error: If the model cannot be loaded
        """
        self.model: Optional[Model] = None
        self.playback = PlaybackState()
        if source is not None:
            self.load(source)

    def load(self, source: Source):
        """
        Load a model, replacing the current one.

        The current model is dropped first, so after a failed load no model
        is loaded. Playback state is kept.

        Raises:
            Md2Error: If the model cannot be loaded
        """
        self.model = None
        self.model = load_md2(source)

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def play(self):
        self.playback.play()

    def pause(self):
        self.playback.pause()

    @property
    def is_playing(self) -> bool:
        return self.playback.is_playing

    def next_animation(self):
        self.playback.next_animation()

    def previous_animation(self):
        self.playback.previous_animation()

    def set_animation(self, animation: Union[AnimationName, int, str]):
        self.playback.set_animation(animation)

    @property
    def active_animation(self) -> AnimationName:
        return self.playback.active_animation

    def update(self, delta_time: float):
        """
        Advance the animation.

        Args:
            delta_time: Time elapsed since the last update (seconds)
        """
        self.playback.update(delta_time)

    # ------------------------------------------------------------------
    # Vertex stream
    # ------------------------------------------------------------------

    def _require_model(self) -> Model:
        if self.model is None:
            raise RuntimeError("No MD2 model loaded")
        return self.model

    def allocate_vertex_buffer(self) -> np.ndarray:
        return allocate_vertex_buffer(self._require_model())

    def generate_vertices(self, out: Optional[BufferLike] = None) -> np.ndarray:
        """
        Fill ``out`` with the interpolated vertices of the current frame.

        See :func:`~md2player.rendering.vertex_stream.generate_vertices`.
        """
        return generate_vertices(self._require_model(), self.playback, out)

    # ------------------------------------------------------------------
    # Queries (0 while no model is loaded)
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self.model.vertex_count if self.model else 0

    @property
    def skin_count(self) -> int:
        return self.model.skin_count if self.model else 0

    @property
    def texcoord_count(self) -> int:
        return self.model.texcoord_count if self.model else 0

    @property
    def triangle_count(self) -> int:
        return self.model.triangle_count if self.model else 0

    @property
    def frame_count(self) -> int:
        return self.model.frame_count if self.model else 0

    @property
    def skin_width(self) -> int:
        return self.model.skin_width if self.model else 0

    @property
    def skin_height(self) -> int:
        return self.model.skin_height if self.model else 0

    @property
    def skins(self) -> List[str]:
        """Skin texture names."""
        return [skin.name for skin in self.model.skins] if self.model else []

    def __repr__(self):
        return f"Md2(model={self.model!r}, playback={self.playback!r})"
