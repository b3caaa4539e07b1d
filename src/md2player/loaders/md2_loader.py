"""
MD2 Loader

Parses MD2 (Quake II) keyframe models from a file or binary stream.

The format is a 68-byte header of little-endian int32 fields followed by
fixed-size record sections located by byte offsets from the start of the
file. Skin names and frame names are NUL-padded strings. OpenGL command
lists are not decoded.
"""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, List, Union

import numpy as np

from ..animation.animation_table import TOTAL_FRAME_COUNT
from ..config.settings import (
    FRAME_HEADER_FORMAT,
    FRAME_HEADER_SIZE,
    FRAME_VERTEX_SIZE,
    HEADER_FORMAT,
    HEADER_SIZE,
    LOGGER_NAME,
    MAX_FRAMES,
    MAX_SKINS,
    MAX_TEXCOORDS,
    MAX_TRIANGLES,
    MAX_VERTICES,
    MD2_IDENT,
    MD2_VERSION,
    NAME_ENCODING,
    NORMAL_COUNT,
    SKIN_NAME_SIZE,
)
from ..errors import Md2Error, Md2ErrorKind
from .model import FRAME_VERTEX_DTYPE, TEXCOORD_DTYPE, TRIANGLE_DTYPE, Frame, Model, Skin

log = logging.getLogger(LOGGER_NAME)

Source = Union[str, "os.PathLike[str]", BinaryIO]


@dataclass(frozen=True)
class Md2Header:
    """MD2 file header. Only needed while loading."""

    ident: int
    version: int
    skin_width: int
    skin_height: int
    frame_size: int
    skin_count: int
    vertex_count: int
    texcoord_count: int
    triangle_count: int
    glcmd_count: int
    frame_count: int
    skin_offset: int
    texcoord_offset: int
    triangle_offset: int
    frame_offset: int
    glcmd_offset: int
    end_offset: int

    @classmethod
    def unpack(cls, data: bytes) -> Md2Header:
        return cls(*struct.unpack_from(HEADER_FORMAT, data, 0))


def _read_text(data: bytes) -> str:
    """Decode a NUL-padded name field."""
    end = data.find(b"\x00")
    if end >= 0:
        data = data[:end]
    return data.decode(NAME_ENCODING, errors="replace")


def _source_name(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, "name", "<stream>"))


def _read_source(source: Source, name: str) -> bytes:
    """Read the whole file or stream into memory."""
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, "rb") as handle:
                return handle.read()
        payload = source.read()
    except (OSError, ValueError) as exc:
        # ValueError: read from a closed stream
        raise Md2Error(Md2ErrorKind.NOT_FOUND, name, str(exc)) from exc

    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise Md2Error(Md2ErrorKind.NOT_FOUND, name, "stream is not opened in binary mode")
    return bytes(payload)


def _check_section(data: bytes, offset: int, size: int, section: str, name: str):
    """Make sure ``size`` bytes starting at ``offset`` are present."""
    if offset < 0 or offset + size > len(data):
        raise Md2Error(
            Md2ErrorKind.TRUNCATED, name,
            f"{section} section needs {size} bytes at offset {offset}, file has {len(data)}"
        )


def load_md2(source: Source) -> Model:
    """
    Load an MD2 model.

    Args:
        source: Path to a .md2 file, or a readable binary stream

    Returns:
        Model with all sections decoded

    Raises:
        Md2Error: If the data cannot be read or is not a valid MD2 model
    """
    name = _source_name(source)
    data = _read_source(source, name)
    log.info("Loading MD2: %s", name)

    if len(data) < HEADER_SIZE:
        raise Md2Error(
            Md2ErrorKind.NOT_FOUND, name,
            f"header needs {HEADER_SIZE} bytes, file has {len(data)}"
        )
    header = Md2Header.unpack(data)

    if header.ident != MD2_IDENT:
        raise Md2Error(Md2ErrorKind.BAD_IDENT, name)
    if header.version != MD2_VERSION:
        raise Md2Error(Md2ErrorKind.BAD_VERSION, name)

    _warn_limits(header, name)

    skins = _read_skins(data, header, name)
    texcoords = _read_texcoords(data, header, name)

    if header.triangle_count <= 0:
        raise Md2Error(Md2ErrorKind.BAD_TRIANGLE_DATA, name)
    triangles = _read_triangles(data, header, name)

    if header.frame_count != TOTAL_FRAME_COUNT:
        raise Md2Error(
            Md2ErrorKind.BAD_FRAME_DATA, name,
            f"expected {TOTAL_FRAME_COUNT} frames, header has {header.frame_count}"
        )
    if header.vertex_count <= 0:
        raise Md2Error(Md2ErrorKind.BAD_VERTEX_DATA, name)

    frames = _read_frames(data, header, name)

    model = Model(
        skin_width=header.skin_width,
        skin_height=header.skin_height,
        skins=skins,
        texcoords=texcoords,
        triangles=triangles,
        frames=frames,
        name=os.path.splitext(os.path.basename(name))[0] or "Model",
    )
    _warn_indices(model, name)

    log.info(
        "MD2 loaded: %d skins, %d texcoords, %d triangles, %d vertices, %d frames",
        model.skin_count,
        model.texcoord_count,
        model.triangle_count,
        model.vertex_count,
        model.frame_count,
    )
    return model


def _read_skins(data: bytes, header: Md2Header, name: str) -> List[Skin]:
    if header.skin_count <= 0:
        return []

    size = header.skin_count * SKIN_NAME_SIZE
    _check_section(data, header.skin_offset, size, "skin", name)

    skins = []
    for i in range(header.skin_count):
        pos = header.skin_offset + i * SKIN_NAME_SIZE
        skins.append(Skin(_read_text(data[pos:pos + SKIN_NAME_SIZE])))
    log.debug("  Skins: %s", ", ".join(skin.name for skin in skins))
    return skins


def _read_texcoords(data: bytes, header: Md2Header, name: str) -> np.ndarray:
    if header.texcoord_count <= 0:
        return np.zeros(0, dtype=TEXCOORD_DTYPE)

    size = header.texcoord_count * TEXCOORD_DTYPE.itemsize
    _check_section(data, header.texcoord_offset, size, "texcoord", name)
    return np.frombuffer(data, dtype=TEXCOORD_DTYPE,
                         count=header.texcoord_count, offset=header.texcoord_offset)


def _read_triangles(data: bytes, header: Md2Header, name: str) -> np.ndarray:
    size = header.triangle_count * TRIANGLE_DTYPE.itemsize
    _check_section(data, header.triangle_offset, size, "triangle", name)
    return np.frombuffer(data, dtype=TRIANGLE_DTYPE,
                         count=header.triangle_count, offset=header.triangle_offset)


def _read_frames(data: bytes, header: Md2Header, name: str) -> List[Frame]:
    frame_size = FRAME_HEADER_SIZE + header.vertex_count * FRAME_VERTEX_SIZE
    if header.frame_size != frame_size:
        log.warning(
            "%s: header frame size is %d bytes, vertex count implies %d",
            name, header.frame_size, frame_size
        )

    _check_section(data, header.frame_offset, frame_size * header.frame_count, "frame", name)

    frames = []
    pos = header.frame_offset
    for _ in range(header.frame_count):
        sx, sy, sz, tx, ty, tz, frame_name = struct.unpack_from(FRAME_HEADER_FORMAT, data, pos)
        pos += FRAME_HEADER_SIZE

        vertices = np.frombuffer(data, dtype=FRAME_VERTEX_DTYPE,
                                 count=header.vertex_count, offset=pos)
        pos += header.vertex_count * FRAME_VERTEX_SIZE

        frames.append(Frame(
            name=_read_text(frame_name),
            scale=np.array((sx, sy, sz), dtype='f4'),
            translation=np.array((tx, ty, tz), dtype='f4'),
            vertices=vertices,
        ))
    return frames


def _warn_limits(header: Md2Header, name: str):
    limits = (
        ("triangles", header.triangle_count, MAX_TRIANGLES),
        ("vertices", header.vertex_count, MAX_VERTICES),
        ("texcoords", header.texcoord_count, MAX_TEXCOORDS),
        ("frames", header.frame_count, MAX_FRAMES),
        ("skins", header.skin_count, MAX_SKINS),
    )
    for label, count, limit in limits:
        if count > limit:
            log.warning("%s: %d %s exceeds the MD2 limit of %d", name, count, label, limit)


def _warn_indices(model: Model, name: str):
    """Report indices that would fall outside their arrays during playback."""
    if model.triangles['vertex'].max() >= model.vertex_count:
        log.warning("%s: triangle references a vertex beyond %d", name, model.vertex_count)
    if model.triangles['st'].max() >= model.texcoord_count:
        log.warning("%s: triangle references a texcoord beyond %d", name, model.texcoord_count)
    for frame in model.frames:
        if frame.vertices['normal'].max() >= NORMAL_COUNT:
            log.warning("%s: frame '%s' has a normal index beyond %d",
                        name, frame.name, NORMAL_COUNT - 1)
            break
