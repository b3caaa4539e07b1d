"""
MD2 Errors

All load failures raise :class:`Md2Error`; the kind of failure is an
:class:`Md2ErrorKind` member.
"""

from enum import Enum
from typing import Optional


class Md2ErrorKind(Enum):
    """Load failure kinds, each with its message template."""
    NOT_FOUND = "The file {source} was not found."
    BAD_IDENT = "The file {source} has an invalid MD2 ident."
    BAD_VERSION = "The file {source} has an invalid MD2 version."
    BAD_TRIANGLE_DATA = "The file {source} has invalid MD2 triangle data."
    BAD_FRAME_DATA = "The file {source} has invalid MD2 frame data."
    BAD_VERTEX_DATA = "The file {source} has invalid MD2 vertex data."
    TRUNCATED = "The file {source} is truncated."


class Md2Error(Exception):
    """
    Raised when an MD2 stream cannot be loaded.

    Attributes:
        kind: What went wrong
        source: Path or stream name the data came from
        detail: Optional extra context appended to the message
    """

    def __init__(self, kind: Md2ErrorKind, source: str, detail: Optional[str] = None):
        self.kind = kind
        self.source = source
        self.detail = detail
        message = kind.value.format(source=source)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __repr__(self):
        return f"Md2Error(kind={self.kind.name}, source='{self.source}')"
