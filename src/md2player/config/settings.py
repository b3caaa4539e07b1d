"""
MD2 Player Configuration Settings

Format constants and playback defaults shared by the loader, the
animation player and the vertex stream generator.
"""

# ============================================================================
# File Format
# ============================================================================

# "IDP2" packed little-endian into a 32-bit integer
MD2_IDENT = ord('I') | ord('D') << 8 | ord('P') << 16 | ord('2') << 24
MD2_VERSION = 8

HEADER_FORMAT = "<17i"   # 17 little-endian int32 fields
HEADER_SIZE = 68         # struct.calcsize(HEADER_FORMAT)

SKIN_NAME_SIZE = 64      # Bytes per skin record
FRAME_NAME_SIZE = 16     # Bytes per frame name
FRAME_HEADER_FORMAT = f"<3f3f{FRAME_NAME_SIZE}s"  # scale, translation, name
FRAME_HEADER_SIZE = 40
FRAME_VERTEX_SIZE = 4    # x, y, z, normal index (all uint8)

# Encoding for the NUL-padded name fields
NAME_ENCODING = "latin-1"

# ============================================================================
# Engine Limits
# ============================================================================
#
# Quake II engine limits. Files above them still load; the loader
# only warns about them.

MAX_TRIANGLES = 4096
MAX_VERTICES = 2048
MAX_TEXCOORDS = 2048
MAX_FRAMES = 512
MAX_SKINS = 32

# Number of precalculated normal vectors
NORMAL_COUNT = 162

# ============================================================================
# Playback
# ============================================================================

DEFAULT_PLAYBACK_SPEED = 1.0   # Multiplier applied to every animation's fps
DEFAULT_PLAYING = True         # New players start unpaused

# ============================================================================
# Logging
# ============================================================================

LOGGER_NAME = "md2player"
