from __future__ import annotations
from enum import Enum

class BlockType(str, Enum):
    STREAMINFO = "streaminfo"
    PADDING = "padding"
    APPLICATION = "application"
    SEEKTABLE = "seektable"
    VORBIS_COMMENT = "vorbis_comment"
    CUESHEET = "cuesheet"
    PICTURE = "picture"
    FORBIDDEN = "forbidden"
    RESERVED = "reserved"   # codes 7..126, carried alongside as BlockHeader.code

# 7-bit type code -> block type (Table 3 of the FLAC format)
BLOCK_TYPE_CODES: dict[int, BlockType] = {
    0: BlockType.STREAMINFO,
    1: BlockType.PADDING,
    2: BlockType.APPLICATION,
    3: BlockType.SEEKTABLE,
    4: BlockType.VORBIS_COMMENT,
    5: BlockType.CUESHEET,
    6: BlockType.PICTURE,
    127: BlockType.FORBIDDEN,
}
