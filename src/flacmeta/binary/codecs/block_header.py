from __future__ import annotations
from ..errors import UnexpectedEof
from flacmeta.models.block import BlockHeader
from flacmeta.models.common import BlockType, BLOCK_TYPE_CODES

HEADER_SIZE = 4

LAST_BLOCK_MASK = 0x80
TYPE_CODE_MASK = 0x7F

_TYPE_TO_CODE = {t: c for c, t in BLOCK_TYPE_CODES.items()}

def block_type_for_code(code: int) -> BlockType:
    if not (0 <= code <= TYPE_CODE_MASK):
        raise ValueError(f"block type code out of 7-bit range: {code}")
    return BLOCK_TYPE_CODES.get(code, BlockType.RESERVED)

def decode_block_header(raw: bytes) -> BlockHeader:
    """
    4-byte metadata block header, big-endian:
      bit 31      last-block flag
      bits 30..24 block type code
      bits 23..0  payload length in bytes
    """
    if len(raw) < HEADER_SIZE:
        raise UnexpectedEof(f"block header needs {HEADER_SIZE} bytes, got {len(raw)}")
    b0 = raw[0]
    code = b0 & TYPE_CODE_MASK
    return BlockHeader(
        is_last=bool(b0 & LAST_BLOCK_MASK),
        block_type=block_type_for_code(code),
        code=code,
        length=int.from_bytes(raw[1:HEADER_SIZE], "big"),
    )

def encode_block_header(hdr: BlockHeader) -> bytes:
    code = hdr.code if hdr.block_type is BlockType.RESERVED else _TYPE_TO_CODE[hdr.block_type]
    out = bytearray()
    out += ((LAST_BLOCK_MASK if hdr.is_last else 0) | code).to_bytes(1, "big")
    out += hdr.length.to_bytes(3, "big")
    assert len(out) == HEADER_SIZE
    return bytes(out)
