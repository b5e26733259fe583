from __future__ import annotations
from typing import Tuple
from .bitcursor import BitCursor
from ..errors import FlacError, InsufficientData
from flacmeta.models.streaminfo import Streaminfo

# (field, width in bits), in on-wire order. The md5 is split in two 64-bit
# halves because read_bits tops out at 64.
STREAMINFO_LAYOUT: Tuple[Tuple[str, int], ...] = (
    ("min_blk_size",       16),
    ("max_blk_size",       16),
    ("min_frame_size",     24),
    ("max_frame_size",     24),
    # 64-bit cluster: none of these four sit on byte boundaries
    ("sample_rate",        20),
    ("num_channels",        3),
    ("bits_per_sample",     5),
    ("total_sample_count", 36),
    ("md5_hi",             64),
    ("md5_lo",             64),
)

STREAMINFO_BITS = sum(width for _, width in STREAMINFO_LAYOUT)
STREAMINFO_SIZE = STREAMINFO_BITS // 8

def decode_streaminfo(payload: bytes) -> Streaminfo:
    """
    Decode a STREAMINFO payload. Only the first 34 bytes are read; anything
    after them is ignored.
    """
    if len(payload) < STREAMINFO_SIZE:
        raise InsufficientData(len(payload), STREAMINFO_SIZE)

    cur = BitCursor(bytes(payload[:STREAMINFO_SIZE]))
    raw = {name: cur.read_bits(width) for name, width in STREAMINFO_LAYOUT}

    # Sanity: every bit of the 34-byte record consumed, no more, no less
    if cur.tell_bits() != STREAMINFO_BITS or cur.remaining_bits() != 0:
        raise FlacError(f"STREAMINFO consumed {cur.tell_bits()} bits, expected {STREAMINFO_BITS}")

    md5 = (raw.pop("md5_hi") << 64) | raw.pop("md5_lo")
    return Streaminfo(md5_checksum=md5, **raw)

def encode_streaminfo(si: Streaminfo) -> bytes:
    values = si.model_dump(include={name for name, _ in STREAMINFO_LAYOUT})
    values["md5_hi"] = si.md5_checksum >> 64
    values["md5_lo"] = si.md5_checksum & ((1 << 64) - 1)

    acc = 0
    for name, width in STREAMINFO_LAYOUT:
        acc = (acc << width) | (values[name] & ((1 << width) - 1))
    out = acc.to_bytes(STREAMINFO_SIZE, "big")
    assert len(out) == STREAMINFO_SIZE
    return out
