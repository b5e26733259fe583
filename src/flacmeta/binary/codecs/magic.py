from __future__ import annotations
from ..errors import BadMagic, UnexpectedEof

FLAC_MAGIC = b"fLaC"

def validate_magic(data: bytes) -> None:
    """Check the 4-byte stream marker; raise on a short read or a mismatch."""
    head = bytes(data[:4])
    if len(head) < 4:
        raise UnexpectedEof(f"stream too short for the marker: need 4 bytes, got {len(head)}")
    if head != FLAC_MAGIC:
        raise BadMagic(head, FLAC_MAGIC)
