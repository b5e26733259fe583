from __future__ import annotations

import io
import logging
from contextlib import closing, contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from .codecs.magic import FLAC_MAGIC, validate_magic
from .codecs.block_header import HEADER_SIZE, decode_block_header
from .codecs.streaminfo import decode_streaminfo
from .errors import StreaminfoNotFirst, TruncatedHeader, TruncatedPayload, UnexpectedBlockType

from flacmeta.models.block import MetadataBlock
from flacmeta.models.common import BlockType
from flacmeta.models.stream import FlacStream

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, bytearray, memoryview, BinaryIO]


# -----------------------------
# Helpers
# -----------------------------

@contextmanager
def _open_source(src: Source) -> Iterator[BinaryIO]:
    """Yield a readable binary stream; only paths are opened (and closed) here."""
    if isinstance(src, (bytes, bytearray, memoryview)):
        yield io.BytesIO(bytes(src))
    elif isinstance(src, (str, Path)):
        with open(src, "rb") as fh:
            yield fh
    else:
        yield src


def _read_exact(fh: BinaryIO, n: int) -> bytes:
    """Read up to n bytes, looping over short reads; fewer than n means EOF."""
    chunks = []
    left = n
    while left > 0:
        chunk = fh.read(left)
        if not chunk:
            break
        chunks.append(chunk)
        left -= len(chunk)
    return b"".join(chunks)


# -----------------------------
# Block iteration
# -----------------------------

def iter_blocks(src: Source, *, strict_order: bool = True) -> Iterator[MetadataBlock]:
    """
    Validate the marker, then yield each metadata block in stream order until
    the one flagged last. STREAMINFO payloads are decoded; other payloads are
    read and dropped. The first error aborts the walk.
    """
    with _open_source(src) as fh:
        validate_magic(_read_exact(fh, len(FLAC_MAGIC)))
        offset = len(FLAC_MAGIC)
        index = 0

        while True:
            raw_hdr = _read_exact(fh, HEADER_SIZE)
            if len(raw_hdr) < HEADER_SIZE:
                raise TruncatedHeader(len(raw_hdr), offset)
            hdr = decode_block_header(raw_hdr)
            logger.debug("block %d at %d: type=%s code=%d length=%d last=%s",
                         index, offset, hdr.block_type.value, hdr.code, hdr.length, hdr.is_last)

            if hdr.block_type in (BlockType.RESERVED, BlockType.FORBIDDEN):
                raise UnexpectedBlockType(hdr.code)
            if strict_order and index == 0 and hdr.block_type is not BlockType.STREAMINFO:
                raise StreaminfoNotFirst(hdr.block_type.value)

            payload = _read_exact(fh, hdr.length)
            if len(payload) != hdr.length:
                raise TruncatedPayload(hdr.length, len(payload), offset + HEADER_SIZE)

            si = None
            if hdr.block_type is BlockType.STREAMINFO:
                si = decode_streaminfo(payload)
                logger.debug("streaminfo: %d Hz, raw channels=%d, raw bps=%d, samples=%d",
                             si.sample_rate, si.num_channels, si.bits_per_sample, si.total_sample_count)
            else:
                logger.debug("skipped %d byte %s payload", hdr.length, hdr.block_type.value)

            yield MetadataBlock(header=hdr, streaminfo=si)

            offset += HEADER_SIZE + hdr.length
            index += 1
            if hdr.is_last:
                return


# -----------------------------
# Full parse
# -----------------------------

def parse_stream(src: Source, *, strict_order: bool = True) -> FlacStream:
    """Walk every metadata block. Blocks read before a failure are not returned."""
    stream = FlacStream(blocks=list(iter_blocks(src, strict_order=strict_order)))
    logger.info("parsed %d metadata block(s)", len(stream.blocks))
    return stream


# -----------------------------
# Fast summary
# -----------------------------

def summarize_stream(
    src: Source,
    *,
    strict_order: bool = True,
    max_blocks: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Returns (blocks_count, metadata_bytes), metadata_bytes counting the marker
    and every header and payload walked. Supports early stop via max_blocks.
    """
    blocks = 0
    total = len(FLAC_MAGIC)
    with closing(iter_blocks(src, strict_order=strict_order)) as it:
        for block in it:
            blocks += 1
            total += HEADER_SIZE + block.header.length
            if max_blocks is not None and blocks >= max_blocks:
                break
    return blocks, total
