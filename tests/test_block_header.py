import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import pytest

from flacmeta.binary.codecs.block_header import block_type_for_code, decode_block_header, encode_block_header
from flacmeta.binary.codecs.magic import validate_magic
from flacmeta.binary.errors import BadMagic, UnexpectedEof
from flacmeta.models.common import BlockType

def test_last_streaminfo_header_layout():
    hdr = decode_block_header(bytes([0x80, 0x00, 0x00, 0x22]))
    assert hdr.is_last is True
    assert hdr.block_type is BlockType.STREAMINFO
    assert hdr.code == 0
    assert hdr.length == 34

def test_length_is_24_bit_big_endian():
    hdr = decode_block_header(bytes([0x01, 0x12, 0x34, 0x56]))
    assert hdr.is_last is False
    assert hdr.block_type is BlockType.PADDING
    assert hdr.length == 0x123456

    hdr = decode_block_header(bytes([0xFF, 0xFF, 0xFF, 0xFF]))
    assert hdr.block_type is BlockType.FORBIDDEN
    assert hdr.length == 0xFFFFFF

def test_is_last_independent_of_lower_31_bits():
    for base in (0x00000000, 0x80000000, 0x04000022, 0xFF7F0001):
        want = bool(base >> 31)
        for bit in range(31):
            word = base ^ (1 << bit)
            hdr = decode_block_header(word.to_bytes(4, "big"))
            assert hdr.is_last is want

@pytest.mark.parametrize("code,expected", [
    (0, BlockType.STREAMINFO), (1, BlockType.PADDING), (2, BlockType.APPLICATION),
    (3, BlockType.SEEKTABLE), (4, BlockType.VORBIS_COMMENT), (5, BlockType.CUESHEET),
    (6, BlockType.PICTURE), (7, BlockType.RESERVED), (126, BlockType.RESERVED),
    (127, BlockType.FORBIDDEN),
])
def test_type_code_mapping(code, expected):
    assert block_type_for_code(code) is expected

def test_reserved_code_decodes_without_error():
    hdr = decode_block_header(bytes([0x80 | 42, 0, 0, 0]))
    assert hdr.is_reserved and hdr.code == 42

def test_header_encode_matches_decode():
    raw = bytes([0x84, 0x00, 0x01, 0x00])
    assert encode_block_header(decode_block_header(raw)) == raw

def test_short_header():
    with pytest.raises(UnexpectedEof):
        decode_block_header(b"\x80\x00\x00")

def test_magic():
    validate_magic(b"fLaC")
    validate_magic(bytes([0x66, 0x4C, 0x61, 0x43]))
    with pytest.raises(UnexpectedEof):
        validate_magic(b"fLa")

@pytest.mark.parametrize("found", [b"FLAC", b"flac", b"OggS", b"\x00\x00\x00\x00", b"fLaD", b"RIFF"])
def test_bad_magic(found):
    with pytest.raises(BadMagic) as exc:
        validate_magic(found)
    assert exc.value.found == found

def test_every_single_byte_flip_of_magic_is_rejected():
    magic = bytearray(b"fLaC")
    for i in range(4):
        for bit in range(8):
            bad = bytearray(magic)
            bad[i] ^= 1 << bit
            with pytest.raises(BadMagic):
                validate_magic(bytes(bad))
