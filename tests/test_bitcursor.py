import pytest

from flacmeta.binary.codecs.bitcursor import BitCursor
from flacmeta.binary.errors import OutOfBits

def test_reads_msb_first_across_bytes():
    cur = BitCursor(bytes([0b1011_0011, 0b0101_1100]))
    assert cur.read_bits(3) == 0b101
    assert cur.read_bits(7) == 0b1_0011_01
    assert cur.read_bits(6) == 0b01_1100
    assert cur.tell_bits() == 16
    assert cur.remaining_bits() == 0

def test_full_64_bit_read():
    data = (0x0123456789ABCDEF).to_bytes(8, "big")
    cur = BitCursor(data)
    assert cur.read_bits(64) == 0x0123456789ABCDEF

def test_unaligned_64_bit_read():
    data = bytes([0xF0]) + (0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")
    cur = BitCursor(data)
    assert cur.read_bits(4) == 0xF
    assert cur.read_bits(64) == (0xFFFFFFFFFFFFFFFF >> 4)  # four zero bits lead in
    assert cur.remaining_bits() == 4

def test_out_of_bits_leaves_position():
    cur = BitCursor(b"\xAA")
    cur.read_bits(5)
    with pytest.raises(OutOfBits) as exc:
        cur.read_bits(4)
    assert exc.value.requested == 4 and exc.value.remaining == 3
    assert cur.tell_bits() == 5
    assert cur.read_bits(3) == 0b010

@pytest.mark.parametrize("n", [0, 65, -1])
def test_width_range(n):
    with pytest.raises(ValueError):
        BitCursor(bytes(16)).read_bits(n)
