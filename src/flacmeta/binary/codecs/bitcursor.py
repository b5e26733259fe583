from __future__ import annotations
from ..errors import OutOfBits

class BitCursor:
    __slots__ = ("buf", "_bitpos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self._bitpos = 0

    def bit_length(self) -> int: return len(self.buf) * 8
    def remaining_bits(self) -> int: return self.bit_length() - self._bitpos
    def tell_bits(self) -> int: return self._bitpos

    # bits (MSB-first, across byte boundaries)
    def read_bits(self, n: int) -> int:
        if not (0 < n <= 64): raise ValueError("bits 1..64")
        if n > self.remaining_bits(): raise OutOfBits(n, self.remaining_bits())
        start = self._bitpos
        end = start + n
        first, last = start // 8, (end + 7) // 8
        window = int.from_bytes(self.buf[first:last], "big")
        # drop the trailing bits past `end`, then the leading bits before `start`
        val = (window >> (last * 8 - end)) & ((1 << n) - 1)
        self._bitpos = end
        return val
