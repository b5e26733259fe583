from __future__ import annotations


class FlacError(ValueError):
    pass


class UnexpectedEof(FlacError):
    pass


class TruncatedHeader(UnexpectedEof):
    def __init__(self, got: int, offset: int | None = None):
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"truncated metadata block header{where}: need 4 bytes, got {got}")
        self.got = got
        self.offset = offset


class TruncatedPayload(UnexpectedEof):
    def __init__(self, expected: int, got: int, offset: int | None = None):
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"truncated metadata block payload{where}: declared {expected} bytes, got {got}")
        self.expected = expected
        self.got = got
        self.offset = offset


class BadMagic(FlacError):
    def __init__(self, found: bytes, expected: bytes):
        super().__init__(f"invalid stream marker: found {found.hex()} ({found!r}), expected {expected.hex()} ({expected!r})")
        self.found = found


class UnexpectedBlockType(FlacError):
    def __init__(self, code: int):
        super().__init__(f"unexpected metadata block type {code}")
        self.code = code


class InsufficientData(FlacError):
    def __init__(self, length: int, needed: int):
        super().__init__(f"STREAMINFO payload too short: {length} bytes, need {needed}")
        self.length = length


class OutOfBits(FlacError):
    def __init__(self, requested: int, remaining: int):
        super().__init__(f"bit underrun: requested {requested}, {remaining} left")
        self.requested = requested
        self.remaining = remaining


class StreaminfoNotFirst(FlacError):
    def __init__(self, block_type):
        super().__init__(f"first metadata block must be STREAMINFO, found {block_type}")
        self.block_type = block_type
