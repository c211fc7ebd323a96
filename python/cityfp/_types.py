import struct
from typing import NamedTuple


class Hash128(NamedTuple):
    """128-bit digest as an ordered pair of 64-bit words"""

    first: int
    second: int

    def to_bytes(self) -> bytes:
        return struct.pack("<2Q", self.first, self.second)

    def hexdigest(self) -> str:
        return self.to_bytes().hex()


class Hash256(NamedTuple):
    """256-bit digest as four 64-bit words"""

    a: int
    b: int
    c: int
    d: int

    def to_bytes(self) -> bytes:
        return struct.pack("<4Q", self.a, self.b, self.c, self.d)

    def hexdigest(self) -> str:
        return self.to_bytes().hex()


def as_seed128(seed) -> tuple[int, int]:
    """Normalize a 128-bit seed given as any pair of ints"""
    try:
        first, second = seed
    except (TypeError, ValueError):
        raise ValueError(f"128-bit seed must be a pair of ints, got {seed!r}") from None
    return first & 0xFFFFFFFFFFFFFFFF, second & 0xFFFFFFFFFFFFFFFF
