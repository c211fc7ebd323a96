"""Loaders and mixing primitives shared by every CityHash revision."""

import struct

# Some primes between 2^63 and 2^64 for various uses
K0 = 0xC3A5C85C97CB3127
K1 = 0xB492B66FBE98F273
K2 = 0x9AE16A3B2F90404F
K3 = 0xC949D7C7509E6557

# Murmur3 constants for 32-bit hashing
C1 = 0xCC9E2D51
C2 = 0x1B873593

_KMUL = 0x9DDFEA08EB382D69

MASK64 = 0xFFFFFFFFFFFFFFFF
MASK32 = 0xFFFFFFFF


def as_view(data) -> memoryview:
    """Flat unsigned-byte view over any bytes-like object"""
    view = memoryview(data)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view


def read64(data, offset: int = 0) -> int:
    """Read little-endian uint64"""
    return struct.unpack_from("<Q", data, offset)[0]


def read32(data, offset: int = 0) -> int:
    """Read little-endian uint32"""
    return struct.unpack_from("<I", data, offset)[0]


def bswap64(val: int) -> int:
    return struct.unpack("<Q", struct.pack(">Q", val))[0]


def bswap32(val: int) -> int:
    return struct.unpack("<I", struct.pack(">I", val))[0]


def rotate64(val: int, shift: int) -> int:
    """Rotate right; shift must be in [0, 64)"""
    assert 0 <= shift < 64, shift
    shift &= 63
    if shift == 0:
        return val
    return ((val >> shift) | (val << (64 - shift))) & MASK64


def rotate32(val: int, shift: int) -> int:
    assert 0 <= shift < 32, shift
    shift &= 31
    if shift == 0:
        return val
    return ((val >> shift) | (val << (32 - shift))) & MASK32


def smix(val: int) -> int:
    return val ^ (val >> 47)


def hash16(u: int, v: int, mul: int = _KMUL) -> int:
    """Collapse the 128-bit value (u, v) to 64 bits, Murmur-inspired"""
    a = ((u ^ v) * mul) & MASK64
    a ^= a >> 47
    b = ((v ^ a) * mul) & MASK64
    b ^= b >> 47
    return (b * mul) & MASK64


def weak_hash32(w: int, x: int, y: int, z: int, a: int, b: int) -> tuple[int, int]:
    """Cheap 16-byte hash of four words and two seeds"""
    a = (a + w) & MASK64
    b = rotate64((b + a + z) & MASK64, 21)
    c = a
    a = (a + x + y) & MASK64
    b = (b + rotate64(a, 44)) & MASK64
    return (a + z) & MASK64, (b + c) & MASK64


def weak_hash32_at(data, offset: int, a: int, b: int) -> tuple[int, int]:
    """weak_hash32 over the 32 bytes at data[offset:offset + 32]"""
    w, x, y, z = struct.unpack_from("<4Q", data, offset)
    return weak_hash32(w, x, y, z, a, b)


# Murmur3 helpers for the 32-bit hash

def fmix(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h


def mur(a: int, h: int) -> int:
    """Combine two 32-bit values"""
    a = (a * C1) & MASK32
    a = rotate32(a, 17)
    a = (a * C2) & MASK32
    h ^= a
    h = rotate32(h, 19)
    return (h * 5 + 0xE6546B64) & MASK32
