"""
CityHash 1.0: 64-bit and 128-bit fingerprints.

``hash64_v1`` is kept for fingerprints stored by the original revision and is
intentionally incompatible with ``cityfp.city.hash64``. The 128-bit family
(and the CRC family built on it in ``cityfp.crc``) only exists in this revision.
"""

from ._types import Hash128, as_seed128
from ._util import (
    K0,
    K1,
    K2,
    K3,
    MASK64,
    as_view,
    hash16,
    read32,
    read64,
    rotate64,
    smix,
    weak_hash32_at,
)


def hash_len_0_to_16(data, length: int) -> int:
    if length > 8:
        a = read64(data, 0)
        b = read64(data, length - 8)
        return hash16(a, rotate64((b + length) & MASK64, length)) ^ b
    if length >= 4:
        a = read32(data, 0)
        return hash16(length + (a << 3), read32(data, length - 4))
    if length > 0:
        a = data[0]
        b = data[length >> 1]
        c = data[length - 1]
        y = a + (b << 8)
        z = length + (c << 2)
        return (smix((y * K2 ^ z * K3) & MASK64) * K2) & MASK64
    return K2


def _hash_len_17_to_32(data, length: int) -> int:
    a = (read64(data, 0) * K1) & MASK64
    b = read64(data, 8)
    c = (read64(data, length - 8) * K2) & MASK64
    d = (read64(data, length - 16) * K0) & MASK64
    return hash16(
        (rotate64((a - b) & MASK64, 43) + rotate64(c, 30) + d) & MASK64,
        (a + rotate64(b ^ K3, 20) - c + length) & MASK64,
    )


def _hash_len_33_to_64(data, length: int) -> int:
    z = read64(data, 24)
    a = (read64(data, 0) + (length + read64(data, length - 16)) * K0) & MASK64
    b = rotate64((a + z) & MASK64, 52)
    c = rotate64(a, 37)
    a = (a + read64(data, 8)) & MASK64
    c = (c + rotate64(a, 7)) & MASK64
    a = (a + read64(data, 16)) & MASK64
    vf = (a + z) & MASK64
    vs = (b + rotate64(a, 31) + c) & MASK64
    a = (read64(data, 16) + read64(data, length - 32)) & MASK64
    z = read64(data, length - 8)
    b = rotate64((a + z) & MASK64, 52)
    c = rotate64(a, 37)
    a = (a + read64(data, length - 24)) & MASK64
    c = (c + rotate64(a, 7)) & MASK64
    a = (a + read64(data, length - 16)) & MASK64
    wf = (a + z) & MASK64
    ws = (b + rotate64(a, 31) + c) & MASK64
    r = smix(((vf + ws) * K2 + (wf + vs) * K0) & MASK64)
    return (smix((r * K0 + vs) & MASK64) * K2) & MASK64


def _chunk64(data, offset: int, v, w, x: int, y: int, z: int):
    """One 64-byte step of the long-input loop; returns the new (v, w, x, y, z)"""
    v_lo, v_hi = v
    w_lo, w_hi = w
    x = (rotate64((x + y + v_lo + read64(data, offset + 16)) & MASK64, 37) * K1) & MASK64
    y = (rotate64((y + v_hi + read64(data, offset + 48)) & MASK64, 42) * K1) & MASK64
    x ^= w_hi
    y ^= v_lo
    z = rotate64(z ^ w_lo, 33)
    v = weak_hash32_at(data, offset, (v_hi * K1) & MASK64, (x + w_lo) & MASK64)
    w = weak_hash32_at(data, offset + 32, (z + w_hi) & MASK64, y)
    return v, w, z, y, x


def hash64_v1(data) -> int:
    """Compute the 64-bit CityHash 1.0 of the given data"""
    data = as_view(data)
    length = len(data)
    if length <= 32:
        if length <= 16:
            return hash_len_0_to_16(data, length)
        return _hash_len_17_to_32(data, length)
    if length <= 64:
        return _hash_len_33_to_64(data, length)

    # For inputs over 64 bytes we hash the end first, and then as we
    # loop we keep 56 bytes of state: v, w, x, y, and z.
    x = read64(data, 0)
    y = read64(data, length - 16) ^ K1
    z = read64(data, length - 56) ^ K0
    v = weak_hash32_at(data, length - 64, length, y)
    w = weak_hash32_at(data, length - 32, (length * K1) & MASK64, K0)
    z = (z + smix(v[1]) * K1) & MASK64
    x = (rotate64((z + x) & MASK64, 39) * K1) & MASK64
    y = (rotate64(y, 33) * K1) & MASK64

    # Round down to a multiple of 64; the last partial block was covered above
    end = (length - 1) & ~63
    for offset in range(0, end, 64):
        v, w, x, y, z = _chunk64(data, offset, v, w, x, y, z)

    return hash16(
        (hash16(v[0], w[0]) + smix(y) * K1 + z) & MASK64,
        (hash16(v[1], w[1]) + x) & MASK64,
    )


def hash64_v1_with_seed(data, seed: int) -> int:
    """Compute the 64-bit CityHash 1.0 with a custom seed"""
    return hash64_v1_with_seeds(data, K2, seed)


def hash64_v1_with_seeds(data, seed0: int, seed1: int) -> int:
    """Compute the 64-bit CityHash 1.0 with two custom seeds"""
    return hash16((hash64_v1(data) - seed0) & MASK64, seed1 & MASK64)


def _city_murmur(data, length: int, seed: tuple[int, int]) -> Hash128:
    """128-bit hash for inputs under 128 bytes, based on City and Murmur"""
    a, b = seed
    remaining = length - 16

    if remaining <= 0:
        a = (smix((a * K1) & MASK64) * K1) & MASK64
        c = (b * K1 + hash_len_0_to_16(data, length)) & MASK64
        d = smix((a + (read64(data, 0) if length >= 8 else c)) & MASK64)
    else:
        c = hash16((read64(data, length - 8) + K1) & MASK64, a)
        d = hash16((b + length) & MASK64, (c + read64(data, length - 16)) & MASK64)
        a = (a + d) & MASK64
        offset = 0
        while remaining > 0:
            a ^= (smix((read64(data, offset) * K1) & MASK64) * K1) & MASK64
            a = (a * K1) & MASK64
            b ^= a
            c ^= (smix((read64(data, offset + 8) * K1) & MASK64) * K1) & MASK64
            c = (c * K1) & MASK64
            d ^= c
            offset += 16
            remaining -= 16

    a = hash16(a, c)
    b = hash16(d, b)
    return Hash128(a ^ b, hash16(b, a))


def _hash128(data, seed: tuple[int, int]) -> Hash128:
    length = len(data)
    if length < 128:
        return _city_murmur(data, length, seed)

    # Keep 56 bytes of state: v, w, x, y, and z
    x, y = seed
    z = (length * K1) & MASK64
    v_lo = (rotate64(y ^ K1, 49) * K1 + read64(data, 0)) & MASK64
    v_hi = (rotate64(v_lo, 42) * K1 + read64(data, 8)) & MASK64
    w_lo = (rotate64((y + z) & MASK64, 35) * K1 + x) & MASK64
    w_hi = (rotate64((x + read64(data, 88)) & MASK64, 53) * K1) & MASK64
    v = (v_lo, v_hi)
    w = (w_lo, w_hi)

    # The same inner loop as hash64_v1(), two 64-byte steps per cycle
    offset = 0
    remaining = length
    while remaining >= 128:
        v, w, x, y, z = _chunk64(data, offset, v, w, x, y, z)
        v, w, x, y, z = _chunk64(data, offset + 64, v, w, x, y, z)
        offset += 128
        remaining -= 128

    v_lo, v_hi = v
    w_lo, w_hi = w
    y = (y + rotate64(w_lo, 37) * K0 + z) & MASK64
    x = (x + rotate64((v_lo + z) & MASK64, 49) * K0) & MASK64

    # Fold up to four 32-byte chunks from the end of the input
    tail_done = 0
    while tail_done < remaining:
        tail_done += 32
        y = (rotate64((y - x) & MASK64, 42) * K0 + v_hi) & MASK64
        w_lo = (w_lo + read64(data, length - tail_done + 16)) & MASK64
        x = (rotate64(x, 49) * K0 + w_lo) & MASK64
        w_lo = (w_lo + v_lo) & MASK64
        v_lo, v_hi = weak_hash32_at(data, length - tail_done, v_lo, v_hi)

    # Two different 48-byte-to-8-byte hashes give the 16-byte result
    x = hash16(x, v_lo)
    y = hash16(y, w_lo)
    return Hash128(
        (hash16((x + v_hi) & MASK64, w_hi) + y) & MASK64,
        hash16((x + w_hi) & MASK64, (y + v_hi) & MASK64),
    )


def hash128_with_seed(data, seed) -> Hash128:
    """Compute the 128-bit CityHash with a 128-bit seed given as a pair of ints"""
    return _hash128(as_view(data), as_seed128(seed))


def hash128(data) -> Hash128:
    """Compute the 128-bit CityHash of the given data"""
    data = as_view(data)
    length = len(data)
    if length >= 16:
        seed = (read64(data, 0) ^ K3, read64(data, 8))
        return _hash128(data[16:], seed)
    if length >= 8:
        seed = (read64(data, 0) ^ ((length * K0) & MASK64), read64(data, length - 8) ^ K1)
        return _hash128(data[:0], seed)
    return _hash128(data, (K0, K1))
