"""
CityHash 1.1: 32-bit and 64-bit fingerprints.

This is the current revision. Its 64-bit output differs from the 1.0 revision
in ``cityfp.city_v1`` for every non-empty input.
"""

from ._util import (
    C1,
    C2,
    K0,
    K1,
    K2,
    MASK32,
    MASK64,
    as_view,
    bswap32,
    bswap64,
    fmix,
    hash16,
    mur,
    read32,
    read64,
    rotate32,
    rotate64,
    smix,
    weak_hash32_at,
)


def _hash32_len_0_to_4(data, length: int) -> int:
    b = 0
    c = 9
    for i in range(length):
        v = data[i]
        # bytes are added as signed chars
        if v >= 0x80:
            v -= 0x100
        b = (b * C1 + v) & MASK32
        c ^= b
    return fmix(mur(b, mur(length, c)))


def _hash32_len_5_to_12(data, length: int) -> int:
    a = length
    b = d = length * 5
    c = 9
    a = (a + read32(data, 0)) & MASK32
    b = (b + read32(data, length - 4)) & MASK32
    c = (c + read32(data, (length >> 1) & 4)) & MASK32
    return fmix(mur(c, mur(b, mur(a, d))))


def _hash32_len_13_to_24(data, length: int) -> int:
    a = read32(data, (length >> 1) - 4)
    b = read32(data, 4)
    c = read32(data, length - 8)
    d = read32(data, length >> 1)
    e = read32(data, 0)
    f = read32(data, length - 4)
    h = length
    return fmix(mur(f, mur(e, mur(d, mur(c, mur(b, mur(a, h)))))))


def _scramble32(val: int) -> int:
    return (rotate32((val * C1) & MASK32, 17) * C2) & MASK32


def _mix32(h: int, val: int, shift: int = 19) -> int:
    h ^= val
    h = rotate32(h, shift)
    return (h * 5 + 0xE6546B64) & MASK32


def hash32(data) -> int:
    """Compute the 32-bit CityHash of the given data"""
    data = as_view(data)
    length = len(data)
    if length <= 24:
        if length <= 4:
            return _hash32_len_0_to_4(data, length)
        if length <= 12:
            return _hash32_len_5_to_12(data, length)
        return _hash32_len_13_to_24(data, length)

    h = length & MASK32
    g = f = (C1 * length) & MASK32
    a0 = _scramble32(read32(data, length - 4))
    a1 = _scramble32(read32(data, length - 8))
    a2 = _scramble32(read32(data, length - 16))
    a3 = _scramble32(read32(data, length - 12))
    a4 = _scramble32(read32(data, length - 20))
    h = _mix32(_mix32(h, a0), a2)
    g = _mix32(_mix32(g, a1), a3)
    f = rotate32((f + a4) & MASK32, 19)
    f = (f * 5 + 0xE6546B64) & MASK32

    offset = 0
    iters = (length - 1) // 20
    while iters:
        a0 = _scramble32(read32(data, offset))
        a1 = read32(data, offset + 4)
        a2 = _scramble32(read32(data, offset + 8))
        a3 = _scramble32(read32(data, offset + 12))
        a4 = read32(data, offset + 16)
        h = _mix32(h, a0, 18)
        f = (rotate32((f + a1) & MASK32, 19) * C1) & MASK32
        g = rotate32((g + a2) & MASK32, 18)
        g = (g * 5 + 0xE6546B64) & MASK32
        h = _mix32(h, (a3 + a1) & MASK32)
        g = (bswap32(g ^ a4) * 5) & MASK32
        h = bswap32((h + a4 * 5) & MASK32)
        f = (f + a0) & MASK32
        f, h, g = g, f, h
        offset += 20
        iters -= 1

    g = (rotate32(g, 11) * C1) & MASK32
    g = (rotate32(g, 17) * C1) & MASK32
    f = (rotate32(f, 11) * C1) & MASK32
    f = (rotate32(f, 17) * C1) & MASK32
    h = rotate32((h + g) & MASK32, 19)
    h = (h * 5 + 0xE6546B64) & MASK32
    h = (rotate32(h, 17) * C1) & MASK32
    h = rotate32((h + f) & MASK32, 19)
    h = (h * 5 + 0xE6546B64) & MASK32
    return (rotate32(h, 17) * C1) & MASK32


def _hash_len_0_to_16(data, length: int) -> int:
    if length >= 8:
        mul = K2 + length * 2
        a = (read64(data, 0) + K2) & MASK64
        b = read64(data, length - 8)
        c = (rotate64(b, 37) * mul + a) & MASK64
        d = ((rotate64(a, 25) + b) * mul) & MASK64
        return hash16(c, d, mul)
    if length >= 4:
        mul = K2 + length * 2
        a = read32(data, 0)
        return hash16(length + (a << 3), read32(data, length - 4), mul)
    if length > 0:
        a = data[0]
        b = data[length >> 1]
        c = data[length - 1]
        y = a + (b << 8)
        z = length + (c << 2)
        return (smix((y * K2 ^ z * K0) & MASK64) * K2) & MASK64
    return K2


def _hash_len_17_to_32(data, length: int) -> int:
    mul = K2 + length * 2
    a = (read64(data, 0) * K1) & MASK64
    b = read64(data, 8)
    c = (read64(data, length - 8) * mul) & MASK64
    d = (read64(data, length - 16) * K2) & MASK64
    return hash16(
        (rotate64((a + b) & MASK64, 43) + rotate64(c, 30) + d) & MASK64,
        (a + rotate64((b + K2) & MASK64, 18) + c) & MASK64,
        mul,
    )


def _hash_len_33_to_64(data, length: int) -> int:
    mul = K2 + length * 2
    a = (read64(data, 0) * K2) & MASK64
    b = read64(data, 8)
    c = read64(data, length - 24)
    d = read64(data, length - 32)
    e = (read64(data, 16) * K2) & MASK64
    f = (read64(data, 24) * 9) & MASK64
    g = read64(data, length - 8)
    h = (read64(data, length - 16) * mul) & MASK64
    u = (rotate64((a + g) & MASK64, 43) + (rotate64(b, 30) + c) * 9) & MASK64
    v = ((((a + g) & MASK64) ^ d) + f + 1) & MASK64
    w = (bswap64(((u + v) * mul) & MASK64) + h) & MASK64
    x = (rotate64((e + f) & MASK64, 42) + c) & MASK64
    y = ((bswap64(((v + w) * mul) & MASK64) + g) * mul) & MASK64
    z = (e + f + c) & MASK64
    a = (bswap64(((x + z) * mul + y) & MASK64) + b) & MASK64
    b = (smix(((z + a) * mul + d + h) & MASK64) * mul) & MASK64
    return (b + x) & MASK64


def hash64(data) -> int:
    """Compute the 64-bit CityHash of the given data"""
    data = as_view(data)
    length = len(data)
    if length <= 32:
        if length <= 16:
            return _hash_len_0_to_16(data, length)
        return _hash_len_17_to_32(data, length)
    if length <= 64:
        return _hash_len_33_to_64(data, length)

    # For inputs over 64 bytes we hash the end first, and then as we
    # loop we keep 56 bytes of state: v, w, x, y, and z.
    x = read64(data, length - 40)
    y = (read64(data, length - 16) + read64(data, length - 56)) & MASK64
    z = hash16((read64(data, length - 48) + length) & MASK64, read64(data, length - 24))
    v_lo, v_hi = weak_hash32_at(data, length - 64, length, z)
    w_lo, w_hi = weak_hash32_at(data, length - 32, (y + K1) & MASK64, x)
    x = (x * K1 + read64(data, 0)) & MASK64

    # Round down to a multiple of 64; the last partial block was covered above
    end = (length - 1) & ~63
    offset = 0
    while offset < end:
        x = (rotate64((x + y + v_lo + read64(data, offset + 8)) & MASK64, 37) * K1) & MASK64
        y = (rotate64((y + v_hi + read64(data, offset + 48)) & MASK64, 42) * K1) & MASK64
        x ^= w_hi
        y = (y + v_lo + read64(data, offset + 40)) & MASK64
        z = (rotate64((z + w_lo) & MASK64, 33) * K1) & MASK64
        v_lo, v_hi = weak_hash32_at(data, offset, (v_hi * K1) & MASK64, (x + w_lo) & MASK64)
        w_lo, w_hi = weak_hash32_at(
            data, offset + 32, (z + w_hi) & MASK64, (y + read64(data, offset + 16)) & MASK64
        )
        z, x = x, z
        offset += 64

    return hash16(
        (hash16(v_lo, w_lo) + smix(y) * K1 + z) & MASK64,
        (hash16(v_hi, w_hi) + x) & MASK64,
    )


def hash64_with_seed(data, seed: int) -> int:
    """Compute the 64-bit CityHash with a custom seed"""
    return hash64_with_seeds(data, K2, seed)


def hash64_with_seeds(data, seed0: int, seed1: int) -> int:
    """Compute the 64-bit CityHash with two custom seeds"""
    return hash16((hash64(data) - seed0) & MASK64, seed1 & MASK64)
