"""
CRC32C-mixed CityHash 1.0: 256-bit fingerprints and the 128-bit variants built on them.

The CRC32 instruction is only used as a fast integer mixer. The ``crc32c``
package supplies it, and the functions here refuse to run (raising
CrcUnsupportedError) unless the configured policy accepts what was detected.
They never fall back to a different hash.
"""

import logging
import struct
from enum import Enum

from ._types import Hash128, Hash256, as_seed128
from ._util import K0, MASK32, MASK64, as_view, hash16, read64, rotate64, smix, weak_hash32_at
from .city_v1 import hash128, hash128_with_seed
from .config import CrcPolicy, get_config
from .exceptions import CrcUnsupportedError

try:
    import crc32c
except ImportError:
    # crc32c refuses to import when CRC32C_SW_MODE=none and the CPU lacks the instruction
    crc32c = None

logger = logging.getLogger(__name__)

# Inputs of at most this many bytes use the plain 128-bit hash
CRC128_THRESHOLD = 900

_BLOCK = 240


class CrcSupport(Enum):
    HARDWARE = "hardware"
    SOFTWARE = "software"
    UNAVAILABLE = "unavailable"


def crc_support() -> CrcSupport:
    """Report which CRC32C implementation this process can use."""
    if crc32c is None:
        support = CrcSupport.UNAVAILABLE
    elif crc32c.hardware_based:
        support = CrcSupport.HARDWARE
    else:
        support = CrcSupport.SOFTWARE
    logger.debug("crc32c support detected: %s", support.value)
    return support


def crc_available() -> bool:
    """Whether hash256 and the hash128_crc functions may run under the current config."""
    policy = get_config().crc_policy
    if policy is CrcPolicy.OFF:
        return False
    support = crc_support()
    if policy is CrcPolicy.ANY:
        return support is not CrcSupport.UNAVAILABLE
    return support is CrcSupport.HARDWARE


def _require_crc() -> None:
    if not crc_available():
        policy = get_config().crc_policy
        logger.debug("refusing CRC hash: policy=%s", policy.value)
        raise CrcUnsupportedError(
            f"CRC32C mixing is unavailable (support={crc_support().value}, "
            f"policy={policy.value}); use hash128 instead"
        )


def _crc32c_u64(crc: int, value: int) -> int:
    """Raw CRC32C update of the low 32 bits of crc with one little-endian word"""
    # crc32c.crc32c() pre- and post-inverts the running value
    return crc32c.crc32c(struct.pack("<Q", value), (crc & MASK32) ^ MASK32) ^ MASK32


def _hash256_long(data, length: int, seed: int) -> Hash256:
    """Requires length >= 240"""
    a = (read64(data, 56) + K0) & MASK64
    b = (read64(data, 96) + K0) & MASK64
    c = r1 = hash16(b, length)
    d = r2 = (read64(data, 120) * K0 + length) & MASK64
    e = (read64(data, 184) + seed) & MASK64
    f = seed
    g = h = i = j = 0
    t = (c + d) & MASK64

    # 240 bytes of input per iteration, six 40-byte steps
    iters = length // _BLOCK
    remaining = length - iters * _BLOCK
    offset = 0
    for _ in range(iters):
        for multiplier, z in ((1, 1), (K0, 0), (1, 1), (K0, 0), (1, 1), (K0, 0)):
            w0, w1, w2, w3, w4 = struct.unpack_from("<5Q", data, offset)
            old_a = a
            a = (rotate64(b, 41 ^ z) * multiplier + w0) & MASK64
            b = (rotate64(c, 27 ^ z) * multiplier + w1) & MASK64
            c = (rotate64(d, 41 ^ z) * multiplier + w2) & MASK64
            d = (rotate64(e, 33 ^ z) * multiplier + w3) & MASK64
            e = (rotate64(t, 25 ^ z) * multiplier + w4) & MASK64
            t = old_a
            f = _crc32c_u64(f, a)
            g = _crc32c_u64(g, b)
            h = _crc32c_u64(h, c)
            i = _crc32c_u64(i, d)
            j = _crc32c_u64(j, e)
            offset += 40

    j = (j + (i << 32)) & MASK64
    a = hash16(a, j)
    h = (h + (g << 32)) & MASK64
    b = (b * K0 + h) & MASK64
    c = (hash16(c, f) + i) & MASK64
    d = hash16(d, e)
    v_lo = (j + e) & MASK64
    v_hi = hash16(h, t)
    h = (v_hi + f) & MASK64

    # Fold the remaining 0-239 bytes in 32-byte chunks from the end
    tail_done = 0
    while tail_done < remaining:
        tail_done += 32
        c = (rotate64((c - a) & MASK64, 42) * K0 + v_hi) & MASK64
        d = (d + read64(data, length - tail_done + 16)) & MASK64
        a = (rotate64(a, 49) * K0 + d) & MASK64
        d = (d + v_lo) & MASK64
        v_lo, v_hi = weak_hash32_at(data, length - tail_done, v_lo, v_hi)

    e = (hash16(a, d) + v_lo) & MASK64
    f = (hash16(b, c) + a) & MASK64
    g = (hash16(v_lo, v_hi) + c) & MASK64
    r0 = (e + f + g + h) & MASK64
    a = (smix(((a + g) * K0) & MASK64) * K0 + b) & MASK64
    r1 = (r1 + a + r0) & MASK64
    a = (smix((a * K0) & MASK64) * K0 + c) & MASK64
    r2 = (r2 + a + r1) & MASK64
    a = (smix(((a + e) * K0) & MASK64) * K0) & MASK64
    r3 = (a + r2) & MASK64
    return Hash256(r0, r1, r2, r3)


def _hash256_short(data, length: int) -> Hash256:
    """Requires length < 240"""
    buf = bytearray(_BLOCK)
    buf[:length] = data
    return _hash256_long(buf, _BLOCK, ~length & MASK32)


def _hash256(data) -> Hash256:
    length = len(data)
    if length >= _BLOCK:
        return _hash256_long(data, length, 0)
    return _hash256_short(data, length)


def hash256(data) -> Hash256:
    """Compute the 256-bit CRC32C-mixed CityHash of the given data"""
    _require_crc()
    return _hash256(as_view(data))


def hash128_crc(data) -> Hash128:
    """Compute the 128-bit CityHash, switching to the CRC32C hash for long inputs"""
    _require_crc()
    data = as_view(data)
    if len(data) <= CRC128_THRESHOLD:
        return hash128(data)
    result = _hash256(data)
    return Hash128(result.c, result.d)


def hash128_crc_with_seed(data, seed) -> Hash128:
    """Compute the seeded 128-bit CityHash, switching to the CRC32C hash for long inputs"""
    _require_crc()
    data = as_view(data)
    if len(data) <= CRC128_THRESHOLD:
        return hash128_with_seed(data, seed)
    first, second = as_seed128(seed)
    result = _hash256(data)
    u = (second + result.a) & MASK64
    v = (first + result.b) & MASK64
    return Hash128(
        hash16(u, (v + result.c) & MASK64),
        hash16(rotate64(v, 32), (u * K0 + result.d) & MASK64),
    )
