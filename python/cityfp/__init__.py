"""
cityfp - CityHash fingerprints in pure Python

Fast non-cryptographic 32/64/128/256-bit hashes for hash-table keys, checksums
and deduplication. Two incompatible 64-bit revisions are provided: ``hash64``
(CityHash 1.1) and ``hash64_v1`` (CityHash 1.0, which the 128/256-bit family
belongs to).

Usage:
    from cityfp import crc_available, hash64, hash64_with_seed, hash128, hash256

    h = hash64(b"Hello, World!")
    h = hash64_with_seed(b"Hello", 12345)
    first, second = hash128(b"Hello")

    # CRC32C-mixed family; raises CrcUnsupportedError when unavailable
    if crc_available():
        digest = hash256(data).hexdigest()
"""

from ._types import Hash128, Hash256
from .city import hash32, hash64, hash64_with_seed, hash64_with_seeds
from .city_v1 import (
    hash64_v1,
    hash64_v1_with_seed,
    hash64_v1_with_seeds,
    hash128,
    hash128_with_seed,
)
from .config import CityFPConfig, CrcPolicy, get_config, set_config
from .crc import (
    CrcSupport,
    crc_available,
    crc_support,
    hash128_crc,
    hash128_crc_with_seed,
    hash256,
)
from .exceptions import ConfigError, CityFPError, CrcUnsupportedError

__version__ = "1.0.0"

__all__ = [
    "CityFPConfig",
    "CityFPError",
    "ConfigError",
    "CrcPolicy",
    "CrcSupport",
    "CrcUnsupportedError",
    "Hash128",
    "Hash256",
    "crc_available",
    "crc_support",
    "get_config",
    "hash32",
    "hash64",
    "hash64_v1",
    "hash64_v1_with_seed",
    "hash64_v1_with_seeds",
    "hash64_with_seed",
    "hash64_with_seeds",
    "hash128",
    "hash128_crc",
    "hash128_crc_with_seed",
    "hash128_with_seed",
    "hash256",
    "set_config",
]
