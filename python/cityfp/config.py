"""
Runtime configuration for cityfp.

Only the CRC hash family is configurable; the plain hash functions take no
settings. Values can be provided via constructor parameters or environment
variables, and constructor parameters take precedence.
"""

import os
from enum import Enum
from typing import Optional, Union

from .exceptions import ConfigError


class CrcPolicy(Enum):
    """Which CRC32C implementations may back the CRC hash family."""

    HARDWARE = "hardware"
    ANY = "any"
    OFF = "off"


CRC_POLICY_ENV = "CITYFP_CRC_POLICY"


def _parse_policy(value: Union[str, CrcPolicy]) -> CrcPolicy:
    if isinstance(value, CrcPolicy):
        return value
    try:
        return CrcPolicy(value.strip().lower())
    except (AttributeError, ValueError):
        choices = ", ".join(p.value for p in CrcPolicy)
        raise ConfigError(
            f"crc_policy must be one of {choices}, got {value!r}"
        ) from None


class CityFPConfig:
    """
    Configuration for the CRC32C-mixed hash family.

    Args:
        crc_policy: ``hardware`` (default) requires the CPU CRC32 instruction,
                    ``any`` also accepts the table-driven implementation, which
                    gives bit-identical results, and ``off`` disables the family.
                    Falls back to the ``CITYFP_CRC_POLICY`` environment variable.
    """

    DEFAULT_CRC_POLICY = CrcPolicy.HARDWARE

    def __init__(self, crc_policy: Optional[Union[str, CrcPolicy]] = None):
        if crc_policy is None:
            crc_policy = os.environ.get(CRC_POLICY_ENV) or self.DEFAULT_CRC_POLICY
        self.crc_policy = _parse_policy(crc_policy)

    def __repr__(self) -> str:
        return f"CityFPConfig(crc_policy={self.crc_policy.value!r})"


_config: Optional[CityFPConfig] = None


def get_config() -> CityFPConfig:
    """Return the process-wide configuration, reading the environment on first use."""
    global _config
    if _config is None:
        _config = CityFPConfig()
    return _config


def set_config(config: Optional[CityFPConfig]) -> None:
    """Replace the process-wide configuration; None re-reads the environment lazily."""
    global _config
    _config = config
