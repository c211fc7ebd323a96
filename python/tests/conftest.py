import pytest

from cityfp import CityFPConfig, CrcPolicy, set_config


def make_input(length):
    """Deterministic input the reference tables were generated from"""
    return bytes((i * 131 + 17) & 0xFF for i in range(length))


@pytest.fixture(autouse=True)
def _reset_config():
    set_config(None)
    yield
    set_config(None)


@pytest.fixture()
def crc_any():
    """Open the CRC gate for whatever crc32c implementation is installed"""
    pytest.importorskip("crc32c")
    set_config(CityFPConfig(crc_policy=CrcPolicy.ANY))
