"Core exceptions raised by cityfp"


class CityFPError(Exception):
    pass


class ConfigError(CityFPError, ValueError):
    "Invalid configuration value"
    pass


class CrcUnsupportedError(CityFPError):
    "The CRC32C-mixed hash family is not available under the current policy"
    pass
