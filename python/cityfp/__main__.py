"""Print CityHash fingerprints of files, sha256sum style."""

import argparse
import logging
import sys

from . import city, city_v1, crc
from .exceptions import CrcUnsupportedError


def _fingerprint(data: bytes, bits: int, v1: bool, seed) -> str:
    if bits == 32:
        return f"{city.hash32(data):08x}"
    if bits == 64:
        if seed is None:
            value = city_v1.hash64_v1(data) if v1 else city.hash64(data)
        elif v1:
            value = city_v1.hash64_v1_with_seed(data, seed)
        else:
            value = city.hash64_with_seed(data, seed)
        return f"{value:016x}"
    if bits == 128:
        if seed is None:
            return city_v1.hash128(data).hexdigest()
        return city_v1.hash128_with_seed(data, (seed, 0)).hexdigest()
    return crc.hash256(data).hexdigest()


def _read(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    with open(name, "rb") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cityfp", description="Print CityHash fingerprints of files."
    )
    parser.add_argument("files", nargs="*", default=["-"], metavar="FILE")
    parser.add_argument("--bits", type=int, choices=(32, 64, 128, 256), default=64)
    parser.add_argument(
        "--v1", action="store_true", help="use the CityHash 1.0 revision for 64-bit output"
    )
    parser.add_argument("--seed", type=lambda s: int(s, 0), default=None)
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and args.bits in (32, 256):
        parser.error(f"--seed is not supported with --bits {args.bits}")
    if args.v1 and args.bits != 64:
        parser.error("--v1 only applies to --bits 64")
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    for name in args.files:
        try:
            digest = _fingerprint(_read(name), args.bits, args.v1, args.seed)
        except CrcUnsupportedError as e:
            print(f"cityfp: {e}", file=sys.stderr)
            return 2
        except OSError as e:
            print(f"cityfp: {name}: {e.strerror}", file=sys.stderr)
            return 1
        print(f"{digest}  {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
