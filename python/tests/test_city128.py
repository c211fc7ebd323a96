import random

import pytest

from cityfp import Hash128, hash64, hash64_v1, hash128, hash128_with_seed
from cityfp.city_v1 import _city_murmur, _hash128

from conftest import make_input

SEED = Hash128(0x0123456789ABCDEF, 0xFEDCBA9876543210)

# (length, hash128, hash128_with_seed(SEED))
HASH128 = [
    (0, (0x3df09dfc64c09a2b, 0x3cb540c392e51e29), (0xc5ee24e9a7f8e832, 0x896d1395ac698dec)),
    (1, (0xa81dd96fd15be273, 0xa60860b94ba69401), (0x3de34cee76c6cc24, 0xba8cd08ab84004b6)),
    (3, (0x88d9dffa4b6018c3, 0xebbd1b024b926570), (0x233445a59ea3b787, 0x2986903a7fde0312)),
    (4, (0xe3568f9504e7f41d, 0xfd6951dc768b73b9), (0x330b0292d2807298, 0x8f959b8bd742e5fb)),
    (7, (0xce0df19b9b8450d7, 0x0f014d4ef02edab2), (0xaeec24f8867197f3, 0xc71dc04394ee1717)),
    (8, (0xd4ea7ae69ca13baa, 0xda68b25ea692961c), (0xa151de8e3d1a7331, 0xb925ec39bd04d74f)),
    (12, (0xc9e8dc6524826cb7, 0x910739aefeb4d458), (0x53ec72d4f16333c6, 0x43f9eae189fced22)),
    (13, (0x1316e71186265cff, 0x015444260c7e2bd8), (0xa027b51cdc4119e6, 0x9b6a2c20bec63487)),
    (15, (0x54dacea77fe8fd89, 0xa75e0750eabdd9af), (0x997bff482d5cd9b2, 0x4ff0b6a423674a80)),
    (16, (0x2e125bc89e377948, 0xb1802f87e215c37e), (0x924a5becf65d9852, 0xfdc7c93fcc491e09)),
    (17, (0x1d7021904bda3772, 0x56742a7a2fa716ed), (0x1d45b8c87c2558b6, 0xc7c822bc29b0a343)),
    (24, (0xaf3ebb6a116e7a33, 0x2254bdaa3dee29c4), (0xb79092e018fbd99b, 0xf82da5c3d6a0cea9)),
    (25, (0x4d4aa0bb263719b6, 0xadbdb3331f5367f1), (0xf89e6d8d250312d3, 0x88551dff6d5440a8)),
    (31, (0x86b71c8301fb797f, 0x13dc72b91259a010), (0x1024e95f6b014cfd, 0x93c9f12652e7eba6)),
    (32, (0x9dcf725cdabcac67, 0xda2038c355e490b8), (0x14207a36f3340308, 0xdbd78277d0ec6120)),
    (33, (0xc17d00d5a330bc62, 0x553f97474456d7c5), (0x9156209d7ad254b0, 0x3604fa32077d7636)),
    (63, (0xcc57f5ccaa767e55, 0xd9edc405d0dec321), (0x7ab50baff6ecda1c, 0x1cf61695488fd648)),
    (64, (0xb7a50da8fcc03aab, 0xa3681edc3d680edf), (0xef58d47f92b30e47, 0x6334007ff1e3fa52)),
    (65, (0xa256001c54b2e88a, 0xbd7b2dfaabd45f10), (0xc0d6f9ab7748f8dd, 0x7e7b1b609c19b311)),
    (127, (0x44778cb197c88817, 0x92baa9c9a6d287a4), (0x2a7affb09f56b36a, 0xe1ec5aa794d22833)),
    (128, (0x8691d902e211ce73, 0x1a9576d805e9f454), (0xa4648ee682901ce5, 0x62adfea7c2153f8c)),
    (129, (0xadbb41e48e908945, 0x76440e35ece8fd0c), (0x36195266fc6047b7, 0x5689f71ba6bf5f2b)),
    (191, (0xff7f715d96afbe48, 0xc6cb76752887d576), (0x177b03d968af75f6, 0xcde6177a8bd45d5d)),
    (192, (0xf74f6049307647e4, 0xfe9d6ec030588154), (0x35c837fdacf1a9bd, 0xa0e3c6c3e3c23728)),
    (239, (0x32fa555c03800e13, 0x41ee1939c38ebb06), (0xfa4b33224d4ad822, 0xd882bf1db2a8353c)),
    (240, (0x9ffa3273ac470ff0, 0x38809489e4551104), (0xaf0f117c506be0b4, 0x9ef681ea83bad6e4)),
    (241, (0xcda0cb65e8e17081, 0x177c7694256690a6), (0x3299d0784740b558, 0x9f16dddae03b88b5)),
    (479, (0x345937ef186b7ec2, 0xd4a1360d1f44a033), (0x5f9711bb8e89b8a0, 0xb423e02db3820f8d)),
    (480, (0xbff024619372f8ec, 0x703d50e1abdc233e), (0x09a9eed34eeb0227, 0x44050a988f0b1451)),
    (900, (0x53d5217538cd048b, 0x8ccee50839898a87), (0x42af1ab22ac07ec9, 0x1846d25e10ab3d31)),
    (901, (0xb1caa12a61b9b6ed, 0xd9c626ab33f34bcb), (0xcb97fad39ea6f437, 0xcf0cd9cb0bb876f7)),
    (2048, (0x779ee13693b53fe1, 0x4795a3c9747fa368), (0x337f8d4d16835755, 0xe038ef4a05b23de9)),
]


@pytest.mark.parametrize("length,expected,seeded", HASH128)
def test_hash128_reference(length, expected, seeded):
    data = make_input(length)
    assert hash128(data) == expected
    assert hash128_with_seed(data, SEED) == seeded


def test_golden_key():
    assert hash128(b"10F70305-2FA8-45EC-886F-21486263BA69") == (
        0x549C3A86441E40B9,
        0x06D1A1BAEC369A7C,
    )


def test_result_type():
    result = hash128(b"abc")
    assert isinstance(result, Hash128)
    first, second = result
    assert result.first == first and result.second == second
    assert len(result.to_bytes()) == 16
    assert result.to_bytes()[:8] == first.to_bytes(8, "little")
    assert result.hexdigest() == result.to_bytes().hex()


def test_seed_accepts_any_pair():
    data = make_input(200)
    expected = hash128_with_seed(data, SEED)
    assert hash128_with_seed(data, tuple(SEED)) == expected
    assert hash128_with_seed(data, list(SEED)) == expected


@pytest.mark.parametrize("seed", [1, (1, 2, 3), None])
def test_malformed_seed(seed):
    with pytest.raises(ValueError):
        hash128_with_seed(b"abc", seed)


def test_short_and_long_paths_split_at_128():
    seed = tuple(SEED)
    short = make_input(127)
    long = make_input(128)
    assert _hash128(memoryview(short), seed) == _city_murmur(memoryview(short), 127, seed)
    assert _hash128(memoryview(long), seed) != _city_murmur(memoryview(long), 128, seed)
    assert hash128_with_seed(short, SEED) == (0x2A7AFFB09F56B36A, 0xE1EC5AA794D22833)
    assert hash128_with_seed(long, SEED) == (0xA4648EE682901CE5, 0x62ADFEA7C2153F8C)


def test_unseeded_seed_derivation():
    # from 16 bytes on, the first 16 bytes become the seed
    data = make_input(40)
    first = int.from_bytes(data[:8], "little") ^ 0xC949D7C7509E6557
    second = int.from_bytes(data[8:16], "little")
    assert hash128(data) == hash128_with_seed(data[16:], (first, second))


@pytest.mark.parametrize(
    "data",
    [make_input(100), bytearray(make_input(100)), memoryview(make_input(100))],
    ids=["bytes", "bytearray", "memoryview"],
)
def test_buffer_types(data):
    assert hash128(data) == (0xA2CCEF3782345867, 0x85EE7030112345C9)
    assert hash64(data) == 16503601989387789186


def test_non_byte_memoryview():
    data = make_input(64)
    view = memoryview(data).cast("Q")
    assert hash128(view) == hash128(data)
    assert hash64_v1(view) == hash64_v1(data)


def test_sub_view():
    data = make_input(300)
    assert hash128(memoryview(data)[10:250]) == hash128(data[10:250])


@pytest.mark.parametrize("value", ["text", None, 42])
def test_rejects_non_buffers(value):
    with pytest.raises(TypeError):
        hash128(value)
    with pytest.raises(TypeError):
        hash64(value)


def _bit_difference(a, b):
    return bin(a ^ b).count("1")


@pytest.mark.parametrize("length", [12, 40, 100, 200])
def test_avalanche(length):
    rng = random.Random(length)
    total64 = total128 = 0
    samples = 150
    for _ in range(samples):
        data = bytearray(rng.getrandbits(8) for _ in range(length))
        before64 = hash64(data)
        before128 = hash128(data).to_bytes()
        bit = rng.randrange(length * 8)
        data[bit // 8] ^= 1 << (bit % 8)
        total64 += _bit_difference(before64, hash64(data))
        after128 = hash128(data).to_bytes()
        total128 += _bit_difference(
            int.from_bytes(before128, "little"), int.from_bytes(after128, "little")
        )
    assert 28 <= total64 / samples <= 36
    assert 58 <= total128 / samples <= 70
