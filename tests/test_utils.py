import pytest

from hdwallet32.utils import (
    CURVE_GX,
    CURVE_GY,
    CURVE_ORDER,
    Bip32Error,
    HardenedChildPublicKeyError,
    InvalidChecksumError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    SerializedKeyWrongSizeError,
    add_checksum_to_bytes,
    add_private_keys,
    add_public_keys,
    base58_decode,
    base58_encode,
    checksum,
    compress_public_key,
    expand_public_key,
    hash160,
    hash_double_sha256,
    hash_ripemd160,
    hash_sha256,
    public_key_for_private_key,
    uint32_bytes,
    validate_child_public_key,
    validate_private_key,
)


def _scalar(value):
    return value.to_bytes(32, "big")


def test_hash_lengths():
    assert len(hash_sha256(b"data")) == 32
    assert len(hash_double_sha256(b"data")) == 32
    assert len(hash_ripemd160(b"data")) == 20
    assert len(hash160(b"data")) == 20


def test_double_sha256_is_sha256_twice():
    data = b"extended key"
    assert hash_double_sha256(data) == hash_sha256(hash_sha256(data))


def test_hash160_is_ripemd_of_sha256():
    data = b"\x02" * 33
    assert hash160(data) == hash_ripemd160(hash_sha256(data))


def test_checksum_and_append():
    data = b"\x04\x88\xad\xe4payload"
    assert checksum(data) == hash_double_sha256(data)[:4]
    with_checksum = add_checksum_to_bytes(data)
    assert with_checksum[:-4] == data
    assert with_checksum[-4:] == checksum(data)


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x00\x01", b"\x04\x88\xad\xe4", bytes(range(82)), b"\xff" * 40],
)
def test_base58_round_trip(data):
    assert base58_decode(base58_encode(data)) == data


def test_base58_leading_zeros():
    assert base58_encode(b"\x00\x00\x01") == "112"


def test_base58_decode_rejects_invalid_characters():
    with pytest.raises(ValueError):
        base58_decode("abc0def")
    with pytest.raises(ValueError):
        base58_decode("IIII")


def test_generator_public_key():
    assert public_key_for_private_key(_scalar(1)).hex() == (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )


def test_compress_matches_generator():
    assert compress_public_key(CURVE_GX, CURVE_GY) == public_key_for_private_key(_scalar(1))


@pytest.mark.parametrize("scalar", [1, 2, 3, 12345, CURVE_ORDER - 1, 2**200 + 17])
def test_expand_compress_round_trip(scalar):
    public = public_key_for_private_key(_scalar(scalar))
    assert len(public) == 33
    assert public[0] in (2, 3)
    assert compress_public_key(*expand_public_key(public)) == public


def test_expanded_point_is_on_curve():
    public = public_key_for_private_key(_scalar(987654321))
    x, y = expand_public_key(public)
    p = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
    assert (y * y - x ** 3 - 7) % p == 0


@pytest.mark.parametrize("a,b", [(1, 1), (1, 2), (5, 7), (CURVE_ORDER - 3, 10)])
def test_add_public_keys_matches_scalar_sum(a, b):
    combined = add_public_keys(public_key_for_private_key(_scalar(a)), public_key_for_private_key(_scalar(b)))
    assert combined == public_key_for_private_key(_scalar((a + b) % CURVE_ORDER))


def test_add_private_keys_wraps_modulo_order():
    assert add_private_keys(_scalar(CURVE_ORDER - 1), _scalar(2)) == _scalar(1)
    assert add_private_keys(_scalar(3), _scalar(4)) == _scalar(7)
    assert len(add_private_keys(_scalar(0), _scalar(1))) == 32


@pytest.mark.parametrize(
    "key",
    [bytes(32), _scalar(CURVE_ORDER), b"\xff" * 32, b"\x01" * 31, b"\x01" * 33],
)
def test_validate_private_key_rejects(key):
    with pytest.raises(InvalidPrivateKeyError):
        validate_private_key(key)


def test_validate_child_public_key_rejects_zero_x():
    with pytest.raises(InvalidPublicKeyError):
        validate_child_public_key(b"\x02" + bytes(32))


def test_uint32_bytes():
    assert uint32_bytes(0x80000000) == b"\x80\x00\x00\x00"
    assert uint32_bytes(1) == b"\x00\x00\x00\x01"
    with pytest.raises(ValueError):
        uint32_bytes(2**32)
    with pytest.raises(ValueError):
        uint32_bytes(-1)


@pytest.mark.parametrize(
    "error_class,message",
    [
        (SerializedKeyWrongSizeError, "Serialized keys should by exactly 82 bytes"),
        (HardenedChildPublicKeyError, "Can't create hardened child for public key"),
        (InvalidChecksumError, "Checksum doesn't match"),
        (InvalidPrivateKeyError, "Invalid private key"),
        (InvalidPublicKeyError, "Invalid public key"),
    ],
)
def test_error_messages(error_class, message):
    error = error_class()
    assert str(error) == message
    assert isinstance(error, Bip32Error)
    assert isinstance(error, ValueError)