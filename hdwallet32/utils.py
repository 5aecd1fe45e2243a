"""Hashing, base58 encoding and secp256k1 helpers for extended keys."""

from __future__ import annotations

import hashlib
from typing import Optional, Tuple

from Crypto.Hash import RIPEMD160

PUBLIC_KEY_COMPRESSED_LENGTH = 33

# secp256k1 domain parameters
CURVE_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
CURVE_B = 7
CURVE_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
CURVE_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

BITCOIN_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: value for value, char in enumerate(BITCOIN_BASE58_ALPHABET)}

Point = Optional[Tuple[int, int]]


class Bip32Error(ValueError):
    """Base class for extended key errors."""

    default_message = "extended key error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class SerializedKeyWrongSizeError(Bip32Error):
    """A serialized key does not have the required length."""

    default_message = "Serialized keys should by exactly 82 bytes"


class HardenedChildPublicKeyError(Bip32Error):
    """A hardened child was requested from a public key."""

    default_message = "Can't create hardened child for public key"


class InvalidChecksumError(Bip32Error):
    """A serialized key carries a checksum that does not match."""

    default_message = "Checksum doesn't match"


class InvalidPrivateKeyError(Bip32Error):
    """A private key is zero, too large or of the wrong length."""

    default_message = "Invalid private key"


class InvalidPublicKeyError(Bip32Error):
    """A derived public key is invalid."""

    default_message = "Invalid public key"


# Hashes

def hash_sha256(data: bytes) -> bytes:
    return hashlib.sha256(bytes(data)).digest()


def hash_double_sha256(data: bytes) -> bytes:
    return hash_sha256(hash_sha256(data))


def hash_ripemd160(data: bytes) -> bytes:
    return RIPEMD160.new(bytes(data)).digest()


def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of the SHA-256 of ``data``."""
    return hash_ripemd160(hash_sha256(data))


# Encoding

def checksum(data: bytes) -> bytes:
    """First four bytes of the double SHA-256 of ``data``."""
    return hash_double_sha256(data)[:4]


def add_checksum_to_bytes(data: bytes) -> bytes:
    data = bytes(data)
    return data + checksum(data)


def base58_encode(data: bytes) -> str:
    data = bytes(data)
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(BITCOIN_BASE58_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return BITCOIN_BASE58_ALPHABET[0] * leading_zeros + "".join(reversed(digits))


def base58_decode(data: str) -> bytes:
    """Decode a base58 string; raise ValueError on a character outside the alphabet."""
    number = 0
    for char in data:
        try:
            number = number * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(data) - len(data.lstrip(BITCOIN_BASE58_ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * leading_ones + body


# Curve arithmetic

def _point_add(first: Point, second: Point) -> Point:
    if first is None:
        return second
    if second is None:
        return first
    x1, y1 = first
    x2, y2 = second
    if x1 == x2:
        if (y1 + y2) % CURVE_P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, CURVE_P) % CURVE_P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, CURVE_P) % CURVE_P
    x3 = (slope * slope - x1 - x2) % CURVE_P
    y3 = (slope * (x1 - x3) - y1) % CURVE_P
    return x3, y3


def _scalar_mult(scalar: int, point: Point) -> Point:
    scalar %= CURVE_ORDER
    result: Point = None
    addend = point
    while scalar:
        if scalar & 1:
            result = _point_add(result, addend)
        addend = _point_add(addend, addend)
        scalar >>= 1
    return result


def _from_pair(x: int, y: int) -> Point:
    return None if x == 0 and y == 0 else (x, y)


def _to_pair(point: Point) -> Tuple[int, int]:
    return (0, 0) if point is None else point


# Keys

def public_key_for_private_key(key: bytes) -> bytes:
    """Compressed public key for a private key given as big-endian bytes."""
    scalar = int.from_bytes(bytes(key), "big")
    return compress_public_key(*_to_pair(_scalar_mult(scalar, (CURVE_GX, CURVE_GY))))


def add_public_keys(key1: bytes, key2: bytes) -> bytes:
    point1 = _from_pair(*expand_public_key(key1))
    point2 = _from_pair(*expand_public_key(key2))
    return compress_public_key(*_to_pair(_point_add(point1, point2)))


def add_private_keys(key1: bytes, key2: bytes) -> bytes:
    total = (int.from_bytes(bytes(key1), "big") + int.from_bytes(bytes(key2), "big")) % CURVE_ORDER
    return total.to_bytes(32, "big")


def compress_public_key(x: int, y: int) -> bytes:
    """Encode a point as a 33-byte compressed public key."""
    header = 0x02 + (y & 1)
    return bytes([header]) + x.to_bytes(PUBLIC_KEY_COMPRESSED_LENGTH - 1, "big")


def expand_public_key(key: bytes) -> Tuple[int, int]:
    """Recover the (x, y) coordinates of a compressed public key."""
    key = bytes(key)
    x = int.from_bytes(key[1:], "big")
    y_squared = (pow(x, 3, CURVE_P) + CURVE_B) % CURVE_P
    y = pow(y_squared, (CURVE_P + 1) // 4, CURVE_P)
    if y * y % CURVE_P != y_squared:
        y = 0
    if key[0] - 2 != y % 2:
        y = CURVE_P - y
    return x, y


def validate_private_key(key: bytes) -> None:
    """Raise InvalidPrivateKeyError unless ``key`` is a usable 32-byte scalar."""
    key = bytes(key)
    if len(key) != 32 or not any(key) or int.from_bytes(key, "big") >= CURVE_ORDER:
        raise InvalidPrivateKeyError()


def validate_child_public_key(key: bytes) -> None:
    """Raise InvalidPublicKeyError if either coordinate of ``key`` is zero."""
    x, y = expand_public_key(key)
    if x == 0 or y == 0:
        raise InvalidPublicKeyError()


# Numerical

def uint32_bytes(i: int) -> bytes:
    if not 0 <= i <= 0xFFFFFFFF:
        raise ValueError(f"{i} does not fit in an unsigned 32-bit integer")
    return i.to_bytes(4, "big")