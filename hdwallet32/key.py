"""Hierarchical deterministic extended keys."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, replace

from .utils import (
    HardenedChildPublicKeyError,
    InvalidChecksumError,
    SerializedKeyWrongSizeError,
    add_checksum_to_bytes,
    add_private_keys,
    add_public_keys,
    base58_decode,
    base58_encode,
    checksum,
    hash160,
    public_key_for_private_key,
    uint32_bytes,
    validate_child_public_key,
    validate_private_key,
)

FIRST_HARDENED_CHILD = 0x80000000
PRIVATE_WALLET_VERSION = bytes.fromhex("0488ADE4")
PUBLIC_WALLET_VERSION = bytes.fromhex("0488B21E")
SERIALIZED_KEY_LENGTH = 82


@dataclass(frozen=True)
class Key:
    """An extended key: key material plus the data needed to derive children."""

    key: bytes
    version: bytes
    child_number: bytes
    fingerprint: bytes
    chain_code: bytes
    depth: int
    is_private: bool

    def new_child_key(self, child_idx: int) -> "Key":
        """Derive the child at ``child_idx``; indices from 2**31 are hardened."""
        child_number = uint32_bytes(child_idx)
        hardened = child_idx >= FIRST_HARDENED_CHILD
        if not self.is_private and hardened:
            raise HardenedChildPublicKeyError()

        intermediary = self._intermediary(child_idx, child_number)
        tweak, chain_code = intermediary[:32], intermediary[32:]

        if self.is_private:
            fingerprint = hash160(public_key_for_private_key(self.key))[:4]
            child_key = add_private_keys(tweak, self.key)
            validate_private_key(child_key)
            version = PRIVATE_WALLET_VERSION
        else:
            tweak_point = public_key_for_private_key(tweak)
            validate_child_public_key(tweak_point)
            fingerprint = hash160(self.key)[:4]
            child_key = add_public_keys(tweak_point, self.key)
            version = PUBLIC_WALLET_VERSION

        return Key(
            key=child_key,
            version=version,
            child_number=child_number,
            fingerprint=fingerprint,
            chain_code=chain_code,
            depth=(self.depth + 1) & 0xFF,
            is_private=self.is_private,
        )

    def _intermediary(self, child_idx: int, child_number: bytes) -> bytes:
        if child_idx >= FIRST_HARDENED_CHILD:
            data = b"\x00" + self.key
        elif self.is_private:
            data = public_key_for_private_key(self.key)
        else:
            data = self.key
        return hmac.new(self.chain_code, data + child_number, hashlib.sha512).digest()

    def public_key(self) -> "Key":
        """The public (neutered) version of this key."""
        key_bytes = public_key_for_private_key(self.key) if self.is_private else self.key
        return replace(self, key=key_bytes, version=PUBLIC_WALLET_VERSION, is_private=False)

    def serialize(self) -> bytes:
        """The 82-byte serialization, including its four-byte checksum."""
        key_bytes = b"\x00" + self.key if self.is_private else self.key
        payload = b"".join(
            (
                self.version,
                bytes([self.depth]),
                self.fingerprint,
                self.child_number,
                self.chain_code,
                key_bytes,
            )
        )
        return add_checksum_to_bytes(payload)

    def b58_serialize(self) -> str:
        return base58_encode(self.serialize())

    def __str__(self) -> str:
        return self.b58_serialize()


def new_master_key(seed: bytes) -> Key:
    """Create a master private key from a seed."""
    intermediary = hmac.new(b"Bitcoin seed", bytes(seed), hashlib.sha512).digest()
    key_bytes, chain_code = intermediary[:32], intermediary[32:]
    validate_private_key(key_bytes)
    return Key(
        key=key_bytes,
        version=PRIVATE_WALLET_VERSION,
        child_number=bytes(4),
        fingerprint=bytes(4),
        chain_code=chain_code,
        depth=0,
        is_private=True,
    )


def deserialize(data: bytes) -> Key:
    """Parse an 82-byte serialized key and verify its checksum."""
    data = bytes(data)
    if len(data) != SERIALIZED_KEY_LENGTH:
        raise SerializedKeyWrongSizeError()
    is_private = data[45] == 0
    key = Key(
        key=data[46:78] if is_private else data[45:78],
        version=data[0:4],
        child_number=data[9:13],
        fingerprint=data[5:9],
        chain_code=data[13:45],
        depth=data[4],
        is_private=is_private,
    )
    if checksum(data[:-4]) != data[-4:]:
        raise InvalidChecksumError()
    return key


def b58_deserialize(data: str) -> Key:
    """Parse a base58-encoded serialized key."""
    return deserialize(base58_decode(data))


def new_seed() -> bytes:
    """256 cryptographically secure random bytes."""
    return secrets.token_bytes(256)