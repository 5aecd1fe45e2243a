# hdwallet32

Hierarchical deterministic keys as described by BIP32, on the secp256k1 curve.
Build a master key from a seed, derive private or public children (hardened or
not), and read and write extended keys as raw 82-byte strings or as the usual
base58 `xprv…` / `xpub…` text.

## Installation

```
pip install hdwallet32
```

The only runtime dependency is `pycryptodome`, used for RIPEMD-160. The
curve arithmetic is done in pure Python.

## Usage

```python
from hdwallet32.key import (
    FIRST_HARDENED_CHILD,
    b58_deserialize,
    new_master_key,
    new_seed,
)
from hdwallet32.utils import HardenedChildPublicKeyError

seed = new_seed()                      # 256 random bytes
master = new_master_key(seed)          # private master key
print(str(master))                     # xprv...

# m/44'/0'/0'/0
account = master
for index in (44 + FIRST_HARDENED_CHILD, FIRST_HARDENED_CHILD, FIRST_HARDENED_CHILD, 0):
    account = account.new_child_key(index)

xpub = account.public_key()            # the "neuter" operation
print(xpub.b58_serialize())            # xpub...

# Public-parent to public-child derivation
restored = b58_deserialize(xpub.b58_serialize())
child = restored.new_child_key(5)
print(child.key.hex())                 # 33-byte compressed public key

# Hardened children cannot come from a public key
try:
    restored.new_child_key(FIRST_HARDENED_CHILD)
except HardenedChildPublicKeyError:
    pass
```

`Key` is a frozen dataclass with the fields `key`, `version`, `child_number`,
`fingerprint`, `chain_code`, `depth` and `is_private`. Two keys with the same
fields compare equal, so a key read back with `b58_deserialize` equals the one
that was written.

`Key.serialize()` gives the 82 bytes (78 bytes of data and a 4-byte
double-SHA256 checksum), and `deserialize()` reads them back.
`Key.b58_serialize()` and `str(key)` give the base58 text.

The module `hdwallet32.key` also holds the constants `FIRST_HARDENED_CHILD`
(`0x80000000`), `PRIVATE_WALLET_VERSION`, `PUBLIC_WALLET_VERSION` and
`SERIALIZED_KEY_LENGTH`.

## Errors

Every error raised by the package is a `ValueError`. The errors that are
specific to extended keys come from `hdwallet32.utils.Bip32Error`:

- `SerializedKeyWrongSizeError`: the serialized key is not 82 bytes long
- `InvalidChecksumError`: the checksum does not match
- `HardenedChildPublicKeyError`: a public key was asked for a hardened child
- `InvalidPrivateKeyError` / `InvalidPublicKeyError`: a key made from a seed or
  derived from a parent is invalid

Two cases raise a plain `ValueError` instead: a string that holds a character
outside the base58 alphabet, passed to `b58_deserialize` or `base58_decode`,
and a child index that does not fit in an unsigned 32-bit integer, passed to
`Key.new_child_key`.

## Helpers

`hdwallet32.utils` also holds the basic pieces: `hash_sha256`,
`hash_double_sha256`, `hash_ripemd160`, `hash160`, `checksum`,
`add_checksum_to_bytes`, `base58_encode` / `base58_decode`,
`public_key_for_private_key`, `compress_public_key` / `expand_public_key`,
`add_private_keys`, `add_public_keys`, `validate_private_key`,
`validate_child_public_key` and `uint32_bytes`.

## What it does not do

This is a library only. It has no command-line tool, does not parse
derivation path strings such as `m/44'/0'/0'/0` (children are derived one
index at a time), does not turn keys into addresses, and does not store keys
anywhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```