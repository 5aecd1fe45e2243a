"""BIP32 hierarchical deterministic keys on secp256k1: extended keys in ``key``, helpers in ``utils``."""

__version__ = "0.1.0"
__all__ = ["key", "utils"]