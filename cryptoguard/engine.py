"""
Cipher factory.

`create` is the single entry point front ends use: it resolves a variant id
or display name to a registered cipher class and builds it with the key.
"""

from typing import Any, List, Type

from cryptoguard import ciphers  # noqa: F401  registers the built-in ciphers
from cryptoguard.base import CIPHER_REGISTRY, CipherStrategy
from cryptoguard.exceptions import InvalidKey


def available_ciphers() -> List[Type[CipherStrategy]]:
    return list(CIPHER_REGISTRY.values())


def resolve_variant(variant: str) -> Type[CipherStrategy]:
    """Look up a cipher class by variant id or display name, ignoring case."""
    wanted = variant.strip().lower()
    for cls in CIPHER_REGISTRY.values():
        if wanted in (cls.variant, cls.name.lower()):
            return cls
    raise InvalidKey(f"unknown cipher {variant!r}")


def create(variant: str, key_or_mapping: Any) -> CipherStrategy:
    """Build the cipher named by `variant` with its key or mapping bound."""
    return resolve_variant(variant)(key_or_mapping)
