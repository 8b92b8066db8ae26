"""CryptoGuard - classical text ciphers behind one interchangeable contract."""

from cryptoguard.base import CIPHER_REGISTRY, CipherStrategy, register_cipher
from cryptoguard.ciphers import CaesarCipher, RepeatingKeyXorCipher, SubstitutionCipher, XorCipher
from cryptoguard.engine import available_ciphers, create, resolve_variant
from cryptoguard.exceptions import CorruptFileError, InvalidKey

__version__ = "1.0.0"

__all__ = [
    "CIPHER_REGISTRY",
    "CipherStrategy",
    "register_cipher",
    "CaesarCipher",
    "XorCipher",
    "RepeatingKeyXorCipher",
    "SubstitutionCipher",
    "available_ciphers",
    "create",
    "resolve_variant",
    "CorruptFileError",
    "InvalidKey",
]
