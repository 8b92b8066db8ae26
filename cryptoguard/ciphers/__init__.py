"""Built-in ciphers. Importing this package registers them."""

from cryptoguard.ciphers.caesar import CaesarCipher
from cryptoguard.ciphers.xor import RepeatingKeyXorCipher, XorCipher
from cryptoguard.ciphers.substitution import SubstitutionCipher

__all__ = ["CaesarCipher", "XorCipher", "RepeatingKeyXorCipher", "SubstitutionCipher"]
