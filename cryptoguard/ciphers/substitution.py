"""
Substitution Cipher - fixed monoalphabetic permutation.

The key is a one-to-one mapping of the 26 letters onto themselves. It is
validated and turned into forward and inverse translation tables once, when
the cipher is built; every encrypt/decrypt call reuses those tables.

Example: the reversed alphabet "ZYXWVUTSRQPONMLKJIHGFEDCBA" turns
"HELLO" into "SVOOL".
"""

from typing import Mapping, Union

from cryptoguard.base import CipherStrategy, register_cipher
from cryptoguard.validation import ALPHABET, validate_mapping


@register_cipher
class SubstitutionCipher(CipherStrategy):
    """
    Monoalphabetic substitution with case-preserving lookup tables.

    Args:
        mapping: 26-letter permutation string (target of A, of B, ...) or a
            letter-to-letter mapping. Case-insensitive.

    Raises:
        InvalidKey: if the mapping is not a bijection on A-Z.
    """

    variant = "substitution"
    name = "Substitution Cipher"
    description = "Replaces letters using a 26-letter permutation (key: mapping A-Z)."

    def __init__(self, mapping: Union[str, Mapping[str, str]]):
        self._mapping = validate_mapping(mapping)
        plain = ALPHABET + ALPHABET.lower()
        cipher = self._mapping + self._mapping.lower()
        self._forward = str.maketrans(plain, cipher)
        self._inverse = str.maketrans(cipher, plain)

    @property
    def mapping(self) -> str:
        """The normalized permutation, uppercase, in A-Z source order."""
        return self._mapping

    def encrypt(self, text: str) -> str:
        return text.translate(self._forward)

    def decrypt(self, text: str) -> str:
        return text.translate(self._inverse)
