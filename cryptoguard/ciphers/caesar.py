"""
Caesar Cipher - additive shift over the 26-letter alphabet.

Each letter is replaced by the letter a fixed number of positions later in
the alphabet, wrapping around from Z to A. Case is preserved and anything
that is not an ASCII letter is passed through unchanged.
"""

from typing import Union

from cryptoguard.base import CipherStrategy, register_cipher
from cryptoguard.validation import ALPHABET_SIZE, is_lower, is_upper, validate_int_key


@register_cipher
class CaesarCipher(CipherStrategy):
    """
    Shift cipher with a non-negative integer key.

    Keys of 26 and above are reduced modulo 26, so a key of 29 behaves
    exactly like a key of 3. A key of 0 is the identity transform.
    """

    variant = "caesar"
    name = "Caesar Cipher"
    description = "Shifts every letter by a fixed amount (key: integer >= 0)."

    def __init__(self, key: Union[int, str]):
        self._key = validate_int_key(key)
        self._shift = self._key % ALPHABET_SIZE

    @property
    def key(self) -> int:
        return self._key

    def _shift_text(self, text: str, shift: int) -> str:
        """Apply a forward shift of `shift` positions to every letter."""
        result = []
        for char in text:
            if is_upper(char):
                result.append(chr((ord(char) - ord('A') + shift) % ALPHABET_SIZE + ord('A')))
            elif is_lower(char):
                result.append(chr((ord(char) - ord('a') + shift) % ALPHABET_SIZE + ord('a')))
            else:
                result.append(char)
        return ''.join(result)

    def encrypt(self, text: str) -> str:
        return self._shift_text(text, self._shift)

    def decrypt(self, text: str) -> str:
        return self._shift_text(text, -self._shift % ALPHABET_SIZE)
