"""
XOR ciphers - symmetric transforms over raw code points.

Two key shapes are offered as separate ciphers because they do not produce
the same output:

- XorCipher combines every character with one integer.
- RepeatingKeyXorCipher combines character i with byte i mod len(key)
  of a key string.

XOR is self-inverse, so decrypting is the same operation as encrypting.
The output may contain control or non-ASCII characters; it round-trips
exactly as long as it is stored without transcoding.

NOT cryptographic security.
"""

from typing import Union

from cryptoguard.base import CipherStrategy, register_cipher
from cryptoguard.validation import validate_int_key, validate_key_string

# Only the low 16 bits of the key are applied, so every result stays at or
# below U+10FFFF.
KEY_UNIT_MASK = 0xFFFF


@register_cipher
class XorCipher(CipherStrategy):
    """
    XOR each character's code point with a single integer key.

    Keys above 65535 are reduced to their low 16 bits, so 65537 behaves
    like 1.
    """

    variant = "xor"
    name = "XOR Cipher"
    description = "XORs every character with one integer (key: integer >= 0)."

    def __init__(self, key: Union[int, str]):
        self._key = validate_int_key(key)
        self._unit = self._key & KEY_UNIT_MASK

    @property
    def key(self) -> int:
        return self._key

    def encrypt(self, text: str) -> str:
        return ''.join(chr(ord(char) ^ self._unit) for char in text)

    def decrypt(self, text: str) -> str:
        return self.encrypt(text)


@register_cipher
class RepeatingKeyXorCipher(CipherStrategy):
    """
    XOR each character with the key's bytes, cycling through the key.

    A str key is used through its UTF-8 encoding, so every key unit is a
    single byte (0-255) and the transform never leaves the code point range.
    """

    variant = "xor-repeat"
    name = "Repeating-Key XOR Cipher"
    description = "XORs characters with a repeating key string (key: non-empty text)."

    def __init__(self, key: Union[str, bytes]):
        self._key = validate_key_string(key)
        self._key_len = len(self._key)

    @property
    def key(self) -> bytes:
        return self._key

    def encrypt(self, text: str) -> str:
        result = []
        for i, char in enumerate(text):
            key_byte = self._key[i % self._key_len]
            result.append(chr(ord(char) ^ key_byte))
        return ''.join(result)

    def decrypt(self, text: str) -> str:
        return self.encrypt(text)
