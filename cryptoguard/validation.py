"""
Key validation and character classification shared by the ciphers.

Every function here either returns a normalized value or raises InvalidKey
with a reason that can be shown to the user as-is.
"""

import string
from collections import abc
from typing import Mapping, Union

from cryptoguard.exceptions import InvalidKey

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_letter(ch: str) -> bool:
    """True only for the unaccented Latin letters A-Z and a-z."""
    return is_upper(ch) or is_lower(ch)


def parse_int_key(raw: Union[int, str]) -> int:
    """Turn an int or a numeric string (as typed into a UI) into an int key."""
    if isinstance(raw, bool):
        raise InvalidKey("key must be an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise InvalidKey("key must not be empty")
        try:
            return int(raw)
        except ValueError:
            raise InvalidKey("key must be a valid integer") from None
    raise InvalidKey("key must be an integer")


def validate_int_key(raw: Union[int, str]) -> int:
    key = parse_int_key(raw)
    if key < 0:
        raise InvalidKey("key must be non-negative")
    return key


def validate_key_string(raw: Union[str, bytes]) -> bytes:
    """Validate a repeating XOR key and return its key units as bytes."""
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    elif isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw)
    else:
        raise InvalidKey("key must be a string")
    if not raw:
        raise InvalidKey("key must not be empty")
    return raw


def validate_mapping(mapping: Union[str, Mapping[str, str]]) -> str:
    """
    Validate a substitution mapping and normalize it to a permutation string.

    Accepts either a 26-letter string, where position i holds the target of
    the i-th letter of the alphabet, or a letter-to-letter mapping. Letters
    are case-insensitive.

    Returns:
        The 26 uppercase target letters in A-Z source order.

    Raises:
        InvalidKey: wrong length, non-letter symbol, duplicate source letter
            or duplicate target letter.
    """
    if isinstance(mapping, str):
        pairs = list(zip(ALPHABET, mapping))
        size = len(mapping)
    elif isinstance(mapping, abc.Mapping):
        pairs = list(mapping.items())
        size = len(mapping)
    else:
        raise InvalidKey("mapping must be a 26-letter string or a letter-to-letter mapping")

    if size != ALPHABET_SIZE:
        raise InvalidKey(f"mapping must contain exactly {ALPHABET_SIZE} letters, got {size}")

    for source, target in pairs:
        for symbol in (source, target):
            if not isinstance(symbol, str) or len(symbol) != 1 or not is_letter(symbol):
                raise InvalidKey(f"mapping contains non-letter symbol {symbol!r}")

    targets = {}
    for source, target in pairs:
        source = source.upper()
        if source in targets:
            raise InvalidKey(f"duplicate source letter {source!r} in mapping")
        targets[source] = target.upper()

    seen = set()
    for letter in ALPHABET:
        target = targets[letter]
        if target in seen:
            raise InvalidKey(f"duplicate target letter {target!r} in mapping")
        seen.add(target)

    return "".join(targets[letter] for letter in ALPHABET)
