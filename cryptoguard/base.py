from abc import ABC, abstractmethod
from typing import Dict, Type

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================


class CipherStrategy(ABC):
    """
    Abstract base class that all ciphers must implement.

    The key is bound when the cipher is constructed, so a constructed
    instance is always valid and can be reused for any number of calls.
    """

    # Command-line identifier, e.g. "caesar".
    variant: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used for logging and menus."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encrypt(self, text: str) -> str:
        pass

    @abstractmethod
    def decrypt(self, text: str) -> str:
        pass

    def __str__(self) -> str:
        return f"Cipher: {self.name}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} variant={self.variant!r}>"


CIPHER_REGISTRY: Dict[str, Type[CipherStrategy]] = {}


def register_cipher(cls):
    """Decorator to auto-register cipher classes under their variant id."""
    if not cls.variant:
        raise TypeError(f"{cls.__name__} must define a variant id")
    CIPHER_REGISTRY[cls.variant] = cls
    return cls
