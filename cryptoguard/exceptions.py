"""Error kinds raised by CryptoGuard."""


class InvalidKey(ValueError):
    """Raised when a cipher key or substitution mapping is malformed."""

    def __init__(self, reason: str = "Invalid key provided for cipher"):
        super().__init__(reason)
        self.reason = reason


class CorruptFileError(OSError):
    """Raised when a Reed-Solomon protected file is damaged beyond repair."""
