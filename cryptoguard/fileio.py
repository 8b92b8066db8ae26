"""
File helpers for reading input text and persisting results.

Text is stored as UTF-8 with surrogate pass-through, so XOR output that
lands on a lone surrogate code point survives a write/read cycle.

Written files can optionally carry Reed-Solomon error correction. A
protected file is framed as:

    [MAGIC_BYTE 0xEC] [ECC_SYMBOLS n] [RS-encoded UTF-8 payload]

`n` is limited to 1-64, which keeps the second byte below 0x80. A plain
UTF-8 file that happens to begin with 0xEC always has a continuation byte
(0x80-0xBF) there, so the two can never be confused on read.
"""

import os
from pathlib import Path
from typing import Tuple, Union

from reedsolo import ReedSolomonError, RSCodec

from cryptoguard.exceptions import CorruptFileError

ECC_MAGIC_BYTE = 0xEC
MAX_ECC_SYMBOLS = 64
ENCODING = "utf-8"
ERRORS = "surrogatepass"

PathLike = Union[str, os.PathLike]


# ==========================================
#  ERROR CORRECTION: Reed-Solomon framing
# ==========================================

def _check_ecc_symbols(ecc_symbols: int) -> None:
    if not 0 <= ecc_symbols <= MAX_ECC_SYMBOLS:
        raise ValueError(f"ecc_symbols must be between 0 and {MAX_ECC_SYMBOLS}, got {ecc_symbols}")


def is_protected(data: bytes) -> bool:
    return len(data) >= 2 and data[0] == ECC_MAGIC_BYTE and 1 <= data[1] <= MAX_ECC_SYMBOLS


def protect(data: bytes, ecc_symbols: int) -> bytes:
    """
    Add Reed-Solomon ECC to data.
    Returns: [MAGIC_BYTE] + [ECC_SYMBOLS_COUNT] + [RS_ENCODED_DATA]
    """
    _check_ecc_symbols(ecc_symbols)
    if ecc_symbols == 0:
        return data
    encoded = RSCodec(ecc_symbols).encode(data)
    return bytes([ECC_MAGIC_BYTE, ecc_symbols]) + bytes(encoded)


def unprotect(data: bytes) -> Tuple[bytes, bool, int]:
    """
    Strip and repair a Reed-Solomon frame, if there is one.

    Returns:
        (payload, had_ecc, errors_corrected)

    Raises:
        CorruptFileError: the frame is present but holds more damage than
            its ECC symbols can repair.
    """
    if not is_protected(data):
        return data, False, 0

    ecc_symbols = data[1]
    try:
        decoded, _, errata_pos = RSCodec(ecc_symbols).decode(data[2:])
    except ReedSolomonError as e:
        raise CorruptFileError(f"data corrupted beyond repair: {e}") from e
    return bytes(decoded), True, len(errata_pos) if errata_pos else 0


# ==========================================
#  TEXT FILES
# ==========================================

def read_text(path: PathLike) -> str:
    """Read a whole file as text, repairing it first if it is ECC protected."""
    with open(path, "rb") as f:
        data = f.read()
    payload, _, _ = unprotect(data)
    try:
        return payload.decode(ENCODING, ERRORS)
    except UnicodeDecodeError as e:
        raise CorruptFileError(f"{path} is not UTF-8 text: {e.reason} at byte {e.start}") from e


def write_text(path: PathLike, text: str, ecc_symbols: int = 0) -> None:
    """Write text to a file, replacing its contents."""
    data = protect(text.encode(ENCODING, ERRORS), ecc_symbols)
    with open(path, "wb") as f:
        f.write(data)


def output_path_for(input_path: PathLike, suffix: str) -> Path:
    """
    Generate an output file name next to `input_path` that does not exist yet.

    Examples:
        /home/me/secret.txt, "_encrypted" -> /home/me/secret_encrypted.txt
        (then secret_encrypted_1.txt, secret_encrypted_2.txt, ... if taken)
    """
    if not str(input_path).strip():
        return Path(f"output{suffix}.txt")

    source = Path(input_path)
    base, ext = source.stem, source.suffix
    candidate = source.with_name(f"{base}{suffix}{ext}")
    count = 1
    while candidate.exists():
        candidate = source.with_name(f"{base}{suffix}_{count}{ext}")
        count += 1
    return candidate.absolute()
