"""
Activity tracking for the front ends.

ActivityLog appends one timestamped line per file operation, e.g.

    [2025-01-31 14:02:11] Caesar Cipher encrypted file to out.txt

Operation counts are kept in a Counter owned by the caller; nothing here
holds process-wide state besides the logging handlers themselves.
"""

import logging
import os
from collections import Counter
from pathlib import Path
from typing import Union

DEFAULT_ACTIVITY_LOG = "activity.log"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_activity_logger(path: Union[str, os.PathLike] = DEFAULT_ACTIVITY_LOG) -> logging.Logger:
    """Return a logger that appends to `path`; one handler per resolved path."""
    resolved = Path(path).absolute()
    logger = logging.getLogger(f"cryptoguard.activity.{resolved}")
    if not logger.handlers:
        handler = logging.FileHandler(resolved, mode="a", encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


class ActivityLog:
    """Append-only log of encrypt/decrypt operations that produced a file."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_ACTIVITY_LOG):
        self.path = Path(path)
        self._logger = get_activity_logger(self.path)

    def log(self, message: str) -> None:
        self._logger.info(message)

    def record(self, cipher_name: str, action: str, target: Union[str, os.PathLike]) -> None:
        """Log e.g. 'XOR Cipher decrypted file to out.txt'."""
        self.log(f"{cipher_name} {action} file to {target}")

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)


def count_operation(tally: Counter, cipher_name: str, action: str) -> Counter:
    tally[(cipher_name, action)] += 1
    return tally


def format_tally(tally: Counter) -> str:
    if not tally:
        return "No operations performed."
    lines = [f"  {name:<26} {action:<10} x{count}"
             for (name, action), count in sorted(tally.items())]
    total = sum(tally.values())
    return "\n".join(["Operations this session:", *lines, f"Total: {total}"])
