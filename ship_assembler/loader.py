"""Loader for plain-text parts files (one part descriptor per line)."""
from __future__ import annotations

import os
from typing import List


class PartsFileNotFoundError(FileNotFoundError):
    """The parts file path does not exist."""


class PartsFileUnreadableError(OSError):
    """The parts file exists but could not be opened or read."""


def load_lines(path: str, announce: bool = True) -> List[str]:
    """Read a parts file into a list of lines.

    Args:
        path: Location of the parts file
        announce: Print a confirmation naming the file once it is read

    Returns:
        Lines in file order with line terminators stripped

    Raises:
        PartsFileNotFoundError: If ``path`` does not exist
        PartsFileUnreadableError: If ``path`` exists but cannot be read
    """
    if not os.path.exists(path):
        raise PartsFileNotFoundError(f"file: '{path}' does not exist!")

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except OSError as exc:
        raise PartsFileUnreadableError(f"file: '{path}' could not be opened!") from exc

    if announce:
        print(f"Parts loaded from: {path}")
    return lines


__all__ = ["PartsFileNotFoundError", "PartsFileUnreadableError", "load_lines"]
