"""Whole-file reading."""

from __future__ import annotations

import os
from pathlib import Path


def read_all(path: str | os.PathLike) -> bytes:
    """Return the whole content of the file at ``path`` as bytes.

    Raises ``OSError`` if the file cannot be opened or read.
    """
    with open(Path(path), "rb") as handle:
        return handle.read()