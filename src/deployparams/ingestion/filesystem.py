"""Protocol-based filesystem interface.

The local implementation satisfies the protocol structurally (no
inheritance). Test doubles are plain classes with the same signature.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...
    def read_text(self, path: str) -> str: ...


class LocalFileSystem:
    """Reads from the real disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        """Read ``path``; a BOM written by editors is dropped."""
        text = Path(path).read_text(encoding=self._encoding)
        return text.removeprefix("\ufeff")
