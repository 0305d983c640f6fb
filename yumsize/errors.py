"""
Exception hierarchy for yumsize.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union


class YumSizeError(Exception):
    """Base class for errors raised by yumsize."""


class FileOpenError(YumSizeError):
    """An input file could not be opened for reading."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Failed to open file: {self.path}")


class SizeParseError(YumSizeError, ValueError):
    """A size token has an invalid number or an unknown unit."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse bytesize: {token}")
