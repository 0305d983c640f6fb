"""
yumsize - sort package-manager update lines by size

Reads lines copied from a package-manager update log, sorts them by their
trailing size token and prints the total.
"""
from __future__ import annotations

__version__ = "0.1.0"

# Re-export main components for convenient imports
from yumsize.errors import YumSizeError, FileOpenError, SizeParseError
from yumsize.models import SizeEntry, FileReport, sort_entries
from yumsize.utils import parse_size, human_size
from yumsize.processor import (
    extract_size_token,
    iter_entries,
    process_file,
    render_report,
    write_report,
    handle_file,
)

__all__ = [
    # Version info
    "__version__",
    # Errors
    "YumSizeError",
    "FileOpenError",
    "SizeParseError",
    # Models
    "SizeEntry",
    "FileReport",
    "sort_entries",
    # Size codec
    "parse_size",
    "human_size",
    # Processor
    "extract_size_token",
    "iter_entries",
    "process_file",
    "render_report",
    "write_report",
    "handle_file",
]
