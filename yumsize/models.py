"""
Data models for yumsize.

This module contains the dataclasses used to carry parsed log lines
from the processor to the report output.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Dict, Iterable, List

from yumsize.constants import SIZE_COLUMN_WIDTH
from yumsize.utils import human_size


@dataclass(frozen=True)
class SizeEntry:
    """A source line paired with its parsed size.
    
    Attributes:
        text: Original line without its trailing newline
        size: Size in bytes parsed from the line's trailing token
    """
    text: str
    size: float
    
    def to_row(self) -> str:
        """Render as a report row: aligned size, tab, original line."""
        return f"{human_size(self.size):>{SIZE_COLUMN_WIDTH}}\t{self.text}"


def sort_entries(entries: Iterable[SizeEntry]) -> List[SizeEntry]:
    """Sort entries by size, largest first, keeping read order for ties."""
    return sorted(entries, key=attrgetter('size'), reverse=True)


@dataclass
class FileReport:
    """Entries and running total collected from one input file.
    
    Attributes:
        path: Path of the processed file
        entries: Entries in the order their lines were read
        total: Sum of all entry sizes in bytes
    """
    path: str
    entries: List[SizeEntry] = field(default_factory=list)
    total: float = 0.0
    
    def add(self, entry: SizeEntry) -> None:
        """Append an entry and add its size to the total."""
        self.entries.append(entry)
        self.total += entry.size
    
    def sorted_entries(self) -> List[SizeEntry]:
        """Entries ordered by size, largest first.
        
        Ties keep the order in which the lines were read.
        """
        return sort_entries(self.entries)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and inspection."""
        return {
            'path': self.path,
            'entries': len(self.entries),
            'total': self.total,
        }
