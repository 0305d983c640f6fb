"""
Constants for yumsize.

Defines the unit table, the size-token patterns and the usage banner.
"""
from __future__ import annotations

import re
from typing import Dict, Pattern


# --- Units -------------------------------------------------------------------

# Binary multipliers, smallest first. Order matters for formatting.
UNIT_TABLE: Dict[str, float] = {
    'B': 1,
    'K': 1024,
    'M': 1024 ** 2,
    'G': 1024 ** 3,
    'T': 1024 ** 4,
    'P': 1024 ** 5,
    'E': 1024 ** 6,
    'Z': 1024 ** 7,
    'Y': 1024 ** 8,
}


# --- Patterns ----------------------------------------------------------------

# Trailing size token of a log line, e.g. "312 k" or "1.5MB"
SIZE_TOKEN_PAT: Pattern[str] = re.compile(
    r"([\d.]+\s*(?:[KMGTPEZY]?B|[BKMGTPEZY]))\s*$",
    re.I | re.ASCII,
)

# A complete size string as accepted by parse_size()
SIZE_PARSE_PAT: Pattern[str] = re.compile(
    r"^(?P<number>[-+]?[\d.]+)\s*(?P<unit>[KMGTPEZY]?B|[BKMGTPEZY]?)$",
    re.I | re.ASCII,
)


# --- Output ------------------------------------------------------------------

SIZE_COLUMN_WIDTH = 10

LOG_FILE_NAME = 'yumsize.log'

USAGE = """\
Usage: yumsize datafile [datafile...]

Sorts package lines by their trailing size, largest first, and prints the sum.

Contents in data file are copied when running yum update:

    analitza      x86_64   4.12.3-1.fc20     updates       312 k
    ark           x86_64   4.12.3-1.fc20     updates       278 k
    ark-libs      x86_64   4.12.3-1.fc20     updates       138 k
"""
