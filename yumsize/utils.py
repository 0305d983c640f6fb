"""
Size codec for yumsize.

Converts between human-readable sizes ("312 k", "1.5 MB") and byte counts
using binary (1024-based) units.
"""
from __future__ import annotations

from yumsize.constants import SIZE_PARSE_PAT, UNIT_TABLE
from yumsize.errors import SizeParseError


def parse_size(token: str) -> float:
    """Convert a human-readable size string to bytes.
    
    The unit is case-insensitive and may carry a trailing "B", so "K",
    "k" and "KB" are equivalent. A bare number or "B" means bytes.
    
    Args:
        token: Size string, e.g. "312 k"
        
    Returns:
        Size in bytes
        
    Raises:
        SizeParseError: If the number or the unit is invalid
        
    Examples:
        >>> parse_size('312 k')
        319488.0
        >>> parse_size('1.5MB')
        1572864.0
    """
    match = SIZE_PARSE_PAT.match(token.strip())
    if not match:
        raise SizeParseError(token)
    
    try:
        number = float(match.group('number'))
    except ValueError as e:
        raise SizeParseError(token) from e
    
    unit = match.group('unit').upper()
    if len(unit) == 2:
        unit = unit[0]
    return number * UNIT_TABLE[unit or 'B']


def human_size(n: float, precision: int = 2) -> str:
    """Convert bytes to human-readable size string.
    
    Args:
        n: Size in bytes
        precision: Number of decimal places
        
    Returns:
        Human-readable string (e.g., "1.23 GB")
        
    Examples:
        >>> human_size(1024)
        '1.00 KB'
        >>> human_size(745472)
        '728.00 KB'
    """
    if n < 0:
        return f"-{human_size(-n, precision)}"
    
    size = float(n)
    last = list(UNIT_TABLE)[-1]
    for unit, factor in UNIT_TABLE.items():
        scaled = size / factor
        if scaled < 1024 or unit == last:
            suffix = 'B' if unit == 'B' else f'{unit}B'
            return f"{scaled:.{precision}f} {suffix}"
