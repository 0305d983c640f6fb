"""
Line processing for yumsize.

Reads package-manager log files, keeps the lines that end with a size
token and turns them into a sorted report.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from yumsize.constants import SIZE_TOKEN_PAT
from yumsize.errors import FileOpenError, SizeParseError
from yumsize.logging import logger
from yumsize.models import FileReport, SizeEntry
from yumsize.utils import human_size, parse_size


PathLike = Union[str, Path]


def extract_size_token(line: str) -> Optional[str]:
    """Return the size token at the end of a line.
    
    Args:
        line: A single log line
        
    Returns:
        The token (e.g. "312 k"), or None if the line has none
    """
    match = SIZE_TOKEN_PAT.search(line)
    if match:
        return match.group(1)
    return None


def iter_entries(lines: Iterable[str]) -> Iterator[SizeEntry]:
    """Yield an entry for every line ending with a size token.
    
    Lines without a token are skipped.
    
    Raises:
        SizeParseError: If a matched token cannot be parsed
    """
    for raw_line in lines:
        line = raw_line.rstrip('\r\n')
        token = extract_size_token(line)
        if token is None:
            continue
        yield SizeEntry(text=line, size=parse_size(token))


def process_file(path: PathLike) -> FileReport:
    """Collect the sized lines of a file and their total.
    
    Args:
        path: Text file with lines copied from an update log
        
    Returns:
        FileReport with entries in read order and their sum
        
    Raises:
        FileOpenError: If the file cannot be opened
        SizeParseError: If a trailing token cannot be parsed
    """
    report = FileReport(path=str(path))
    try:
        f = open(path, 'r', encoding='utf-8', errors='replace', newline='\n')
    except OSError as e:
        raise FileOpenError(path) from e
    
    with f:
        for entry in iter_entries(f):
            report.add(entry)
    
    logger.debug(f"Processed {path}: {report.to_dict()}")
    return report


def render_report(report: FileReport) -> List[str]:
    """Output lines for a report: sorted rows, a blank line and the sum."""
    lines = [entry.to_row() for entry in report.sorted_entries()]
    lines.append('')
    lines.append(f"Sum: {human_size(report.total)}")
    return lines


def write_report(report: FileReport, stream: TextIO) -> None:
    for line in render_report(report):
        stream.write(line + '\n')


def handle_file(path: PathLike, stream: TextIO) -> bool:
    """Process one file and write its report.
    
    Failures are logged and reported through the return value so the
    caller can move on to the next file.
    
    Returns:
        True if the report was written, False otherwise
    """
    try:
        report = process_file(path)
    except FileOpenError as e:
        logger.error(str(e))
        return False
    except SizeParseError as e:
        logger.error(f"{e} ({path})")
        return False
    
    write_report(report, stream)
    return True
