"""
Logging configuration for yumsize.

Diagnostics go to standard error through loguru; a rotating log file can
be added for troubleshooting.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from yumsize.constants import LOG_FILE_NAME


def _write_stderr(message: Any) -> None:
    # Looked up per call so redirected streams are honored.
    sys.stderr.write(str(message))


def setup_logging(level: str = 'WARNING', log_dir: Optional[Path] = None) -> Any:
    """Configure loguru for command-line use.
    
    Args:
        level: Minimum level written to standard error
        log_dir: Directory for an additional DEBUG log file, or None
        
    Returns:
        The configured loguru logger
    """
    logger.remove()
    logger.add(
        _write_stderr,
        level=level,
        format='{message}',
    )
    
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / LOG_FILE_NAME,
            rotation='5 MB',
            retention='30 days',
            compression='gz',
            format='{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}',
            level='DEBUG',
        )
    
    return logger


__all__ = ['logger', 'setup_logging']
