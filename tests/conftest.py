"""
Shared fixtures for yumsize tests.
"""
from pathlib import Path

import pytest

from yumsize.logging import setup_logging


SAMPLE_LINES = [
    'analitza      x86_64   4.12.3-1.fc20     updates       312 k',
    'ark           x86_64   4.12.3-1.fc20     updates       278 k',
    'ark-libs      x86_64   4.12.3-1.fc20     updates       138 k',
]


@pytest.fixture
def sample_lines():
    """Lines from a yum update transaction table."""
    return list(SAMPLE_LINES)


@pytest.fixture
def stderr_logging():
    """Route loguru diagnostics to the (captured) standard error."""
    setup_logging()
    yield


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text to a file under tmp_path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def sample_file(write_file) -> Path:
    """The three-line yum update excerpt, with a header and a blank line."""
    text = (
        'Package       Arch     Version           Repository    Size\n'
        '\n'
        + '\n'.join(SAMPLE_LINES)
        + '\n'
    )
    return write_file('updates.txt', text)
