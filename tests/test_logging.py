"""
Tests for yumsize.logging module.
"""
import gzip
from pathlib import Path

from yumsize.constants import LOG_FILE_NAME
from yumsize.logging import logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""
    
    def teardown_method(self):
        setup_logging()
    
    def test_returns_logger(self):
        """Test the loguru logger is returned."""
        assert setup_logging() is logger
    
    def test_stderr_messages(self, capsys):
        """Test warnings reach stderr as the bare message."""
        setup_logging()
        logger.warning('something odd')
        assert capsys.readouterr().err == 'something odd\n'
    
    def test_level_filters(self, capsys):
        """Test messages below the level are dropped."""
        setup_logging()
        logger.debug('hidden')
        logger.info('hidden too')
        assert capsys.readouterr().err == ''
    
    def test_verbose_level(self, capsys):
        """Test a lower level lets debug through."""
        setup_logging(level='DEBUG')
        logger.debug('shown')
        assert 'shown' in capsys.readouterr().err
    
    def test_log_file(self, tmp_path):
        """Test the optional log file."""
        log_dir = tmp_path / 'logs'
        setup_logging(log_dir=log_dir)
        logger.debug('to file')
        logger.remove()
        # Closing the sink may compress the file
        (path,) = log_dir.glob(Path(LOG_FILE_NAME).stem + '*')
        opener = gzip.open if path.suffix == '.gz' else open
        with opener(path, 'rt', encoding='utf-8') as f:
            text = f.read()
        assert 'to file' in text
        assert 'DEBUG' in text
