# tests/test_logging_conf.py
"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconv.shared.logging_conf (setup_logging for testing)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from fxconv.shared.logging_conf import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_defaults_to_stderr(self, restore_root_logger):
        setup_logging(level="WARNING")

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert restore_root_logger.level == logging.WARNING

    def test_log_dir_uses_rotating_file(self, restore_root_logger, tmp_path):
        setup_logging(level=logging.INFO, log_dir=tmp_path / "logs", max_bytes=1024, backup_count=2)

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "fxconv.log")
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2

    def test_log_stdout(self, restore_root_logger):
        setup_logging(log_stdout=True)

        streams = [getattr(h, "stream", None) for h in restore_root_logger.handlers]
        assert sys.stdout in streams
        assert sys.stderr not in streams
