import logging
import sys

import pytest

from logging_config import DEBUG_FORMAT, INFO_FORMAT, configure_logging

@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

def test_info_mode_uses_single_stderr_handler():
    configure_logging()
    configure_logging()
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert root.handlers[0].formatter._fmt == INFO_FORMAT

def test_debug_mode_uses_detailed_format():
    configure_logging(debug_mode=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers[0].formatter._fmt == DEBUG_FORMAT
