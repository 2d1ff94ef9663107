#
# File: logging_config.py
# Revision: 4
# Description: Configures the root logger. Records always go to stderr so
# that stdout only carries the selected repository path.
#

import logging
import sys

DEBUG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
INFO_FORMAT = '[%(levelname)s] %(message)s'

def configure_logging(debug_mode: bool = False):
    """
    Configures the root logger with a specific level and format.

    Args:
        debug_mode: If True, sets logging to DEBUG level with a detailed format.
                    Otherwise, sets to INFO level with a clean format.
    """
    level = logging.DEBUG if debug_mode else logging.INFO
    log_format = DEBUG_FORMAT if debug_mode else INFO_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplication
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger.addHandler(handler)

    # prompt_toolkit logs its own internals at DEBUG; keep them out of normal runs
    if not debug_mode:
        logging.getLogger("asyncio").setLevel(logging.WARNING)
        logging.getLogger("prompt_toolkit").setLevel(logging.WARNING)
