#
# File: utils/paths.py
# Revision: 4
# Description: Path helpers: default locations for the scan root and the
# cache file, and the two-segment display label for a repository.
#

import os
import tempfile
from pathlib import Path

GITJUMP_DIR = '.gitjump'
DEFAULT_ROOT_DIR_NAME = 'git'
CACHE_FILE_NAME = '.repos'

def get_default_root_dir() -> Path:
    """The directory scanned when nothing else is configured."""
    return Path.home() / DEFAULT_ROOT_DIR_NAME

def get_default_cache_file() -> Path:
    """The cache file location when nothing else is configured."""
    return Path(tempfile.gettempdir()) / CACHE_FILE_NAME

def get_user_settings_dir() -> Path:
    return Path.home() / GITJUMP_DIR

def get_last_two_elements(path: str | Path) -> str:
    """
    Builds a short label from the last two segments of a path, e.g.
    `/home/me/git/tools/gitjump` -> `tools/gitjump`.

    Paths with fewer than two segments are returned unchanged.
    """
    path = str(path)
    elements = [e for e in path.split(os.sep) if e]
    if len(elements) < 2:
        return path
    return os.path.join(elements[-2], elements[-1])

def to_absolute(path: str | Path) -> Path:
    """Expands `~` and makes the path absolute without resolving symlinks."""
    return Path(os.path.abspath(Path(path).expanduser()))
