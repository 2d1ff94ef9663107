#
# File: utils/git_utils.py
# Revision: 3
# Description: Helpers for recognising Git metadata directories during a
# directory walk.
#

from pathlib import Path

GIT_DIR_NAME = '.git'

def is_git_dir(path: str | Path) -> bool:
    """True when the path is named `.git`. Callers only pass directories."""
    return Path(path).name == GIT_DIR_NAME

def repository_root_of(git_dir: str | Path) -> Path:
    """Returns the repository root that owns a `.git` directory."""
    return Path(git_dir).parent
