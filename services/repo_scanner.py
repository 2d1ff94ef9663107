#
# File: services/repo_scanner.py
# Revision: 2
# Description: Walks a root directory and collects Git repository roots.
# Pruning is decided per directory by `classify_directory`, and directory
# listing goes through a `DirectoryLister` so the walk can run against a
# fake tree in tests.
#

import abc
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from repo_types import Repo
from utils.errors import ScanError
from utils.git_utils import is_git_dir, repository_root_of
from utils.ignore_rules import IgnoreRules
from utils.paths import to_absolute

DEFAULT_SKIP_SUFFIXES = ('.terraform',)

class DirAction(Enum):
    """What the walk does with a directory it reaches."""
    DESCEND = "descend"
    SKIP = "skip"
    REPOSITORY = "repository"

class DirectoryLister(abc.ABC):
    """Lists the subdirectories of a directory."""

    @abc.abstractmethod
    def list_dirs(self, path: Path) -> List[Path]:
        """
        Returns the subdirectories of `path` in the order they should be
        visited. Raises OSError if the directory cannot be read.
        """
        pass

class OsDirectoryLister(DirectoryLister):
    """Lists real directories in lexical order. Symlinks are not followed."""

    def list_dirs(self, path: Path) -> List[Path]:
        with os.scandir(path) as it:
            names = sorted(entry.name for entry in it if entry.is_dir(follow_symlinks=False))
        return [path / name for name in names]

def classify_directory(path: Path, skip_suffixes: Iterable[str] = DEFAULT_SKIP_SUFFIXES,
                       ignore_rules: Optional[IgnoreRules] = None) -> DirAction:
    """Decides whether the walk skips, records, or descends into a directory."""
    name = path.name
    if any(name.endswith(suffix) for suffix in skip_suffixes):
        return DirAction.SKIP
    if is_git_dir(path):
        return DirAction.REPOSITORY
    if ignore_rules is not None and ignore_rules.is_ignored(path):
        return DirAction.SKIP
    return DirAction.DESCEND

def scan_repositories(root: str | Path,
                      skip_suffixes: Iterable[str] = DEFAULT_SKIP_SUFFIXES,
                      ignore_rules: Optional[IgnoreRules] = None,
                      lister: Optional[DirectoryLister] = None) -> List[Repo]:
    """
    Finds every repository root under `root`, depth-first.

    A directory is a repository root when it contains a `.git` directory. The
    `.git` directory itself is never entered, but its siblings are, so
    repositories nested in a repository's subfolders are found too.

    Raises:
        ScanError: if any directory cannot be listed, including `root` itself.
    """
    root = to_absolute(root)
    skip_suffixes = tuple(skip_suffixes)
    lister = lister or OsDirectoryLister()
    repos: List[Repo] = []

    logging.info(f"Scanning for repositories under: {root}")

    def visit(directory: Path):
        action = classify_directory(directory, skip_suffixes, ignore_rules)
        if action is DirAction.SKIP:
            logging.debug(f"Skipping {directory}")
            return
        if action is DirAction.REPOSITORY:
            repo = Repo.from_path(repository_root_of(directory))
            logging.debug(f"Found repository {repo.short_name} at {repo.full_path}")
            repos.append(repo)
            return
        try:
            children = lister.list_dirs(directory)
        except OSError as e:
            raise ScanError(directory, e) from e
        for child in children:
            visit(child)

    visit(root)

    logging.info(f"Found {len(repos)} repositories.")
    return repos
