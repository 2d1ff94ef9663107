#
# File: services/repo_cache.py
# Revision: 1
# Description: Persists the list of discovered repositories as a JSON array.
# The cache is all-or-nothing: it is either read back verbatim or rebuilt
# from a fresh scan.
#

import json
import logging
from pathlib import Path
from typing import List

from config import Config
from repo_types import Repo
from services.repo_scanner import scan_repositories
from utils.errors import CacheError

class RepoCache:
    """
    Reads and writes the repository cache file.
    """
    def __init__(self, cache_file: str | Path):
        self._cache_file = Path(cache_file)

    def exists(self) -> bool:
        return self._cache_file.exists()

    def load(self) -> List[Repo]:
        """
        Loads the cached repositories in their stored order.

        Raises:
            CacheError: if the file cannot be read or is not a list of repositories.
        """
        try:
            with open(self._cache_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (IOError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CacheError(f"Could not read cache {self._cache_file}: {e}") from e
        if not isinstance(data, list):
            raise CacheError(f"Cache {self._cache_file} does not contain a JSON array.")
        try:
            repos = [Repo.from_dict(item) for item in data]
        except ValueError as e:
            raise CacheError(f"Invalid entry in cache {self._cache_file}: {e}") from e
        logging.debug(f"Loaded {len(repos)} repositories from cache: {self._cache_file}")
        return repos

    def save(self, repos: List[Repo]) -> bool:
        """Overwrites the cache file. Returns False if it could not be written."""
        try:
            self._cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._cache_file, 'w', encoding='utf-8') as f:
                json.dump([repo.to_dict() for repo in repos], f, indent=2)
            logging.debug(f"Repository cache saved to: {self._cache_file}")
            return True
        except IOError as e:
            logging.error(f"Failed to write repository cache: {e}")
            return False

def scan_and_cache(config: Config, cache: RepoCache) -> List[Repo]:
    """Runs a fresh scan and overwrites the cache with the result."""
    repos = scan_repositories(
        config.get_root_dir(),
        skip_suffixes=config.get_skip_suffixes(),
        ignore_rules=config.get_ignore_rules(),
    )
    cache.save(repos)
    return repos

def load_repositories(config: Config, rescan: bool = False) -> List[Repo]:
    """
    Returns the repositories for the configured root, preferring the cache.

    A missing or unreadable cache falls back to a fresh scan, which is then
    written back. A ScanError from that scan propagates to the caller and
    leaves the cache as it was.
    """
    cache = RepoCache(config.get_cache_file())
    if rescan:
        logging.info("Rescan requested, ignoring the repository cache.")
        return scan_and_cache(config, cache)

    if cache.exists():
        try:
            return cache.load()
        except CacheError as e:
            logging.warning(f"Error reading cache, rescanning: {e}")
            return scan_and_cache(config, cache)

    return scan_and_cache(config, cache)
