#
# File: utils/ignore_rules.py
# Revision: 2
# Description: Gitignore-style patterns for directories the repository scan
# should not enter.
#

from pathlib import Path
from typing import Iterable, List

# Third-party library for robust .gitignore pattern matching.
# To install: pip install pathspec
import pathspec

class IgnoreRules:
    """
    Holds gitignore-style patterns relative to a scan root and decides if a
    directory under that root should be pruned.
    """
    def __init__(self, root: str | Path, patterns: Iterable[str] = ()):
        self.root = Path(root)
        self._patterns: List[str] = []
        self._spec = None
        self.add_patterns(patterns)

    @property
    def patterns(self) -> List[str]:
        return list(self._patterns)

    def add_patterns(self, patterns: Iterable[str]):
        cleaned = [p.strip() for p in patterns if p.strip() and not p.strip().startswith('#')]
        self._patterns.extend(cleaned)
        self._spec = None # Force recompile on next check

    def _compile_spec(self):
        if self._spec is None:
            self._spec = pathspec.PathSpec.from_lines('gitwildmatch', self._patterns)

    def is_ignored(self, dir_path: str | Path) -> bool:
        """Checks a directory path. Paths outside the root are never ignored."""
        if not self._patterns:
            return False
        self._compile_spec()
        try:
            relative_path = Path(dir_path).relative_to(self.root)
        except ValueError:
            return False
        if relative_path == Path('.'):
            return False
        # Trailing slash so that directory-only patterns such as `build/` match.
        return self._spec.match_file(f"{relative_path.as_posix()}/")
