#
# File: utils/errors.py
# Revision: 3
# Description: Exception hierarchy for scanning, caching and selecting
# repositories. Only cache errors are recovered from; everything else is
# reported by main.py.
#

class GitJumpError(Exception):
    """Base class for all errors raised by gitjump."""
    pass

class ScanError(GitJumpError):
    """Raised when the directory walk fails. The scan is aborted as a whole."""
    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to scan {self.path}: {cause}")

class CacheError(GitJumpError):
    """Raised when the cache file cannot be read or does not hold a repository list."""
    pass

class SelectionError(GitJumpError):
    """Raised when the selector does not produce a repository."""
    pass

class SelectionAborted(SelectionError):
    """Raised when the user cancels the prompt (Ctrl-C / Ctrl-D)."""
    def __init__(self, message: str = "selection aborted"):
        super().__init__(message)

class NoMatchError(SelectionError):
    """Raised when the input matches no repository."""
    pass
