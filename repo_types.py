#
# File: repo_types.py
# Revision: 1
# Description: Defines the repository descriptor shared by the scanner, the
# cache and the selector, kept apart to prevent circular import issues.
#

from dataclasses import dataclass
from typing import Any, Dict

from utils.paths import get_last_two_elements

@dataclass(frozen=True)
class Repo:
    """One discovered repository: a display label and its absolute root path."""
    short_name: str = ""
    full_path: str = ""

    @classmethod
    def from_path(cls, repo_path) -> "Repo":
        repo_path = str(repo_path)
        return cls(short_name=get_last_two_elements(repo_path), full_path=repo_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Repo":
        """Builds a Repo from a cache entry. Missing fields default to empty."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        short_name = data.get("short_name", "")
        full_path = data.get("full_path", "")
        if not isinstance(short_name, str) or not isinstance(full_path, str):
            raise ValueError(f"repository fields must be strings: {data!r}")
        return cls(short_name=short_name, full_path=full_path)

    def to_dict(self) -> Dict[str, str]:
        """Serializes to a cache entry, omitting empty fields."""
        data = {}
        if self.short_name:
            data["short_name"] = self.short_name
        if self.full_path:
            data["full_path"] = self.full_path
        return data

    def __str__(self) -> str:
        return self.short_name or self.full_path
