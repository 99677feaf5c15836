"""Exclusion rules for filtering directories and files during traversal."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
]
