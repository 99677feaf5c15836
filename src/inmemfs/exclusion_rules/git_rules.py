"""Implementation of exclusion rules using .gitignore pattern syntax."""

from typing import List, Optional, Sequence

from pathspec import PathSpec

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Paths are matched with the pathspec library the same way Git matches them. The
    rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Rules are applied in the order they were given, so a later negation can re-include
    a path excluded by an earlier rule.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules(["node_modules/", "*.log", "!keep.log"])
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules: Optional[Sequence[str]] = None):
        """Initialize GitIgnoreExclusionRules with an optional list of patterns.

        Args:
            rules: .gitignore patterns, one per element. Defaults to no rules.
        """
        self._rules: List[str] = list(rules) if rules is not None else []
        self.spec = PathSpec.from_lines("gitignore", self._rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the added patterns.

        The path is matched exactly as provided; no normalization is performed.

        Args:
            path: The relative path to check. Directory paths end with "/".

        Returns:
            bool: True if the last pattern matching the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules(["*.pyc", "!important.pyc"])
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        return self.spec.match_file(path)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "build/", "!important.txt").

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("build/")
            >>> rules.exclude("build/output.txt")
            True
            >>> rules.exclude("build/")
            True
        """
        self._rules.append(rule)
        self.spec = PathSpec.from_lines("gitignore", self._rules)

    @property
    def rules(self) -> List[str]:
        return list(self._rules)
