from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    Exclusion rules decide which directories and files a traversal of the in-memory tree
    skips. Paths handed to exclude() are relative to the directory the traversal starts
    from, use "/" as separator, and carry a trailing "/" when they name a directory.

    Example:
        >>> from inmemfs.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')  # Add rule programmatically
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.exclude('test.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The relative directory or file path to check.

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are configured entirely at construction use this default
        implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add, in the format of the concrete rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
