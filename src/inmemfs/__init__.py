"""In-memory hierarchical file system.

This package provides a tree of directories and files that lives entirely in memory,
with stable traversal order and canonical slash-delimited paths for every node.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from inmemfs.exceptions import (
    DirectoryAlreadyExistsError,
    FileAlreadyExistsError,
    InMemoryFileSystemError,
    NoParentError,
    TreeStructureError,
)
from inmemfs.exclusion_rules import BaseExclusionRules, GitIgnoreExclusionRules
from inmemfs.file_system_tree import Directory, File, FileSystemEntry, NamedCollection
from inmemfs.paths import DELIMITER, combine
from inmemfs.types import EntryType

# Expose the version for programmatic use
try:
    __version__ = version("inmemfs")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseExclusionRules",
    "DELIMITER",
    "Directory",
    "DirectoryAlreadyExistsError",
    "EntryType",
    "File",
    "FileAlreadyExistsError",
    "FileSystemEntry",
    "GitIgnoreExclusionRules",
    "InMemoryFileSystemError",
    "NamedCollection",
    "NoParentError",
    "TreeStructureError",
    "combine",
]
