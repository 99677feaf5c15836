from enum import Enum


class EntryType(str, Enum):
    """Enumeration of node types in the in-memory tree.

    Used to discriminate the alternatives of a FileSystemEntry when directories and
    files are listed together.

    Attributes:
        DIRECTORY: Directory node
        FILE: File leaf
    """

    DIRECTORY = "directory"
    FILE = "file"
