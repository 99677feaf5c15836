from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inmemfs.file_system_tree.directory import Directory


class InMemoryFileSystemError(Exception):
    """
    Base class for all errors raised by the in-memory file system.

    Catch this exception to handle every tree violation uniformly. It is never raised
    directly; each concrete subclass describes one distinct, non-overlapping condition.

    Attributes:
        message (str): Human-readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NoParentError(InMemoryFileSystemError):
    """
    Exception raised when the parent of a root directory is requested.

    Attributes:
        directory_name (str): Name of the directory that has no parent.

    Example:
        >>> error = NoParentError("/")
        >>> str(error)
        "Directory '/' does not have a parent directory"
    """

    def __init__(self, directory_name: str) -> None:
        """
        Initialize the exception with the name of the offending directory.

        Args:
            directory_name (str): Name of the directory whose parent was requested.
        """
        self.directory_name = directory_name
        super().__init__(f"Directory '{directory_name}' does not have a parent directory")


class DirectoryAlreadyExistsError(InMemoryFileSystemError):
    """
    Exception raised when a child directory is added under a name already taken by a
    sibling directory.

    The tree is left untouched when this is raised.

    Attributes:
        directory_name (str): The conflicting directory name.
        parent_directory (Directory): The directory that already holds a child of that name.

    Example:
        >>> from inmemfs.file_system_tree.directory import Directory
        >>> root = Directory.create_root()
        >>> error = DirectoryAlreadyExistsError("a", root)
        >>> str(error)
        "Directory 'a' already exists in '/'"
    """

    def __init__(self, directory_name: str, parent_directory: "Directory") -> None:
        self.directory_name = directory_name
        self.parent_directory = parent_directory
        super().__init__(f"Directory '{directory_name}' already exists in '{parent_directory.name}'")


class FileAlreadyExistsError(InMemoryFileSystemError):
    """
    Exception raised when a file is added under a name already taken by a sibling file.

    The tree is left untouched when this is raised.

    Attributes:
        file_name (str): The conflicting file name.
        parent_directory (Directory): The directory that already holds a file of that name.
    """

    def __init__(self, file_name: str, parent_directory: "Directory") -> None:
        self.file_name = file_name
        self.parent_directory = parent_directory
        super().__init__(f"File '{file_name}' already exists in '{parent_directory.name}'")


class TreeStructureError(InMemoryFileSystemError):
    """
    Exception raised when a directory would be moved, detached, or attached to a parent
    by any route other than Directory.add_child_directory().

    Parents are assigned once at construction; the tree only ever grows.

    Attributes:
        directory_name (str): Name of the directory whose parent change was refused.
    """

    def __init__(self, directory_name: str, reason: str) -> None:
        self.directory_name = directory_name
        super().__init__(f"Cannot change parent of directory '{directory_name}': {reason}")
