"""Tagged union over the two kinds of tree node."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union, cast

from inmemfs.file_system_tree.file import File
from inmemfs.types import EntryType

if TYPE_CHECKING:
    from inmemfs.file_system_tree.directory import Directory


@dataclass(frozen=True)
class FileSystemEntry:
    """Either a directory or a file, used for mixed listings of tree nodes.

    Exactly one of ``directory`` and ``file`` is set. Prefer the of_directory() and
    of_file() factories over calling the constructor directly.

    Attributes:
        directory (Optional[Directory]): The wrapped directory, if this is a directory entry.
        file (Optional[File]): The wrapped file, if this is a file entry.

    Example:
        >>> from inmemfs.file_system_tree.directory import Directory
        >>> root = Directory.create_root().add_file("1.txt", "")
        >>> [entry.get_path() for entry in root.entries()]
        ['/', '/1.txt']
    """

    directory: Optional["Directory"] = None
    file: Optional[File] = None

    def __post_init__(self) -> None:
        if (self.directory is None) == (self.file is None):
            raise ValueError("FileSystemEntry requires exactly one of directory or file")

    @classmethod
    def of_directory(cls, directory: "Directory") -> "FileSystemEntry":
        return cls(directory=directory)

    @classmethod
    def of_file(cls, file: File) -> "FileSystemEntry":
        return cls(file=file)

    @property
    def entry_type(self) -> EntryType:
        return EntryType.DIRECTORY if self.directory is not None else EntryType.FILE

    @property
    def is_directory(self) -> bool:
        return self.directory is not None

    @property
    def is_file(self) -> bool:
        return self.file is not None

    @property
    def node(self) -> Union["Directory", File]:
        """The wrapped directory or file."""
        return self.directory if self.directory is not None else cast(File, self.file)

    @property
    def name(self) -> str:
        return self.node.name

    def get_path(self) -> str:
        """Get the canonical path of the wrapped node."""
        return self.node.get_path()
