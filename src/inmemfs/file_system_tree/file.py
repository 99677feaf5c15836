"""Immutable file leaf of the in-memory tree."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inmemfs.paths import combine

if TYPE_CHECKING:
    from inmemfs.file_system_tree.directory import Directory


@dataclass(frozen=True)
class File:
    """A named string payload owned by a directory.

    Files are created through Directory.add_file() and never change afterwards.

    Attributes:
        name (str): The file name, unique among the files of its directory.
        contents (str): Opaque payload.
        parent_directory (Directory): The owning directory.
    """

    name: str
    contents: str
    parent_directory: "Directory" = field(repr=False)

    def get_path(self) -> str:
        """Get the canonical path of this file.

        Returns:
            The parent directory's path extended with the file name.

        Example:
            >>> from inmemfs.file_system_tree.directory import Directory
            >>> root = Directory.create_root()
            >>> root.add_file("1.txt", "").get_file("1.txt").get_path()
            '/1.txt'
        """
        return combine(self.parent_directory.get_path(), self.name)
