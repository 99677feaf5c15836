"""In-memory directory and file tree.

This package provides the Directory and File node types, the ordered name-keyed
collection backing each directory, and the FileSystemEntry union used for mixed
listings.
"""

from .directory import Directory
from .file import File
from .file_system_entry import FileSystemEntry
from .named_collection import NamedCollection

__all__ = ["Directory", "File", "FileSystemEntry", "NamedCollection"]
