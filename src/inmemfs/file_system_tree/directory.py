"""Directory node of the in-memory file system tree."""

import logging
from typing import Iterator, List, Optional, Tuple, Union

from anytree import NodeMixin

from inmemfs.exceptions import DirectoryAlreadyExistsError, FileAlreadyExistsError, NoParentError, TreeStructureError
from inmemfs.exclusion_rules.base_rules import BaseExclusionRules
from inmemfs.file_system_tree.file import File
from inmemfs.file_system_tree.file_system_entry import FileSystemEntry
from inmemfs.file_system_tree.named_collection import NamedCollection
from inmemfs.paths import DELIMITER, combine

logger = logging.getLogger(__name__)


class Directory(NodeMixin):  # type: ignore
    """A directory in an in-memory file system tree.

    Extends anytree.NodeMixin so that child directories are the anytree children of
    their parent, which gives parent back-references and attach/detach hooks. Files are
    kept in a separate name-keyed collection, so a directory and a file may share a name
    within the same parent.

    The tree is append-only. A directory gets its parent once, at construction, and the
    anytree parent/children setters refuse any later change with TreeStructureError.

    Traversal methods (parents(), directories(), files(), entries()) are generators that
    walk the tree afresh on every call, so they always reflect its current state.

    Attributes:
        name (str): The directory name, unique among sibling directories.
        parent (Optional[Directory]): The owning directory, None for the root.
        children (tuple[Directory]): Child directories in insertion order (from anytree).

    Example:
        >>> root = Directory.create_root()
        >>> _ = root.add_child_directory("a").add_child_directory("b").add_file("1.txt", "")
        >>> [d.get_path() for d in root.directories()]
        ['/', '/a', '/a/b']
        >>> [f.get_path() for f in root.files()]
        ['/a/b/1.txt']
    """

    separator = DELIMITER

    def __init__(self, name: str, parent: Optional["Directory"] = None) -> None:
        """Initialize a Directory.

        Args:
            name: The directory name.
            parent: The owning directory. When given, the new directory is registered
                with it exactly as add_child_directory() would. Defaults to None, which
                makes this directory the root of a new tree.

        Raises:
            DirectoryAlreadyExistsError: If parent already has a child directory named name.
        """
        super().__init__()
        self._name = name
        self._directories: NamedCollection["Directory"] = NamedCollection()
        self._files: NamedCollection[File] = NamedCollection()
        if parent is not None:
            parent._adopt(self)

    @classmethod
    def create_root(cls) -> "Directory":
        """Create the root directory of a new tree.

        Returns:
            A directory without a parent, named after the path delimiter.
        """
        return cls(DELIMITER)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent_directory(self) -> "Directory":
        """Get the owning directory.

        Raises:
            NoParentError: If this directory is the root.
        """
        if self.parent is None:
            raise NoParentError(self._name)
        return self.parent

    def add_child_directory(self, name: str) -> "Directory":
        """Create a child directory.

        Args:
            name: Name of the new directory.

        Returns:
            The new child, so that chained calls continue on the child.

        Raises:
            DirectoryAlreadyExistsError: If a child directory with this name already exists.

        Example:
            >>> root = Directory.create_root()
            >>> root.add_child_directory("a").add_child_directory("b").get_path()
            '/a/b'
        """
        return Directory(name, parent=self)

    def add_file(self, name: str, contents: str = "") -> "Directory":
        """Create a file in this directory.

        Args:
            name: Name of the new file.
            contents: Payload of the new file. Defaults to an empty string.

        Returns:
            This directory (not the file), so that chained calls keep adding to it.

        Raises:
            FileAlreadyExistsError: If a file with this name already exists here.

        Example:
            >>> root = Directory.create_root()
            >>> root.add_file("1.txt", "one").add_file("2.txt", "two") is root
            True
        """
        new_file = File(name, contents, self)
        if self._files.contains(new_file):
            logger.debug("Rejected duplicate file %r in %r", name, self.get_path())
            raise FileAlreadyExistsError(name, self)
        self._files.add(new_file)
        logger.debug("Created file %r", new_file.get_path())
        return self

    def get_directory(self, name: str) -> Optional["Directory"]:
        """Look up an immediate child directory by name."""
        return self._directories.get(name)

    def get_file(self, name: str) -> Optional[File]:
        """Look up a file of this directory by name."""
        return self._files.get(name)

    def get_path(self) -> str:
        """Get the canonical path of this directory.

        The root's path is the delimiter alone, whatever the root is named. Every other
        path is the delimiter combined with the names of the ancestors below the root,
        oldest first, and then this directory's name.

        Returns:
            The slash-delimited path, without a trailing delimiter unless it is the root.
        """
        if self.parent is None:
            return DELIMITER
        segments = [d.name for d in self.parents() if not d.is_root]
        segments.reverse()
        return combine(DELIMITER, *segments, self._name)

    def parents(self) -> Iterator["Directory"]:
        """Iterate over the ancestors of this directory.

        Yields:
            The immediate parent first, then each further ancestor up to the root.
            Nothing is yielded for the root itself.
        """
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def directories(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> Iterator["Directory"]:
        """Iterate over this directory and all of its descendant directories.

        The walk is depth-first pre-order: this directory, then each child's own walk in
        the order the children were added.

        Args:
            exclusion_rules: Rules matched against each directory's path relative to this
                directory, with a trailing delimiter. An excluded directory is skipped
                with its whole subtree. This directory itself is never excluded.

        Yields:
            Directories in pre-order.
        """
        for directory, _ in self._walk(exclusion_rules):
            yield directory

    def files(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> Iterator[File]:
        """Iterate over every file reachable from this directory.

        Files are grouped by directory: for each directory produced by directories(),
        its own files are yielded in the order they were added.

        Args:
            exclusion_rules: Rules matched against each file's path relative to this
                directory. Files in excluded directories are skipped as well.

        Yields:
            Files, shallow directories first.
        """
        for directory, relative_path in self._walk(exclusion_rules):
            yield from self._own_files(directory, relative_path, exclusion_rules)

    def entries(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> Iterator[FileSystemEntry]:
        """Iterate over all directories and files as FileSystemEntry objects.

        A single pre-order walk: each directory is yielded once, immediately followed by
        its own files, before its child directories.

        Args:
            exclusion_rules: Applied as in directories() and files().

        Yields:
            Mixed directory and file entries.
        """
        for directory, relative_path in self._walk(exclusion_rules):
            yield FileSystemEntry.of_directory(directory)
            for file in self._own_files(directory, relative_path, exclusion_rules):
                yield FileSystemEntry.of_file(file)

    def get_directory_count(self) -> int:
        """Get the number of descendant directories, excluding this one."""
        return sum(1 for _ in self.directories()) - 1

    def get_file_count(self) -> int:
        """Get the number of files reachable from this directory."""
        return sum(1 for _ in self.files())

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of this directory one line at a time.

        Output is similar to the Unix 'tree' command. Within each directory, child
        directories come first and then files, each group in insertion order.

        Yields:
            Lines of the tree representation, including the connecting lines.

        Example:
            >>> root = Directory.create_root()
            >>> _ = root.add_child_directory("a").add_file("2.txt", "")
            >>> _ = root.add_file("1.txt", "")
            >>> for line in root.stream_tree_representation():
            ...     print(line)
            /
            ├── a/
            │   └── 2.txt
            └── 1.txt
        """
        # Pending lines as (node, prefix, is_last), next line on top
        stack: List[Tuple[Union["Directory", File], str, bool]] = []

        def push_children(directory: "Directory", prefix: str) -> None:
            children: List[Union["Directory", File]] = [*directory._directories, *directory._files]
            for i in reversed(range(len(children))):
                stack.append((children[i], prefix, i == len(children) - 1))

        yield DELIMITER if self.is_root else f"{self._name}{DELIMITER}"
        push_children(self, "")
        while stack:
            node, prefix, is_last = stack.pop()
            connector = "└── " if is_last else "├── "
            if isinstance(node, File):
                yield f"{prefix}{connector}{node.name}"
            else:
                yield f"{prefix}{connector}{node.name}{DELIMITER}"
                push_children(node, prefix + ("    " if is_last else "│   "))

    def get_tree_representation(self) -> str:
        """Get a complete string representation of this directory's subtree."""
        return "\n".join(self.stream_tree_representation())

    def _adopt(self, child: "Directory") -> None:
        if self._directories.contains(child):
            logger.debug("Rejected duplicate directory %r in %r", child.name, self.get_path())
            raise DirectoryAlreadyExistsError(child.name, self)
        self._directories.add(child)
        child.parent = self
        logger.debug("Created directory %r", child.get_path())

    def _walk(self, exclusion_rules: Optional[BaseExclusionRules]) -> Iterator[Tuple["Directory", str]]:
        """Pre-order walk yielding each directory with its path relative to this one.

        Uses an explicit stack so that tree depth is not bounded by the interpreter's
        recursion limit. The relative path of this directory is the empty string.
        """
        stack: List[Tuple["Directory", str]] = [(self, "")]
        while stack:
            directory, relative_path = stack.pop()
            yield directory, relative_path
            for child in reversed(directory.children):
                child_path = f"{relative_path}{DELIMITER}{child.name}" if relative_path else child.name
                if exclusion_rules is not None and exclusion_rules.exclude(child_path + DELIMITER):
                    continue
                stack.append((child, child_path))

    def _own_files(
        self, directory: "Directory", directory_path: str, exclusion_rules: Optional[BaseExclusionRules]
    ) -> Iterator[File]:
        if exclusion_rules is None:
            yield from directory._files
            return

        for file in directory._files:
            relative_path = f"{directory_path}{DELIMITER}{file.name}" if directory_path else file.name
            if not exclusion_rules.exclude(relative_path):
                yield file

    # anytree hooks: the parent of a directory is fixed once it has been adopted

    def _pre_attach(self, parent: NodeMixin) -> None:
        if not isinstance(parent, Directory) or parent.get_directory(self._name) is not self:
            raise TreeStructureError(self._name, "use add_child_directory() to create child directories")

    def _pre_detach(self, parent: NodeMixin) -> None:
        raise TreeStructureError(self._name, "directories cannot be moved or removed")

    def __repr__(self) -> str:
        return f"Directory({self.get_path()!r})"
