"""Test configuration and fixtures for inmemfs."""

import pytest

from inmemfs.file_system_tree.directory import Directory


@pytest.fixture
def file_system():
    """Build the reference tree.

    /
    ├── a/
    │   ├── b/
    │   │   └── 1.txt
    │   ├── c/
    │   ├── 2.txt
    │   └── 3.txt
    ├── b/
    └── 1.txt
    """
    root = Directory.create_root()
    (
        root.add_child_directory("a")
        .add_child_directory("b")
        .add_file("1.txt", "")
        .parent_directory.add_child_directory("c")
        .parent_directory.add_file("2.txt", "")
        .add_file("3.txt", "")
    )
    root.add_child_directory("b")
    root.add_file("1.txt", "")
    return root
