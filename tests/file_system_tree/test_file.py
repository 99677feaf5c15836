"""Unit tests for the File class."""

import dataclasses

import pytest

from inmemfs.file_system_tree.directory import Directory


def test_file_path_under_root():
    root = Directory.create_root().add_file("1.txt", "")
    assert root.get_file("1.txt").get_path() == "/1.txt"


def test_file_path_under_subdirectory():
    b = Directory.create_root().add_child_directory("a").add_child_directory("b").add_file("1.txt", "")
    assert b.get_file("1.txt").get_path() == "/a/b/1.txt"


def test_file_is_immutable():
    """Test that a file cannot be changed after creation."""
    root = Directory.create_root().add_file("1.txt", "one")
    file = root.get_file("1.txt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        file.contents = "changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        file.name = "2.txt"


def test_file_repr_omits_parent():
    root = Directory.create_root().add_file("1.txt", "one")
    assert repr(root.get_file("1.txt")) == "File(name='1.txt', contents='one')"


def test_files_in_different_directories_are_distinct():
    root = Directory.create_root()
    root.add_file("1.txt", "")
    root.add_child_directory("a").add_file("1.txt", "")
    first, second = root.files()
    assert first != second
    assert first.get_path() != second.get_path()
