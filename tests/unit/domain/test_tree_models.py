from __future__ import annotations

"""
Unit tests for the arena-backed DirectoryTree.

Verifies:
1. Cursor navigation rules (root marker, parent marker, implicit creation).
2. Idempotent entry insertion.
3. Recursive size aggregation and pre-order directory enumeration.
"""

import pytest

from aoc2022.domain.errors import StructuralError
from aoc2022.domain.tree_models import DirectoryTree


@pytest.fixture
def small_tree() -> DirectoryTree:
    """
    /
      a/
        e/
          i (584)
        f (29116)
      b.txt (100)
    """
    tree = DirectoryTree()
    tree.record_entry("dir", "a")
    tree.record_entry("file", "b.txt", 100)
    tree.change_directory("a")
    tree.record_entry("dir", "e")
    tree.record_entry("file", "f", 29116)
    tree.change_directory("e")
    tree.record_entry("file", "i", 584)
    tree.change_directory("/")
    return tree


def test_cursor_starts_at_root() -> None:
    tree = DirectoryTree()
    assert tree.cursor == tree.root
    assert tree.node(tree.root).is_dir


def test_parent_marker_at_root_is_noop() -> None:
    tree = DirectoryTree()
    assert tree.change_directory("..") == tree.root
    assert tree.change_directory("..") == tree.root


def test_change_directory_creates_missing_child() -> None:
    tree = DirectoryTree()
    index = tree.change_directory("never_listed")

    node = tree.node(index)
    assert node.is_dir
    assert node.size == 0
    assert node.parent == tree.root
    assert tree.node(tree.root).children == {"never_listed": index}


def test_parent_marker_returns_to_parent(small_tree: DirectoryTree) -> None:
    a = small_tree.change_directory("a")
    small_tree.change_directory("e")
    assert small_tree.change_directory("..") == a
    assert small_tree.change_directory("..") == small_tree.root


def test_record_entry_does_not_move_cursor() -> None:
    tree = DirectoryTree()
    tree.record_entry("dir", "x")
    tree.record_entry("file", "y", 10)
    assert tree.cursor == tree.root


def test_relisting_is_idempotent(small_tree: DirectoryTree) -> None:
    """Listing a directory twice changes neither sizes nor child counts."""
    before_size = small_tree.total_size()
    before_nodes = len(small_tree.nodes)

    small_tree.change_directory("a")
    small_tree.record_entry("dir", "e")
    small_tree.record_entry("file", "f", 29116)
    # A second listing with a different size must not resize the existing file
    small_tree.record_entry("file", "f", 1)

    assert small_tree.total_size() == before_size
    assert len(small_tree.nodes) == before_nodes
    assert len(small_tree.node(small_tree.cursor).children) == 2


def test_total_size_aggregates_recursively(small_tree: DirectoryTree) -> None:
    a = small_tree.node(small_tree.root).children["a"]
    e = small_tree.node(a).children["e"]

    assert small_tree.total_size(e) == 584
    assert small_tree.total_size(a) == 584 + 29116
    assert small_tree.total_size() == 584 + 29116 + 100


def test_all_directories_preorder(small_tree: DirectoryTree) -> None:
    names = [small_tree.node(i).name for i in small_tree.all_directories()]
    assert names == ["/", "a", "e"]


def test_all_directories_is_restartable(small_tree: DirectoryTree) -> None:
    first = list(small_tree.all_directories())
    second = list(small_tree.all_directories())
    assert first == second


def test_path_of_and_render(small_tree: DirectoryTree) -> None:
    a = small_tree.node(small_tree.root).children["a"]
    e = small_tree.node(a).children["e"]
    assert small_tree.path_of(e) == "/a/e"
    assert small_tree.path_of(small_tree.root) == "/"

    lines = small_tree.render()
    assert lines[0] == "- / (dir)"
    assert "    - e (dir)" in lines
    assert "      - i (file, size=584)" in lines


def test_file_entry_requires_size() -> None:
    tree = DirectoryTree()
    with pytest.raises(ValueError):
        tree.record_entry("file", "nosize")
    with pytest.raises(ValueError):
        tree.record_entry("link", "x")


def test_change_directory_into_file_is_rejected(small_tree: DirectoryTree) -> None:
    before = len(small_tree.nodes)
    with pytest.raises(StructuralError, match="'/b.txt' is already a file"):
        small_tree.change_directory("b.txt")
    assert small_tree.cursor == small_tree.root
    assert len(small_tree.nodes) == before


def test_entry_kind_conflicts_are_rejected(small_tree: DirectoryTree) -> None:
    with pytest.raises(StructuralError, match="already a file"):
        small_tree.record_entry("dir", "b.txt")
    with pytest.raises(StructuralError, match="already a directory"):
        small_tree.record_entry("file", "a", 10)
