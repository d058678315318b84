"""Unit tests for sibling ordering and child insertion."""

import pytest

from vaultreader.api.tree.insert_child import insert_child
from vaultreader.api.tree.Node import Node
from vaultreader.api.tree.NodeKind import NodeKind
from vaultreader.api.tree.sort_children import sort_children

pytestmark = pytest.mark.tree


def test_directories_before_files_then_by_name():
    children = [
        Node(name="b.md", kind=NodeKind.FILE, path="b.md"),
        Node(name="z", kind=NodeKind.DIRECTORY, path="z"),
        Node(name="a.md", kind=NodeKind.FILE, path="a.md"),
        Node(name="m", kind=NodeKind.DIRECTORY, path="m"),
    ]
    sort_children(children)
    assert [child.name for child in children] == ["m", "z", "a.md", "b.md"]


def test_insert_child_keeps_order():
    parent = Node(name="", kind=NodeKind.DIRECTORY, path="")
    insert_child(parent, Node(name="c.md", kind=NodeKind.FILE, path="c.md"))
    insert_child(parent, Node(name="a.md", kind=NodeKind.FILE, path="a.md"))
    insert_child(parent, Node(name="docs", kind=NodeKind.DIRECTORY, path="docs"))
    assert [child.name for child in parent.children] == ["docs", "a.md", "c.md"]


def test_insert_child_rejects_duplicate_path():
    parent = Node(name="", kind=NodeKind.DIRECTORY, path="")
    insert_child(parent, Node(name="a.md", kind=NodeKind.FILE, path="a.md"))
    with pytest.raises(ValueError, match="Duplicate path"):
        insert_child(parent, Node(name="a.md", kind=NodeKind.FILE, path="a.md"))


def test_insert_child_into_file_fails():
    parent = Node(name="a.md", kind=NodeKind.FILE, path="a.md")
    with pytest.raises(ValueError, match="file node"):
        insert_child(parent, Node(name="b.md", kind=NodeKind.FILE, path="a.md/b.md"))


def _files(*names: str) -> list[Node]:
    return [Node(name=name, kind=NodeKind.FILE, path=name) for name in names]


def test_mixed_case_names_sort_alphabetically():
    children = _files("banana.md", "Apple.md", "cherry.md", "Date.md")
    sort_children(children)
    assert [child.name for child in children] == ["Apple.md", "banana.md", "cherry.md", "Date.md"]


def test_accented_names_sort_with_their_base_letter():
    children = _files("zebra.md", "éclair.md", "apple.md")
    sort_children(children)
    assert [child.name for child in children] == ["apple.md", "éclair.md", "zebra.md"]


def test_names_differing_only_in_case_are_ordered_deterministically():
    children = _files("Notes.md", "notes.md")
    sort_children(children)
    assert [child.name for child in children] == ["notes.md", "Notes.md"]
