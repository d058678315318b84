"""Child insertion (UNO: single function)."""

from .Node import Node
from .sort_children import sort_children


def insert_child(parent: Node, node: Node) -> None:
    """Insert ``node`` under ``parent`` keeping the sibling ordering invariant.

    Raises:
        ValueError: If ``parent`` is not a directory or already holds a node at ``node.path``.
    """
    if parent.children is None:
        raise ValueError(f"Cannot insert into file node: {parent.path!r}")
    if any(child.path == node.path for child in parent.children):
        raise ValueError(f"Duplicate path in tree: {node.path!r}")
    parent.children.append(node)
    sort_children(parent.children)
