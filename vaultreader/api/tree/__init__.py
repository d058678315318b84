"""Vault tree model."""

from .breadcrumbs import Breadcrumb, breadcrumbs
from .filter_tree import filter_tree
from .insert_child import insert_child
from .Node import Node, join_path
from .NodeKind import NodeKind
from .sort_children import sort_children

__all__ = [
    "Breadcrumb",
    "Node",
    "NodeKind",
    "breadcrumbs",
    "filter_tree",
    "insert_child",
    "join_path",
    "sort_children",
]
