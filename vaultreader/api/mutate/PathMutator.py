"""Path mutator (UNO: single class)."""

from __future__ import annotations

import logging

from ..backend._AbstractBackend import _AbstractBackend
from ..errors import NameCollision, UnsupportedOperation, VaultError
from ..tree.insert_child import insert_child
from ..tree.Node import Node, join_path
from ..tree.NodeKind import NodeKind
from ..tree.sort_children import sort_children

logger = logging.getLogger(__name__)

_INVALID_NAMES = frozenset({"", ".", ".."})


class PathMutator:
    """Create, delete and rename nodes while keeping the tree consistent.

    Every mutation is validated first, then handed to the backend, and only
    committed to the tree once the backend call succeeded. A failed backend
    call leaves the tree untouched and the error propagates.

    Mutations are not locked: callers must not run two mutations on
    overlapping subtrees at the same time.
    """

    def __init__(self, backend: _AbstractBackend):
        self.backend = backend

    def create(self, parent: Node, name: str, kind: NodeKind) -> Node:
        """Create ``name`` under ``parent`` and insert it in sibling order.

        Raises:
            NameCollision: If a sibling is already called ``name``.
        """
        self._validate_name(name)
        if parent.kind is not NodeKind.DIRECTORY:
            raise ValueError(f"Parent is not a directory: {parent.path!r}")
        self._check_collision(parent, name)
        logger.debug("create %s/%s: validated", parent.path, name)

        node = self._io("create", join_path(parent.path, name), self.backend.create, parent, name, kind)
        insert_child(parent, node)
        logger.debug("create %s: applied", node.path)
        return node

    def delete(self, parent: Node, node: Node) -> None:
        """Delete ``node`` (recursively for directories) and detach it from ``parent``."""
        self._check_parent(parent, node)
        logger.debug("delete %s: validated", node.path)

        self._io("delete", node.path, self.backend.delete, parent, node)
        parent.children = [child for child in parent.children or [] if child is not node]
        logger.debug("delete %s: applied", node.path)

    def rename(self, parent: Node, node: Node, new_name: str) -> None:
        """Rename ``node`` and rewrite the paths of all its descendants.

        Raises:
            NameCollision: If another sibling is already called ``new_name``.
            UnsupportedOperation: If the backend cannot rename this node.
        """
        self._validate_name(new_name)
        self._check_parent(parent, node)
        if new_name == node.name:
            return
        self._check_collision(parent, new_name)
        if not self.backend.can_rename(node):
            raise UnsupportedOperation(f"Backend cannot rename {node.kind.value} {node.path!r}")
        old_path = node.path
        new_path = join_path(parent.path, new_name)
        logger.debug("rename %s -> %s: validated", old_path, new_path)

        self._io("rename", old_path, self.backend.rename, parent, node, new_name)
        node.name = new_name
        for descendant in node.walk():
            descendant.path = new_path + descendant.path[len(old_path) :]
        sort_children(parent.children or [])
        logger.debug("rename %s -> %s: applied", old_path, new_path)

    def _io(self, action: str, path: str, func, *args):
        logger.debug("%s %s: io-pending", action, path)
        try:
            return func(*args)
        except VaultError as e:
            logger.warning("%s %s: failed (%s)", action, path, e)
            raise

    @staticmethod
    def _validate_name(name: str) -> None:
        if name in _INVALID_NAMES or "/" in name or "\\" in name:
            raise ValueError(f"Invalid node name: {name!r}")

    @staticmethod
    def _check_collision(parent: Node, name: str) -> None:
        if parent.child(name) is not None:
            raise NameCollision(f"{join_path(parent.path, name)!r} already exists")

    @staticmethod
    def _check_parent(parent: Node, node: Node) -> None:
        if not any(child is node for child in parent.children or []):
            raise ValueError(f"{node.path!r} is not a child of {parent.path!r}")
