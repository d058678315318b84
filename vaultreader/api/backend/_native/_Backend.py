"""
Native filesystem backend.

Wraps a real directory; every node carries its ``pathlib.Path`` as resource.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ...errors import NameCollision, NotFound, PermissionDenied, UnsupportedOperation
from ...tree.Node import Node, join_path
from ...tree.NodeKind import NodeKind
from ...tree.sort_children import sort_children
from .._AbstractBackend import _AbstractBackend
from ._Data import _Data
from ._os_errors import _os_errors

logger = logging.getLogger(__name__)

IGNORED_NAMES = frozenset({".obsidian", ".git", ".trash", ".DS_Store", "node_modules"})


class _Backend(_AbstractBackend):
    """Vault backed by a directory on disk."""

    def __init__(self, data: _Data, store=None):  # noqa: ARG002
        self._base_dir = Path(data.base_dir)
        self.rename_primitive = data.rename_primitive

    @property
    def vault_id(self) -> str:
        return f"local-{self._base_dir.name}"

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def open_root(self) -> Node:
        if not self._base_dir.is_dir():
            raise NotFound(f"Vault directory not found: {self._base_dir}")
        root = self._scan(self._base_dir, "")
        logger.info("Scanned native vault %s (%d nodes)", self._base_dir, sum(1 for _ in root.walk()))
        return root

    def _scan(self, dir_path: Path, current_path: str) -> Node:
        children: list[Node] = []
        with _os_errors("list", dir_path):
            entries = list(dir_path.iterdir())
        for entry in entries:
            if entry.name in IGNORED_NAMES or entry.name.startswith("."):
                continue
            path = join_path(current_path, entry.name)
            if entry.is_dir():
                children.append(self._scan(entry, path))
            elif entry.is_file():
                children.append(Node(name=entry.name, kind=NodeKind.FILE, path=path, resource=entry))
        sort_children(children)
        return Node(
            name=dir_path.name,
            kind=NodeKind.DIRECTORY,
            path=current_path,
            children=children,
            resource=dir_path,
        )

    @staticmethod
    def _resource(node: Node) -> Path:
        if not isinstance(node.resource, Path):
            raise ValueError(f"Node {node.path!r} has no native resource")
        return node.resource

    @staticmethod
    def _ensure_permission(path: Path) -> None:
        """Verify write access before any mutating call."""
        if not os.access(path, os.W_OK):
            raise PermissionDenied(f"Write access to {path} was refused")

    def read(self, node: Node) -> str:
        path = self._resource(node)
        if node.kind is NodeKind.DIRECTORY:
            raise ValueError(f"Cannot read directory: {node.path!r}")
        with _os_errors("read", path):
            return path.read_text(encoding="utf-8")

    def write(self, node: Node, text: str) -> None:
        path = self._resource(node)
        if node.kind is NodeKind.DIRECTORY:
            raise ValueError(f"Cannot write directory: {node.path!r}")
        self._ensure_permission(path)
        with _os_errors("write", path):
            path.write_text(text, encoding="utf-8")

    def create(self, parent: Node, name: str, kind: NodeKind) -> Node:
        parent_dir = self._resource(parent)
        self._ensure_permission(parent_dir)
        target = parent_dir / name
        with _os_errors("create", target):
            if kind is NodeKind.DIRECTORY:
                target.mkdir()
            else:
                target.touch(exist_ok=False)
        return Node(name=name, kind=kind, path=join_path(parent.path, name), resource=target)

    def delete(self, parent: Node, node: Node) -> None:
        self._ensure_permission(self._resource(parent))
        path = self._resource(node)
        with _os_errors("delete", path):
            if node.kind is NodeKind.DIRECTORY:
                shutil.rmtree(path)
            else:
                path.unlink()

    def can_rename(self, node: Node) -> bool:
        return self.rename_primitive or node.kind is NodeKind.FILE

    def rename(self, parent: Node, node: Node, new_name: str) -> None:
        if not self.can_rename(node):
            raise UnsupportedOperation(f"Directory rename is not supported here: {node.path!r}")
        self._ensure_permission(self._resource(parent))
        old_path = self._resource(node)
        new_path = old_path.with_name(new_name)
        if new_path.exists():
            raise NameCollision(f"Cannot rename {old_path}: {new_path} already exists")

        if self.rename_primitive:
            with _os_errors("rename", old_path):
                old_path.rename(new_path)
        else:
            self._copy_rename(old_path, new_path)

        for descendant in node.walk():
            descendant.resource = new_path / self._resource(descendant).relative_to(old_path)

    @staticmethod
    def _copy_rename(old_path: Path, new_path: Path) -> None:
        """Read old, create new, write, delete old.

        Not atomic: if deleting the old file fails, both entries remain.
        """
        with _os_errors("read", old_path):
            content = old_path.read_bytes()
        with _os_errors("create", new_path):
            new_path.touch(exist_ok=False)
        with _os_errors("write", new_path):
            new_path.write_bytes(content)
        with _os_errors("delete", old_path):
            old_path.unlink()
