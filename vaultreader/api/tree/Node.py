"""Node model (UNO: single model)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .NodeKind import NodeKind


def join_path(parent_path: str, name: str) -> str:
    """Join a child name onto a vault path (root path is the empty string)."""
    return f"{parent_path}/{name}" if parent_path else name


@dataclass(eq=False)
class Node:
    """A file or directory in the vault tree.

    Nodes are compared by identity. ``resource`` belongs to the storage
    backend that created the node and is never interpreted elsewhere.
    """

    name: str
    kind: NodeKind
    path: str
    children: list[Node] | None = None
    resource: Any = field(default=None, repr=False)
    cached_content: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.kind is NodeKind.DIRECTORY and self.children is None:
            self.children = []
        if self.kind is NodeKind.FILE:
            self.children = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def child(self, name: str) -> Node | None:
        """Return the direct child called ``name``, if any."""
        for node in self.children or []:
            if node.name == name:
                return node
        return None

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant, depth-first in sibling order."""
        yield self
        for node in self.children or []:
            yield from node.walk()

    def iter_files(self) -> Iterator[Node]:
        """Yield every FILE node at or below this node."""
        for node in self.walk():
            if node.kind is NodeKind.FILE:
                yield node

    def find(self, path: str) -> Node | None:
        """Find the node at ``path`` below this node (exact, case-sensitive)."""
        path = path.strip("/")
        if path == self.path:
            return self
        current: Node | None = self
        for part in path.split("/"):
            current = current.child(part) if current is not None else None
            if current is None:
                return None
        return current

    def parent_of(self, node: Node) -> Node | None:
        """Return the directory that directly contains ``node``."""
        for candidate in self.walk():
            if candidate.children and any(child is node for child in candidate.children):
                return candidate
        return None

    def to_manifest(self) -> dict[str, Any]:
        """Export as a plain nested record (no resource, no cached content)."""
        record: dict[str, Any] = {"name": self.name, "kind": self.kind.value, "path": self.path}
        if self.children is not None:
            record["children"] = [child.to_manifest() for child in self.children]
        return record

    @classmethod
    def from_manifest(cls, record: dict[str, Any]) -> Node:
        """Build a tree from the manifest form produced by ``to_manifest``."""
        from .sort_children import sort_children

        kind = NodeKind(record["kind"])
        children = None
        if kind is NodeKind.DIRECTORY:
            children = [cls.from_manifest(child) for child in record.get("children") or []]
            sort_children(children)
        return cls(name=record["name"], kind=kind, path=record.get("path", ""), children=children)
