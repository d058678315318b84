"""
Virtual backend.

No backing filesystem: file content lives in the persisted store keyed by
``(vault_id, path)``; directories have no stored entry.
"""

from __future__ import annotations

import logging

from ...errors import IOFailure, NotFound
from ...registry.get_manifest import get_manifest
from ...store.Store import Store
from ...store.store_key import store_key
from ...tree.Node import Node, join_path
from ...tree.NodeKind import NodeKind
from ....utils.expand_path import expand_path
from .._AbstractBackend import ContentLayer, _AbstractBackend
from ._Data import _Data
from ._Origin import _Origin

logger = logging.getLogger(__name__)


class _Backend(_AbstractBackend):
    """Vault whose contents live in a persisted key-value store."""

    def __init__(self, data: _Data, store: Store | None = None):
        if store is None:
            raise ValueError("virtual vault requires a persisted store")
        self._vault_id = data.vault_id
        self.store = store
        self.origin = _Origin(
            origin_dir=expand_path(data.origin_dir) if data.origin_dir else None,
            manifest_path=expand_path(data.manifest) if data.manifest else None,
        )

    @property
    def vault_id(self) -> str:
        return self._vault_id

    def _key(self, path: str) -> str:
        return store_key(self._vault_id, path)

    def open_root(self) -> Node:
        """Load the saved snapshot for this vault, else the bootstrap manifest."""
        snapshot = get_manifest(self.store, self._vault_id)
        if snapshot is not None:
            logger.info("Loaded virtual vault %s from saved snapshot", self._vault_id)
            return Node.from_manifest(snapshot)
        logger.info("Loaded virtual vault %s from bootstrap manifest", self._vault_id)
        try:
            return Node.from_manifest(self.origin.manifest())
        except (KeyError, ValueError, TypeError) as e:
            raise IOFailure(f"Malformed manifest for vault {self._vault_id}: {e}") from e

    def read(self, node: Node) -> str:
        text = self.store.get(self._key(node.path))
        if text is None:
            raise NotFound(f"No stored content for {node.path!r}")
        return text

    def write(self, node: Node, text: str) -> None:
        if node.kind is NodeKind.DIRECTORY:
            raise ValueError(f"Cannot write directory: {node.path!r}")
        self.store.set(self._key(node.path), text)

    def create(self, parent: Node, name: str, kind: NodeKind) -> Node:
        node = Node(name=name, kind=kind, path=join_path(parent.path, name))
        if kind is NodeKind.FILE:
            # An empty entry shadows any bundled default at this path in later sessions
            self.store.set(self._key(node.path), "")
            node.cached_content = ""
        return node

    def delete(self, parent: Node, node: Node) -> None:  # noqa: ARG002
        for file_node in node.iter_files():
            self.store.remove(self._key(file_node.path))

    def rename(self, parent: Node, node: Node, new_name: str) -> None:
        """Move the stored entry of every file at or below ``node`` to its new key.

        Each file is materialized under its new key from the first content
        layer that holds it (store, cache, bundled default, else empty), so a
        bundled default at the new path never shows through.
        """
        new_prefix = join_path(parent.path, new_name)
        for file_node in list(node.iter_files()):
            old_path = file_node.path
            new_path = new_prefix + old_path[len(node.path) :]
            text = self.store.get(self._key(old_path))
            if text is None:
                text = file_node.cached_content
            if text is None:
                text = self.origin.get(old_path)
            self.store.set(self._key(new_path), text if text is not None else "")
            self.store.remove(self._key(old_path))
            logger.debug("Migrated %s -> %s", old_path, new_path)

    def content_layers(self) -> list[ContentLayer]:
        return [self._stored_content, self._cached_content, self._origin_content]

    def _stored_content(self, node: Node) -> str | None:
        return self.store.get(self._key(node.path))

    @staticmethod
    def _cached_content(node: Node) -> str | None:
        return node.cached_content

    def _origin_content(self, node: Node) -> str | None:
        return self.origin.get(node.path)
