"""Vault public API."""

from __future__ import annotations

from typing import Any

from ...utils import get_logger
from ..backend._AbstractBackend import _AbstractBackend
from ..content.ContentResolver import ContentResolver
from ..errors import NotFound
from ..markup.process_markup import ProcessedDocument, process_markup
from ..mutate.PathMutator import PathMutator
from ..registry.add_or_update_vault import add_or_update_vault
from ..registry.save_manifest import save_manifest
from ..resolve.ReferenceResolver import ReferenceResolver
from ..resolve.ResolvedReference import ResolvedReference
from ..store.Store import Store
from ..store.StoreConfig import StoreConfig
from ..tree.filter_tree import filter_tree
from ..tree.Node import Node
from ..tree.NodeKind import NodeKind
from .VaultConfig import VaultConfig


def split_path(path: str) -> tuple[str, str]:
    """Split a vault path into ``(parent_path, name)``."""
    path = path.strip("/")
    parent_path, _, name = path.rpartition("/")
    return parent_path, name


class Vault:
    """Session over one vault: its tree, content, mutations and references.

    Delegates storage to a backend chosen by configuration.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, vault_config: VaultConfig, store_config: StoreConfig):
        self.vault_config = vault_config
        self.store_config = store_config
        self.type = vault_config.type
        self._store: Store | None = None
        self._backend: _AbstractBackend | None = None
        self._root: Node | None = None

    def __enter__(self) -> Vault:
        from .VaultConfig import _BACKEND_REGISTRY

        backend_type = self.vault_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        self._store = Store(self.store_config).__enter__()
        try:
            # Import backend class directly from backend module
            module = __import__(f"vaultreader.api.backend._{backend_type}._Backend", fromlist=[""])
            self._backend = module._Backend(self.vault_config.data, self._store)
            self._root = self._backend.open_root()
            self.content = ContentResolver(self._backend)
            self.mutator = PathMutator(self._backend)
            self.resolver = ReferenceResolver(self._root)
            add_or_update_vault(self._store, self.vault_id, self._root.name or self.vault_id, backend_type)
            self._save_snapshot()
        except BaseException:
            self._store.__exit__(None, None, None)
            self._store = None
            self._backend = None
            self._root = None
            raise

        get_logger("vault").info("Opened %s vault %s", backend_type, self.vault_id)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self._store is not None:
            self._store.__exit__(exc_type, exc_val, exc_tb)
        self._store = None
        self._backend = None
        self._root = None
        return False

    @property
    def backend(self) -> _AbstractBackend:
        if self._backend is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._backend

    @property
    def root(self) -> Node:
        if self._root is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._root

    @property
    def store(self) -> Store:
        if self._store is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._store

    @property
    def vault_id(self) -> str:
        return self.backend.vault_id

    def find(self, path: str) -> Node:
        """Return the node at ``path`` ("" is the root).

        Raises:
            NotFound: If no node lives at ``path``.
        """
        node = self.root.find(path)
        if node is None:
            raise NotFound(f"No such path in vault: {path!r}")
        return node

    def tree(self, search: str = "") -> list[Node]:
        """Top-level nodes after applying hidden paths and ``search``."""
        return filter_tree(self.root.children or [], search, self.vault_config.hidden_paths)

    def read(self, path: str) -> str:
        return self.content.read(self.find(path))

    def write(self, path: str, text: str) -> None:
        self.content.write(self.find(path), text)

    def create(self, path: str, kind: NodeKind = NodeKind.FILE) -> Node:
        parent_path, name = split_path(path)
        node = self.mutator.create(self.find(parent_path), name, kind)
        self._save_snapshot()
        return node

    def delete(self, path: str) -> None:
        node = self.find(path)
        parent = self._parent(node)
        self.mutator.delete(parent, node)
        self._save_snapshot()

    def rename(self, path: str, new_name: str) -> Node:
        node = self.find(path)
        parent = self._parent(node)
        self.mutator.rename(parent, node, new_name)
        self._save_snapshot()
        return node

    def render(self, path: str) -> ProcessedDocument:
        return process_markup(self.read(path))

    def resolve(self, target: str, is_embed: bool = False) -> ResolvedReference:
        return self.resolver.locate(target, is_embed)

    def _parent(self, node: Node) -> Node:
        if node is self.root:
            raise ValueError("The vault root has no parent")
        parent = self.root.parent_of(node)
        if parent is None:
            raise NotFound(f"No parent for {node.path!r}")
        return parent

    def _save_snapshot(self) -> None:
        save_manifest(self.store, self.vault_id, self.root)
