"""Abstract base class for vault storage backends."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from ..tree.Node import Node
from ..tree.NodeKind import NodeKind

ContentLayer = Callable[[Node], "str | None"]


class _AbstractBackend(ABC):
    """Storage capability over a vault tree.

    Implementations own ``Node.resource``; nothing outside the backend
    interprets it.
    """

    @property
    @abstractmethod
    def vault_id(self) -> str:
        """Identifier of the vault bound to this backend."""
        pass

    @abstractmethod
    def open_root(self) -> Node:
        """Build the vault tree and return its root directory node."""
        pass

    @abstractmethod
    def read(self, node: Node) -> str:
        """Read the stored content of a file node.

        Raises:
            NotFound: If the backend holds no content for the node.
        """
        pass

    @abstractmethod
    def write(self, node: Node, text: str) -> None:
        pass

    @abstractmethod
    def create(self, parent: Node, name: str, kind: NodeKind) -> Node:
        """Create the entry and return a new, not yet inserted, node."""
        pass

    @abstractmethod
    def delete(self, parent: Node, node: Node) -> None:
        pass

    @abstractmethod
    def rename(self, parent: Node, node: Node, new_name: str) -> None:
        """Rename the underlying entry. Node names and paths are left to the caller."""
        pass

    def can_rename(self, node: Node) -> bool:  # noqa: ARG002
        """Whether ``rename`` is supported for ``node`` on this backend."""
        return True

    def content_layers(self) -> list[ContentLayer]:
        """Ordered read layers; an empty list means reads go straight to ``read``."""
        return []
