"""ResolvedReference model (UNO: single model)."""

from dataclasses import dataclass, field

from ..tree.Node import Node


@dataclass(frozen=True)
class ResolvedReference:
    """Outcome of locating a reference target in the vault.

    URI-first: ``target_uri`` identifies the resolved node; a miss keeps the
    raw target in the URI and reports ``missing_target``.
    """

    target: str
    target_uri: str
    status: str
    node: Node | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, object]:
        return {
            "target": self.target,
            "target_uri": self.target_uri,
            "status": self.status,
            "path": self.node.path if self.node is not None else None,
        }
