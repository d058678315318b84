"""Reference resolver (UNO: single class)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from ..tree.Node import Node
from ..tree.NodeKind import NodeKind
from ._constants import DOCUMENT_SUFFIX, STATUS_MISSING_TARGET, STATUS_OK, VAULT_URI_PREFIX
from .ResolvedReference import ResolvedReference

logger = logging.getLogger(__name__)

_Rule = Callable[[str, str, str, bool], bool]


def _normalize(value: str) -> str:
    return value.replace("\\", "/").lower()


def _strip_suffix(value: str) -> str:
    return value[: -len(DOCUMENT_SUFFIX)] if value.endswith(DOCUMENT_SUFFIX) else value


class ReferenceResolver:
    """Maps a reference target to a FILE node of the vault tree.

    Files are visited depth-first in sibling order (directories before
    files). For each file the rules are tried in order and the first file
    satisfying any rule wins:

    1. the full path equals the target (case-insensitive);
    2. for embeds and separator-free targets, the file name equals the target;
    3. with a trailing ``.md`` dropped on both sides, the full path (target
       with a separator) or the file name (bare target) equals the target.

    Because sibling order is fixed by the tree invariant, the winner among
    several candidates is deterministic; ``candidates`` lists all of them.
    """

    def __init__(self, root: Node):
        self.root = root
        self.rules: list[_Rule] = [
            self._matches_path,
            self._matches_name,
            self._matches_without_suffix,
        ]

    def resolve(self, target: str, is_embed: bool = False) -> Node | None:
        """Return the first matching FILE node, or None."""
        found = next(self._iter_matches(target, is_embed), None)
        if found is None:
            logger.info("Unresolved reference: %r", target)
        return found

    def candidates(self, target: str, is_embed: bool = False) -> list[Node]:
        """Every FILE node satisfying a rule, in resolution order."""
        matches = list(self._iter_matches(target, is_embed))
        if len(matches) > 1:
            logger.debug("Ambiguous reference %r: %s", target, [node.path for node in matches])
        return matches

    def locate(self, target: str, is_embed: bool = False) -> ResolvedReference:
        """Resolve ``target`` into a read-only locator for rendering."""
        node = self.resolve(target, is_embed)
        if node is None:
            return ResolvedReference(
                target=target,
                target_uri=f"{VAULT_URI_PREFIX}{target.strip().lstrip('/')}",
                status=STATUS_MISSING_TARGET,
            )
        return ResolvedReference(
            target=target,
            target_uri=f"{VAULT_URI_PREFIX}{node.path}",
            status=STATUS_OK,
            node=node,
        )

    def _iter_matches(self, target: str, is_embed: bool) -> Iterator[Node]:
        wanted = _normalize(target.strip()).lstrip("/")
        if not wanted:
            return
        for node in self.root.walk():
            if node.kind is not NodeKind.FILE:
                continue
            name = _normalize(node.name)
            path = _normalize(node.path)
            if any(rule(wanted, name, path, is_embed) for rule in self.rules):
                yield node

    # Rules
    @staticmethod
    def _matches_path(target: str, name: str, path: str, is_embed: bool) -> bool:  # noqa: ARG004
        return path == target

    @staticmethod
    def _matches_name(target: str, name: str, path: str, is_embed: bool) -> bool:  # noqa: ARG004
        return (is_embed or "/" not in target) and name == target

    @staticmethod
    def _matches_without_suffix(target: str, name: str, path: str, is_embed: bool) -> bool:  # noqa: ARG004
        bare_target = _strip_suffix(target)
        if "/" in target:
            return _strip_suffix(path) == bare_target
        return _strip_suffix(name) == bare_target
