"""Content resolver (UNO: single class)."""

from __future__ import annotations

import logging

from ..backend._AbstractBackend import _AbstractBackend
from ..tree.Node import Node
from ..tree.NodeKind import NodeKind

logger = logging.getLogger(__name__)


class ContentResolver:
    """Layered reads and writes on top of a storage backend.

    Backends without content layers are read directly. Layered backends
    are consulted layer by layer and the first hit wins; when no layer
    holds content the file reads as empty, as a newly referenced file
    rather than an error.
    """

    def __init__(self, backend: _AbstractBackend):
        self.backend = backend

    def read(self, node: Node) -> str:
        if node.kind is NodeKind.DIRECTORY:
            raise ValueError(f"Cannot read directory: {node.path!r}")

        layers = self.backend.content_layers()
        if not layers:
            return self.backend.read(node)

        for layer in layers:
            text = layer(node)
            if text is not None:
                return text
        logger.debug("No content for %s at any layer, reading as empty", node.path)
        return ""

    def write(self, node: Node, text: str) -> None:
        self.backend.write(node, text)
        if self.backend.content_layers():
            # cached_content mirrors the last write of this session.
            node.cached_content = text
