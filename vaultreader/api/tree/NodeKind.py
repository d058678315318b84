"""NodeKind enum (UNO: single enum)."""

from enum import Enum


class NodeKind(str, Enum):
    """Kind of a vault tree node."""

    FILE = "file"
    DIRECTORY = "directory"
