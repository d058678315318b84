"""Breadcrumb trail for a vault path (UNO: single function)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Breadcrumb:
    name: str
    path: str


def breadcrumbs(path: str) -> list[Breadcrumb]:
    """Return one breadcrumb per path segment, root-most first.

    Example:
        >>> [b.path for b in breadcrumbs("Projects/Alpha/Specs.md")]
        ['Projects', 'Projects/Alpha', 'Projects/Alpha/Specs.md']
    """
    trail: list[Breadcrumb] = []
    current = ""
    for part in path.strip("/").split("/"):
        if not part:
            continue
        current = f"{current}/{part}" if current else part
        trail.append(Breadcrumb(name=part, path=current))
    return trail
