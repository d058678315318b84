"""Structural vault mutations."""

from .PathMutator import PathMutator

__all__ = ["PathMutator"]
