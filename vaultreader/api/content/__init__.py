"""Layered content reads and writes."""

from .ContentResolver import ContentResolver

__all__ = ["ContentResolver"]
