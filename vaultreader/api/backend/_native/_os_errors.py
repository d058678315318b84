"""Translate OS errors into vault errors (UNO: single context manager)."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ...errors import IOFailure, NameCollision, NotFound, PermissionDenied


@contextmanager
def _os_errors(action: str, path: Path) -> Iterator[None]:
    try:
        yield
    except PermissionError as e:
        raise PermissionDenied(f"Cannot {action} {path}: permission denied") from e
    except FileNotFoundError as e:
        raise NotFound(f"Cannot {action} {path}: no such file or directory") from e
    except FileExistsError as e:
        raise NameCollision(f"Cannot {action} {path}: already exists") from e
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(f"Cannot {action} {path}: {e}") from e
