"""Metadata value decoder (UNO: single function)."""

from typing import Any


def parse_metadata_value(raw: str) -> Any:
    """Decode a scalar metadata value.

    Booleans and null are recognized literally, surrounding quotes are
    stripped, ``[a, b]`` becomes a list whose elements are decoded the same
    way, and anything else is kept as the raw string.
    """
    value = raw.strip()
    if value == "true":
        return True
    if value == "false":
        return False
    if value == "null":
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1].strip()
        if not inner:
            return []
        return [parse_metadata_value(item) for item in inner.split(",")]
    return value
