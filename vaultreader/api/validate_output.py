"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against registered schema.

    Args:
        func: The command function (used to infer domain and command name)
        output: The output dict to validate

    Returns:
        Validated output dict (with defaults filled in)

    Raises:
        ValueError: If validation fails
    """
    # Infer domain and command from function
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[0] != "vaultreader" or module_parts[1] != "api":
        return output

    domain = module_parts[2]
    func_name = func.__name__
    if not func_name.startswith("cmd_"):
        return output

    schema_class = get_output_schema(domain, func_name[4:])
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output validation failed for {domain}.{func_name[4:]}: {e}\nGot output: {output}") from e
