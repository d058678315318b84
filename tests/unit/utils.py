"""Test utilities."""

import re
from pathlib import Path


def _snake_to_pascal(snake_str: str) -> str:
    """Convert snake_case to PascalCase."""
    components = snake_str.split("_")
    return "".join(word.capitalize() for word in components)


def verify_domain_schemas(domain_name: str) -> None:
    """Verify that every cmd_* module in a domain has a registered output schema."""
    from vaultreader.api._output_schemas import get_output_schema

    repo_root = Path(__file__).resolve().parents[2]
    domain_dir = repo_root / "vaultreader" / "api" / domain_name

    if not domain_dir.exists():
        raise FileNotFoundError(f"Domain {domain_name} does not exist")

    missing = []
    domain_pascal = _snake_to_pascal(domain_name)
    for cmd_file in sorted(domain_dir.glob("cmd_*.py")):
        match = re.match(r"cmd_(.+)\.py$", cmd_file.name)
        if not match:
            continue
        command_snake = match.group(1)
        schema = get_output_schema(domain_name, command_snake)
        expected_name = f"{domain_pascal}{_snake_to_pascal(command_snake)}Output"
        if schema is None or schema.__name__ != expected_name:
            missing.append(expected_name)

    if missing:
        raise AssertionError(f"vaultreader/api/{domain_name} is missing output schemas: {missing}")
