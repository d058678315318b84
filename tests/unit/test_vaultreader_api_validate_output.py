"""Unit tests for StageResult and output validation."""

from collections.abc import Iterator

import pytest

from vaultreader.api._output_schemas import get_output_schema
from vaultreader.api._output_schemas._registry import register_output_schema
from vaultreader.api._output_schemas.vault import VaultReadOutput
from vaultreader.api.StageResult import StageResult
from vaultreader.api.validate_output import validate_output
from vaultreader.api.vault.cmd_read import cmd_read

from tests.unit.utils import verify_domain_schemas

pytestmark = pytest.mark.unit


def test_stage_result_defaults():
    def progress(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")

    result = StageResult(announce="Testing", progress_callback=progress)
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_schema_registered():
    assert get_output_schema("vault", "read") is VaultReadOutput
    assert get_output_schema("vault", "unknown") is None


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("vault", "read", VaultReadOutput)


def test_validate_output_fills_defaults():
    output = validate_output(cmd_read, {"vault_id": "v", "path": "a.md", "content": ""})
    assert output["errors"] == []
    assert output["warnings"] == []


def test_validate_output_rejects_missing_fields():
    with pytest.raises(ValueError, match="vault.read"):
        validate_output(cmd_read, {"path": "a.md"})


def test_non_command_functions_pass_through():
    def helper():
        pass

    assert validate_output(helper, {"anything": 1}) == {"anything": 1}


@pytest.mark.parametrize("domain", ["vault", "history"])
def test_every_command_has_schema(domain):
    verify_domain_schemas(domain)
