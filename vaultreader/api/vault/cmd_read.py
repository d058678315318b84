"""Vault read API command.

CLI: vaultr vault read
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultReadOutput
from ._open_vault import _open_vault


def cmd_read(path: str) -> StageResult:
    """Read a document through the content layers."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Reading content...")
            with vault:
                vault_id = vault.vault_id
                content = vault.read(path)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Read failed: {e}"
            result_obj.output = VaultReadOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
                content="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Read {path} ({len(content)} characters)"
        result_obj.output = VaultReadOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=path,
            content=content,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Reading {path}...",
        progress_callback=do_work,
    )
