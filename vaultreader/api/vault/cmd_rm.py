"""Vault rm API command.

CLI: vaultr vault rm
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultRmOutput
from ._open_vault import _open_vault


def cmd_rm(path: str) -> StageResult:
    """Delete a node, recursively for directories."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Deleting...")
            with vault:
                vault_id = vault.vault_id
                vault.delete(path)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Delete failed: {e}"
            result_obj.output = VaultRmOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Deleted {path}"
        result_obj.output = VaultRmOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Deleting {path}...",
        progress_callback=do_work,
    )
