"""Vault write API command.

CLI: vaultr vault write
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultWriteOutput
from ._open_vault import _open_vault


def cmd_write(path: str, text: str) -> StageResult:
    """Replace the content of an existing document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Writing content...")
            with vault:
                vault_id = vault.vault_id
                vault.write(path, text)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Write failed: {e}"
            result_obj.output = VaultWriteOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
                length=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote {path}"
        result_obj.output = VaultWriteOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=path,
            length=len(text),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Writing {path}...",
        progress_callback=do_work,
    )
