"""Vault mv API command.

CLI: vaultr vault mv
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultMvOutput
from ._open_vault import _open_vault


def cmd_mv(path: str, new_name: str) -> StageResult:
    """Rename a node in place; directories carry their descendants along."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Renaming...")
            with vault:
                vault_id = vault.vault_id
                node = vault.rename(path, new_name)
                new_path = node.path
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Rename failed: {e}"
            result_obj.output = VaultMvOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
                new_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Renamed {path} to {new_path}"
        result_obj.output = VaultMvOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=path,
            new_path=new_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Renaming {path}...",
        progress_callback=do_work,
    )
