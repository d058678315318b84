"""Vault new API command.

CLI: vaultr vault new
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from ..tree.NodeKind import NodeKind
from .._output_schemas.vault import VaultNewOutput
from ._open_vault import _open_vault


def cmd_new(path: str, directory: bool = False) -> StageResult:
    """Create a file (or a directory) at ``path``; the parent must exist."""
    kind = NodeKind.DIRECTORY if directory else NodeKind.FILE

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, f"Creating {kind.value}...")
            with vault:
                vault_id = vault.vault_id
                node = vault.create(path, kind)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Create failed: {e}"
            result_obj.output = VaultNewOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
                kind=kind.value,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Created {kind.value} {node.path}"
        result_obj.output = VaultNewOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=node.path,
            kind=kind.value,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Creating {path}...",
        progress_callback=do_work,
    )
