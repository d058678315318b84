"""Vault tree API command.

CLI: vaultr vault tree
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultTreeOutput
from ._open_vault import _open_vault


def cmd_tree(search: str = "") -> StageResult:
    """List the vault tree, hiding configured paths and filtering by ``search``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Opening vault...")
            with vault:
                vault_id = vault.vault_id
                nodes = vault.tree(search)
                node_count = sum(1 for top in nodes for _ in top.walk())
                tree = [node.to_manifest() for node in nodes]
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Vault tree failed: {e}"
            result_obj.output = VaultTreeOutput(
                errors=[str(e)],
                warnings=[],
                vault_id="",
                search=search,
                tree=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Listed {node_count} node(s) in {vault_id}"
        result_obj.output = VaultTreeOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            search=search,
            tree=tree,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing vault tree...",
        progress_callback=do_work,
    )
