"""History forget API command.

CLI: vaultr history forget
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..registry.get_vault_history import get_vault_history
from ..registry.remove_vault import remove_vault
from ..StageResult import StageResult
from ..store.Store import Store
from .._output_schemas.history import HistoryForgetOutput


def cmd_forget(vault_id: str) -> StageResult:
    """Drop a vault from history along with its saved tree snapshot.

    Stored document content is left in place.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultReaderConfig import VaultReaderConfig

        yield (0.2, "Loading configuration...")
        try:
            config = VaultReaderConfig.load()
            yield (0.5, "Updating history...")
            with Store(config.store) as store:
                known = any(record.id == vault_id for record in get_vault_history(store))
                remove_vault(store, vault_id)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to forget {vault_id}: {e}"
            result_obj.output = HistoryForgetOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                removed=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = [] if known else [f"{vault_id} was not in the history"]
        yield (1.0, "Complete")
        result_obj.result = f"Forgot {vault_id}" if known else f"{vault_id} not found in history"
        result_obj.output = HistoryForgetOutput(
            errors=[],
            warnings=warnings,
            vault_id=vault_id,
            removed=known,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Forgetting {vault_id}...",
        progress_callback=do_work,
    )
