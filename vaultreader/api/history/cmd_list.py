"""History list API command.

CLI: vaultr history list
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..registry.get_vault_history import get_vault_history
from ..StageResult import StageResult
from ..store.Store import Store
from .._output_schemas.history import HistoryListOutput


def cmd_list() -> StageResult:
    """List previously opened vaults, most recent first."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultReaderConfig import VaultReaderConfig

        yield (0.2, "Loading configuration...")
        try:
            config = VaultReaderConfig.load()
            yield (0.5, "Reading history...")
            with Store(config.store) as store:
                history = get_vault_history(store)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read history: {e}"
            result_obj.output = HistoryListOutput(errors=[str(e)], warnings=[], vaults=[]).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(history)} vault(s)"
        result_obj.output = HistoryListOutput(
            errors=[],
            warnings=[],
            vaults=[record.model_dump() for record in history],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing vault history...",
        progress_callback=do_work,
    )
