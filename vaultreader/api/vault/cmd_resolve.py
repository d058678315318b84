"""Vault resolve API command.

CLI: vaultr vault resolve
"""

from collections.abc import Iterator

from ..errors import VaultError
from ..resolve._constants import STATUS_MISSING_TARGET
from ..StageResult import StageResult
from .._output_schemas.vault import VaultResolveOutput
from ._open_vault import _open_vault


def cmd_resolve(target: str, embed: bool = False) -> StageResult:
    """Resolve a reference target to a vault node.

    A missing target is a normal outcome (``status: missing_target``), not a
    command failure.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Resolving reference...")
            with vault:
                vault_id = vault.vault_id
                located = vault.resolve(target, embed)
                candidates = [node.path for node in vault.resolver.candidates(target, embed)]
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Resolve failed: {e}"
            result_obj.output = VaultResolveOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                target=target,
                is_embed=embed,
                status=STATUS_MISSING_TARGET,
                target_uri="",
                path=None,
                candidates=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = []
        if len(candidates) > 1:
            warnings.append(f"Ambiguous reference {target!r}: {len(candidates)} candidates, using {candidates[0]}")

        yield (1.0, "Complete")
        if located.node is not None:
            result_obj.result = f"Resolved {target!r} to {located.node.path}"
        else:
            result_obj.result = f"No match for {target!r}"
        result_obj.output = VaultResolveOutput(
            errors=[],
            warnings=warnings,
            vault_id=vault_id,
            target=target,
            is_embed=embed,
            status=located.status,
            target_uri=located.target_uri,
            path=located.node.path if located.node is not None else None,
            candidates=candidates,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Resolving {target!r}...",
        progress_callback=do_work,
    )
