"""Vault render API command.

CLI: vaultr vault render
"""

from collections.abc import Iterator
from dataclasses import asdict

from ..errors import VaultError
from ..StageResult import StageResult
from .._output_schemas.vault import VaultRenderOutput
from ._open_vault import _open_vault


def cmd_render(path: str) -> StageResult:
    """Read a document and return its metadata, body, outline and references."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_id = ""
        yield (0.2, "Loading configuration...")
        try:
            vault = _open_vault()
            yield (0.5, "Processing markup...")
            with vault:
                vault_id = vault.vault_id
                document = vault.render(path)
        except (VaultError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Render failed: {e}"
            result_obj.output = VaultRenderOutput(
                errors=[str(e)],
                warnings=[],
                vault_id=vault_id,
                path=path,
                metadata=None,
                body="",
                outline=[],
                references=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {path} ({len(document.outline)} heading(s), {len(document.references)} reference(s))"
        result_obj.output = VaultRenderOutput(
            errors=[],
            warnings=[],
            vault_id=vault_id,
            path=path,
            metadata=document.metadata,
            body=document.body,
            outline=[asdict(entry) for entry in document.outline],
            references=[{**asdict(reference), "href": reference.href} for reference in document.references],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Rendering {path}...",
        progress_callback=do_work,
    )
