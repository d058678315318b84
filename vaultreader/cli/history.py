"""History Typer app factory."""

import typer

from vaultreader.api.history.cmd_forget import cmd_forget
from vaultreader.api.history.cmd_list import cmd_list
from vaultreader.cli._handle_stage_result import _handle_stage_result


def history() -> typer.Typer:
    """Create and configure the history Typer app."""
    app = typer.Typer(
        name="history",
        help="Previously opened vaults",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd() -> None:
        """List known vaults, most recent first."""
        _handle_stage_result(cmd_list)()

    @app.command(name="forget")
    def forget_cmd(vault_id: str = typer.Argument(..., help="Vault id as shown by 'vaultr history list'")) -> None:
        """Forget a vault and its saved tree snapshot."""
        _handle_stage_result(cmd_forget)(vault_id)

    return app
