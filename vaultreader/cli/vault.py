"""Vault Typer app factory."""

import typer

from vaultreader.api.vault.cmd_mv import cmd_mv
from vaultreader.api.vault.cmd_new import cmd_new
from vaultreader.api.vault.cmd_read import cmd_read
from vaultreader.api.vault.cmd_render import cmd_render
from vaultreader.api.vault.cmd_resolve import cmd_resolve
from vaultreader.api.vault.cmd_rm import cmd_rm
from vaultreader.api.vault.cmd_tree import cmd_tree
from vaultreader.api.vault.cmd_write import cmd_write
from vaultreader.cli._handle_stage_result import _handle_stage_result


def vault() -> typer.Typer:
    """Create and configure the vault Typer app."""
    app = typer.Typer(
        name="vault",
        help="Vault operations",
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

    @app.command(name="tree")
    def tree_cmd(
        search: str = typer.Option("", "--search", "-s", help="Keep files whose name contains this text"),
    ) -> None:
        """List the vault tree."""
        _handle_stage_result(cmd_tree)(search)

    @app.command(name="read")
    def read_cmd(path: str = typer.Argument(..., help="Vault path of the document")) -> None:
        """Read a document."""
        _handle_stage_result(cmd_read)(path)

    @app.command(name="write")
    def write_cmd(
        path: str = typer.Argument(..., help="Vault path of the document"),
        text: str = typer.Argument(..., help="New content"),
    ) -> None:
        """Replace the content of a document."""
        _handle_stage_result(cmd_write)(path, text)

    @app.command(name="new")
    def new_cmd(
        path: str = typer.Argument(..., help="Vault path to create; the parent directory must exist"),
        directory: bool = typer.Option(False, "--dir", help="Create a directory instead of a file"),
    ) -> None:
        """Create a file or directory."""
        _handle_stage_result(cmd_new)(path, directory)

    @app.command(name="rm")
    def rm_cmd(path: str = typer.Argument(..., help="Vault path to delete")) -> None:
        """Delete a file or directory (recursively)."""
        _handle_stage_result(cmd_rm)(path)

    @app.command(name="mv")
    def mv_cmd(
        path: str = typer.Argument(..., help="Vault path to rename"),
        new_name: str = typer.Argument(..., help="New name (not a path)"),
    ) -> None:
        """Rename a file or directory in place."""
        _handle_stage_result(cmd_mv)(path, new_name)

    @app.command(name="render")
    def render_cmd(path: str = typer.Argument(..., help="Vault path of the document")) -> None:
        """Show metadata, body, outline and references of a document."""
        _handle_stage_result(cmd_render)(path)

    @app.command(name="resolve")
    def resolve_cmd(
        target: str = typer.Argument(..., help="Reference target, e.g. 'Projects/Alpha/Specs'"),
        embed: bool = typer.Option(False, "--embed", "-e", help="Resolve as an embedded resource"),
    ) -> None:
        """Resolve a wiki reference target to a vault path."""
        _handle_stage_result(cmd_resolve)(target, embed)

    return app
