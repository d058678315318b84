"""CLI - main entry point."""

import sys


def _log_level() -> str:
    from vaultreader.api.config.VaultReaderConfig import VaultReaderConfig

    try:
        return VaultReaderConfig.load().log.level
    except ValueError:
        return "INFO"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from vaultreader import __version__
    from vaultreader.cli._create_app import _create_app
    from vaultreader.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"vaultr {__version__}")
        return 0

    configure_logging(level=_log_level())

    app = _create_app()
    try:
        # Non-standalone mode returns the exit code instead of calling sys.exit
        exit_code = app(argv, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        return 1
    return exit_code if isinstance(exit_code, int) else 0
