"""Unit tests for the vaultr CLI."""

import json

import pytest
from typer.testing import CliRunner

from vaultreader import __version__
from vaultreader.cli import main
from vaultreader.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()


def _json_main(capsys, *argv: str) -> tuple[int, dict]:
    exit_code = main(["--display", "json", *argv])
    return exit_code, json.loads(capsys.readouterr().out)


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"vaultr {__version__}"


def test_read_json(demo_home, capsys):
    exit_code, output = _json_main(capsys, "vault", "read", "Welcome.md")
    assert exit_code == 0
    assert output["path"] == "Welcome.md"
    assert output["content"].startswith("# Welcome")


def test_failure_exit_code(demo_home, capsys):
    exit_code, output = _json_main(capsys, "vault", "read", "Missing.md")
    assert exit_code == 1
    assert output["errors"]


def test_new_write_render_round(demo_home, capsys):
    assert _json_main(capsys, "vault", "new", "Projects/Beta", "--dir")[0] == 0
    assert _json_main(capsys, "vault", "new", "Projects/Beta/Notes.md")[0] == 0
    assert _json_main(capsys, "vault", "write", "Projects/Beta/Notes.md", "---\nstatus: done\n---\n# Notes")[0] == 0
    exit_code, output = _json_main(capsys, "vault", "render", "Projects/Beta/Notes.md")
    assert exit_code == 0
    assert output["metadata"] == {"status": "done"}
    assert output["outline"] == [{"level": 1, "text": "Notes", "anchor_id": "notes"}]


def test_resolve_embed_flag(demo_home, capsys):
    exit_code, output = _json_main(capsys, "vault", "resolve", "demo-image.svg", "--embed")
    assert exit_code == 0
    assert output["status"] == "ok"


def test_history_commands(demo_home, capsys):
    _json_main(capsys, "vault", "tree")
    exit_code, output = _json_main(capsys, "history", "list")
    assert exit_code == 0
    assert output["vaults"][0]["id"] == "mock-demo"
    exit_code, output = _json_main(capsys, "history", "forget", "mock-demo")
    assert output["removed"] is True


def test_yaml_is_default(demo_home):
    result = runner.invoke(_create_app(), ["vault", "tree"])
    assert result.exit_code == 0
    assert "vault_id: mock-demo" in result.output


def test_invalid_display_format(demo_home):
    result = runner.invoke(_create_app(), ["--display", "xml", "vault", "tree"])
    assert result.exit_code == 1


def test_usage_error(capsys):
    assert main(["vault", "read"]) == 2
    assert "Usage error" in capsys.readouterr().err


def test_group_without_subcommand_shows_help(demo_home):
    result = runner.invoke(_create_app(), ["vault"])
    assert result.exit_code == 0
    assert "resolve" in result.output
