"""Unit tests for vault command functions."""

import pytest

from tests.conftest import run_cmd
from vaultreader.api.vault.cmd_mv import cmd_mv
from vaultreader.api.vault.cmd_new import cmd_new
from vaultreader.api.vault.cmd_read import cmd_read
from vaultreader.api.vault.cmd_render import cmd_render
from vaultreader.api.vault.cmd_resolve import cmd_resolve
from vaultreader.api.vault.cmd_rm import cmd_rm
from vaultreader.api.vault.cmd_tree import cmd_tree
from vaultreader.api.vault.cmd_write import cmd_write

pytestmark = pytest.mark.cli


class TestTree:
    def test_tree(self, demo_home):
        result = run_cmd(cmd_tree)
        assert result.success
        assert result.output["vault_id"] == "mock-demo"
        assert [node["name"] for node in result.output["tree"]] == ["FigureBed 🌄", "Projects", "Tech", "Work", "Welcome.md"]

    def test_search(self, demo_home):
        result = run_cmd(cmd_tree, search="specs")
        assert result.success
        assert result.output["tree"][0]["children"][0]["children"][0]["path"] == "Projects/Alpha/Specs.md"

    def test_missing_config(self):
        result = run_cmd(cmd_tree)
        assert not result.success
        assert "not found" in result.output["errors"][0]
        assert result.output["tree"] == []


class TestReadWrite:
    def test_read_demo_document(self, demo_home):
        result = run_cmd(cmd_read, "Welcome.md")
        assert result.success
        assert result.output["content"].startswith("# Welcome")

    def test_write_then_read(self, demo_home):
        assert run_cmd(cmd_write, "Welcome.md", "# New").output["length"] == 5
        assert run_cmd(cmd_read, "Welcome.md").output["content"] == "# New"

    def test_read_missing_path(self, demo_home):
        result = run_cmd(cmd_read, "Nope.md")
        assert not result.success
        assert result.output["vault_id"] == "mock-demo"
        assert "Nope.md" in result.output["errors"][0]

    def test_read_directory(self, demo_home):
        result = run_cmd(cmd_read, "Projects")
        assert not result.success
        assert "directory" in result.result

    def test_native_read(self, native_home):
        result = run_cmd(cmd_read, "Projects/Alpha/Specs.md")
        assert result.success
        assert result.output["vault_id"] == "local-vault"
        assert "status: draft" in result.output["content"]


class TestMutations:
    def test_new_file_reads_empty(self, demo_home):
        result = run_cmd(cmd_new, "Projects/Alpha/Plan.md")
        assert result.success
        assert result.output == {"errors": [], "warnings": [], "vault_id": "mock-demo", "path": "Projects/Alpha/Plan.md", "kind": "file"}
        assert run_cmd(cmd_read, "Projects/Alpha/Plan.md").output["content"] == ""

    def test_new_directory(self, native_home, native_vault_dir):
        result = run_cmd(cmd_new, "Inbox", directory=True)
        assert result.success
        assert result.output["kind"] == "directory"
        assert (native_vault_dir / "Inbox").is_dir()

    def test_new_collision(self, demo_home):
        result = run_cmd(cmd_new, "Welcome.md")
        assert not result.success
        assert "already exists" in result.output["errors"][0]

    def test_new_in_missing_parent(self, demo_home):
        result = run_cmd(cmd_new, "Nowhere/Plan.md")
        assert not result.success

    def test_mv_directory(self, demo_home):
        run_cmd(cmd_write, "Projects/Alpha/Specs.md", "edited")
        result = run_cmd(cmd_mv, "Projects", "Archive")
        assert result.success
        assert result.output["new_path"] == "Archive"
        assert run_cmd(cmd_read, "Archive/Alpha/Specs.md").output["content"] == "edited"
        assert not run_cmd(cmd_read, "Projects/Alpha/Specs.md").success

    def test_mv_collision(self, demo_home):
        result = run_cmd(cmd_mv, "Projects", "Work")
        assert not result.success
        assert result.output["new_path"] == ""

    def test_mv_unsupported_directory_rename(self, home_dir, native_vault_dir):
        from tests.conftest import native_config_dict, write_config

        config = native_config_dict(native_vault_dir)
        config["vault"]["data"]["rename_primitive"] = False
        write_config(home_dir, config)
        result = run_cmd(cmd_mv, "Projects", "Archive")
        assert not result.success
        assert (native_vault_dir / "Projects").is_dir()

    def test_rm(self, demo_home):
        assert run_cmd(cmd_rm, "Tech").success
        tree = run_cmd(cmd_tree).output["tree"]
        assert "Tech" not in [node["name"] for node in tree]


class TestRenderResolve:
    def test_render(self, demo_home):
        result = run_cmd(cmd_render, "Projects/Alpha/Specs.md")
        assert result.success
        assert result.output["metadata"] == {"tags": ["project", "alpha"], "status": "draft"}
        assert result.output["outline"][0] == {"level": 1, "text": "Project Alpha Specs", "anchor_id": "project-alpha-specs"}
        assert not result.output["body"].startswith("---")

    def test_render_references(self, demo_home):
        result = run_cmd(cmd_render, "Welcome.md")
        embeds = [ref for ref in result.output["references"] if ref["is_embed"]]
        assert embeds[0]["target"] == "demo-image.svg"
        assert embeds[0]["href"] == "wikiimage:demo-image.svg"

    def test_resolve(self, demo_home):
        result = run_cmd(cmd_resolve, "Specs")
        assert result.success
        assert result.output["status"] == "ok"
        assert result.output["path"] == "Projects/Alpha/Specs.md"
        assert result.output["target_uri"] == "vault:///Projects/Alpha/Specs.md"
        assert result.output["warnings"] == []

    def test_resolve_embed(self, demo_home):
        result = run_cmd(cmd_resolve, "demo-image.svg", embed=True)
        assert result.output["path"] == "FigureBed 🌄/demo-image.svg"

    def test_resolve_missing_is_not_a_failure(self, demo_home):
        result = run_cmd(cmd_resolve, "Nowhere")
        assert result.success
        assert result.output["status"] == "missing_target"
        assert result.output["path"] is None

    def test_resolve_ambiguous_warns(self, demo_home):
        run_cmd(cmd_new, "Specs.md")
        result = run_cmd(cmd_resolve, "Specs")
        assert result.output["path"] == "Projects/Alpha/Specs.md"
        assert result.output["candidates"] == ["Projects/Alpha/Specs.md", "Specs.md"]
        assert "Ambiguous" in result.output["warnings"][0]
