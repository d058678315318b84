"""Unit tests for vaultreader.api.resolve.ReferenceResolver module."""

import logging

import pytest

from vaultreader.api.backend._virtual._demo import demo_manifest
from vaultreader.api.resolve.ReferenceResolver import ReferenceResolver
from vaultreader.api.tree.Node import Node

pytestmark = pytest.mark.resolve


@pytest.fixture
def resolver() -> ReferenceResolver:
    return ReferenceResolver(Node.from_manifest(demo_manifest()))


def _tree(*paths: str) -> Node:
    root = {"name": "Vault", "kind": "directory", "path": "", "children": []}
    for file_path in paths:
        current = root
        parts = file_path.split("/")
        for depth, part in enumerate(parts):
            path = "/".join(parts[: depth + 1])
            if depth == len(parts) - 1:
                current["children"].append({"name": part, "kind": "file", "path": path})
                continue
            existing = next((c for c in current["children"] if c["path"] == path), None)
            if existing is None:
                existing = {"name": part, "kind": "directory", "path": path, "children": []}
                current["children"].append(existing)
            current = existing
    return Node.from_manifest(root)


class TestRules:
    def test_full_path_without_extension(self, resolver):
        assert resolver.resolve("Projects/Alpha/Specs").path == "Projects/Alpha/Specs.md"

    def test_full_path_exact(self, resolver):
        assert resolver.resolve("Projects/Alpha/Specs.md").path == "Projects/Alpha/Specs.md"

    def test_bare_name(self, resolver):
        assert resolver.resolve("Specs").path == "Projects/Alpha/Specs.md"

    def test_embed_filename_at_any_depth(self, resolver):
        assert resolver.resolve("demo-image.svg", is_embed=True).path == "FigureBed 🌄/demo-image.svg"

    def test_case_insensitive(self, resolver):
        assert resolver.resolve("projects/alpha/SPECS").path == "Projects/Alpha/Specs.md"
        assert resolver.resolve("welcome").path == "Welcome.md"

    def test_backslashes_and_leading_slash(self, resolver):
        assert resolver.resolve("\\Projects\\Alpha\\Specs").path == "Projects/Alpha/Specs.md"
        assert resolver.resolve("/Welcome.md").path == "Welcome.md"

    def test_partial_path_does_not_match(self, resolver):
        assert resolver.resolve("Alpha/Specs") is None

    def test_directories_never_match(self, resolver):
        assert resolver.resolve("Projects") is None

    def test_miss(self, resolver, caplog):
        with caplog.at_level(logging.INFO, logger="vaultreader"):
            assert resolver.resolve("Nowhere") is None
        assert "Nowhere" in caplog.text

    def test_empty_target(self, resolver):
        assert resolver.resolve("   ") is None

    def test_only_md_suffix_is_optional(self):
        resolver = ReferenceResolver(_tree("diagram.svg"))
        assert resolver.resolve("diagram") is None
        assert resolver.resolve("diagram.svg").path == "diagram.svg"

    def test_embed_with_path_falls_back_to_filename(self):
        resolver = ReferenceResolver(_tree("assets/img/logo.png"))
        assert resolver.resolve("elsewhere/logo.png") is None
        assert resolver.resolve("logo.png", is_embed=True).path == "assets/img/logo.png"


class TestOrdering:
    def test_first_match_in_depth_first_order_wins(self):
        resolver = ReferenceResolver(_tree("Notes.md", "b/Notes.md", "a/Notes.md"))
        assert resolver.resolve("Notes").path == "a/Notes.md"
        assert [node.path for node in resolver.candidates("Notes")] == ["a/Notes.md", "b/Notes.md", "Notes.md"]

    def test_resolution_is_idempotent(self, resolver):
        first = resolver.resolve("Specs")
        assert resolver.resolve("Specs") is first

    def test_resolver_sees_tree_mutations(self, resolver):
        specs = resolver.root.find("Projects/Alpha/Specs.md")
        specs.name = "Plan.md"
        specs.path = "Projects/Alpha/Plan.md"
        assert resolver.resolve("Specs") is None
        assert resolver.resolve("Plan") is specs


class TestLocate:
    def test_ok(self, resolver):
        located = resolver.locate("demo-image.svg", is_embed=True)
        assert located.status == "ok"
        assert located.target_uri == "vault:///FigureBed 🌄/demo-image.svg"
        assert located.node.name == "demo-image.svg"
        assert located.to_dict()["path"] == "FigureBed 🌄/demo-image.svg"

    def test_missing_target(self, resolver):
        located = resolver.locate("missing.png", is_embed=True)
        assert located.status == "missing_target"
        assert located.node is None
        assert located.target_uri == "vault:///missing.png"
