"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from vaultreader.api.store._mongomock import _client as _mongomock_client
from vaultreader.api.store.Store import Store
from vaultreader.api.store.StoreConfig import StoreConfig
from vaultreader.utils import configure_logging as _logging_state


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid configuration: the built-in demo vault over mongomock."""
    return {
        "vault": {
            "type": "virtual",
            "data": {"vault_id": "mock-demo"},
            "hidden_paths": [],
        },
        "store": {
            "type": "mongomock",
            "prefix": "vaultreader_test",
            "data": {},
        },
        "log": {"level": "DEBUG"},
    }


def native_config_dict(base_dir: Path) -> dict:
    """Configuration for a native vault rooted at ``base_dir``."""
    config = minimal_config_dict()
    config["vault"] = {"type": "native", "data": {"base_dir": str(base_dir)}, "hidden_paths": []}
    return config


def write_config(home: Path, config: dict) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    config_path = home / "config.json"
    config_path.write_text(json.dumps(config), encoding="utf-8")
    return config_path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch) -> None:
    """Point VAULTREADER_HOME into tmp_path and start each test with an empty store."""
    monkeypatch.setenv("VAULTREADER_HOME", str(tmp_path / ".vaultreader"))
    # Keep tests from attaching file handlers to the shared logger
    monkeypatch.setattr(_logging_state, "_CONFIGURED", True)
    _mongomock_client._shared_mongomock_client = None
    yield
    _mongomock_client._shared_mongomock_client = None


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    return tmp_path / ".vaultreader"


@pytest.fixture
def demo_home(home_dir: Path, minimal_config_dict: dict) -> Path:
    """VAULTREADER_HOME with a config for the built-in demo vault."""
    write_config(home_dir, minimal_config_dict)
    return home_dir


@pytest.fixture
def native_vault_dir(tmp_path: Path) -> Path:
    """A small vault on disk.

    vault/
        Welcome.md
        Projects/Alpha/Specs.md
        Work/Meetings/2023-10-27.md
        attachments/diagram.svg
        .obsidian/app.json  (ignored)
    """
    base = tmp_path / "vault"
    (base / "Projects" / "Alpha").mkdir(parents=True)
    (base / "Work" / "Meetings").mkdir(parents=True)
    (base / "attachments").mkdir()
    (base / ".obsidian").mkdir()
    (base / "Welcome.md").write_text("# Welcome\n\nSee [[Specs]].\n", encoding="utf-8")
    (base / "Projects" / "Alpha" / "Specs.md").write_text("---\nstatus: draft\n---\n# Specs\n", encoding="utf-8")
    (base / "Work" / "Meetings" / "2023-10-27.md").write_text("# Meeting\n", encoding="utf-8")
    (base / "attachments" / "diagram.svg").write_text("<svg/>", encoding="utf-8")
    (base / ".obsidian" / "app.json").write_text("{}", encoding="utf-8")
    return base


@pytest.fixture
def native_home(home_dir: Path, native_vault_dir: Path) -> Path:
    """VAULTREADER_HOME with a config for ``native_vault_dir``."""
    write_config(home_dir, native_config_dict(native_vault_dir))
    return home_dir


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(type="mongomock", prefix="vaultreader_test", data={})


@pytest.fixture
def store(store_config: StoreConfig):
    """An entered mongomock-backed Store."""
    with Store(store_config) as opened:
        yield opened


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
