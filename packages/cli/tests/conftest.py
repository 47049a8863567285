"""Pytest configuration and fixtures for CLI tests."""
import logging

import pytest
from typer.testing import CliRunner

from gomodmerge_sdk import FakeToolchain


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the gomodmerge logger; put it back afterwards."""
    root = logging.getLogger("gomodmerge")
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def go_module(tmp_path, monkeypatch):
    """Run the CLI from inside a local module."""
    module_dir = tmp_path / "local"
    module_dir.mkdir()
    (module_dir / "go.mod").write_text("module example.com/local\n\ngo 1.21\n")
    monkeypatch.chdir(module_dir)
    monkeypatch.setenv("GOMODMERGE_SCRATCH_PARENT", str(tmp_path))
    return module_dir


@pytest.fixture
def foreign_modfile(tmp_path):
    """A foreign go.mod to merge from."""
    other_dir = tmp_path / "other"
    other_dir.mkdir()
    modfile = other_dir / "go.mod"
    modfile.write_text("module example.com/other\n\ngo 1.21\n")
    return modfile


@pytest.fixture
def use_toolchain(monkeypatch):
    """Make the merge command run against the given fake toolchain."""
    def _use(toolchain: FakeToolchain) -> FakeToolchain:
        created = []

        def _create(go_binary=None):
            created.append(go_binary)
            return toolchain

        toolchain.created_with = created
        monkeypatch.setattr("gomodmerge_cli.merge_cmd.create_toolchain", _create)
        return toolchain
    return _use
