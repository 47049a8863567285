"""Pytest configuration and fixtures for SDK tests."""
import shutil

import pytest

from gomodmerge_sdk import FakeToolchain


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "requires_go: marks tests that need a Go toolchain on PATH"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests that need the go binary when it is not installed."""
    has_go = shutil.which("go") is not None
    for item in items:
        if "requires_go" in item.keywords and not has_go:
            item.add_marker(pytest.mark.skip(reason="Go toolchain not available"))


@pytest.fixture
def go_module(tmp_path, monkeypatch):
    """A local module directory with a go.mod, used as the working directory."""
    module_dir = tmp_path / "local"
    module_dir.mkdir()
    (module_dir / "go.mod").write_text("module example.com/local\n\ngo 1.21\n")
    monkeypatch.chdir(module_dir)
    return module_dir


@pytest.fixture
def foreign_modfile(tmp_path):
    """A foreign go.mod outside the local module."""
    other_dir = tmp_path / "other"
    other_dir.mkdir()
    modfile = other_dir / "go.mod"
    modfile.write_text(
        "module example.com/other\n\n"
        "go 1.21\n\n"
        "require (\n"
        "\tmod/a v1.3.0\n"
        "\tmod/b v2.0.0\n"
        ")\n"
    )
    return modfile


@pytest.fixture
def scratch_parent(tmp_path):
    """Directory that receives scratch workspaces, so tests can check cleanup."""
    parent = tmp_path / "scratch"
    parent.mkdir()
    return parent


@pytest.fixture
def make_toolchain():
    """Factory for fake toolchains built from two version maps."""
    def _make(local, foreign, **kwargs):
        return FakeToolchain.from_version_maps(local, foreign, **kwargs)
    return _make
