"""Shared pytest fixtures for novae tests."""

import json
from pathlib import Path

import pytest

from novae import ManifestStore, NovaeConfig, Package, PackageKind


@pytest.fixture
def config(tmp_path: Path) -> NovaeConfig:
    """Create a config rooted at a temporary home directory."""
    return NovaeConfig(base_dir=tmp_path / "home")


@pytest.fixture
def store(config: NovaeConfig) -> ManifestStore:
    """Create a store with its directories in place."""
    store = ManifestStore(config)
    store.ensure_directories()
    return store


@pytest.fixture
def script_pkg() -> Package:
    """Create a sample script package."""
    return Package(name="foo", version="1.0.0", kind=PackageKind.SCRIPT)


@pytest.fixture
def extension_pkg() -> Package:
    """Create a sample extension package."""
    return Package(name="bar", version="0.3.1", kind=PackageKind.EXTENSION)


@pytest.fixture
def read_manifest(config: NovaeConfig):
    """Return a helper that reads the raw manifest JSON."""

    def _read() -> list:
        return json.loads(config.manifest_path.read_text(encoding="utf-8"))

    return _read
