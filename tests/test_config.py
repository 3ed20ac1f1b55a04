"""Tests for NovaeConfig."""

from pathlib import Path
from textwrap import dedent

import pytest

from novae.config import NovaeConfig, get_base_dir


class TestGetBaseDir:
    """Tests for base directory resolution."""

    def test_defaults_to_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NOVAE_HOME", raising=False)

        assert get_base_dir() == Path.home()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("NOVAE_HOME", str(tmp_path))

        assert get_base_dir() == tmp_path

    def test_blank_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOVAE_HOME", "  ")

        assert get_base_dir() == Path.home()


class TestNovaeConfig:
    """Tests for the directory layout."""

    def test_default_layout(self, tmp_path: Path) -> None:
        """Layout mirrors ~/.config/novae and ~/.novae."""
        config = NovaeConfig(base_dir=tmp_path)

        assert config.manifest_path == tmp_path / ".config" / "novae" / "config.json"
        assert config.extensions_dir == tmp_path / ".novae" / "extensions"
        assert config.scripts_dir == tmp_path / ".novae" / "scripts"

    def test_kind_dir(self, tmp_path: Path) -> None:
        config = NovaeConfig(base_dir=tmp_path)

        assert config.kind_dir("extension") == config.extensions_dir
        assert config.kind_dir("script") == config.scripts_dir

    def test_directories(self, tmp_path: Path) -> None:
        config = NovaeConfig(base_dir=tmp_path)

        assert config.directories() == [
            config.config_dir,
            config.extensions_dir,
            config.scripts_dir,
        ]

    def test_explicit_dirs(self, tmp_path: Path) -> None:
        config = NovaeConfig(
            base_dir=tmp_path,
            config_dir=tmp_path / "cfg",
            data_dir=tmp_path / "data",
            manifest_name="manifest.json",
        )

        assert config.manifest_path == tmp_path / "cfg" / "manifest.json"
        assert config.scripts_dir == tmp_path / "data" / "scripts"

    def test_from_dict_empty_uses_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        monkeypatch.setenv("NOVAE_HOME", str(tmp_path))

        config = NovaeConfig.from_dict({})

        assert config.base_dir == tmp_path
        assert config.manifest_name == "config.json"

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "novae.yaml"
        yaml_file.write_text(
            dedent(f"""
                base_dir: {tmp_path}
                data_dir: {tmp_path / "pkgs"}
                manifest_name: installed.json
            """).strip()
        )

        config = NovaeConfig.from_yaml(yaml_file)

        assert config.config_dir == tmp_path / ".config" / "novae"
        assert config.extensions_dir == tmp_path / "pkgs" / "extensions"
        assert config.manifest_path.name == "installed.json"

    def test_from_yaml_string_expands_user(self) -> None:
        config = NovaeConfig.from_yaml_string("base_dir: ~/sandbox")

        assert config.base_dir == Path.home() / "sandbox"

    def test_from_yaml_string_empty(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        monkeypatch.setenv("NOVAE_HOME", str(tmp_path))

        config = NovaeConfig.from_yaml_string("")

        assert config.base_dir == tmp_path

    def test_roundtrip(self, tmp_path: Path) -> None:
        original = NovaeConfig(base_dir=tmp_path, manifest_name="m.json")

        restored = NovaeConfig.from_dict(original.to_dict())

        assert restored == original
