"""
Configuration for novae.

Describes the on-disk layout (manifest location and descriptor directories)
rooted at a base directory. Can be loaded from a YAML file or constructed
programmatically.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

HOME_ENV_VAR = "NOVAE_HOME"
DEFAULT_MANIFEST_NAME = "config.json"


def get_base_dir() -> Path:
    """Get the base directory from ``NOVAE_HOME``, defaulting to the user's home."""
    val = os.environ.get(HOME_ENV_VAR, "").strip()
    if val:
        return Path(val).expanduser()
    return Path.home()


def _optional_path(value: Any) -> Path | None:
    if not value:
        return None
    return Path(str(value)).expanduser()


@dataclass
class NovaeConfig:
    """
    Directory layout for the manifest store.

    Example YAML:
        base_dir: ~/sandbox
        config_dir: ~/sandbox/.config/novae
        data_dir: ~/sandbox/.novae
        manifest_name: config.json

    Any field left out is derived from ``base_dir``.
    """

    base_dir: Path = field(default_factory=get_base_dir)
    config_dir: Path | None = None  # Holds the manifest (~/.config/novae)
    data_dir: Path | None = None  # Holds descriptor dirs (~/.novae)
    manifest_name: str = DEFAULT_MANIFEST_NAME

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir)
        if self.config_dir is None:
            self.config_dir = self.base_dir / ".config" / "novae"
        if self.data_dir is None:
            self.data_dir = self.base_dir / ".novae"
        self.config_dir = Path(self.config_dir)
        self.data_dir = Path(self.data_dir)

    @property
    def manifest_path(self) -> Path:
        return self.config_dir / self.manifest_name

    @property
    def extensions_dir(self) -> Path:
        return self.data_dir / "extensions"

    @property
    def scripts_dir(self) -> Path:
        return self.data_dir / "scripts"

    def kind_dir(self, kind: str) -> Path:
        """Directory holding descriptor files for *kind* (``extension`` or ``script``)."""
        if kind == "extension":
            return self.extensions_dir
        return self.scripts_dir

    def directories(self) -> list[Path]:
        """All directories the store expects to exist."""
        return [self.config_dir, self.extensions_dir, self.scripts_dir]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NovaeConfig:
        """Create config from a dictionary."""
        base_dir = _optional_path(data.get("base_dir")) or get_base_dir()
        return cls(
            base_dir=base_dir,
            config_dir=_optional_path(data.get("config_dir")),
            data_dir=_optional_path(data.get("data_dir")),
            manifest_name=data.get("manifest_name") or DEFAULT_MANIFEST_NAME,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> NovaeConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> NovaeConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "base_dir": str(self.base_dir),
            "config_dir": str(self.config_dir),
            "data_dir": str(self.data_dir),
            "manifest_name": self.manifest_name,
        }
