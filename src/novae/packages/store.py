"""
ManifestStore - keeps the package manifest and descriptor files in sync.

The manifest (``config.json``) is the authoritative list of installed
packages. Each installed package is mirrored as a descriptor file under the
directory for its kind so other tools can discover packages without parsing
the whole manifest.

Every mutating operation re-reads the manifest from disk before changing it
and writes it back immediately afterwards.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from novae.config import NovaeConfig
from novae.logging import get_logger
from novae.packages.models import Package

logger = get_logger("packages.store")


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_json(path: Path, data: Any) -> None:
    """Write *data* as indented JSON, replacing *path* atomically.

    The file ends up with the mode a plain write gives under the current umask.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class ManifestStore:
    """
    Owns the ordered package list and its on-disk mirror.

    Records are keyed by ``(name, version)``: reinstalling the same pair
    replaces the existing entry in place, while different versions of one
    name are kept side by side in insertion order.
    """

    def __init__(self, config: NovaeConfig | None = None) -> None:
        self.config = config or NovaeConfig()
        self._packages: list[Package] = []

    @property
    def packages(self) -> list[Package]:
        """Records as of the last load or mutation."""
        return list(self._packages)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def ensure_directories(self) -> None:
        """Create the config directory and both descriptor directories."""
        for directory in self.config.directories():
            directory.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[Package]:
        """
        Load the manifest from disk.

        A missing manifest is treated as an empty one and written out
        immediately. Malformed JSON is not caught.
        """
        path = self.config.manifest_path
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"Manifest {path} must contain a JSON array")
            self._packages = [Package.from_dict(entry) for entry in data]
            logger.debug("Loaded %d package(s) from %s", len(self._packages), path)
        else:
            logger.debug("No manifest at %s, creating an empty one", path)
            self._packages = []
            self.save()
        return self.packages

    def save(self) -> None:
        """Write the in-memory list to the manifest file."""
        path = self.config.manifest_path
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_json(path, [pkg.to_dict() for pkg in self._packages])
        logger.debug("Saved %d package(s) to %s", len(self._packages), path)

    def descriptor_path(self, pkg: Package) -> Path:
        return self.config.kind_dir(pkg.kind) / pkg.descriptor_name

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def install(self, pkg: Package) -> Package:
        """Add *pkg* to the manifest and write its descriptor file."""
        self.ensure_directories()
        self.load()

        for i, existing in enumerate(self._packages):
            if existing.key == pkg.key:
                logger.info("Reinstalling %s@%s", pkg.name, pkg.version)
                self._packages[i] = pkg
                break
        else:
            self._packages.append(pkg)

        self.save()
        _write_json(self.descriptor_path(pkg), pkg.to_dict())
        logger.info("Installed %s", pkg)
        return pkg

    def uninstall(self, name: str) -> list[Package]:
        """
        Remove every record called *name*.

        Returns the removed records; an empty list means nothing matched and
        nothing on disk was touched.
        """
        self.load()
        removed = self.find(name)
        if not removed:
            logger.debug("Nothing to uninstall for %r", name)
            return []

        self._packages = [pkg for pkg in self._packages if pkg.name != name]
        self.save()

        for pkg in removed:
            self.descriptor_path(pkg).unlink(missing_ok=True)
            logger.info("Uninstalled %s", pkg)
        return removed

    def find(self, name: str) -> list[Package]:
        """All loaded records named *name*, in manifest order."""
        return [pkg for pkg in self._packages if pkg.name == name]

    def list_packages(self) -> list[Package]:
        """Records in manifest order."""
        return self.load()
