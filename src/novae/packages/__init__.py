"""Installed package records and the manifest store that persists them."""
from __future__ import annotations

from novae.packages.models import InvalidPackageError, Package, PackageKind
from novae.packages.store import ManifestStore

__all__ = [
    "InvalidPackageError",
    "ManifestStore",
    "Package",
    "PackageKind",
]
