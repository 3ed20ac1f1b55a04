"""
novae - a minimal local registry for extensions and scripts.

Installed packages are recorded in a JSON manifest and mirrored as one
descriptor file per package under a kind-specific directory.

Example:
    from novae import ManifestStore, NovaeConfig, Package

    store = ManifestStore(NovaeConfig())
    store.install(Package.create("foo", "1.0.0", "script"))
    for pkg in store.list_packages():
        print(pkg)
"""

from novae.config import NovaeConfig
from novae.logging import get_logger, setup_logging
from novae.packages import InvalidPackageError, ManifestStore, Package, PackageKind

__version__ = "0.1.0"

__all__ = [
    "InvalidPackageError",
    "ManifestStore",
    "NovaeConfig",
    "Package",
    "PackageKind",
    "get_logger",
    "setup_logging",
]
