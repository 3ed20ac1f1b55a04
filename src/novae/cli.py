"""
Command-line interface for novae.

    novae install <name> <version> <extension|script>
    novae uninstall <name>
    novae list
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from novae.config import NovaeConfig
from novae.logging import get_logger, setup_logging
from novae.packages import InvalidPackageError, ManifestStore, Package

console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)
err_console = Console(
    stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True,
)

logger = get_logger("cli")

UNKNOWN_COMMAND = "Unknown command. Use 'install', 'uninstall', or 'list'."
INSTALL_USAGE = "Usage: novae install <name> <version> <extension|script>"
UNINSTALL_USAGE = "Usage: novae uninstall <name>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="novae",
        description="Minimal local registry for extensions and scripts",
        epilog=(
            "commands:\n"
            "  install <name> <version> <extension|script>\n"
            "  uninstall <name>\n"
            "  list\n"
            "\n"
            "Use -- before arguments that start with a dash:\n"
            "  novae install -- -beta 1.0 script"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file overriding the directory layout",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )
    parser.add_argument("command", nargs="?", help="install, uninstall or list")
    parser.add_argument("args", nargs="*", help="Command arguments")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)
    trailing: list[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, trailing = argv[:split], argv[split + 1 :]

    args = build_parser().parse_intermixed_args(argv)
    positionals = ([args.command] if args.command else []) + args.args + trailing
    command, rest = (positionals[0], positionals[1:]) if positionals else (None, [])

    setup_logging("DEBUG" if args.verbose else "WARNING", file=args.log_file)

    config = NovaeConfig.from_yaml(args.config) if args.config else NovaeConfig()
    store = ManifestStore(config)
    store.ensure_directories()
    store.load()

    if command == "install":
        return cmd_install(store, rest)
    elif command == "uninstall":
        return cmd_uninstall(store, rest)
    elif command == "list":
        return cmd_list(store)

    err_console.print(UNKNOWN_COMMAND, style="red")
    return 1


def cmd_install(store: ManifestStore, argv: list[str]) -> int:
    """Install a package."""
    if len(argv) < 3:
        err_console.print(INSTALL_USAGE, style="red")
        return 1

    name, version, kind = argv[:3]
    try:
        pkg = Package.create(name, version, kind)
    except InvalidPackageError as e:
        err_console.print(str(e), style="red")
        return 1

    store.install(pkg)
    console.print(f"Installed {pkg.name}@{pkg.version}")
    return 0


def cmd_uninstall(store: ManifestStore, argv: list[str]) -> int:
    """Uninstall every version of a package."""
    if not argv or not argv[0]:
        err_console.print(UNINSTALL_USAGE, style="red")
        return 1

    name = argv[0]
    removed = store.uninstall(name)
    if removed:
        console.print(f"Uninstalled {name}")
    return 0


def cmd_list(store: ManifestStore) -> int:
    """List installed packages in manifest order."""
    packages = store.list_packages()
    console.print("Installed packages:")
    for pkg in packages:
        console.print(str(pkg))
    logger.debug("Listed %d package(s)", len(packages))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
