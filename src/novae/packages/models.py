"""Package data models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class InvalidPackageError(ValueError):
    """Raised when a package record is missing fields or has an unknown kind."""

    pass


class PackageKind(str, Enum):
    """Category of an installed package; selects its descriptor directory."""

    EXTENSION = "extension"
    SCRIPT = "script"

    @classmethod
    def parse(cls, value: str) -> PackageKind:
        """Parse a kind string, raising ``InvalidPackageError`` if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidPackageError(
                "Type must be either 'extension' or 'script'"
            ) from None


@dataclass(frozen=True)
class Package:
    """An installed package record.

    Serialized as ``{"name": ..., "version": ..., "type": ...}`` both in the
    manifest and in the per-package descriptor file.
    """

    name: str
    version: str
    kind: PackageKind

    @classmethod
    def create(cls, name: str, version: str, kind: str) -> Package:
        """Build a validated record from user input."""
        if not name:
            raise InvalidPackageError("Package name must not be empty")
        if not version:
            raise InvalidPackageError("Package version must not be empty")
        for label, value in (("name", name), ("version", version)):
            if "/" in value or "\\" in value:
                raise InvalidPackageError(
                    f"Package {label} must not contain a path separator: {value!r}"
                )
        return cls(name=name, version=version, kind=PackageKind.parse(kind))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Package:
        """Create from a manifest or descriptor entry."""
        if not isinstance(data, dict):
            raise InvalidPackageError(f"Package entry must be an object, got {data!r}")
        try:
            return cls.create(data["name"], data["version"], data["type"])
        except KeyError as e:
            raise InvalidPackageError(f"Package entry is missing {e.args[0]!r}") from None

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "type": self.kind.value,
        }

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the record in the manifest."""
        return (self.name, self.version)

    @property
    def descriptor_name(self) -> str:
        return f"{self.name}-{self.version}.json"

    def __str__(self) -> str:
        return f"{self.name}@{self.version} ({self.kind.value})"
