"""
Manifest model — what a Cargo.toml says about itself.

Only the handful of fields that matter for locating the project root
are kept.  A Manifest is parsed, classified and thrown away; nothing
here is ever written back.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from toml_const_cli.core.models.toml_value import ValueKind, get_string, get_table, kind_of

MANIFEST_FILE = "Cargo.toml"


class ManifestKind(StrEnum):
    """How a directory takes part in root resolution."""

    WORKSPACE = "workspace"
    PACKAGE = "package"
    ABSENT = "absent"


class Manifest(BaseModel):
    """A parsed Cargo manifest.

    Attributes:
        package:  ``[package] name``, if it is a string.
        workspace: True when a ``[workspace]`` key is present.
        binaries: Names of ``[[bin]]`` targets, if any.
        library:  ``[lib] name``, if it is a string.
    """

    package: str | None = None
    workspace: bool = False
    binaries: list[str] | None = None
    library: str | None = None

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> Manifest:
        """Build a Manifest from a table produced by ``tomllib``."""
        package_table = get_table(table, "package")
        package = get_string(package_table, "name") if package_table else None

        binaries: list[str] | None = None
        bins = table.get("bin")
        if bins is not None and kind_of(bins) is ValueKind.ARRAY:
            binaries = []
            for entry in bins:
                if kind_of(entry) is not ValueKind.TABLE:
                    continue
                name = get_string(entry, "name")
                if name is not None:
                    binaries.append(name)

        lib_table = get_table(table, "lib")
        library = get_string(lib_table, "name") if lib_table else None

        return cls(
            package=package,
            workspace="workspace" in table,
            binaries=binaries,
            library=library,
        )

    @property
    def kind(self) -> ManifestKind:
        """Workspace beats package; neither means the manifest is ignored."""
        if self.workspace:
            return ManifestKind.WORKSPACE
        if self.package is not None:
            return ManifestKind.PACKAGE
        return ManifestKind.ABSENT
