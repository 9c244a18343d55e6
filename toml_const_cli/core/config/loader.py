"""
Manifest loader — reads Cargo.toml into domain models.

This is the entry point for everything the tool learns from the
package it was pointed at.  It reads TOML with ``tomllib`` and returns
typed ``Manifest`` objects.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from toml_const_cli.core.models.manifest import Manifest
from toml_const_cli.core.models.toml_value import ValueKind, get_table, kind_of

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when an input file or the generated configuration is unusable."""


class ManifestError(ConfigError):
    """Raised when the package manifest is missing, unreadable or incomplete."""


def parse_manifest(text: str) -> Manifest:
    """Parse Cargo.toml contents.

    Raises:
        tomllib.TOMLDecodeError: If the text is not valid TOML.
    """
    return Manifest.from_table(tomllib.loads(text))


def read_manifest_table(path: Path) -> dict[str, Any]:
    """Read and parse the manifest the user pointed at.

    Raises:
        ManifestError: If the file is missing, unreadable or invalid TOML.
    """
    if not path.is_file():
        raise ManifestError(f"Failed to read cargo manifest: {path} not found")

    logger.debug("Loading cargo manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Failed to read cargo manifest: {e}") from e

    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Failed to parse manifest into toml: {e}") from e


def package_name(table: dict[str, Any]) -> str:
    """Return ``[package] name`` from a manifest table.

    Raises:
        ManifestError: If the name is absent or not a string.
    """
    package = get_table(table, "package")
    name = package.get("name") if package else None
    if name is None:
        raise ManifestError(
            "Cargo manifest does not have a package name. "
            "The manifest specified may be a workspace."
        )
    if kind_of(name) is not ValueKind.STRING:
        raise ManifestError("Cargo package name needs to be a string")
    return name


def resolve_package_name(path: Path, override: str | None = None) -> str:
    """Name used to prefix the boilerplate files.

    The manifest must always be valid and carry a package name, even
    when ``override`` replaces it.
    """
    name = package_name(read_manifest_table(path))
    if override is not None:
        if not override.strip():
            raise ManifestError("Name override must not be empty")
        logger.info("Using name override '%s' instead of '%s'", override, name)
        return override
    return name
