"""
Package navigation — find the project root of a nested Cargo tree.

Starting from a package directory, every ancestor is inspected for a
Cargo.toml.  A workspace manifest ends the search on the spot; a plain
package manifest becomes the current candidate and the walk goes on,
so the topmost package wins when no workspace sits above it.

Pure logic — reads files, writes nothing.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from toml_const_cli.core.config.loader import parse_manifest
from toml_const_cli.core.models.manifest import MANIFEST_FILE, ManifestKind

logger = logging.getLogger(__name__)


def classify_directory(directory: Path) -> ManifestKind:
    """Classify one directory by the manifest it holds.

    Missing, unreadable and unparsable manifests all count as ABSENT.
    """
    manifest_path = directory / MANIFEST_FILE
    if not manifest_path.is_file():
        return ManifestKind.ABSENT

    try:
        manifest = parse_manifest(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Skipping unreadable manifest %s: %s", manifest_path, e)
        return ManifestKind.ABSENT

    return manifest.kind


def find_cargo_parent(start: Path) -> Path | None:
    """Return the directory of the governing manifest above ``start``.

    Args:
        start: Package directory to start from (included in the walk).

    Returns:
        The first workspace manifest's directory, else the topmost
        package manifest's directory, else None.
    """
    try:
        full_path = start.resolve(strict=True)
    except OSError as e:
        logger.warning("Cannot resolve %s: %s", start, e)
        return None

    found: Path | None = None

    for directory in (full_path, *full_path.parents):
        kind = classify_directory(directory)

        if kind is ManifestKind.WORKSPACE:
            logger.debug("Workspace manifest at %s", directory)
            return directory

        if kind is ManifestKind.PACKAGE:
            logger.debug("Package manifest at %s", directory)
            found = directory

    return found


def resolve_project_root(start: Path) -> Path:
    """Anchor directory for all path computation, falling back to ``start``."""
    root = find_cargo_parent(start)
    if root is None:
        logger.info("No cargo manifest found above %s — using it as root", start)
        return start.resolve()
    logger.info("Project root: %s", root)
    return root


def relative_prefix(root: Path, target_file: Path) -> str:
    """``"../"`` once per directory level between ``target_file`` and ``root``.

    Raises:
        ValueError: If ``target_file`` does not live under ``root``.
    """
    target_dir = target_file.resolve().parent
    depth = len(target_dir.relative_to(root.resolve()).parts)
    return "../" * depth
