"""
Cargo config persistence — read/write for .cargo/config.toml.

The document lives in <project root>/.cargo/config.toml.  Writes are
atomic (write to temp file, then rename) so a crash mid-write never
leaves a truncated config behind.  Comments do not survive a round
trip; keys and values do.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from toml_const_cli.core.config.loader import ConfigError

logger = logging.getLogger(__name__)

CARGO_CONFIG_DIR = ".cargo"
CARGO_CONFIG_FILE = "config.toml"


@dataclass
class ConfigDocument:
    """A parsed config.toml and where it came from."""

    path: Path
    data: dict[str, Any] = field(default_factory=dict)


def default_config_path(project_root: Path) -> Path:
    """Get the cargo config path for a project."""
    return project_root / CARGO_CONFIG_DIR / CARGO_CONFIG_FILE


def load_config_document(path: Path) -> ConfigDocument:
    """Load a cargo config file, creating it empty if it does not exist.

    Raises:
        ConfigError: If the file cannot be created, read or parsed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot open cargo config {path}: {e}") from e

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    logger.debug("Loaded cargo config from %s (%d top-level keys)", path, len(data))
    return ConfigDocument(path=path, data=data)


def save_config_document(document: ConfigDocument) -> None:
    """Serialize the document back to its path (atomic write).

    An existing file's permission bits are carried over to the new one.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path = document.path
    content = tomli_w.dumps(document.data)

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".config_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            # mkstemp creates 0600; the replaced file keeps the user's mode
            if path.exists():
                os.chmod(fd, stat.S_IMODE(path.stat().st_mode))
            with open(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            tmp.replace(path)
            logger.debug("Cargo config saved to %s", path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        raise ConfigError(f"Failed to write cargo config {path}: {e}") from e
