"""
Boilerplate generator — the template/debug/deploy TOML data files.

All three start from the same payload.  They are created once; a file
that already has content is never touched again, and finding one stops
the run so user edits are not silently replaced.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toml_const_cli.core.config.loader import ConfigError
from toml_const_cli.core.models.generated import GeneratedFile, WriteMode
from toml_const_cli.core.services.generators.writer import write_generated_file

logger = logging.getLogger(__name__)


CONFIG_TOML_BOILERPLATE = """\
# Generated by toml-const-cli.
#
# The template file is committed; the debug and deploy files are not.
# Keys set in debug/deploy override the template at build time.

[package]
name = "example"
version = "0.1.0"

[settings]
enabled = true
retries = 3
"""


def generate_boilerplate(config_dir: Path, names: list[str]) -> list[GeneratedFile]:
    """One CREATE-mode GeneratedFile per name, all with the fixed payload."""
    return [
        GeneratedFile(
            path=str(config_dir / name),
            content=CONFIG_TOML_BOILERPLATE,
            mode=WriteMode.CREATE,
            reason=f"Boilerplate config file {name}",
        )
        for name in names
    ]


def ensure_boilerplate(project_root: Path, config_dir: str, names: list[str]) -> list[Path]:
    """Create ``project_root/config_dir`` and the boilerplate files in it.

    Files are handled in order.  The first one found with content aborts
    the call; files handled before it in this call keep what was written.

    Returns:
        Paths of the files written.

    Raises:
        ArtifactExistsError: A file already has content.
        ConfigError: The directory or a file cannot be created.
    """
    target_dir = project_root / config_dir

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Failed to create config directory {target_dir}: {e}") from e

    written: list[Path] = []
    for file in generate_boilerplate(target_dir, names):
        try:
            written.append(write_generated_file(file))
        except OSError as e:
            raise ConfigError(f"Failed to create toml config file {file.path}: {e}") from e

    logger.info("Created %d boilerplate file(s) in %s", len(written), target_dir)
    return written
