"""
.gitignore generator — keep generated and local-only files out of git.

Two files are produced:
    - beside the generated source file: one block appended per run,
      ignoring that file by name;
    - inside the config directory: rewritten every run so only the
      current template file escapes the ``*.toml`` rule.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toml_const_cli.core.config.loader import ConfigError
from toml_const_cli.core.models.generated import GeneratedFile, WriteMode
from toml_const_cli.core.services.generators.writer import write_generated_file

logger = logging.getLogger(__name__)

GITIGNORE = ".gitignore"
GENERATOR_NAME = "toml-const-cli"


class IgnoreFileError(ConfigError):
    """Raised when a .gitignore cannot be written."""


def generate_generated_file_ignore(generated_file_path: Path) -> GeneratedFile:
    """Rule block for the directory holding the generated source file."""
    return GeneratedFile(
        path=str(generated_file_path.parent / GITIGNORE),
        content=f"\n\n# added by {GENERATOR_NAME}\n{generated_file_path.name}\n",
        mode=WriteMode.APPEND,
        reason=f"Ignore generated file {generated_file_path.name}",
    )


def generate_config_dir_ignore(config_dir: Path, template_name: str) -> GeneratedFile:
    """Ignore every TOML file in the config dir except the template."""
    return GeneratedFile(
        path=str(config_dir / GITIGNORE),
        content=f"# added by {GENERATOR_NAME}\n*.toml\n!{template_name}\n",
        mode=WriteMode.OVERWRITE,
        reason=f"Ignore local config files, keep {template_name}",
    )


def update_gitignore_files(
    config_dir: Path,
    generated_file_path: Path,
    template_name: str,
) -> list[Path]:
    """Write both .gitignore files.

    Args:
        config_dir: Absolute path to the config directory.
        generated_file_path: Path to the generated source file.
        template_name: Template file name to keep tracked.

    Returns:
        Paths of the two .gitignore files.

    Raises:
        IgnoreFileError: Naming the file that could not be written.
    """
    files = [
        generate_generated_file_ignore(generated_file_path),
        generate_config_dir_ignore(config_dir, template_name),
    ]

    written: list[Path] = []
    for file in files:
        try:
            written.append(write_generated_file(file))
        except OSError as e:
            raise IgnoreFileError(f"Unable to update {file.path}: {e}") from e

    return written
