"""
Generated file writer — put a GeneratedFile on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toml_const_cli.core.config.loader import ConfigError
from toml_const_cli.core.models.generated import GeneratedFile, WriteMode

logger = logging.getLogger(__name__)


class ArtifactExistsError(ConfigError):
    """Raised when a CREATE-mode target already has content."""


def write_generated_file(file: GeneratedFile) -> Path:
    """Write ``file`` according to its mode.

    CREATE opens the target (creating it if missing) and refuses to
    write when it already holds anything.  APPEND and OVERWRITE create
    parent directories as needed.

    Raises:
        ArtifactExistsError: CREATE target is not empty.
        OSError: Any filesystem failure.
    """
    target = Path(file.path)

    if file.mode is WriteMode.CREATE:
        with target.open("a+", encoding="utf-8") as fh:
            fh.seek(0)
            if fh.read():
                raise ArtifactExistsError(f"Config files already exist: {target}")
            fh.write(file.content)
        logger.info("Created %s", target)
        return target

    target.parent.mkdir(parents=True, exist_ok=True)

    if file.mode is WriteMode.APPEND:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(file.content)
        logger.info("Appended to %s", target)
    else:
        target.write_text(file.content, encoding="utf-8")
        logger.info("Wrote %s", target)

    return target
