"""
Config merger — write the generated entries into the [env] table.

Only the generated keys are ever touched.  Every other key in [env],
and every other table in the document, comes out the way it went in.
"""

from __future__ import annotations

import logging
from typing import Any

from toml_const_cli.core.config.loader import ConfigError
from toml_const_cli.core.models.generated import GeneratedEnv
from toml_const_cli.core.models.toml_value import ValueKind, kind_of

logger = logging.getLogger(__name__)

ENV_SECTION = "env"


class ConfigShapeError(ConfigError):
    """Raised when [env] exists but is not a table."""


def merge_env(document: dict[str, Any], env: GeneratedEnv) -> dict[str, Any]:
    """Insert or overwrite the generated keys in ``document["env"]``.

    The document is updated in place and returned.

    Raises:
        ConfigShapeError: If ``env`` is present with a non-table value.
    """
    entries = env.entries()
    section = document.get(ENV_SECTION)

    if section is None:
        logger.debug("Creating [%s] table", ENV_SECTION)
        document[ENV_SECTION] = dict(entries)
        return document

    kind = kind_of(section)
    if kind is not ValueKind.TABLE:
        raise ConfigShapeError(f'key "{ENV_SECTION}" not defined as a table (found {kind})')

    replaced = sorted(key for key in entries if key in section)
    if replaced:
        logger.info("Overwriting existing [%s] keys: %s", ENV_SECTION, ", ".join(replaced))
    section.update(entries)
    return document
