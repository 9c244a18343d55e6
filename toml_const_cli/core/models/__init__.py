"""
Domain models — Pydantic types for toml-const-cli.

All models are re-exported here for convenient access:

    from toml_const_cli.core.models import Manifest, GeneratedEnv, GeneratedFile
"""

from toml_const_cli.core.models.generated import (
    BoilerplateNames,
    GeneratedEnv,
    GeneratedFile,
    WriteMode,
)
from toml_const_cli.core.models.manifest import Manifest, ManifestKind
from toml_const_cli.core.models.toml_value import ValueKind, kind_of

__all__ = [
    # generated.py
    "BoilerplateNames",
    "GeneratedEnv",
    "GeneratedFile",
    # manifest.py
    "Manifest",
    "ManifestKind",
    # toml_value.py
    "ValueKind",
    "WriteMode",
    "kind_of",
]
