"""
Init use case — bootstrap a package for compile-time TOML constants.

Ties together manifest loading, root resolution, the cargo config
merge, boilerplate creation and .gitignore updates.  Steps run in
order and the first failure stops the rest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from toml_const_cli.core.config.loader import ConfigError, resolve_package_name
from toml_const_cli.core.models.generated import BoilerplateNames, GeneratedEnv
from toml_const_cli.core.persistence.cargo_config import (
    default_config_path,
    load_config_document,
    save_config_document,
)
from toml_const_cli.core.services.config_merge import merge_env
from toml_const_cli.core.services.generators.boilerplate import ensure_boilerplate
from toml_const_cli.core.services.generators.gitignore import update_gitignore_files
from toml_const_cli.core.services.package_navi import relative_prefix, resolve_project_root

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".config/"
DEFAULT_GENERATED_FILE_PATH = "generated.rs"


@dataclass
class InitResult:
    """Result of the init use case."""

    package_name: str | None = None
    project_root: Path | None = None
    cargo_config: Path | None = None
    env: GeneratedEnv | None = None
    boilerplate_files: list[Path] = field(default_factory=list)
    ignore_files: list[Path] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
            return result

        result["package_name"] = self.package_name
        result["project_root"] = str(self.project_root)
        result["cargo_config"] = str(self.cargo_config)
        result["env"] = self.env.entries() if self.env else {}
        result["boilerplate_files"] = [str(p) for p in self.boilerplate_files]
        result["ignore_files"] = [str(p) for p in self.ignore_files]
        return result


def _require_relative(value: str, option: str) -> None:
    if PurePath(value).is_absolute():
        raise ConfigError(f"{option} must be a relative path, got {value}")


def run_init(
    manifest_path: Path,
    with_name: str | None = None,
    config_path: str = DEFAULT_CONFIG_PATH,
    generated_file_path: str = DEFAULT_GENERATED_FILE_PATH,
) -> InitResult:
    """Run every init step against one package manifest.

    Args:
        manifest_path: Path to the package's Cargo.toml.
        with_name: Optional prefix for the boilerplate file names,
            instead of the manifest package name.
        config_path: Config directory, relative to the project root.
        generated_file_path: Generated source file, relative to the
            manifest's directory.

    Returns:
        InitResult describing what was written, or the error.
    """
    result = InitResult()

    try:
        _init(result, manifest_path, with_name, config_path, generated_file_path)
    except ConfigError as e:
        result.error = str(e)
    except OSError as e:
        result.error = f"Filesystem error: {e}"

    if result.error:
        logger.debug("init aborted: %s", result.error)
    return result


def _init(
    result: InitResult,
    manifest_path: Path,
    with_name: str | None,
    config_path: str,
    generated_file_path: str,
) -> None:
    name = resolve_package_name(manifest_path, with_name)
    result.package_name = name

    _require_relative(config_path, "config path")
    _require_relative(generated_file_path, "generated file path")

    manifest_file = manifest_path.resolve()
    package_dir = manifest_file.parent
    project_root = resolve_project_root(package_dir)
    result.project_root = project_root

    # ── Cargo config ────────────────────────────────────────────
    names = BoilerplateNames.for_package(name)
    env = GeneratedEnv.build(
        names,
        config_dir=config_path,
        generated_file=generated_file_path,
        relative_prefix=relative_prefix(project_root, manifest_file),
    )
    result.env = env

    document = load_config_document(default_config_path(project_root))
    merge_env(document.data, env)
    save_config_document(document)
    result.cargo_config = document.path
    logger.info("Wrote env entries to %s", document.path)

    # ── Boilerplate + ignore rules ──────────────────────────────
    result.boilerplate_files = ensure_boilerplate(project_root, config_path, names.as_list())
    result.ignore_files = update_gitignore_files(
        project_root / config_path,
        package_dir / generated_file_path,
        names.template,
    )
