"""
Generated artifact models — used by the merger and all generators.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

# Keys written into the [env] table of .cargo/config.toml
TEMPLATE_ENV = "TOML_CONST_TEMPLATE"
DEBUG_ENV = "TOML_CONST_DEBUG"
DEPLOY_ENV = "TOML_CONST_DEPLOY"
CONFIG_PATH_ENV = "TOML_CONST_CONFIG_PATH"
GENERATED_FILE_PATH_ENV = "TOML_CONST_GENERATED_FILE_PATH"

GENERATED_KEYS = (
    TEMPLATE_ENV,
    DEBUG_ENV,
    DEPLOY_ENV,
    CONFIG_PATH_ENV,
    GENERATED_FILE_PATH_ENV,
)


class WriteMode(StrEnum):
    """How a GeneratedFile lands on disk."""

    CREATE = "create"        # only into a missing or empty file
    APPEND = "append"        # add to the end, creating if needed
    OVERWRITE = "overwrite"  # replace whatever is there


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:    Absolute target path.
        content: Text to write.
        mode:    See ``WriteMode``.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    mode: WriteMode = WriteMode.CREATE
    reason: str = ""


class BoilerplateNames(BaseModel):
    """The three data file names derived from a package name."""

    template: str
    debug: str
    deploy: str

    @classmethod
    def for_package(cls, package_name: str) -> BoilerplateNames:
        return cls(
            template=f"{package_name}.template.toml",
            debug=f"{package_name}.debug.toml",
            deploy=f"{package_name}.deploy.toml",
        )

    def as_list(self) -> list[str]:
        return [self.template, self.debug, self.deploy]


class GeneratedEnv(BaseModel):
    """The entries this tool owns inside the [env] table.

    ``config_path`` already carries the relative prefix that makes it
    valid from the package manifest's directory.
    """

    template: str
    debug: str
    deploy: str
    config_path: str
    generated_path: str

    @classmethod
    def build(
        cls,
        names: BoilerplateNames,
        config_dir: str,
        generated_file: str,
        relative_prefix: str,
    ) -> GeneratedEnv:
        return cls(
            template=names.template,
            debug=names.debug,
            deploy=names.deploy,
            config_path=f"{relative_prefix}{config_dir}",
            generated_path=generated_file,
        )

    def entries(self) -> dict[str, str]:
        """Key/value pairs in the order they are written."""
        return {
            TEMPLATE_ENV: self.template,
            DEBUG_ENV: self.debug,
            DEPLOY_ENV: self.deploy,
            CONFIG_PATH_ENV: self.config_path,
            GENERATED_FILE_PATH_ENV: self.generated_path,
        }
