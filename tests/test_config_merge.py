"""
Tests for the cargo config merge — [env] updates and persistence.
"""

import stat
import textwrap
import tomllib
from pathlib import Path

import pytest

from toml_const_cli.core.config.loader import ConfigError
from toml_const_cli.core.models.generated import (
    CONFIG_PATH_ENV,
    DEBUG_ENV,
    DEPLOY_ENV,
    GENERATED_FILE_PATH_ENV,
    GENERATED_KEYS,
    TEMPLATE_ENV,
    BoilerplateNames,
    GeneratedEnv,
)
from toml_const_cli.core.persistence.cargo_config import (
    ConfigDocument,
    default_config_path,
    load_config_document,
    save_config_document,
)
from toml_const_cli.core.services.config_merge import ConfigShapeError, merge_env


@pytest.fixture
def env() -> GeneratedEnv:
    return GeneratedEnv.build(
        BoilerplateNames.for_package("foo"),
        config_dir=".config/",
        generated_file="generated.rs",
        relative_prefix="",
    )


@pytest.fixture
def existing_config(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        [build]
        target = "x86_64-unknown-linux-gnu"
        jobs = 4

        [env]
        RUST_LOG = "debug"
        TOML_CONST_TEMPLATE = "stale.template.toml"

        [alias]
        b = "build"
        t = ["test", "--all"]
    """)
    path = tmp_path / ".cargo" / "config.toml"
    path.parent.mkdir()
    path.write_text(content)
    return path


# ═══════════════════════════════════════════════════════════════════
#  GeneratedEnv
# ═══════════════════════════════════════════════════════════════════


class TestGeneratedEnv:
    def test_entries(self, env: GeneratedEnv):
        assert env.entries() == {
            TEMPLATE_ENV: "foo.template.toml",
            DEBUG_ENV: "foo.debug.toml",
            DEPLOY_ENV: "foo.deploy.toml",
            CONFIG_PATH_ENV: ".config/",
            GENERATED_FILE_PATH_ENV: "generated.rs",
        }

    def test_prefix_only_applies_to_config_path(self):
        env = GeneratedEnv.build(
            BoilerplateNames.for_package("bar"),
            config_dir=".config/",
            generated_file="src/generated.rs",
            relative_prefix="../../",
        )
        assert env.config_path == "../../.config/"
        assert env.generated_path == "src/generated.rs"


# ═══════════════════════════════════════════════════════════════════
#  merge_env
# ═══════════════════════════════════════════════════════════════════


class TestMergeEnv:
    def test_creates_env_table(self, env: GeneratedEnv):
        document: dict = {"build": {"jobs": 2}}
        merge_env(document, env)
        assert document["env"] == env.entries()
        assert document["build"] == {"jobs": 2}

    def test_preserves_unrelated_keys(self, env: GeneratedEnv):
        document = {
            "env": {"RUST_LOG": "info", "OTHER": {"value": "x", "relative": True}},
            "alias": {"b": "build"},
        }
        merge_env(document, env)
        assert document["env"]["RUST_LOG"] == "info"
        assert document["env"]["OTHER"] == {"value": "x", "relative": True}
        assert document["alias"] == {"b": "build"}
        for key, value in env.entries().items():
            assert document["env"][key] == value

    def test_overwrites_generated_keys(self, env: GeneratedEnv):
        document = {"env": {TEMPLATE_ENV: "old.toml"}}
        merge_env(document, env)
        assert document["env"][TEMPLATE_ENV] == "foo.template.toml"

    def test_idempotent(self, env: GeneratedEnv):
        once = merge_env({"env": {"A": "1"}, "x": [1, 2]}, env)
        twice = merge_env(merge_env({"env": {"A": "1"}, "x": [1, 2]}, env), env)
        assert once == twice

    @pytest.mark.parametrize("value", ["a string", ["a", "list"], 3, True])
    def test_non_table_env_raises(self, env: GeneratedEnv, value):
        document = {"env": value}
        with pytest.raises(ConfigShapeError, match="not defined as a table"):
            merge_env(document, env)
        assert document["env"] == value


# ═══════════════════════════════════════════════════════════════════
#  load / save
# ═══════════════════════════════════════════════════════════════════


class TestConfigDocument:
    def test_default_path(self, tmp_path: Path):
        assert default_config_path(tmp_path) == tmp_path / ".cargo" / "config.toml"

    def test_load_missing_creates_empty(self, tmp_path: Path):
        path = default_config_path(tmp_path)
        document = load_config_document(path)
        assert document.data == {}
        assert path.is_file()

    def test_load_invalid_raises(self, tmp_path: Path):
        path = default_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text("[env\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config_document(path)

    def test_save_then_load(self, tmp_path: Path):
        path = default_config_path(tmp_path)
        path.parent.mkdir()
        save_config_document(ConfigDocument(path=path, data={"env": {"A": "b"}}))
        assert load_config_document(path).data == {"env": {"A": "b"}}
        assert list(path.parent.glob("*.tmp")) == []

    def test_merge_round_trip(self, existing_config: Path, env: GeneratedEnv):
        before = tomllib.loads(existing_config.read_text())

        document = load_config_document(existing_config)
        merge_env(document.data, env)
        save_config_document(document)

        after = tomllib.loads(existing_config.read_text())
        assert after["build"] == before["build"]
        assert after["alias"] == before["alias"]
        assert after["env"]["RUST_LOG"] == "debug"
        assert {k: after["env"][k] for k in GENERATED_KEYS} == env.entries()

    def test_merge_twice_is_stable(self, existing_config: Path, env: GeneratedEnv):
        for _ in range(2):
            document = load_config_document(existing_config)
            merge_env(document.data, env)
            save_config_document(document)
        first = tomllib.loads(existing_config.read_text())

        document = load_config_document(existing_config)
        merge_env(document.data, env)
        save_config_document(document)
        assert tomllib.loads(existing_config.read_text()) == first

    def test_load_non_utf8_raises(self, tmp_path: Path):
        path = default_config_path(tmp_path)
        path.parent.mkdir()
        path.write_bytes(b"# \xff\n[env]\n")
        with pytest.raises(ConfigError, match="Cannot open cargo config"):
            load_config_document(path)

    def test_save_keeps_file_mode(self, existing_config: Path, env: GeneratedEnv):
        existing_config.chmod(0o644)

        document = load_config_document(existing_config)
        merge_env(document.data, env)
        save_config_document(document)

        assert stat.S_IMODE(existing_config.stat().st_mode) == 0o644
