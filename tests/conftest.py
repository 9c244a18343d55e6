"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_manifest() -> Callable[..., Path]:
    """Return a helper that writes a Cargo.toml into a directory.

    ``write_manifest(dir, name="app")`` writes a package manifest,
    ``write_manifest(dir, workspace=True)`` a virtual workspace manifest.
    """

    def _write(
        directory: Path,
        name: str | None = None,
        workspace: bool = False,
        raw: str | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        if raw is None:
            parts = []
            if name is not None:
                parts.append(f'[package]\nname = "{name}"\nversion = "0.1.0"\n')
            if workspace:
                parts.append('[workspace]\nmembers = ["crates/*"]\n')
            raw = "\n".join(parts)
        path = directory / "Cargo.toml"
        path.write_text(textwrap.dedent(raw), encoding="utf-8")
        return path

    return _write
