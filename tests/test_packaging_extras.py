"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_runtime_dependencies() -> None:
    deps = cast(list[str], _load_pyproject()["project"]["dependencies"])
    names = {dep.split(">")[0].split("=")[0].strip().lower() for dep in deps}
    assert {"pydantic", "pyyaml"} <= names


def test_dev_extra() -> None:
    extras = _load_pyproject()["project"].get("optional-dependencies", {})
    assert any(dep.startswith("pytest") for dep in extras["dev"])


def test_defaults_shipped_as_package_data() -> None:
    package_data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in package_data["cssdice.config"]
