"""Typed configuration schema and loader for the cssdice package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

from cssdice.utils.errors import ConfigError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

KindName = Literal["integer", "number", "length", "opacity-value", "color"]


class SeedSettings(BaseModel):
    """Seed for the random source shared by generated batches."""

    env: str
    value: int | None = None

    model_config = ConfigDict(extra="forbid")


class GenerateSettings(BaseModel):
    """Which value kinds to generate and how many of each."""

    kinds: list[KindName]
    count: conint(ge=1)

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Package logger settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    generate: GenerateSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.  A seed variable that is not
    an integer raises :class:`~cssdice.utils.errors.ConfigError`.
    """

    with (
        importlib_resources.files("cssdice.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    if seed_env in environ:
        raw = environ[seed_env]
        try:
            cfg.seed.value = int(raw)
        except ValueError as exc:
            raise ConfigError(f"{seed_env} must be an integer, got {raw!r}") from exc

    return cfg


__all__ = [
    "ConfigModel",
    "GenerateSettings",
    "KindName",
    "LoggingSettings",
    "SeedSettings",
    "deep_merge_dicts",
    "load_config",
]
