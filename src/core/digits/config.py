"""Configuration for the `digits` package.

The shipped defaults live in ``defaults.yaml`` next to this module. Setting the
``DIGITS_CONFIG`` environment variable to a YAML file with the same schema
replaces them. Parsing is fail-closed: unknown keys, wrong types and unknown
enum values raise ``ConfigError``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError
from .guards import is_int
from .types import I64, POINTER_WIDTHS, IntType, OverflowPolicy, lookup_int_type

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = "digits/config/v1"
CONFIG_ENV_VAR = "DIGITS_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.yaml"

_KNOWN_KEYS = frozenset({"schema", "default_int_type", "overflow", "pointer_width"})


@dataclass(frozen=True)
class DigitConfig:
    default_int_type: IntType = I64
    overflow: OverflowPolicy = OverflowPolicy.CHECKED
    pointer_width: int = 64


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ConfigError(f"{name} must be a mapping")
    return obj


def _require_str(obj: Any, *, name: str) -> str:
    if not isinstance(obj, str) or not obj.strip():
        raise ConfigError(f"{name} must be a non-empty string")
    return obj.strip()


def parse_config(raw: Mapping[str, Any]) -> DigitConfig:
    """Build a ``DigitConfig`` from a decoded YAML/JSON mapping.

    Missing keys take the ``DigitConfig`` defaults.
    """
    root = _require_mapping(dict(raw) if isinstance(raw, Mapping) else raw, name="config")

    unknown = sorted(set(root) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    if "schema" in root:
        schema = _require_str(root["schema"], name="config.schema")
        if schema != CONFIG_SCHEMA:
            raise ConfigError(f"unsupported config.schema: {schema}")

    pointer_width = root.get("pointer_width", DigitConfig.pointer_width)
    if not is_int(pointer_width) or pointer_width not in POINTER_WIDTHS:
        raise ConfigError(f"config.pointer_width must be one of {POINTER_WIDTHS}: {pointer_width!r}")

    type_name = _require_str(
        root.get("default_int_type", DigitConfig.default_int_type.name), name="config.default_int_type"
    )
    try:
        int_type = lookup_int_type(type_name, pointer_width)
    except KeyError as exc:
        raise ConfigError(f"config.default_int_type: {exc.args[0]}") from exc

    policy_name = _require_str(
        root.get("overflow", DigitConfig.overflow.value), name="config.overflow"
    )
    try:
        policy = OverflowPolicy(policy_name)
    except ValueError as exc:
        choices = ", ".join(p.value for p in OverflowPolicy)
        raise ConfigError(f"config.overflow must be one of {choices}: {policy_name}") from exc

    return DigitConfig(default_int_type=int_type, overflow=policy, pointer_width=pointer_width)


def load_config(path: Path | str) -> DigitConfig:
    """Read and parse a YAML config file."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config {p}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {p}: {exc}") from exc
    cfg = parse_config(_require_mapping(data, name="config"))
    logger.debug("loaded digits config from %s: %s", p, cfg)
    return cfg


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH


@lru_cache(maxsize=1)
def get_config() -> DigitConfig:
    """Process-wide configuration (cached; see ``reload_config``)."""
    return load_config(config_path())


def reload_config() -> DigitConfig:
    """Drop the cached configuration and read it again."""
    get_config.cache_clear()
    return get_config()
