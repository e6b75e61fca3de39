from __future__ import annotations
from typing import Any, Dict, Iterable

import yaml

DEFAULTS: Dict[str, Any] = {
    "parts_file": "vehicle_parts.txt",
    "seed": None,
    "split_wings": False,
}


class ConfigError(ValueError):
    """A config file could not be parsed into a mapping."""


def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    out.update(b or {})
    return out

def _load_one(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"config: '{path}' could not be read: {exc}") from exc
    # JSON documents are valid YAML, so one parser covers both
    try:
        d = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"config: '{path}' is not valid YAML/JSON: {exc}") from exc
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise ConfigError(f"config: '{path}' must contain a mapping at the top level")
    return d

def load_configs(paths: Iterable[str] | None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = dict(DEFAULTS)
    for p in (paths or []):
        cfg = _merge(cfg, _load_one(p))
    return cfg

def apply_cli_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    # None means "not given on the command line"
    given = {k: v for k, v in (overrides or {}).items() if v is not None}
    return _merge(base, given)

__all__ = ["DEFAULTS", "ConfigError", "load_configs", "apply_cli_overrides", "_merge"]
