"""Central config helpers for strict YAML-driven descriptor settings."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

class MissingConfigError(RuntimeError):
    pass

def require(cfg: Dict[str, Any], key: str) -> Any:
    if key not in cfg or cfg[key] is None:
        raise MissingConfigError(f"Missing required config key: '{key}'")
    return cfg[key]

def ensure_keys(section: Dict[str, Any], required: Iterable[str], section_name: str):
    for k in required:
        if k not in section or section[k] is None:
            raise MissingConfigError(f"Missing required key '{k}' in section '{section_name}'")

def require_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = cfg.get(name)
    if not isinstance(sec, dict):
        raise MissingConfigError(f"Missing '{name}' section")
    return sec

def require_int(cfg: Dict[str, Any], key: str) -> int:
    value = require(cfg, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MissingConfigError(f"Config key '{key}' must be an integer, got {value!r}")
    return value

def require_int_list(cfg: Dict[str, Any], key: str, length: int) -> List[int]:
    value = require(cfg, key)
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise MissingConfigError(f"Config key '{key}' must be a list of {length} integers, got {value!r}")
    return [int(v) for v in value]

__all__ = [
    'MissingConfigError', 'require', 'ensure_keys',
    'require_section', 'require_int', 'require_int_list',
]
