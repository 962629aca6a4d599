"""Config loader that merges multiple YAML files into a single dict.
Load order defines precedence (later overrides earlier); the packaged
``default.yml`` always comes first."""
from __future__ import annotations
import yaml
from typing import List, Dict, Any, Optional
import os

ENV_CONFIG_PATH = 'MRELBP_CONFIG_PATH'


def default_config_path() -> str:
    here = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(here, 'descriptors', 'config', 'default.yml')


def load_yaml_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_dicts(dicts: List[Dict[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for d in dicts:
        for k, v in d.items():
            if isinstance(v, dict) and isinstance(result.get(k), dict):
                result[k] = merge_dicts([result[k], v])  # type: ignore[arg-type]
            else:
                result[k] = v
    return result


def load_configs(paths: List[str]) -> Dict[str, Any]:
    return merge_dicts([load_yaml_file(p) for p in paths])


def load_descriptor_settings(overrides: Optional[List[str]] = None) -> Dict[str, Any]:
    """Defaults, then ``$MRELBP_CONFIG_PATH`` if set, then explicit overrides."""
    paths = [default_config_path()]
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        paths.append(env_path)
    paths.extend(overrides or [])
    return load_configs(paths)

__all__ = [
    "load_configs", "load_yaml_file", "merge_dicts",
    "default_config_path", "load_descriptor_settings", "ENV_CONFIG_PATH",
]
